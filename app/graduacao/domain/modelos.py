"""Modelos de domínio do dojo.

Responsabilidades:
- Representar senseis, alunos, exames e inscrições
- Validar tipos e limites dos campos
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from graduacao.domain.faixa import Faixa


CAMPOS_NOTA = ("kihon", "kata1", "kata2", "kumite")


class Sexo(str, Enum):
    MASCULINO = "M"
    FEMININO = "F"
    OUTRO = "Outro"


class Sensei(BaseModel):
    """Instrutor responsável por alunos."""

    id: str = Field(..., min_length=1)
    nome: str = Field(..., min_length=1)


class Aluno(BaseModel):
    """Aluno matriculado no dojo.

    Responsabilidades:
    - Garantir que a faixa atual é uma faixa conhecida
    - Manter referência opcional (fraca) ao sensei
    """

    id: str = Field(..., min_length=1)
    nome: str = Field(..., min_length=1)
    cpf: Optional[str] = None
    sexo: Optional[Sexo] = None
    data_nascimento: Optional[str] = None
    faixa_atual: Faixa = Faixa.BRANCA
    sensei_id: Optional[str] = None

    @field_validator("cpf", "data_nascimento", "sensei_id", mode="before")
    @classmethod
    def _vazio_para_nulo(cls, valor):
        if isinstance(valor, str) and not valor.strip():
            return None
        return valor


class Exame(BaseModel):
    """Exame de graduação agendado."""

    id: str = Field(..., min_length=1)
    data: str = Field(..., min_length=1, description="Data ISO (AAAA-MM-DD)")
    horario: str = ""
    local: str = Field(..., min_length=1)

    @field_validator("data", "local")
    @classmethod
    def _nao_vazio(cls, valor: str) -> str:
        if not valor.strip():
            raise ValueError("Campo obrigatório não pode ser vazio.")
        return valor.strip()


class Inscricao(BaseModel):
    """Inscrição de um aluno em um exame.

    Média e aprovação são derivadas das notas pela calculadora de notas e
    nunca atribuídas de forma independente.
    """

    id: str = Field(..., min_length=1)
    exame_id: str = Field(..., min_length=1)
    aluno_id: str = Field(..., min_length=1)
    faixa_alvo: Faixa
    presente: bool = False
    kihon: Optional[float] = Field(None, ge=0, le=10)
    kata1: Optional[float] = Field(None, ge=0, le=10)
    kata2: Optional[float] = Field(None, ge=0, le=10)
    kumite: Optional[float] = Field(None, ge=0, le=10)
    media: Optional[float] = None
    aprovado: bool = False

    def notas(self) -> dict:
        return {campo: getattr(self, campo) for campo in CAMPOS_NOTA}


class DadosDojo(BaseModel):
    """Fotografia completa dos dados carregados em memória."""

    senseis: list[Sensei] = Field(default_factory=list)
    alunos: list[Aluno] = Field(default_factory=list)
    exames: list[Exame] = Field(default_factory=list)
    inscricoes: list[Inscricao] = Field(default_factory=list)
