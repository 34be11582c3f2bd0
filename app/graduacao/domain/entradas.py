"""Modelos de entrada enviados pelo cliente da API.

Responsabilidades:
- Validar campos mínimos de cada operação
- Separar campos editáveis de campos derivados
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field

from graduacao.domain.faixa import Faixa
from graduacao.domain.modelos import Sexo


class EntradaSensei(BaseModel):
    nome: str = Field(..., min_length=1)


class EntradaAluno(BaseModel):
    """Campos do formulário de cadastro de aluno."""

    nome: str = Field(..., min_length=1)
    cpf: Optional[str] = None
    sexo: Optional[Sexo] = Sexo.MASCULINO
    data_nascimento: Optional[str] = None
    faixa_atual: Faixa = Faixa.BRANCA
    sensei_id: Optional[str] = None


class AtualizacaoAluno(BaseModel):
    """Atualização parcial; apenas campos enviados são alterados."""

    nome: Optional[str] = Field(None, min_length=1)
    cpf: Optional[str] = None
    sexo: Optional[Sexo] = None
    data_nascimento: Optional[str] = None
    faixa_atual: Optional[Faixa] = None
    sensei_id: Optional[str] = None


class EntradaImportacao(BaseModel):
    conteudo: str = Field(..., description="Texto do CSV; a primeira linha é o cabeçalho")


class EntradaExame(BaseModel):
    data: str = Field(..., min_length=1)
    horario: str = ""
    local: str = Field(..., min_length=1)


class AtualizacaoExame(BaseModel):
    data: Optional[str] = Field(None, min_length=1)
    horario: Optional[str] = None
    local: Optional[str] = Field(None, min_length=1)


class EntradaInscricao(BaseModel):
    aluno_id: str = Field(..., min_length=1)
    faixa_alvo: Optional[Faixa] = Field(None, description="Padrão: próxima faixa do aluno")


class EntradaNota(BaseModel):
    """Uma nota digitada; vazio ou nulo limpa o campo."""

    campo: str = Field(..., pattern="^(kihon|kata1|kata2|kumite)$")
    valor: Optional[Union[float, str]] = None


class EntradaExclusaoLote(BaseModel):
    ids: List[str] = Field(default_factory=list)
