"""Contrato da camada de persistência.

Responsabilidades:
- Declarar as operações que o núcleo exige do armazenamento
- Padronizar o retorno de falhas como valor (nunca exceção)
- Representar resultados parciais de operações em lote
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from graduacao.domain.modelos import Aluno, DadosDojo, Exame, Inscricao, Sensei


ERRO_DUPLICADO = "ERRO_DUPLICADO"
ERRO_NAO_ENCONTRADO = "ERRO_NAO_ENCONTRADO"


class ResultadoOperacao(BaseModel):
    """Resultado de uma mutação: sucesso ou mensagem de erro do armazenamento."""

    sucesso: bool = True
    erro: Optional[str] = None

    @classmethod
    def ok(cls) -> "ResultadoOperacao":
        return cls()

    @classmethod
    def falha(cls, mensagem: str) -> "ResultadoOperacao":
        return cls(sucesso=False, erro=mensagem)


class ResultadoLote(BaseModel):
    """Resultado de uma operação distribuída em várias requisições.

    Responsabilidades:
    - Listar os ids processados com sucesso
    - Mapear id -> mensagem de erro para falhas parciais
    """

    sucessos: List[str] = Field(default_factory=list)
    falhas: Dict[str, str] = Field(default_factory=dict)

    @property
    def completo(self) -> bool:
        return not self.falhas


class GatewayDados(ABC):
    """Fronteira de persistência usada pelos serviços.

    Toda mutação retorna ResultadoOperacao. A restrição de unicidade
    (exame, aluno) das inscrições é responsabilidade da implementação.
    """

    @abstractmethod
    def carregar_tudo(self) -> DadosDojo:
        """Retorna senseis, alunos, exames e inscrições."""

    @abstractmethod
    def criar_sensei(self, sensei: Sensei) -> ResultadoOperacao: ...

    @abstractmethod
    def excluir_sensei(self, sensei_id: str) -> ResultadoOperacao: ...

    @abstractmethod
    def criar_aluno(self, aluno: Aluno) -> ResultadoOperacao: ...

    @abstractmethod
    def criar_alunos_lote(self, alunos: List[Aluno]) -> ResultadoOperacao:
        """Insere todos os alunos ou nenhum."""

    @abstractmethod
    def atualizar_aluno(self, aluno_id: str, campos: dict) -> ResultadoOperacao: ...

    @abstractmethod
    def excluir_aluno(self, aluno_id: str) -> ResultadoOperacao:
        """Remove o aluno e, em cascata, suas inscrições."""

    @abstractmethod
    def criar_exame(self, exame: Exame) -> ResultadoOperacao: ...

    @abstractmethod
    def atualizar_exame(self, exame_id: str, campos: dict) -> ResultadoOperacao: ...

    @abstractmethod
    def criar_inscricao(self, inscricao: Inscricao) -> ResultadoOperacao: ...

    @abstractmethod
    def atualizar_inscricao(self, inscricao_id: str, campos: dict) -> ResultadoOperacao: ...

    @abstractmethod
    def excluir_inscricao(self, inscricao_id: str) -> ResultadoOperacao: ...

    @abstractmethod
    def gerar_id(self) -> str:
        """Identificador opaco e globalmente único."""
