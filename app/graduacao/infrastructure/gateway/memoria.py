"""Gateway de dados em memória.

Responsabilidades:
- Manter coleções em dicionários ordenados por inserção
- Serializar escritas com lock
- Aplicar cascata e unicidade de inscrições
"""

import threading
import uuid
from typing import Callable, List, Optional

from pydantic import ValidationError

from graduacao.domain.modelos import Aluno, DadosDojo, Exame, Inscricao, Sensei
from graduacao.infrastructure.gateway.contrato import (
    ERRO_DUPLICADO,
    ERRO_NAO_ENCONTRADO,
    GatewayDados,
    ResultadoOperacao,
)
from graduacao.util.logger import FabricaLogger


logger = FabricaLogger.obter("gateway")


class GatewayMemoria(GatewayDados):
    """Implementação de referência do gateway, sem persistência em disco.

    Responsabilidades:
    - Retornar falhas como ResultadoOperacao
    - Desvincular alunos ao excluir um sensei
    - Excluir inscrições ao excluir um aluno
    """

    def __init__(self, dados: Optional[DadosDojo] = None):
        """Inicializa o gateway.

        Parâmetros:
        - dados (DadosDojo | None): carga inicial
        """
        self._lock = threading.RLock()
        self._senseis = {}
        self._alunos = {}
        self._exames = {}
        self._inscricoes = {}
        if dados is not None:
            self._carregar(dados)

    def _carregar(self, dados: DadosDojo) -> None:
        self._senseis = {s.id: s for s in dados.senseis}
        self._alunos = {a.id: a for a in dados.alunos}
        self._exames = {e.id: e for e in dados.exames}
        self._inscricoes = {i.id: i for i in dados.inscricoes}

    def carregar_tudo(self) -> DadosDojo:
        with self._lock:
            return DadosDojo(
                senseis=list(self._senseis.values()),
                alunos=list(self._alunos.values()),
                exames=list(self._exames.values()),
                inscricoes=list(self._inscricoes.values()),
            ).model_copy(deep=True)

    def gerar_id(self) -> str:
        return str(uuid.uuid4())

    def criar_sensei(self, sensei: Sensei) -> ResultadoOperacao:
        def operacao():
            if sensei.id in self._senseis:
                return ResultadoOperacao.falha(ERRO_DUPLICADO)
            self._senseis[sensei.id] = sensei
            return ResultadoOperacao.ok()

        return self._mutar("criar_sensei", operacao)

    def excluir_sensei(self, sensei_id: str) -> ResultadoOperacao:
        def operacao():
            if self._senseis.pop(sensei_id, None) is None:
                return ResultadoOperacao.falha(ERRO_NAO_ENCONTRADO)
            for aluno_id, aluno in list(self._alunos.items()):
                if aluno.sensei_id == sensei_id:
                    self._alunos[aluno_id] = aluno.model_copy(update={"sensei_id": None})
            return ResultadoOperacao.ok()

        return self._mutar("excluir_sensei", operacao)

    def criar_aluno(self, aluno: Aluno) -> ResultadoOperacao:
        return self.criar_alunos_lote([aluno])

    def criar_alunos_lote(self, alunos: List[Aluno]) -> ResultadoOperacao:
        def operacao():
            ids = [aluno.id for aluno in alunos]
            if len(set(ids)) != len(ids) or any(i in self._alunos for i in ids):
                return ResultadoOperacao.falha(ERRO_DUPLICADO)
            for aluno in alunos:
                self._alunos[aluno.id] = aluno
            return ResultadoOperacao.ok()

        return self._mutar("criar_alunos_lote", operacao)

    def atualizar_aluno(self, aluno_id: str, campos: dict) -> ResultadoOperacao:
        return self._mutar("atualizar_aluno", lambda: self._atualizar(self._alunos, Aluno, aluno_id, campos))

    def excluir_aluno(self, aluno_id: str) -> ResultadoOperacao:
        def operacao():
            if self._alunos.pop(aluno_id, None) is None:
                return ResultadoOperacao.falha(ERRO_NAO_ENCONTRADO)
            self._inscricoes = {
                i.id: i for i in self._inscricoes.values() if i.aluno_id != aluno_id
            }
            return ResultadoOperacao.ok()

        return self._mutar("excluir_aluno", operacao)

    def criar_exame(self, exame: Exame) -> ResultadoOperacao:
        def operacao():
            if exame.id in self._exames:
                return ResultadoOperacao.falha(ERRO_DUPLICADO)
            self._exames[exame.id] = exame
            return ResultadoOperacao.ok()

        return self._mutar("criar_exame", operacao)

    def atualizar_exame(self, exame_id: str, campos: dict) -> ResultadoOperacao:
        return self._mutar("atualizar_exame", lambda: self._atualizar(self._exames, Exame, exame_id, campos))

    def criar_inscricao(self, inscricao: Inscricao) -> ResultadoOperacao:
        def operacao():
            if inscricao.id in self._inscricoes:
                return ResultadoOperacao.falha(ERRO_DUPLICADO)
            for existente in self._inscricoes.values():
                if existente.exame_id == inscricao.exame_id and existente.aluno_id == inscricao.aluno_id:
                    return ResultadoOperacao.falha(ERRO_DUPLICADO)
            self._inscricoes[inscricao.id] = inscricao
            return ResultadoOperacao.ok()

        return self._mutar("criar_inscricao", operacao)

    def atualizar_inscricao(self, inscricao_id: str, campos: dict) -> ResultadoOperacao:
        return self._mutar(
            "atualizar_inscricao",
            lambda: self._atualizar(self._inscricoes, Inscricao, inscricao_id, campos),
        )

    def excluir_inscricao(self, inscricao_id: str) -> ResultadoOperacao:
        def operacao():
            if self._inscricoes.pop(inscricao_id, None) is None:
                return ResultadoOperacao.falha(ERRO_NAO_ENCONTRADO)
            return ResultadoOperacao.ok()

        return self._mutar("excluir_inscricao", operacao)

    @staticmethod
    def _atualizar(colecao: dict, modelo, registro_id: str, campos: dict) -> ResultadoOperacao:
        atual = colecao.get(registro_id)
        if atual is None:
            return ResultadoOperacao.falha(ERRO_NAO_ENCONTRADO)

        dados = atual.model_dump()
        dados.update({chave: valor for chave, valor in campos.items() if chave != "id"})
        try:
            colecao[registro_id] = modelo.model_validate(dados)
        except ValidationError as erro:
            return ResultadoOperacao.falha(str(erro))
        return ResultadoOperacao.ok()

    def _mutar(self, nome: str, operacao: Callable[[], ResultadoOperacao]) -> ResultadoOperacao:
        """Executa a mutação sob lock e desfaz o estado se a persistência falhar."""
        with self._lock:
            anterior = self._capturar()
            resultado = operacao()
            if not resultado.sucesso:
                logger.warning(f"Gateway: {nome} falhou: {resultado.erro}")
                return resultado

            try:
                self._persistir()
            except OSError as erro:
                self._restaurar(anterior)
                logger.error(f"Gateway: falha ao persistir {nome}: {erro}")
                return ResultadoOperacao.falha(f"Falha ao persistir dados: {erro}")
            return resultado

    def _capturar(self) -> tuple:
        return dict(self._senseis), dict(self._alunos), dict(self._exames), dict(self._inscricoes)

    def _restaurar(self, estado: tuple) -> None:
        self._senseis, self._alunos, self._exames, self._inscricoes = estado

    def _persistir(self) -> None:
        """Gancho para implementações com armazenamento durável."""
        return None
