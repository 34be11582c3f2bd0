"""Controlador de exames e avaliação da API.

Responsabilidades:
- Definir rotas de exames, inscrições e notas
- Resolver dependência do serviço de exames
- Traduzir erros em respostas HTTP
"""

from fastapi import APIRouter, Depends

from graduacao.api.respostas import executar
from graduacao.application.gateway_runtime import obter_gateway
from graduacao.application.servico_exames import ServicoExames
from graduacao.domain.entradas import (
    AtualizacaoExame,
    EntradaExame,
    EntradaExclusaoLote,
    EntradaInscricao,
    EntradaNota,
)


def obter_servico_exames():
    """Dependência para obter uma instância do serviço de exames.

    Retorno:
    - ServicoExames: serviço ligado ao gateway compartilhado
    """
    return ServicoExames(gateway=obter_gateway())


class ControladorExames:
    """Controlador do ciclo de exame.

    Responsabilidades:
    - Registrar rotas de exames e inscrições
    - Registrar rotas de notas e presença
    - Expor operações em lote com falhas parciais
    """

    def __init__(self):
        self.roteador = APIRouter()
        self._registrar_rotas()

    def _registrar_rotas(self):
        rotas = [
            ("/exams", self._criar_exame, ["POST"], 201),
            ("/exams/{exame_id}", self._atualizar_exame, ["PATCH"], 200),
            ("/exams/{exame_id}/available-students", self._alunos_disponiveis, ["GET"], 200),
            ("/exams/{exame_id}/registrations", self._inscrever, ["POST"], 201),
            ("/exams/{exame_id}/presence", self._marcar_todos_presentes, ["POST"], 200),
            ("/registrations/delete", self._excluir_inscricoes, ["POST"], 200),
            ("/registrations/{inscricao_id}", self._excluir_inscricao, ["DELETE"], 200),
            ("/registrations/{inscricao_id}/scores", self._atualizar_nota, ["PATCH"], 200),
            ("/registrations/{inscricao_id}/scores/clear", self._limpar_notas, ["POST"], 200),
            ("/registrations/{inscricao_id}/presence", self._alternar_presenca, ["POST"], 200),
        ]
        for caminho, endpoint, metodos, status in rotas:
            self.roteador.add_api_route(path=caminho, endpoint=endpoint, methods=metodos, status_code=status)

    @staticmethod
    async def _criar_exame(entrada: EntradaExame, servico: ServicoExames = Depends(obter_servico_exames)):
        return executar(servico.criar_exame, entrada.data, entrada.local, entrada.horario).model_dump()

    @staticmethod
    async def _atualizar_exame(
        exame_id: str, entrada: AtualizacaoExame, servico: ServicoExames = Depends(obter_servico_exames)
    ):
        executar(servico.atualizar_exame, exame_id, entrada.model_dump(exclude_unset=True))
        return {"status": "ok"}

    @staticmethod
    async def _alunos_disponiveis(exame_id: str, servico: ServicoExames = Depends(obter_servico_exames)):
        return [a.model_dump(mode="json") for a in executar(servico.alunos_disponiveis, exame_id)]

    @staticmethod
    async def _inscrever(
        exame_id: str, entrada: EntradaInscricao, servico: ServicoExames = Depends(obter_servico_exames)
    ):
        """Inscreve um aluno; sem faixa alvo, usa a próxima faixa do aluno.

        Exceções:
        - HTTPException: 404 exame/aluno inexistente, 409 aluno já inscrito
        """
        inscricao = executar(servico.inscrever, exame_id, entrada.aluno_id, entrada.faixa_alvo)
        return inscricao.model_dump(mode="json")

    @staticmethod
    async def _marcar_todos_presentes(exame_id: str, servico: ServicoExames = Depends(obter_servico_exames)):
        return executar(servico.marcar_todos_presentes, exame_id).model_dump()

    @staticmethod
    async def _excluir_inscricoes(entrada: EntradaExclusaoLote, servico: ServicoExames = Depends(obter_servico_exames)):
        return executar(servico.excluir_inscricoes, entrada.ids).model_dump()

    @staticmethod
    async def _excluir_inscricao(inscricao_id: str, servico: ServicoExames = Depends(obter_servico_exames)):
        executar(servico.excluir_inscricao, inscricao_id)
        return {"status": "ok"}

    @staticmethod
    async def _atualizar_nota(
        inscricao_id: str, entrada: EntradaNota, servico: ServicoExames = Depends(obter_servico_exames)
    ):
        """Atualiza uma nota e devolve a inscrição com média recalculada.

        Exceções:
        - HTTPException: 422 quando o valor não é numérico
        """
        return executar(servico.atualizar_nota, inscricao_id, entrada.campo, entrada.valor).model_dump(mode="json")

    @staticmethod
    async def _limpar_notas(inscricao_id: str, servico: ServicoExames = Depends(obter_servico_exames)):
        return executar(servico.limpar_notas, inscricao_id).model_dump(mode="json")

    @staticmethod
    async def _alternar_presenca(inscricao_id: str, servico: ServicoExames = Depends(obter_servico_exames)):
        return executar(servico.alternar_presenca, inscricao_id).model_dump(mode="json")
