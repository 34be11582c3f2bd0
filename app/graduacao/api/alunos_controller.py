"""Controlador de alunos e senseis da API.

Responsabilidades:
- Definir rotas de cadastro e importação
- Resolver dependência do serviço de alunos
- Traduzir erros em respostas HTTP
"""

from fastapi import APIRouter, Depends

from graduacao.api.respostas import executar
from graduacao.application.gateway_runtime import obter_gateway
from graduacao.application.servico_alunos import ServicoAlunos
from graduacao.domain.entradas import AtualizacaoAluno, EntradaAluno, EntradaImportacao, EntradaSensei


def obter_servico_alunos():
    """Dependência para obter uma instância do serviço de alunos.

    Retorno:
    - ServicoAlunos: serviço ligado ao gateway compartilhado
    """
    return ServicoAlunos(gateway=obter_gateway())


class ControladorAlunos:
    """Controlador de alunos e senseis.

    Responsabilidades:
    - Registrar rotas de senseis
    - Registrar rotas de alunos e importação
    """

    def __init__(self):
        """Inicializa o controlador.

        Responsabilidades:
        - Instanciar o roteador
        - Registrar as rotas disponíveis
        """
        self.roteador = APIRouter()
        self._registrar_rotas()

    def _registrar_rotas(self):
        self.roteador.add_api_route(path="/senseis", endpoint=self._listar_senseis, methods=["GET"])
        self.roteador.add_api_route(path="/senseis", endpoint=self._criar_sensei, methods=["POST"], status_code=201)
        self.roteador.add_api_route(path="/senseis/{sensei_id}", endpoint=self._excluir_sensei, methods=["DELETE"])
        self.roteador.add_api_route(path="/students", endpoint=self._listar_alunos, methods=["GET"])
        self.roteador.add_api_route(path="/students", endpoint=self._criar_aluno, methods=["POST"], status_code=201)
        self.roteador.add_api_route(
            path="/students/import",
            endpoint=self._importar_alunos,
            methods=["POST"],
            summary="Importa alunos de um CSV (vírgula ou ponto e vírgula)",
        )
        self.roteador.add_api_route(path="/students/{aluno_id}", endpoint=self._atualizar_aluno, methods=["PATCH"])
        self.roteador.add_api_route(path="/students/{aluno_id}", endpoint=self._excluir_aluno, methods=["DELETE"])

    @staticmethod
    async def _listar_senseis(servico: ServicoAlunos = Depends(obter_servico_alunos)):
        return [s.model_dump() for s in executar(servico.listar_senseis)]

    @staticmethod
    async def _criar_sensei(entrada: EntradaSensei, servico: ServicoAlunos = Depends(obter_servico_alunos)):
        return executar(servico.criar_sensei, entrada.nome).model_dump()

    @staticmethod
    async def _excluir_sensei(sensei_id: str, servico: ServicoAlunos = Depends(obter_servico_alunos)):
        executar(servico.excluir_sensei, sensei_id)
        return {"status": "ok"}

    @staticmethod
    async def _listar_alunos(servico: ServicoAlunos = Depends(obter_servico_alunos)):
        return [a.model_dump(mode="json") for a in executar(servico.listar_alunos)]

    @staticmethod
    async def _criar_aluno(entrada: EntradaAluno, servico: ServicoAlunos = Depends(obter_servico_alunos)):
        return executar(servico.criar_aluno, entrada.model_dump()).model_dump(mode="json")

    @staticmethod
    async def _atualizar_aluno(
        aluno_id: str, entrada: AtualizacaoAluno, servico: ServicoAlunos = Depends(obter_servico_alunos)
    ):
        executar(servico.atualizar_aluno, aluno_id, entrada.model_dump(exclude_unset=True))
        return {"status": "ok"}

    @staticmethod
    async def _excluir_aluno(aluno_id: str, servico: ServicoAlunos = Depends(obter_servico_alunos)):
        executar(servico.excluir_aluno, aluno_id)
        return {"status": "ok"}

    @staticmethod
    async def _importar_alunos(entrada: EntradaImportacao, servico: ServicoAlunos = Depends(obter_servico_alunos)):
        """Importa alunos de um CSV.

        Retorno:
        - dict: quantidade importada, linhas ignoradas e avisos

        Exceções:
        - HTTPException: 502 quando o lote é recusado pelo armazenamento
        """
        resultado = executar(servico.importar, entrada.conteudo)
        return {
            "importados": len(resultado.alunos),
            "ignorados": resultado.ignorados,
            "avisos": [aviso.model_dump() for aviso in resultado.avisos],
            "alunos": [aluno.model_dump(mode="json") for aluno in resultado.alunos],
        }
