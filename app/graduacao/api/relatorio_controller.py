"""Controlador de relatórios da API.

Responsabilidades:
- Expor a consulta filtrada e ordenada de inscrições
- Expor o resumo de aprovação
"""

from typing import Optional

from fastapi import APIRouter, Depends

from graduacao.api.respostas import executar
from graduacao.application.gateway_runtime import obter_gateway
from graduacao.application.motor_consulta import ChaveOrdenacao, ConsultaInscricoes, Direcao
from graduacao.application.servico_relatorio import ServicoRelatorio
from graduacao.domain.faixa import Faixa


def obter_servico_relatorio():
    return ServicoRelatorio(gateway=obter_gateway())


def montar_consulta(
    exame_id: Optional[str] = None,
    faixa: Optional[Faixa] = None,
    sensei_id: Optional[str] = None,
    nome: Optional[str] = None,
    ordenar_por: ChaveOrdenacao = ChaveOrdenacao.NOME,
    direcao: Direcao = Direcao.ASC,
) -> ConsultaInscricoes:
    """Monta a consulta a partir dos parâmetros de query string."""
    return ConsultaInscricoes(
        exame_id=exame_id,
        faixa=faixa,
        sensei_id=sensei_id,
        nome=nome,
        ordenar_por=ordenar_por,
        direcao=direcao,
    )


class ControladorRelatorio:
    """Controlador de relatórios.

    Responsabilidades:
    - Registrar rota de listagem
    - Registrar rota de resumo
    """

    def __init__(self):
        self.roteador = APIRouter()
        self.roteador.add_api_route(
            path="/report",
            endpoint=self._listar,
            methods=["GET"],
            summary="Inscrições filtradas e ordenadas",
        )
        self.roteador.add_api_route(
            path="/report/summary",
            endpoint=self._resumir,
            methods=["GET"],
            response_model=dict,
        )

    @staticmethod
    async def _listar(
        consulta: ConsultaInscricoes = Depends(montar_consulta),
        servico: ServicoRelatorio = Depends(obter_servico_relatorio),
    ):
        return [linha.model_dump(mode="json") for linha in executar(servico.consultar, consulta)]

    @staticmethod
    async def _resumir(
        consulta: ConsultaInscricoes = Depends(montar_consulta),
        servico: ServicoRelatorio = Depends(obter_servico_relatorio),
    ):
        return executar(servico.resumir, consulta)
