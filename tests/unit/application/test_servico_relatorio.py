"""Testes do serviço de relatórios."""

from unittest.mock import Mock

from graduacao.application.motor_consulta import ChaveOrdenacao, ConsultaInscricoes
from graduacao.application.servico_relatorio import ServicoRelatorio


def test_consultar_usa_dados_do_gateway(gateway_memoria):
    linhas = ServicoRelatorio(gateway=gateway_memoria).consultar(ConsultaInscricoes(exame_id="e1"))

    assert [linha.nome_aluno for linha in linhas] == ["Ana", "Daniel"]


def test_resumir_delega_ao_motor(gateway_memoria):
    motor = Mock()
    motor.consultar.return_value = ["linha"]
    motor.resumir.return_value = {"total": 1}
    consulta = ConsultaInscricoes(ordenar_por=ChaveOrdenacao.MEDIA)

    resumo = ServicoRelatorio(gateway=gateway_memoria, motor=motor).resumir(consulta)

    assert resumo == {"total": 1}
    motor.resumir.assert_called_once_with(["linha"])
