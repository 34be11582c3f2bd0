"""Testes do serviço de alunos e senseis."""

from unittest.mock import Mock

import pytest

from graduacao.application.servico_alunos import ServicoAlunos, verificar_resultado
from graduacao.domain.erros import FalhaGatewayError, RegistroNaoEncontradoError
from graduacao.domain.faixa import Faixa
from graduacao.domain.modelos import DadosDojo
from graduacao.infrastructure.gateway.contrato import ERRO_NAO_ENCONTRADO, ResultadoOperacao


def test_verificar_resultado():
    verificar_resultado(ResultadoOperacao.ok(), "teste")

    with pytest.raises(RegistroNaoEncontradoError):
        verificar_resultado(ResultadoOperacao.falha(ERRO_NAO_ENCONTRADO), "teste")

    with pytest.raises(FalhaGatewayError, match="disco cheio"):
        verificar_resultado(ResultadoOperacao.falha("disco cheio"), "teste")


def test_listar_ordenado_por_nome(gateway_memoria):
    servico = ServicoAlunos(gateway=gateway_memoria)

    assert [a.nome for a in servico.listar_alunos()] == ["Ana", "Ávila", "Daniel"]
    assert [s.nome for s in servico.listar_senseis()] == ["Sensei Kreese", "Sensei Miyagi"]


def test_criar_e_excluir_sensei(gateway_memoria):
    servico = ServicoAlunos(gateway=gateway_memoria)

    sensei = servico.criar_sensei("  Sensei Lawrence ")
    assert sensei.nome == "Sensei Lawrence"
    assert any(s.id == sensei.id for s in gateway_memoria.carregar_tudo().senseis)

    servico.excluir_sensei(sensei.id)
    assert all(s.id != sensei.id for s in gateway_memoria.carregar_tudo().senseis)


def test_excluir_sensei_inexistente(gateway_memoria):
    with pytest.raises(RegistroNaoEncontradoError):
        ServicoAlunos(gateway=gateway_memoria).excluir_sensei("nao-existe")


def test_criar_atualizar_excluir_aluno(gateway_memoria):
    servico = ServicoAlunos(gateway=gateway_memoria)

    aluno = servico.criar_aluno({"nome": "Johnny", "faixa_atual": Faixa.VERDE, "sensei_id": "s1"})
    servico.atualizar_aluno(aluno.id, {"faixa_atual": Faixa.ROXA})

    salvo = next(a for a in gateway_memoria.carregar_tudo().alunos if a.id == aluno.id)
    assert salvo.faixa_atual == Faixa.ROXA

    servico.excluir_aluno(aluno.id)
    assert all(a.id != aluno.id for a in gateway_memoria.carregar_tudo().alunos)


def test_atualizar_aluno_falha_de_gateway():
    gateway = Mock()
    gateway.atualizar_aluno.return_value = ResultadoOperacao.falha("timeout")

    with pytest.raises(FalhaGatewayError, match="timeout"):
        ServicoAlunos(gateway=gateway).atualizar_aluno("a1", {"nome": "X"})


def test_importar_grava_lote(gateway_memoria, csv_alunos):
    servico = ServicoAlunos(gateway=gateway_memoria)

    resultado = servico.importar(csv_alunos)

    assert len(resultado.alunos) == 3
    assert resultado.ignorados == 1
    nomes = {a.nome for a in gateway_memoria.carregar_tudo().alunos}
    assert {"Ana Silva", "Bruno Costa", "Carla"} <= nomes


def test_importar_sem_alunos_nao_chama_gateway():
    gateway = Mock()
    gateway.carregar_tudo.return_value = DadosDojo()

    resultado = ServicoAlunos(gateway=gateway).importar("nome;cpf\n;123\n")

    assert resultado.alunos == []
    assert resultado.ignorados == 1
    gateway.criar_alunos_lote.assert_not_called()


def test_importar_lote_recusado_e_tudo_ou_nada(csv_alunos):
    gateway = Mock()
    gateway.carregar_tudo.return_value = DadosDojo()
    gateway.gerar_id.side_effect = lambda: "id"
    gateway.criar_alunos_lote.return_value = ResultadoOperacao.falha("lote recusado")

    with pytest.raises(FalhaGatewayError, match="lote recusado"):
        ServicoAlunos(gateway=gateway).importar(csv_alunos)

    gateway.criar_alunos_lote.assert_called_once()
