"""Testes do ponto de entrada FastAPI."""

from unittest.mock import Mock

from fastapi.testclient import TestClient

import main


def test_checar_saude(monkeypatch):
    monkeypatch.setattr(main, "obter_gateway", Mock())
    cliente = TestClient(main.app)
    resposta = cliente.get("/health")

    assert resposta.status_code == 200
    assert resposta.json() == {"status": "ok"}


def test_checar_saude_gateway_invalido(monkeypatch):
    monkeypatch.setattr(main, "obter_gateway", Mock(side_effect=ValueError("GATEWAY_BACKEND inválido: x")))
    cliente = TestClient(main.app)
    resposta = cliente.get("/health")

    assert resposta.status_code == 503
    assert "GATEWAY_BACKEND" in resposta.json()["detail"]


def test_evento_inicializacao_cria_gateway(monkeypatch):
    obter_gateway = Mock()
    monkeypatch.setattr(main, "obter_gateway", obter_gateway)

    cliente = TestClient(main.app)
    with cliente:
        pass

    obter_gateway.assert_called_once()


def test_rotas_registradas():
    caminhos = {rota.path for rota in main.app.routes}

    assert "/api/v1/students/import" in caminhos
    assert "/api/v1/registrations/{inscricao_id}/scores" in caminhos
    assert "/api/v1/report/summary" in caminhos
