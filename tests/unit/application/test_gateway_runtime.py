"""Testes do acesso ao gateway em execução."""

import pytest

from graduacao.application import gateway_runtime
from graduacao.config.settings import Configuracoes
from graduacao.infrastructure.gateway.arquivo_json import GatewayArquivoJson
from graduacao.infrastructure.gateway.memoria import GatewayMemoria


def test_criar_gateway_por_backend(tmp_path, monkeypatch):
    monkeypatch.setattr(Configuracoes, "DATA_FILE", str(tmp_path / "dojo.json"))

    assert isinstance(gateway_runtime.criar_gateway("memoria"), GatewayMemoria)
    assert isinstance(gateway_runtime.criar_gateway(" ARQUIVO "), GatewayArquivoJson)


def test_criar_gateway_backend_invalido():
    with pytest.raises(ValueError):
        gateway_runtime.criar_gateway("postgres")


def test_obter_gateway_reutiliza_instancia(monkeypatch):
    monkeypatch.setattr(Configuracoes, "GATEWAY_BACKEND", "memoria")
    gateway_runtime.definir_gateway(None)

    try:
        primeiro = gateway_runtime.obter_gateway()
        segundo = gateway_runtime.obter_gateway()
        assert primeiro is segundo
    finally:
        gateway_runtime.definir_gateway(None)


def test_definir_gateway():
    gateway = GatewayMemoria()
    gateway_runtime.definir_gateway(gateway)

    try:
        assert gateway_runtime.obter_gateway() is gateway
    finally:
        gateway_runtime.definir_gateway(None)
