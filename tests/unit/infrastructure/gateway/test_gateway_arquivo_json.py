"""Testes do gateway persistido em arquivo JSON."""

import json

import pytest

from graduacao.domain.faixa import Faixa
from graduacao.domain.modelos import Aluno, Sensei
from graduacao.infrastructure.gateway.arquivo_json import GatewayArquivoJson


def test_arquivo_inexistente_inicia_vazio(tmp_path):
    gateway = GatewayArquivoJson(str(tmp_path / "dojo.json"))

    dados = gateway.carregar_tudo()
    assert dados.alunos == []
    assert not (tmp_path / "dojo.json").exists()


def test_mutacao_grava_e_recarrega(tmp_path):
    caminho = tmp_path / "dados" / "dojo.json"
    gateway = GatewayArquivoJson(str(caminho))

    gateway.criar_sensei(Sensei(id="s1", nome="Sensei Miyagi"))
    gateway.criar_aluno(Aluno(id="a1", nome="Daniel", faixa_atual=Faixa.VERDE, sensei_id="s1"))

    conteudo = json.loads(caminho.read_text(encoding="utf-8"))
    assert conteudo["alunos"][0]["faixa_atual"] == "Verde"
    assert not (tmp_path / "dados" / "dojo.json.tmp").exists()

    recarregado = GatewayArquivoJson(str(caminho)).carregar_tudo()
    assert recarregado.alunos[0].sensei_id == "s1"
    assert recarregado.senseis[0].nome == "Sensei Miyagi"


def test_arquivo_invalido(tmp_path):
    caminho = tmp_path / "dojo.json"
    caminho.write_text("{ isto não é json", encoding="utf-8")

    with pytest.raises(ValueError):
        GatewayArquivoJson(str(caminho))
