"""Fixtures compartilhadas para os testes."""

import sys
from pathlib import Path

import pytest


RAIZ = Path(__file__).resolve().parents[2]
DIRETORIO_APP = RAIZ / "app"
if str(DIRETORIO_APP) not in sys.path:
    sys.path.insert(0, str(DIRETORIO_APP))


from graduacao.domain.faixa import Faixa  # noqa: E402
from graduacao.domain.modelos import Aluno, DadosDojo, Exame, Inscricao, Sensei, Sexo  # noqa: E402
from graduacao.infrastructure.gateway.memoria import GatewayMemoria  # noqa: E402


@pytest.fixture()
def registro_notas_temporario(tmp_path, monkeypatch):
    """Direciona a auditoria de notas para um diretório temporário."""
    from graduacao.config.settings import Configuracoes

    caminho = tmp_path / "logs" / "notas.jsonl"
    monkeypatch.setattr(Configuracoes, "GRADE_LOG_PATH", str(caminho))
    return caminho


@pytest.fixture()
def dados_dojo():
    """Retorna uma base pequena com dois senseis, três alunos e um exame."""
    return DadosDojo(
        senseis=[
            Sensei(id="s1", nome="Sensei Kreese"),
            Sensei(id="s2", nome="Sensei Miyagi"),
        ],
        alunos=[
            Aluno(id="a1", nome="Daniel", sexo=Sexo.MASCULINO, faixa_atual=Faixa.AMARELA, sensei_id="s2"),
            Aluno(id="a2", nome="Ana", sexo=Sexo.FEMININO, faixa_atual=Faixa.BRANCA, sensei_id="s1"),
            Aluno(id="a3", nome="Ávila", sexo=Sexo.OUTRO, faixa_atual=Faixa.PRETA),
        ],
        exames=[Exame(id="e1", data="2024-06-01", horario="09:00", local="Dojo Central")],
        inscricoes=[
            Inscricao(id="i1", exame_id="e1", aluno_id="a1", faixa_alvo=Faixa.VERMELHA),
            Inscricao(id="i2", exame_id="e1", aluno_id="a2", faixa_alvo=Faixa.BRANCA_PONTEIRA_AMARELA),
        ],
    )


@pytest.fixture()
def gateway_memoria(dados_dojo):
    """Gateway em memória carregado com a base de exemplo."""
    return GatewayMemoria(dados_dojo)


@pytest.fixture()
def csv_alunos():
    """Conteúdo de CSV com layout padrão, deslocado e linhas a ignorar."""
    return (
        "nome;cpf;sexo;nascimento;faixa;sensei\n"
        "Ana Silva;Sensei Kreese;123.45;F;01/01/00;Amarela\n"
        "Bruno Costa;999;m;5/3/95;verde ii;Sensei Miyagi\n"
        ";111;F;01/01/01;Preta;\n"
        "\n"
        "Carla;222;X;02/02/2002;Faixa Dourada;\n"
    )
