"""Testes do importador de alunos."""

from itertools import count

from graduacao.application.importador import (
    LAYOUT_DESLOCADO,
    LAYOUT_PADRAO,
    ImportadorAlunos,
)
from graduacao.domain.faixa import Faixa
from graduacao.domain.modelos import Sensei, Sexo


def _importador():
    contador = count(1)
    return ImportadorAlunos(gerador_id=lambda: f"id-{next(contador)}")


def test_importar_layouts_e_linhas_ignoradas(dados_dojo, csv_alunos):
    resultado = _importador().importar(csv_alunos, dados_dojo.senseis)

    assert [a.nome for a in resultado.alunos] == ["Ana Silva", "Bruno Costa", "Carla"]
    assert resultado.ignorados == 1

    ana, bruno, carla = resultado.alunos
    assert ana.sensei_id == "s1"
    assert ana.cpf == "123.45"
    assert ana.sexo == Sexo.FEMININO
    assert ana.data_nascimento == "2000-01-01"
    assert ana.faixa_atual == Faixa.AMARELA

    assert bruno.sensei_id == "s2"
    assert bruno.sexo == Sexo.MASCULINO
    assert bruno.data_nascimento == "1995-03-05"
    assert bruno.faixa_atual == Faixa.VERDE_II

    assert carla.sensei_id is None
    assert carla.sexo == Sexo.OUTRO
    assert carla.faixa_atual == Faixa.BRANCA


def test_faixa_nao_reconhecida_gera_aviso(dados_dojo, csv_alunos):
    resultado = _importador().importar(csv_alunos, dados_dojo.senseis)

    assert len(resultado.avisos) == 1
    aviso = resultado.avisos[0]
    assert aviso.linha == 6
    assert aviso.campo == "faixa"
    assert aviso.valor == "Faixa Dourada"


def test_ids_gerados_pelo_gerador():
    resultado = _importador().importar("cabecalho\nAna\nBia\n", [])

    assert [a.id for a in resultado.alunos] == ["id-1", "id-2"]


def test_somente_cabecalho_ou_vazio():
    importador = _importador()

    assert importador.importar("nome,cpf\n", []).alunos == []
    assert importador.importar("", []).alunos == []


def test_virgula_crlf_e_bom():
    conteudo = "\ufeffnome,cpf,sexo,nascimento,faixa,sensei\r\n\"Silva, Ana\",1,F,01/01/2001,Roxa,\r\n"

    resultado = _importador().importar(conteudo, [])

    assert len(resultado.alunos) == 1
    assert resultado.alunos[0].nome == "Silva, Ana"
    assert resultado.alunos[0].faixa_atual == Faixa.ROXA


def test_sensei_desconhecido_fica_sem_vinculo():
    resultado = _importador().importar("h\nAna;1;F;01/01/01;Cinza;Sensei Fantasma\n", [])

    assert resultado.alunos[0].sensei_id is None
    assert resultado.alunos[0].faixa_atual == Faixa.CINZA


def test_separar_campos_preserva_separador_entre_aspas():
    assert ImportadorAlunos.separar_campos('"a;b";c') == ["a;b", "c"]
    assert ImportadorAlunos.separar_campos("a,b,,d") == ["a", "b", "", "d"]


def test_limpar_campo():
    assert ImportadorAlunos.limpar_campo("  'Ana'  ") == "Ana"
    assert ImportadorAlunos.limpar_campo('"Ana') == "Ana"
    assert ImportadorAlunos.limpar_campo(None) == ""


def test_escolher_layout_exige_nome_exato_do_sensei():
    senseis = {"sensei kreese": Sensei(id="s1", nome="Sensei Kreese")}

    assert ImportadorAlunos.escolher_layout(["Ana", "SENSEI KREESE"], senseis) == LAYOUT_DESLOCADO
    assert ImportadorAlunos.escolher_layout(["Ana", "Kreese"], senseis) == LAYOUT_PADRAO
    assert ImportadorAlunos.escolher_layout(["Ana"], senseis) == LAYOUT_PADRAO


def test_nome_desconhecido_na_coluna_1_mantem_layout_padrao(dados_dojo):
    resultado = _importador().importar(
        "h\nAna Silva;Sensei Fantasma;123.45;F;01/01/00;Amarela\n", dados_dojo.senseis
    )

    aluno = resultado.alunos[0]
    assert aluno.cpf == "Sensei Fantasma"
    assert aluno.sensei_id is None


def test_cinco_linhas_com_duas_sem_nome():
    conteudo = "nome,cpf\nAna,1\n,2\nBia,3\n  ,4\nCris,5\n"

    resultado = _importador().importar(conteudo, [])

    assert len(resultado.alunos) == 3
    assert resultado.ignorados == 2
