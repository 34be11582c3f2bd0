"""Testes da ordem de faixas."""

import pytest

from graduacao.domain.faixa import Faixa, OrdemFaixas, ORDEM_FAIXAS


def test_ordem_padrao_tem_treze_faixas():
    assert len(ORDEM_FAIXAS.faixas) == 13
    assert ORDEM_FAIXAS.mais_baixa == Faixa.BRANCA
    assert ORDEM_FAIXAS.mais_alta == Faixa.PRETA


def test_ordinal_segue_a_sequencia():
    assert ORDEM_FAIXAS.ordinal(Faixa.BRANCA) == 0
    assert ORDEM_FAIXAS.ordinal(Faixa.CINZA) == 2
    assert ORDEM_FAIXAS.ordinal("Verde III") == 9
    assert ORDEM_FAIXAS.ordinal(Faixa.PRETA) == 12


def test_ordinal_desconhecido_equivale_a_primeira():
    assert ORDEM_FAIXAS.ordinal("Dourada") == 0
    assert ORDEM_FAIXAS.ordinal(None) == 0


def test_comparar():
    assert ORDEM_FAIXAS.comparar(Faixa.VERDE, Faixa.VERDE_I) == -1
    assert ORDEM_FAIXAS.comparar(Faixa.ROXA, Faixa.LARANJA) == 1
    assert ORDEM_FAIXAS.comparar(Faixa.MARROM, "Marrom") == 0


def test_proxima_limitada_a_mais_alta():
    assert ORDEM_FAIXAS.proxima(Faixa.BRANCA) == Faixa.BRANCA_PONTEIRA_AMARELA
    assert ORDEM_FAIXAS.proxima(Faixa.VERDE_III) == Faixa.ROXA
    assert ORDEM_FAIXAS.proxima(Faixa.PRETA) == Faixa.PRETA


def test_resolver_sem_diferenciar_caixa():
    assert ORDEM_FAIXAS.resolver("  verde ii ") == Faixa.VERDE_II
    assert ORDEM_FAIXAS.resolver("BRANCA PONTEIRA AMARELA") == Faixa.BRANCA_PONTEIRA_AMARELA


def test_resolver_sem_correspondencia_retorna_mais_baixa():
    assert ORDEM_FAIXAS.resolver("Dourada") == Faixa.BRANCA
    assert ORDEM_FAIXAS.resolver("") == Faixa.BRANCA
    assert ORDEM_FAIXAS.resolver(None) == Faixa.BRANCA
    assert ORDEM_FAIXAS.buscar("Dourada") is None


def test_ordem_customizada():
    ordem = OrdemFaixas([Faixa.PRETA, Faixa.BRANCA])

    assert ordem.comparar(Faixa.PRETA, Faixa.BRANCA) == -1
    assert ordem.resolver("inexistente") == Faixa.PRETA


@pytest.mark.parametrize("faixas", [[], [Faixa.BRANCA, Faixa.BRANCA]])
def test_ordem_invalida(faixas):
    with pytest.raises(ValueError):
        OrdemFaixas(faixas)


def test_ordem_total_antissimetrica():
    faixas = ORDEM_FAIXAS.faixas
    for indice, faixa in enumerate(faixas):
        assert ORDEM_FAIXAS.ordinal(faixa) == indice
        for outra in faixas:
            assert ORDEM_FAIXAS.comparar(faixa, outra) == -ORDEM_FAIXAS.comparar(outra, faixa)
