"""Graduações (faixas) e sua ordem total.

Responsabilidades:
- Enumerar as 13 faixas do dojo
- Comparar faixas pela posição na sequência
- Sugerir a próxima faixa de um aluno
"""

from enum import Enum
from typing import Iterable, Union


class Faixa(str, Enum):
    """Faixas da mais baixa para a mais alta."""

    BRANCA = "Branca"
    BRANCA_PONTEIRA_AMARELA = "Branca Ponteira Amarela"
    CINZA = "Cinza"
    AMARELA = "Amarela"
    VERMELHA = "Vermelha"
    LARANJA = "Laranja"
    VERDE = "Verde"
    VERDE_I = "Verde I"
    VERDE_II = "Verde II"
    VERDE_III = "Verde III"
    ROXA = "Roxa"
    MARROM = "Marrom"
    PRETA = "Preta"


class OrdemFaixas:
    """Ordem total e fixa sobre as faixas.

    Responsabilidades:
    - Calcular o ordinal de uma faixa
    - Comparar duas faixas
    - Resolver texto livre para uma faixa conhecida

    Valores desconhecidos equivalem sempre à primeira faixa da sequência.
    """

    def __init__(self, faixas: Iterable[Faixa]):
        """Inicializa a ordem.

        Parâmetros:
        - faixas (Iterable[Faixa]): faixas da mais baixa para a mais alta

        Exceções:
        - ValueError: quando a sequência é vazia ou tem repetições
        """
        self._faixas = tuple(faixas)
        if not self._faixas:
            raise ValueError("A ordem de faixas não pode ser vazia.")
        if len(set(self._faixas)) != len(self._faixas):
            raise ValueError("A ordem de faixas contém faixas repetidas.")

        self._ordinais = {faixa.value: indice for indice, faixa in enumerate(self._faixas)}
        self._por_nome = {faixa.value.lower(): faixa for faixa in self._faixas}

    @property
    def faixas(self) -> tuple:
        return self._faixas

    @property
    def mais_baixa(self) -> Faixa:
        return self._faixas[0]

    @property
    def mais_alta(self) -> Faixa:
        return self._faixas[-1]

    def ordinal(self, faixa: Union[Faixa, str, None]) -> int:
        """Retorna a posição da faixa na sequência (0 para valores desconhecidos)."""
        if faixa is None:
            return 0
        valor = faixa.value if isinstance(faixa, Faixa) else str(faixa)
        return self._ordinais.get(valor, 0)

    def comparar(self, a: Union[Faixa, str, None], b: Union[Faixa, str, None]) -> int:
        """Compara duas faixas.

        Retorno:
        - int: -1, 0 ou 1 conforme a diferença de ordinais
        """
        diferenca = self.ordinal(a) - self.ordinal(b)
        if diferenca < 0:
            return -1
        if diferenca > 0:
            return 1
        return 0

    def proxima(self, faixa: Union[Faixa, str, None]) -> Faixa:
        """Sugere a faixa seguinte, limitada à faixa mais alta."""
        indice = min(self.ordinal(faixa) + 1, len(self._faixas) - 1)
        return self._faixas[indice]

    def resolver(self, texto: Union[str, None]) -> Faixa:
        """Converte texto livre em faixa por comparação exata sem caixa.

        Retorno:
        - Faixa: faixa correspondente ou a mais baixa quando não há correspondência
        """
        faixa = self.buscar(texto)
        return faixa if faixa is not None else self.mais_baixa

    def buscar(self, texto: Union[str, None]):
        """Retorna a faixa correspondente ao texto ou None."""
        if texto is None:
            return None
        return self._por_nome.get(str(texto).strip().lower())


ORDEM_FAIXAS = OrdemFaixas(list(Faixa))
