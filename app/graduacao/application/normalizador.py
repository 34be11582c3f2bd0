"""Normalização de campos textuais do cadastro.

Responsabilidades:
- Converter datas DD/MM/AAAA (ou DD/MM/AA) para ISO
- Converter sexo livre para o código canônico
- Converter nome de faixa para a enumeração
"""

from typing import Optional

from graduacao.config.settings import Configuracoes
from graduacao.domain.faixa import Faixa, OrdemFaixas, ORDEM_FAIXAS
from graduacao.domain.modelos import Sexo


class NormalizadorCampos:
    """Funções totais de normalização: entradas inválidas viram valores padrão.

    Responsabilidades:
    - Nunca levantar exceções para entradas malformadas
    - Documentar o valor padrão de cada campo
    """

    @staticmethod
    def normalizar_data(texto: Optional[str], ano_pivo: Optional[int] = None) -> str:
        """Normaliza uma data livre.

        Parâmetros:
        - texto (str | None): data informada
        - ano_pivo (int | None): anos de 2 dígitos abaixo do pivô vão para 20xx

        Retorno:
        - str: data em AAAA-MM-DD, o próprio texto quando não há '/' ou vazio
        """
        if not texto:
            return ""

        limpo = str(texto).strip()
        if "/" not in limpo:
            return limpo

        partes = limpo.split("/")
        if len(partes) != 3:
            return limpo

        dia = partes[0].strip().zfill(2)
        mes = partes[1].strip().zfill(2)
        ano = partes[2].strip()

        if len(ano) == 2 and ano.isdigit():
            pivo = Configuracoes.ANO_PIVO if ano_pivo is None else ano_pivo
            ano = f"20{ano}" if int(ano) < pivo else f"19{ano}"

        return f"{ano}-{mes}-{dia}"

    @staticmethod
    def normalizar_sexo(texto: Optional[str]) -> Sexo:
        """Normaliza o sexo pelo primeiro caractere, sem diferenciar caixa.

        Retorno:
        - Sexo: M, F ou Outro (padrão)
        """
        if not texto:
            return Sexo.OUTRO

        valor = str(texto).strip().upper()
        if valor.startswith("M"):
            return Sexo.MASCULINO
        if valor.startswith("F"):
            return Sexo.FEMININO
        return Sexo.OUTRO

    @staticmethod
    def normalizar_faixa(texto: Optional[str], ordem: OrdemFaixas = ORDEM_FAIXAS) -> Faixa:
        """Normaliza o nome da faixa; sem correspondência retorna a faixa mais baixa."""
        return ordem.resolver(texto)
