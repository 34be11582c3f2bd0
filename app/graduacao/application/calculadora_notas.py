"""Cálculo de média e aprovação de uma inscrição.

Responsabilidades:
- Aplicar a atualização de um campo de nota
- Recalcular média considerando apenas notas lançadas (> 0)
- Definir aprovação pela nota mínima configurada
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from pydantic import BaseModel

from graduacao.config.settings import Configuracoes
from graduacao.domain.modelos import CAMPOS_NOTA


ValorNota = Union[float, int, str, None]


class ResultadoNotas(BaseModel):
    """Conjunto de notas atualizado com os campos derivados."""

    kihon: Optional[float] = None
    kata1: Optional[float] = None
    kata2: Optional[float] = None
    kumite: Optional[float] = None
    media: Optional[float] = None
    aprovado: bool = False

    def como_atualizacao(self, campo: Optional[str] = None) -> dict:
        """Retorna os campos no formato de atualização parcial do gateway.

        Parâmetros:
        - campo (str | None): quando informado, apenas esse campo de nota
          acompanha média e aprovação; caso contrário, todos os campos
        """
        if campo is None:
            return self.model_dump()
        return {campo: getattr(self, campo), "media": self.media, "aprovado": self.aprovado}


class CalculadoraNotas:
    """Calculadora de notas de exame.

    Responsabilidades:
    - Interpretar valores digitados pelo avaliador
    - Rejeitar valores não numéricos sem levantar exceção
    - Derivar média e aprovação
    """

    def __init__(self, nota_minima: Optional[float] = None):
        """Inicializa a calculadora.

        Parâmetros:
        - nota_minima (float | None): média mínima para aprovação
        """
        self.nota_minima = Configuracoes.NOTA_MINIMA_APROVACAO if nota_minima is None else nota_minima

    def aplicar(self, notas: dict, campo: str, valor: ValorNota) -> Optional[ResultadoNotas]:
        """Aplica a atualização de um campo e recalcula média e aprovação.

        Parâmetros:
        - notas (dict): notas atuais (kihon, kata1, kata2, kumite)
        - campo (str): campo atualizado
        - valor (float | str | None): novo valor; vazio ou None limpa o campo

        Retorno:
        - ResultadoNotas | None: None quando o valor é rejeitado

        Exceções:
        - ValueError: quando o campo não é um campo de nota
        """
        if campo not in CAMPOS_NOTA:
            raise ValueError(f"Campo de nota inválido: {campo}. Use um de {list(CAMPOS_NOTA)}.")

        ok, convertido = self._converter(valor)
        if not ok:
            return None

        atualizadas = {c: notas.get(c) for c in CAMPOS_NOTA}
        atualizadas[campo] = convertido

        bruta = self.media_bruta(atualizadas)
        return ResultadoNotas(
            **atualizadas,
            media=self.arredondar(bruta),
            aprovado=self.aprovado(bruta),
        )

    def calcular_media(self, notas: dict) -> float:
        """Média das notas maiores que zero, arredondada; 0 quando nenhuma conta."""
        return self.arredondar(self.media_bruta(notas))

    @staticmethod
    def media_bruta(notas: dict) -> float:
        contadas = []
        for campo in CAMPOS_NOTA:
            valor = notas.get(campo)
            if valor is not None and valor > 0:
                contadas.append(float(valor))

        if not contadas:
            return 0.0

        return sum(contadas) / len(contadas)

    @staticmethod
    def arredondar(media: float) -> float:
        """Arredonda na casa configurada, com meios para cima (7,125 vira 7,13)."""
        quantum = Decimal(1).scaleb(-Configuracoes.CASAS_DECIMAIS_MEDIA)
        return float(Decimal(str(media)).quantize(quantum, rounding=ROUND_HALF_UP))

    def aprovado(self, media: Optional[float]) -> bool:
        return media is not None and media >= self.nota_minima

    @staticmethod
    def limpar() -> ResultadoNotas:
        """Zera todas as notas, média e aprovação de uma vez."""
        return ResultadoNotas()

    @staticmethod
    def _converter(valor: ValorNota):
        """Converte o valor digitado.

        Retorno:
        - tuple[bool, float | None]: (aceito, valor convertido)
        """
        if valor is None:
            return True, None

        if isinstance(valor, bool):
            return False, None

        if isinstance(valor, (int, float)):
            numero = float(valor)
        else:
            texto = str(valor).strip()
            if not texto:
                return True, None
            try:
                numero = float(texto.replace(",", "."))
            except ValueError:
                return False, None

        if not math.isfinite(numero) or numero < 0 or numero > Configuracoes.NOTA_MAXIMA:
            return False, None

        return True, numero
