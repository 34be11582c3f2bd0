"""Importação de alunos a partir de texto delimitado.

Responsabilidades:
- Quebrar linhas em campos respeitando aspas duplas
- Escolher o layout de colunas de cada linha
- Normalizar campos e vincular senseis existentes
"""

import re
import uuid
from typing import Callable, Iterable, List, Optional, Sequence

from pydantic import BaseModel, Field

from graduacao.application.normalizador import NormalizadorCampos
from graduacao.domain.faixa import OrdemFaixas, ORDEM_FAIXAS
from graduacao.domain.modelos import Aluno, Sensei
from graduacao.util.logger import FabricaLogger


logger = FabricaLogger.obter("importacao")


LAYOUT_PADRAO = ("nome", "cpf", "sexo", "data_nascimento", "faixa", "sensei")
LAYOUT_DESLOCADO = ("nome", "sensei", "cpf", "sexo", "data_nascimento", "faixa")

_QUEBRA_LINHA = re.compile(r"\r?\n")


class AvisoImportacao(BaseModel):
    """Aviso não bloqueante sobre uma linha importada."""

    linha: int
    campo: str
    valor: str
    mensagem: str


class ResultadoImportacao(BaseModel):
    """Alunos produzidos e contagem de linhas ignoradas."""

    alunos: List[Aluno] = Field(default_factory=list)
    ignorados: int = 0
    avisos: List[AvisoImportacao] = Field(default_factory=list)


def _gerar_id_padrao() -> str:
    return str(uuid.uuid4())


class ImportadorAlunos:
    """Converte o conteúdo de um CSV de alunos em registros válidos.

    Responsabilidades:
    - Descartar o cabeçalho e linhas em branco
    - Ignorar (e contar) linhas sem nome
    - Nunca levantar exceção por linha malformada
    """

    def __init__(
        self,
        ordem: OrdemFaixas = ORDEM_FAIXAS,
        gerador_id: Optional[Callable[[], str]] = None,
    ):
        """Inicializa o importador.

        Parâmetros:
        - ordem (OrdemFaixas): ordem de faixas usada na normalização
        - gerador_id (Callable | None): fonte de identificadores únicos
        """
        self.ordem = ordem
        self.gerador_id = gerador_id or _gerar_id_padrao

    def importar(self, conteudo: str, senseis: Iterable[Sensei]) -> ResultadoImportacao:
        """Processa o texto completo do arquivo.

        Parâmetros:
        - conteudo (str): texto do arquivo (primeira linha é cabeçalho)
        - senseis (Iterable[Sensei]): senseis conhecidos para vínculo por nome

        Retorno:
        - ResultadoImportacao: alunos, linhas ignoradas e avisos
        """
        resultado = ResultadoImportacao()
        if not conteudo:
            return resultado

        senseis_por_nome = self._indexar_senseis(senseis)
        linhas = _QUEBRA_LINHA.split(conteudo.lstrip("\ufeff"))

        for numero, linha in enumerate(linhas[1:], start=2):
            linha = linha.strip()
            if not linha:
                continue

            campos = self.separar_campos(linha)
            aluno = self._montar_aluno(campos, senseis_por_nome, numero, resultado)
            if aluno is None:
                resultado.ignorados += 1
                continue
            resultado.alunos.append(aluno)

        logger.info(
            f"Importação processada: {len(resultado.alunos)} alunos, "
            f"{resultado.ignorados} linhas ignoradas, {len(resultado.avisos)} avisos."
        )
        return resultado

    @staticmethod
    def detectar_separador(linha: str) -> str:
        return ";" if ";" in linha else ","

    @classmethod
    def separar_campos(cls, linha: str) -> List[str]:
        """Quebra a linha em campos limpos.

        Aspas duplas alternam o modo "entre aspas", no qual o separador não
        divide campos. Não há suporte a aspas escapadas.
        """
        separador = cls.detectar_separador(linha)
        campos = []
        atual = []
        entre_aspas = False

        for caractere in linha:
            if caractere == '"':
                entre_aspas = not entre_aspas
                atual.append(caractere)
            elif caractere == separador and not entre_aspas:
                campos.append("".join(atual))
                atual = []
            else:
                atual.append(caractere)
        campos.append("".join(atual))

        return [cls.limpar_campo(campo) for campo in campos]

    @staticmethod
    def limpar_campo(valor: Optional[str]) -> str:
        """Remove espaços e uma aspa (simples ou dupla) de cada extremidade."""
        if not valor:
            return ""
        limpo = valor.strip()
        if limpo[:1] in ("'", '"'):
            limpo = limpo[1:]
        if limpo[-1:] in ("'", '"'):
            limpo = limpo[:-1]
        return limpo.strip()

    @staticmethod
    def escolher_layout(campos: Sequence[str], senseis_por_nome: dict) -> tuple:
        """Escolhe entre o layout padrão e o deslocado.

        O layout deslocado (sensei na coluna 1) só vence quando o texto da
        coluna 1 coincide exatamente, sem diferenciar caixa, com um sensei
        cadastrado.

        Retorno:
        - tuple: nomes dos campos na ordem das colunas
        """
        coluna_1 = campos[1].strip().lower() if len(campos) > 1 else ""
        if coluna_1 and coluna_1 in senseis_por_nome:
            return LAYOUT_DESLOCADO
        return LAYOUT_PADRAO

    def _montar_aluno(
        self,
        campos: Sequence[str],
        senseis_por_nome: dict,
        numero: int,
        resultado: ResultadoImportacao,
    ) -> Optional[Aluno]:
        nome = campos[0] if campos else ""
        if not nome:
            return None

        layout = self.escolher_layout(campos, senseis_por_nome)
        valores = {chave: (campos[indice] if indice < len(campos) else "") for indice, chave in enumerate(layout)}

        sensei = senseis_por_nome.get(valores["sensei"].strip().lower()) if valores["sensei"] else None

        faixa_texto = valores["faixa"]
        if faixa_texto and self.ordem.buscar(faixa_texto) is None:
            logger.warning(f"Linha {numero}: faixa '{faixa_texto}' não reconhecida, usando {self.ordem.mais_baixa.value}.")
            resultado.avisos.append(
                AvisoImportacao(
                    linha=numero,
                    campo="faixa",
                    valor=faixa_texto,
                    mensagem=f"Faixa não reconhecida; atribuída {self.ordem.mais_baixa.value}.",
                )
            )

        return Aluno(
            id=self.gerador_id(),
            nome=nome,
            cpf=valores["cpf"] or None,
            sexo=NormalizadorCampos.normalizar_sexo(valores["sexo"]),
            data_nascimento=NormalizadorCampos.normalizar_data(valores["data_nascimento"]) or None,
            faixa_atual=NormalizadorCampos.normalizar_faixa(faixa_texto, self.ordem),
            sensei_id=sensei.id if sensei else None,
        )

    @staticmethod
    def _indexar_senseis(senseis: Iterable[Sensei]) -> dict:
        indice = {}
        for sensei in senseis:
            chave = sensei.nome.strip().lower()
            if chave and chave not in indice:
                indice[chave] = sensei
        return indice
