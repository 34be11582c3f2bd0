"""Motor de consulta sobre inscrições carregadas em memória.

Responsabilidades:
- Enriquecer inscrições com dados de aluno, sensei e exame
- Aplicar filtros conjuntivos
- Ordenar de forma estável por múltiplas chaves
- Resumir resultados para relatórios
"""

import unicodedata
from enum import Enum
from typing import List, Optional

import pandas as pd
from pydantic import BaseModel

from graduacao.config.settings import Configuracoes
from graduacao.domain.faixa import Faixa, OrdemFaixas, ORDEM_FAIXAS
from graduacao.domain.modelos import DadosDojo, Inscricao


class ChaveOrdenacao(str, Enum):
    NOME = "nome"
    FAIXA_ALVO = "faixa_alvo"
    FAIXA_ATUAL = "faixa_atual"
    MEDIA = "media"


class Direcao(str, Enum):
    ASC = "asc"
    DESC = "desc"


class EstadoOrdenacao(BaseModel):
    """Estado de ordenação de uma tela de listagem."""

    chave: ChaveOrdenacao = ChaveOrdenacao.NOME
    direcao: Direcao = Direcao.ASC

    def alternar(self, chave: ChaveOrdenacao) -> "EstadoOrdenacao":
        """Mesma chave inverte a direção; chave nova recomeça ascendente."""
        if chave == self.chave:
            nova = Direcao.DESC if self.direcao == Direcao.ASC else Direcao.ASC
            return EstadoOrdenacao(chave=chave, direcao=nova)
        return EstadoOrdenacao(chave=chave, direcao=Direcao.ASC)


class ConsultaInscricoes(BaseModel):
    """Filtros (todos opcionais, combinados com E) e ordenação."""

    exame_id: Optional[str] = None
    faixa: Optional[Faixa] = None
    sensei_id: Optional[str] = None
    nome: Optional[str] = None
    ordenar_por: ChaveOrdenacao = ChaveOrdenacao.NOME
    direcao: Direcao = Direcao.ASC


class LinhaInscricao(Inscricao):
    """Inscrição acompanhada dos dados resolvidos do aluno, sensei e exame."""

    nome_aluno: str
    faixa_atual: Optional[Faixa] = None
    sensei_id: Optional[str] = None
    nome_sensei: str = Configuracoes.SENSEI_NAO_ATRIBUIDO
    data_exame: Optional[str] = None
    local_exame: Optional[str] = None


def chave_colacao(texto: Optional[str]) -> str:
    """Chave de comparação de nomes que ignora acentos e caixa."""
    if not texto:
        return ""
    decomposto = unicodedata.normalize("NFKD", texto)
    sem_acentos = "".join(c for c in decomposto if not unicodedata.combining(c))
    return sem_acentos.casefold()


class MotorConsulta:
    """Filtra e ordena inscrições sem efeitos colaterais.

    Responsabilidades:
    - Junção inscrição x aluno x sensei x exame
    - Referências quebradas degradam para "não atribuído"
    - Resultados idênticos para entradas idênticas
    """

    def __init__(self, ordem: OrdemFaixas = ORDEM_FAIXAS):
        self.ordem = ordem

    def enriquecer(self, dados: DadosDojo) -> List[LinhaInscricao]:
        """Monta as linhas enriquecidas na ordem de cadastro das inscrições."""
        alunos = {aluno.id: aluno for aluno in dados.alunos}
        senseis = {sensei.id: sensei for sensei in dados.senseis}
        exames = {exame.id: exame for exame in dados.exames}

        linhas = []
        for inscricao in dados.inscricoes:
            aluno = alunos.get(inscricao.aluno_id)
            sensei = senseis.get(aluno.sensei_id) if aluno and aluno.sensei_id else None
            exame = exames.get(inscricao.exame_id)

            linhas.append(
                LinhaInscricao(
                    **inscricao.model_dump(),
                    nome_aluno=aluno.nome if aluno else Configuracoes.ALUNO_DESCONHECIDO,
                    faixa_atual=aluno.faixa_atual if aluno else None,
                    sensei_id=aluno.sensei_id if aluno else None,
                    nome_sensei=sensei.nome if sensei else Configuracoes.SENSEI_NAO_ATRIBUIDO,
                    data_exame=exame.data if exame else None,
                    local_exame=exame.local if exame else None,
                )
            )
        return linhas

    def consultar(self, dados: DadosDojo, consulta: ConsultaInscricoes) -> List[LinhaInscricao]:
        """Aplica filtros e ordenação.

        Parâmetros:
        - dados (DadosDojo): coleções carregadas em memória
        - consulta (ConsultaInscricoes): filtros e ordenação

        Retorno:
        - list[LinhaInscricao]: linhas filtradas e ordenadas
        """
        linhas = [linha for linha in self.enriquecer(dados) if self._atende(linha, consulta)]
        return self.ordenar(linhas, consulta.ordenar_por, consulta.direcao)

    @staticmethod
    def _atende(linha: LinhaInscricao, consulta: ConsultaInscricoes) -> bool:
        if consulta.exame_id and linha.exame_id != consulta.exame_id:
            return False
        if consulta.faixa and linha.faixa_alvo != consulta.faixa:
            return False
        if consulta.sensei_id and linha.sensei_id != consulta.sensei_id:
            return False
        if consulta.nome and consulta.nome.casefold() not in linha.nome_aluno.casefold():
            return False
        return True

    def ordenar(
        self,
        linhas: List[LinhaInscricao],
        chave: ChaveOrdenacao = ChaveOrdenacao.NOME,
        direcao: Direcao = Direcao.ASC,
    ) -> List[LinhaInscricao]:
        """Ordenação estável por chave primária com desempate por nome.

        Sem média, a inscrição fica sempre depois das avaliadas, em qualquer
        direção.
        """
        if not linhas:
            return []

        ascendente = direcao == Direcao.ASC
        tabela = pd.DataFrame(
            {
                "nome": [chave_colacao(l.nome_aluno) for l in linhas],
                "nome_bruto": [l.nome_aluno for l in linhas],
                "faixa_alvo": [self.ordem.ordinal(l.faixa_alvo) for l in linhas],
                "faixa_atual": [self.ordem.ordinal(l.faixa_atual) for l in linhas],
                "media": pd.to_numeric(pd.Series([l.media for l in linhas], dtype="object"), errors="coerce"),
            }
        )
        tabela["sem_media"] = tabela["media"].isna()
        tabela["media"] = tabela["media"].fillna(-1.0)

        if chave == ChaveOrdenacao.NOME:
            colunas = ["nome", "nome_bruto"]
            ascendentes = [ascendente, ascendente]
        elif chave == ChaveOrdenacao.MEDIA:
            colunas = ["sem_media", "media", "nome", "nome_bruto"]
            ascendentes = [True, ascendente, True, True]
        else:
            colunas = [chave.value, "nome", "nome_bruto"]
            ascendentes = [ascendente, True, True]

        ordenada = tabela.sort_values(by=colunas, ascending=ascendentes, kind="mergesort")
        return [linhas[indice] for indice in ordenada.index]

    def resumir(self, linhas: List[LinhaInscricao]) -> dict:
        """Totais de presença e aprovação de um conjunto de linhas."""
        if not linhas:
            return {
                "total": 0,
                "presentes": 0,
                "avaliados": 0,
                "aprovados": 0,
                "reprovados": 0,
                "media_geral": None,
                "por_faixa_alvo": {},
            }

        tabela = pd.DataFrame(
            {
                "faixa_alvo": [l.faixa_alvo.value for l in linhas],
                "ordinal": [self.ordem.ordinal(l.faixa_alvo) for l in linhas],
                "presente": [bool(l.presente) for l in linhas],
                "media": pd.to_numeric(pd.Series([l.media for l in linhas], dtype="object"), errors="coerce"),
                "aprovado": [bool(l.aprovado) for l in linhas],
            }
        )
        avaliados = tabela[tabela["media"].notna()]
        media_geral = round(float(avaliados["media"].mean()), Configuracoes.CASAS_DECIMAIS_MEDIA) if len(avaliados) else None

        por_faixa = (
            tabela.groupby(["ordinal", "faixa_alvo"]).size().reset_index(name="quantidade").sort_values("ordinal")
        )

        return {
            "total": int(len(tabela)),
            "presentes": int(tabela["presente"].sum()),
            "avaliados": int(len(avaliados)),
            "aprovados": int(avaliados["aprovado"].sum()),
            "reprovados": int((~avaliados["aprovado"]).sum()),
            "media_geral": media_geral,
            "por_faixa_alvo": {linha.faixa_alvo: int(linha.quantidade) for linha in por_faixa.itertuples()},
        }
