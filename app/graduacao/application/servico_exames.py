"""Serviço de exames, inscrições e avaliação.

Responsabilidades:
- Agendar e editar exames
- Inscrever alunos sugerindo a próxima faixa
- Aplicar notas via calculadora e registrar auditoria
- Distribuir operações em lote com falhas parciais explícitas
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional

from graduacao.application.calculadora_notas import CalculadoraNotas, ValorNota
from graduacao.application.motor_consulta import chave_colacao
from graduacao.application.servico_alunos import verificar_resultado
from graduacao.config.settings import Configuracoes
from graduacao.domain.erros import (
    AtualizacaoRejeitadaError,
    InscricaoDuplicadaError,
    RegistroNaoEncontradoError,
)
from graduacao.domain.faixa import Faixa, OrdemFaixas, ORDEM_FAIXAS
from graduacao.domain.modelos import Aluno, Exame, Inscricao
from graduacao.infrastructure.gateway.contrato import (
    ERRO_DUPLICADO,
    GatewayDados,
    ResultadoLote,
    ResultadoOperacao,
)
from graduacao.infrastructure.logging.registro_notas import RegistroNotas
from graduacao.util.logger import logger


def sugerir_faixa_alvo(faixa_atual, ordem: OrdemFaixas = ORDEM_FAIXAS) -> Faixa:
    """Faixa sugerida na inscrição: a seguinte à atual, limitada à mais alta."""
    return ordem.proxima(faixa_atual)


class ServicoExames:
    """Serviço do ciclo de exame.

    Responsabilidades:
    - Recusar reinscrição de aluno já inscrito
    - Manter média e aprovação sempre derivadas das notas
    - Reportar cada falha de gateway uma única vez, sem novas tentativas
    """

    def __init__(
        self,
        gateway: GatewayDados,
        ordem: OrdemFaixas = ORDEM_FAIXAS,
        calculadora: Optional[CalculadoraNotas] = None,
        registro: Optional[RegistroNotas] = None,
        max_workers: Optional[int] = None,
    ):
        """Inicializa o serviço.

        Parâmetros:
        - gateway (GatewayDados): fronteira de persistência
        - ordem (OrdemFaixas): ordem de faixas injetada
        - calculadora (CalculadoraNotas | None): calculadora de notas
        - registro (RegistroNotas | None): auditoria de notas
        - max_workers (int | None): paralelismo das operações em lote
        """
        self.gateway = gateway
        self.ordem = ordem
        self.calculadora = calculadora or CalculadoraNotas()
        self.registro = registro or RegistroNotas()
        self.max_workers = max_workers or Configuracoes.MAX_WORKERS_LOTE

    def criar_exame(self, data: str, local: str, horario: str = "") -> Exame:
        exame = Exame(id=self.gateway.gerar_id(), data=data, local=local, horario=horario)
        verificar_resultado(self.gateway.criar_exame(exame), "criar exame")
        return exame

    def atualizar_exame(self, exame_id: str, campos: dict) -> None:
        verificar_resultado(self.gateway.atualizar_exame(exame_id, campos), "atualizar exame")

    def alunos_disponiveis(self, exame_id: str) -> List[Aluno]:
        """Alunos ainda não inscritos no exame, ordenados por nome."""
        dados = self.gateway.carregar_tudo()
        inscritos = {i.aluno_id for i in dados.inscricoes if i.exame_id == exame_id}
        disponiveis = [a for a in dados.alunos if a.id not in inscritos]
        return sorted(disponiveis, key=lambda a: (chave_colacao(a.nome), a.nome))

    def inscrever(self, exame_id: str, aluno_id: str, faixa_alvo: Optional[Faixa] = None) -> Inscricao:
        """Inscreve um aluno em um exame.

        Parâmetros:
        - exame_id (str): exame
        - aluno_id (str): aluno
        - faixa_alvo (Faixa | None): padrão é a próxima faixa do aluno

        Retorno:
        - Inscricao: inscrição criada

        Exceções:
        - RegistroNaoEncontradoError: exame ou aluno inexistente
        - InscricaoDuplicadaError: aluno já inscrito no exame
        - FalhaGatewayError: falha de persistência
        """
        dados = self.gateway.carregar_tudo()
        if not any(e.id == exame_id for e in dados.exames):
            raise RegistroNaoEncontradoError(f"Exame {exame_id} não encontrado.")

        aluno = next((a for a in dados.alunos if a.id == aluno_id), None)
        if aluno is None:
            raise RegistroNaoEncontradoError(f"Aluno {aluno_id} não encontrado.")

        if any(i.exame_id == exame_id and i.aluno_id == aluno_id for i in dados.inscricoes):
            raise InscricaoDuplicadaError(f"Aluno {aluno.nome} já está inscrito neste exame.")

        inscricao = Inscricao(
            id=self.gateway.gerar_id(),
            exame_id=exame_id,
            aluno_id=aluno_id,
            faixa_alvo=faixa_alvo or sugerir_faixa_alvo(aluno.faixa_atual, self.ordem),
            presente=False,
            aprovado=False,
        )

        resultado = self.gateway.criar_inscricao(inscricao)
        if resultado.erro == ERRO_DUPLICADO:
            raise InscricaoDuplicadaError(f"Aluno {aluno.nome} já está inscrito neste exame.")
        verificar_resultado(resultado, "inscrever aluno")

        logger.info(f"Aluno {aluno.nome} inscrito para {inscricao.faixa_alvo.value}.")
        return inscricao

    def obter_inscricao(self, inscricao_id: str) -> Inscricao:
        inscricao = next(
            (i for i in self.gateway.carregar_tudo().inscricoes if i.id == inscricao_id),
            None,
        )
        if inscricao is None:
            raise RegistroNaoEncontradoError(f"Inscrição {inscricao_id} não encontrada.")
        return inscricao

    def atualizar_nota(self, inscricao_id: str, campo: str, valor: ValorNota) -> Inscricao:
        """Atualiza uma nota e grava média e aprovação recalculadas.

        Exceções:
        - ValueError: campo que não é de nota
        - AtualizacaoRejeitadaError: valor não numérico ou fora de [0, 10]
        - RegistroNaoEncontradoError: inscrição inexistente
        - FalhaGatewayError: falha de persistência
        """
        inscricao = self.obter_inscricao(inscricao_id)
        resultado = self.calculadora.aplicar(inscricao.notas(), campo, valor)
        if resultado is None:
            raise AtualizacaoRejeitadaError(f"Valor inválido para {campo}: {valor!r}")

        campos = resultado.como_atualizacao(campo)
        verificar_resultado(self.gateway.atualizar_inscricao(inscricao_id, campos), "atualizar nota")
        self.registro.registrar(inscricao_id, "nota", campos)
        return inscricao.model_copy(update=campos)

    def limpar_notas(self, inscricao_id: str) -> Inscricao:
        inscricao = self.obter_inscricao(inscricao_id)
        campos = self.calculadora.limpar().como_atualizacao()
        verificar_resultado(self.gateway.atualizar_inscricao(inscricao_id, campos), "limpar notas")
        self.registro.registrar(inscricao_id, "limpar", campos)
        return inscricao.model_copy(update=campos)

    def alternar_presenca(self, inscricao_id: str) -> Inscricao:
        inscricao = self.obter_inscricao(inscricao_id)
        campos = {"presente": not inscricao.presente}
        verificar_resultado(self.gateway.atualizar_inscricao(inscricao_id, campos), "alternar presença")
        self.registro.registrar(inscricao_id, "presenca", campos)
        return inscricao.model_copy(update=campos)

    def excluir_inscricao(self, inscricao_id: str) -> None:
        verificar_resultado(self.gateway.excluir_inscricao(inscricao_id), "excluir inscrição")

    def marcar_todos_presentes(self, exame_id: str) -> ResultadoLote:
        """Marca presença de todos os inscritos no exame, uma requisição por inscrição."""
        ids = [
            i.id
            for i in self.gateway.carregar_tudo().inscricoes
            if i.exame_id == exame_id and not i.presente
        ]
        return self._distribuir(
            ids, lambda inscricao_id: self.gateway.atualizar_inscricao(inscricao_id, {"presente": True})
        )

    def excluir_inscricoes(self, ids: Iterable[str]) -> ResultadoLote:
        return self._distribuir(list(dict.fromkeys(ids)), self.gateway.excluir_inscricao)

    def _distribuir(self, ids: List[str], operacao: Callable[[str], ResultadoOperacao]) -> ResultadoLote:
        """Executa a operação para cada id em paralelo e coleta falhas parciais."""
        lote = ResultadoLote()
        if not ids:
            return lote

        def executar_protegido(registro_id: str) -> ResultadoOperacao:
            try:
                return operacao(registro_id)
            except Exception as erro:
                logger.exception(f"Falha inesperada ao processar {registro_id}: {erro}")
                return ResultadoOperacao.falha(str(erro) or type(erro).__name__)

        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(ids))) as executor:
            resultados = list(executor.map(executar_protegido, ids))

        for registro_id, resultado in zip(ids, resultados):
            if resultado.sucesso:
                lote.sucessos.append(registro_id)
            else:
                lote.falhas[registro_id] = resultado.erro or "Falha desconhecida."

        if lote.falhas:
            logger.warning(f"Operação em lote com {len(lote.falhas)} falhas de {len(ids)}.")
        return lote
