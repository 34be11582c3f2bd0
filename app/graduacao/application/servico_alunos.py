"""Serviço de cadastro de alunos e senseis.

Responsabilidades:
- Orquestrar a importação de alunos (análise + envio em lote)
- Encaminhar operações de cadastro ao gateway
- Traduzir falhas do gateway em exceções de domínio
"""

from typing import List, Optional

from graduacao.application.importador import ImportadorAlunos, ResultadoImportacao
from graduacao.application.motor_consulta import chave_colacao
from graduacao.domain.erros import FalhaGatewayError, RegistroNaoEncontradoError
from graduacao.domain.faixa import OrdemFaixas, ORDEM_FAIXAS
from graduacao.domain.modelos import Aluno, Sensei
from graduacao.infrastructure.gateway.contrato import ERRO_NAO_ENCONTRADO, GatewayDados, ResultadoOperacao
from graduacao.util.logger import logger


def verificar_resultado(resultado: ResultadoOperacao, descricao: str) -> None:
    """Converte uma falha do gateway em exceção, preservando a mensagem recebida.

    Exceções:
    - RegistroNaoEncontradoError: registro inexistente
    - FalhaGatewayError: demais falhas
    """
    if resultado.sucesso:
        return
    logger.error(f"Falha em {descricao}: {resultado.erro}")
    if resultado.erro == ERRO_NAO_ENCONTRADO:
        raise RegistroNaoEncontradoError(f"{descricao}: registro não encontrado.")
    raise FalhaGatewayError(resultado.erro or f"Falha desconhecida em {descricao}.")


class ServicoAlunos:
    """Serviço de alunos e senseis.

    Responsabilidades:
    - Importar arquivos de alunos
    - Criar, atualizar e excluir alunos
    - Criar e excluir senseis
    """

    def __init__(
        self,
        gateway: GatewayDados,
        ordem: OrdemFaixas = ORDEM_FAIXAS,
        importador: Optional[ImportadorAlunos] = None,
    ):
        """Inicializa o serviço.

        Parâmetros:
        - gateway (GatewayDados): fronteira de persistência
        - ordem (OrdemFaixas): ordem de faixas injetada
        - importador (ImportadorAlunos | None): importador customizado
        """
        self.gateway = gateway
        self.ordem = ordem
        self.importador = importador or ImportadorAlunos(ordem=ordem, gerador_id=gateway.gerar_id)

    def listar_senseis(self) -> List[Sensei]:
        senseis = self.gateway.carregar_tudo().senseis
        return sorted(senseis, key=lambda s: (chave_colacao(s.nome), s.nome))

    def listar_alunos(self) -> List[Aluno]:
        alunos = self.gateway.carregar_tudo().alunos
        return sorted(alunos, key=lambda a: (chave_colacao(a.nome), a.nome))

    def criar_sensei(self, nome: str) -> Sensei:
        sensei = Sensei(id=self.gateway.gerar_id(), nome=nome.strip())
        verificar_resultado(self.gateway.criar_sensei(sensei), "criar sensei")
        return sensei

    def excluir_sensei(self, sensei_id: str) -> None:
        verificar_resultado(self.gateway.excluir_sensei(sensei_id), "excluir sensei")

    def criar_aluno(self, dados: dict) -> Aluno:
        """Cria um aluno a partir dos campos do formulário.

        Exceções:
        - pydantic.ValidationError: campos inválidos
        - FalhaGatewayError: falha de persistência
        """
        aluno = Aluno(**{**dados, "id": self.gateway.gerar_id()})
        verificar_resultado(self.gateway.criar_aluno(aluno), "criar aluno")
        return aluno

    def atualizar_aluno(self, aluno_id: str, campos: dict) -> None:
        verificar_resultado(self.gateway.atualizar_aluno(aluno_id, campos), "atualizar aluno")

    def excluir_aluno(self, aluno_id: str) -> None:
        verificar_resultado(self.gateway.excluir_aluno(aluno_id), "excluir aluno")

    def importar(self, conteudo: str) -> ResultadoImportacao:
        """Importa o texto de um CSV de alunos.

        Linhas sem nome são apenas contadas. O envio ao gateway é tudo ou
        nada: uma falha aborta o lote inteiro.

        Parâmetros:
        - conteudo (str): texto do arquivo

        Retorno:
        - ResultadoImportacao: alunos gravados, linhas ignoradas e avisos

        Exceções:
        - FalhaGatewayError: quando o gateway recusa o lote
        """
        senseis = self.gateway.carregar_tudo().senseis
        resultado = self.importador.importar(conteudo, senseis)

        if not resultado.alunos:
            logger.warning("Nenhum aluno válido encontrado no arquivo.")
            return resultado

        verificar_resultado(self.gateway.criar_alunos_lote(resultado.alunos), "importar alunos")
        logger.info(f"{len(resultado.alunos)} alunos importados com sucesso.")
        return resultado
