"""Exceções de domínio levantadas pelos serviços de aplicação."""


class ErroGraduacao(Exception):
    """Base para erros de regras do dojo."""


class RegistroNaoEncontradoError(ErroGraduacao):
    """Sensei, aluno, exame ou inscrição inexistente."""


class InscricaoDuplicadaError(ErroGraduacao):
    """Aluno já inscrito no exame."""


class AtualizacaoRejeitadaError(ErroGraduacao):
    """Valor de nota não numérico ou fora da faixa permitida."""


class FalhaGatewayError(ErroGraduacao):
    """Falha reportada pela camada de persistência.

    A mensagem é a retornada pelo gateway, sem reinterpretação.
    """
