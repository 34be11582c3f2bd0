"""Fábrica de logger da aplicação.

Responsabilidades:
- Configurar o logger raiz do dojo uma única vez, com saída em stdout
- Fornecer loggers filhos por módulo (importação, gateway, auditoria)
- Tolerar níveis de log inválidos vindos do ambiente
"""

import logging
import sys
from typing import Optional

from graduacao.config.settings import Configuracoes


NOME_RAIZ = "GRADUACAO_DOJO"
FORMATO = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FORMATO_DATA = "%Y-%m-%d %H:%M:%S"


class FabricaLogger:
    """Responsável por configurar e fornecer instâncias de Logger.

    Responsabilidades:
    - Configuração única do logger raiz
    - Loggers filhos que herdam o handler da raiz
    - Resolução segura do nível configurado
    """

    @staticmethod
    def resolver_nivel(nivel: Optional[str]) -> int:
        """Converte o nome do nível em constante do logging.

        Parâmetros:
        - nivel (str | None): nome como "DEBUG" ou "warning"

        Retorno:
        - int: nível correspondente, INFO quando o nome é desconhecido
        """
        valor = logging.getLevelName(str(nivel or "INFO").strip().upper())
        return valor if isinstance(valor, int) else logging.INFO

    @classmethod
    def configurar(cls, nome: str = NOME_RAIZ, nivel: Optional[str] = None):
        """Configura o logger se ainda não estiver configurado.

        Parâmetros:
        - nome (str): nome do logger
        - nivel (str | None): nível; padrão Configuracoes.LOG_LEVEL

        Retorno:
        - logging.Logger: logger configurado
        """
        logger_instancia = logging.getLogger(nome)

        if not logger_instancia.handlers:
            logger_instancia.setLevel(cls.resolver_nivel(nivel or Configuracoes.LOG_LEVEL))

            handler_console = logging.StreamHandler(sys.stdout)
            handler_console.setFormatter(logging.Formatter(fmt=FORMATO, datefmt=FORMATO_DATA))
            logger_instancia.addHandler(handler_console)

            logger_instancia.propagate = False

        return logger_instancia

    @classmethod
    def obter(cls, modulo: str):
        """Retorna o logger filho "GRADUACAO_DOJO.<modulo>".

        O filho não recebe handler próprio; as mensagens sobem para a raiz.
        """
        cls.configurar()
        return logging.getLogger(f"{NOME_RAIZ}.{modulo}")


logger = FabricaLogger.configurar()
