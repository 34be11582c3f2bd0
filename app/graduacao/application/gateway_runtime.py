"""Acesso ao gateway de dados em execução.

Responsabilidades:
- Criar o gateway configurado uma única vez
- Permitir substituição em testes
"""

import threading

from graduacao.config.settings import Configuracoes
from graduacao.infrastructure.gateway.arquivo_json import GatewayArquivoJson
from graduacao.infrastructure.gateway.contrato import GatewayDados
from graduacao.infrastructure.gateway.memoria import GatewayMemoria
from graduacao.util.logger import logger

_gateway = None
_lock = threading.Lock()


def criar_gateway(backend: str = None) -> GatewayDados:
    """Instancia o gateway pelo nome do backend ("memoria" ou "arquivo").

    Exceções:
    - ValueError: backend desconhecido
    """
    backend = (backend or Configuracoes.GATEWAY_BACKEND).strip().lower()
    if backend == "memoria":
        return GatewayMemoria()
    if backend == "arquivo":
        return GatewayArquivoJson()
    raise ValueError(f"GATEWAY_BACKEND inválido: {backend}")


def obter_gateway() -> GatewayDados:
    """Retorna o gateway compartilhado, criando-o na primeira chamada."""
    global _gateway
    if _gateway is None:
        with _lock:
            if _gateway is None:
                _gateway = criar_gateway()
                logger.info(f"Gateway de dados inicializado: {type(_gateway).__name__}")
    return _gateway


def definir_gateway(gateway) -> None:
    """Substitui (ou limpa, com None) o gateway compartilhado."""
    global _gateway
    with _lock:
        _gateway = gateway
