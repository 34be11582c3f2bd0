"""Registro de auditoria de notas em JSONL.

Responsabilidades:
- Registrar cada atualização de nota aplicada com segurança de thread
- Garantir estrutura padronizada do registro
"""

import json
import os
import threading
import uuid
from datetime import datetime

from graduacao.config.settings import Configuracoes
from graduacao.util.logger import FabricaLogger


logger = FabricaLogger.obter("auditoria")


class RegistroNotas:
    """Logger thread-safe para persistir o histórico de notas.

    Responsabilidades:
    - Garantir instância única
    - Serializar a atualização aplicada
    - Escrever com rotação por tamanho
    """

    _instancia = None
    _lock = threading.Lock()

    def __new__(cls):
        """Cria ou reutiliza a instância única.

        Retorno:
        - RegistroNotas: instância singleton
        """
        if cls._instancia is None:
            with cls._lock:
                if cls._instancia is None:
                    cls._instancia = super(RegistroNotas, cls).__new__(cls)
        return cls._instancia

    def registrar(self, inscricao_id: str, operacao: str, campos: dict) -> None:
        """Escreve um registro de atualização de forma atômica.

        Parâmetros:
        - inscricao_id (str): inscrição alterada
        - operacao (str): "nota", "limpar" ou "presenca"
        - campos (dict): valores gravados

        Retorno:
        - None: falhas são apenas registradas no log da aplicação
        """
        entrada = {
            "event_id": str(uuid.uuid4()),
            "timestamp": datetime.now().isoformat(),
            "registration_id": inscricao_id,
            "operation": operacao,
            "fields": campos,
        }

        try:
            linha_json = json.dumps(entrada, ensure_ascii=False)
        except (TypeError, ValueError) as erro:
            logger.error(f"Falha ao serializar registro de notas: {erro}")
            return

        with self._lock:
            try:
                os.makedirs(os.path.dirname(Configuracoes.GRADE_LOG_PATH), exist_ok=True)
                self._rotacionar_se_necessario()
                with open(Configuracoes.GRADE_LOG_PATH, "a", encoding="utf-8") as arquivo:
                    arquivo.write(linha_json + "\n")
            except OSError as erro:
                logger.error(f"Falha ao escrever registro de notas: {erro}")

    @staticmethod
    def _rotacionar_se_necessario() -> None:
        """Rotaciona o arquivo quando atinge o tamanho máximo."""
        try:
            if not os.path.exists(Configuracoes.GRADE_LOG_PATH):
                return
            if os.path.getsize(Configuracoes.GRADE_LOG_PATH) < Configuracoes.LOG_MAX_BYTES:
                return
            timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
            os.replace(Configuracoes.GRADE_LOG_PATH, f"{Configuracoes.GRADE_LOG_PATH}.{timestamp}.bak")
        except OSError as erro:
            logger.warning(f"Falha ao rotacionar registro de notas: {erro}")
