"""Gateway de dados persistido em arquivo JSON.

Responsabilidades:
- Carregar o arquivo na inicialização
- Regravar o arquivo de forma atômica após cada mutação
"""

import json
import os
from typing import Optional

from graduacao.config.settings import Configuracoes
from graduacao.domain.modelos import DadosDojo
from graduacao.infrastructure.gateway.memoria import GatewayMemoria
from graduacao.util.logger import FabricaLogger


logger = FabricaLogger.obter("gateway")


class GatewayArquivoJson(GatewayMemoria):
    """Gateway em memória com fotografia completa gravada em disco."""

    def __init__(self, caminho: Optional[str] = None):
        """Inicializa o gateway.

        Parâmetros:
        - caminho (str | None): arquivo JSON; padrão Configuracoes.DATA_FILE

        Exceções:
        - ValueError: quando o arquivo existe mas não é um JSON válido do dojo
        """
        super().__init__()
        self.caminho = caminho or Configuracoes.DATA_FILE
        self._carregar_arquivo()

    def _carregar_arquivo(self) -> None:
        if not os.path.exists(self.caminho):
            logger.info(f"Arquivo de dados {self.caminho} inexistente. Iniciando base vazia.")
            return

        try:
            with open(self.caminho, "r", encoding="utf-8") as arquivo:
                conteudo = json.load(arquivo)
            self._carregar(DadosDojo.model_validate(conteudo))
        except (json.JSONDecodeError, ValueError) as erro:
            logger.error(f"Arquivo de dados inválido em {self.caminho}: {erro}")
            raise ValueError(f"Arquivo de dados inválido: {self.caminho}") from erro

        logger.info(
            f"Base carregada de {self.caminho}: {len(self._alunos)} alunos, "
            f"{len(self._exames)} exames, {len(self._inscricoes)} inscrições."
        )

    def _persistir(self) -> None:
        diretorio = os.path.dirname(self.caminho)
        if diretorio:
            os.makedirs(diretorio, exist_ok=True)

        dados = DadosDojo(
            senseis=list(self._senseis.values()),
            alunos=list(self._alunos.values()),
            exames=list(self._exames.values()),
            inscricoes=list(self._inscricoes.values()),
        )
        temporario = f"{self.caminho}.tmp"
        with open(temporario, "w", encoding="utf-8") as arquivo:
            json.dump(dados.model_dump(mode="json"), arquivo, ensure_ascii=False, indent=2)
        os.replace(temporario, self.caminho)
