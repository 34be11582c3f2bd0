"""Ponto de entrada da importação de alunos por linha de comando.

Responsabilidades:
- Ler o arquivo CSV informado
- Importar os alunos na base em arquivo JSON
- Tratar falhas e finalizar com código de saída
"""

import argparse

from graduacao.application.servico_alunos import ServicoAlunos
from graduacao.infrastructure.gateway.arquivo_json import GatewayArquivoJson
from graduacao.util.logger import logger


def _ler_argumentos():
    parser = argparse.ArgumentParser(description="Importa alunos de um arquivo CSV.")
    parser.add_argument("arquivo", help="CSV com cabeçalho, separado por vírgula ou ponto e vírgula")
    parser.add_argument("--base", default=None, help="Arquivo JSON da base (padrão: DATA_FILE)")
    return parser.parse_args()


if __name__ == "__main__":
    argumentos = _ler_argumentos()
    logger.info(f"Iniciando importação de {argumentos.arquivo}...")

    try:
        with open(argumentos.arquivo, "r", encoding="utf-8-sig") as arquivo:
            conteudo = arquivo.read()

        servico = ServicoAlunos(gateway=GatewayArquivoJson(argumentos.base))
        resultado = servico.importar(conteudo)

        for aviso in resultado.avisos:
            logger.warning(f"Linha {aviso.linha}: {aviso.mensagem} ({aviso.campo}='{aviso.valor}')")

        logger.info(
            f"Importação concluída: {len(resultado.alunos)} alunos importados, "
            f"{resultado.ignorados} linhas ignoradas."
        )

    except Exception as erro:
        logger.exception(f"Ocorreu um erro fatal durante a importação: {str(erro)}")
        exit(1)
