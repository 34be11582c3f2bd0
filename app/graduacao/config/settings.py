"""Configurações centrais do projeto.

Responsabilidades:
- Definir caminhos de arquivos
- Definir regras de aprovação e normalização
- Definir backend de persistência
"""

import os
from pathlib import Path


class Configuracoes:
    """Centraliza configurações da aplicação.

    Responsabilidades:
    - Fornecer caminhos de diretórios
    - Declarar constantes de avaliação
    - Selecionar implementação do gateway de dados
    """

    BASE_DIR = Path(__file__).resolve().parents[2]
    DEFAULT_DATA_DIR = os.path.join(BASE_DIR, "data")
    DATA_DIR = os.path.abspath(os.getenv("DATA_DIR", DEFAULT_DATA_DIR))
    LOG_DIR = os.path.join(BASE_DIR, "logs")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    DATA_FILE = os.getenv("DATA_FILE", os.path.join(DATA_DIR, "dojo.json"))
    GRADE_LOG_PATH = os.getenv("GRADE_LOG_PATH", os.path.join(LOG_DIR, "notas.jsonl"))
    LOG_MAX_BYTES = int(os.getenv("LOG_MAX_BYTES", str(10 * 1024 * 1024)))

    GATEWAY_BACKEND = os.getenv("GATEWAY_BACKEND", "memoria").strip().lower()

    NOTA_MINIMA_APROVACAO = float(os.getenv("NOTA_MINIMA_APROVACAO", "6.0"))
    NOTA_MAXIMA = 10.0
    CASAS_DECIMAIS_MEDIA = 2

    # Anos com 2 dígitos abaixo do pivô vão para 20xx, os demais para 19xx.
    ANO_PIVO = int(os.getenv("ANO_PIVO", "30"))

    MAX_WORKERS_LOTE = int(os.getenv("MAX_WORKERS_LOTE", "8"))

    SENSEI_NAO_ATRIBUIDO = "-"
    ALUNO_DESCONHECIDO = "Desconhecido"
