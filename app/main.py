"""Ponto de entrada da API FastAPI.

Responsabilidades:
- Configurar a aplicação FastAPI
- Registrar rotas e eventos
- Inicializar o gateway de dados no startup
"""

import os

import uvicorn
from fastapi import FastAPI, HTTPException

from graduacao.api.alunos_controller import ControladorAlunos
from graduacao.api.exames_controller import ControladorExames
from graduacao.api.relatorio_controller import ControladorRelatorio
from graduacao.application.gateway_runtime import obter_gateway
from graduacao.util.logger import logger

app = FastAPI(
    title="Graduação Dojo",
    description="API de cadastro de alunos, exames de faixa, avaliação e relatórios de aprovação",
    version="1.0.0",
)


@app.on_event("startup")
async def evento_inicializacao():
    """Executa ações de inicialização da aplicação.

    Responsabilidades:
    - Registrar log de inicialização
    - Instanciar o gateway configurado

    Retorno:
    - None: não retorna valor
    """
    logger.info("Inicializando recursos da API...")
    obter_gateway()


controlador_alunos = ControladorAlunos()
app.include_router(controlador_alunos.roteador, prefix="/api/v1", tags=["Cadastro"])

controlador_exames = ControladorExames()
app.include_router(controlador_exames.roteador, prefix="/api/v1", tags=["Exames"])

controlador_relatorio = ControladorRelatorio()
app.include_router(controlador_relatorio.roteador, prefix="/api/v1", tags=["Relatórios"])


@app.get("/health", tags=["Infraestrutura"])
def checar_saude():
    """Endpoint de health check.

    Retorno:
    - dict: status da aplicação
    """
    try:
        obter_gateway()
        return {"status": "ok"}
    except (ValueError, OSError) as erro:
        raise HTTPException(status_code=503, detail=str(erro))


if __name__ == "__main__":
    porta = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=porta)
