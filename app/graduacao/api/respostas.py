"""Tradução de erros de domínio em respostas HTTP."""

from fastapi import HTTPException

from graduacao.domain.erros import (
    AtualizacaoRejeitadaError,
    FalhaGatewayError,
    InscricaoDuplicadaError,
    RegistroNaoEncontradoError,
)


def executar(operacao, *args, **kwargs):
    """Executa a operação do serviço convertendo exceções conhecidas.

    Exceções:
    - HTTPException: 404, 409, 422, 400 ou 502 conforme o erro
    """
    try:
        return operacao(*args, **kwargs)
    except RegistroNaoEncontradoError as erro:
        raise HTTPException(status_code=404, detail=str(erro))
    except InscricaoDuplicadaError as erro:
        raise HTTPException(status_code=409, detail=str(erro))
    except AtualizacaoRejeitadaError as erro:
        raise HTTPException(status_code=422, detail=str(erro))
    except FalhaGatewayError as erro:
        raise HTTPException(status_code=502, detail=str(erro))
    except (ValueError, TypeError) as erro:
        raise HTTPException(status_code=400, detail=str(erro))
