import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


def _primeira_mensagem(detalhe):
    """Extrai a primeira mensagem legível de um detalhe de erro do DRF."""
    if isinstance(detalhe, dict):
        if "detail" in detalhe:
            return _primeira_mensagem(detalhe["detail"])
        for valor in detalhe.values():
            return _primeira_mensagem(valor)
    if isinstance(detalhe, (list, tuple)) and detalhe:
        return _primeira_mensagem(detalhe[0])
    return str(detalhe)


def exception_handler(exc, context):
    """
    Mantém o tratamento padrão do DRF, mas devolve sempre
    {"success": false, "message": ..., "errors": ...}.

    Exceções não tratadas (falhas de banco, etc.) viram 500 com mensagem
    genérica e são registradas no log.
    """
    response = drf_exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.exception("Erro não tratado em %s", view.__class__.__name__ if view else "view")
        return Response(
            {"success": False, "message": "Erro interno do servidor."},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    erros = response.data
    response.data = {
        "success": False,
        "message": _primeira_mensagem(erros),
        "errors": erros,
    }
    return response
