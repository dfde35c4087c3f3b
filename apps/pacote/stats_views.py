"""
Contadores de engajamento (curtidas e visualizações) de pacotes e fotos.

Cada chamada soma exatamente 1 e devolve os valores gravados no banco,
que são a referência para o front. Não há deduplicação por cliente.
"""
import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .models import Pacote, PacoteFoto
from .services import incrementar_contador

logger = logging.getLogger(__name__)


def _incrementar(request, modelo, campo_id, chave, campo, nome):
    alvo_id = request.data.get(campo_id)
    if alvo_id in (None, ""):
        return Response(
            {"success": False, "message": "ID obrigatório"},
            status=status.HTTP_400_BAD_REQUEST
        )

    try:
        alvo_id = int(alvo_id)
    except (TypeError, ValueError):
        return Response(
            {"success": False, "message": "ID inválido"},
            status=status.HTTP_400_BAD_REQUEST
        )

    try:
        contadores = incrementar_contador(modelo, alvo_id, campo)
    except modelo.DoesNotExist:
        return Response(
            {"success": False, "message": f"{nome} não encontrado"},
            status=status.HTTP_404_NOT_FOUND
        )
    except Exception as e:
        logger.exception("Erro ao incrementar %s de %s %s", campo, nome, alvo_id)
        return Response(
            {
                "success": False,
                "message": f"Erro ao atualizar {nome.lower()}",
                "errors": [str(e)]
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return Response({"success": True, chave: contadores})


@api_view(['PATCH'])
@permission_classes([AllowAny])
def pacote_like(request):
    """
    PATCH /api/stats/pacote-like/
    Body: {"pacoteId": 1}
    """
    return _incrementar(request, Pacote, "pacoteId", "pacote", "like", "Pacote")


@api_view(['PATCH'])
@permission_classes([AllowAny])
def pacote_view(request):
    """PATCH /api/stats/pacote-view/"""
    return _incrementar(request, Pacote, "pacoteId", "pacote", "view", "Pacote")


@api_view(['PATCH'])
@permission_classes([AllowAny])
def pacote_foto_like(request):
    """
    PATCH /api/stats/pacote-foto-like/
    Body: {"fotoId": 1}
    """
    return _incrementar(request, PacoteFoto, "fotoId", "foto", "like", "Foto")


@api_view(['PATCH'])
@permission_classes([AllowAny])
def pacote_foto_view(request):
    """PATCH /api/stats/pacote-foto-view/"""
    return _incrementar(request, PacoteFoto, "fotoId", "foto", "view", "Foto")
