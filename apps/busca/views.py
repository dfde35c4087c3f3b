"""
Busca de disponibilidade do site
"""
import logging

from django.utils.dateparse import parse_date
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from apps.pacote.services import buscar_disponibilidade
from .catalogo import catalogo_disponivel

logger = logging.getLogger(__name__)


def _ler_data(request, nome):
    """Lê um parâmetro YYYY-MM-DD. Vazio -> None; inválido -> ValueError."""
    valor = (request.query_params.get(nome) or "").strip()
    if not valor:
        return None
    try:
        data = parse_date(valor)
    except ValueError:
        data = None
    if data is None:
        raise ValueError(f"Data inválida em '{nome}': {valor}")
    return data


def _linha_resultado(linha):
    pacote = {k: v for k, v in linha["pacote"].items() if k != "dates"}
    return {
        **pacote,
        "destinoTitle": linha["destino_title"],
        "destinoSlug": linha["destino_slug"],
        "currentDate": linha["data"],
    }


@api_view(['GET'])
@permission_classes([AllowAny])
def disponibilidade(request):
    """
    GET /api/search/availability/

    Destinos com pelo menos um pacote com saída futura; cada pacote traz
    somente as saídas futuras e a primeira foto.
    """
    try:
        catalogo = catalogo_disponivel()
        return Response({"success": True, "items": catalogo})

    except Exception as e:
        logger.exception("Erro ao montar o catálogo de disponibilidade")
        return Response(
            {
                "success": False,
                "message": "Erro ao buscar disponibilidade",
                "errors": [str(e)]
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


@api_view(['GET'])
@permission_classes([AllowAny])
def buscar(request):
    """
    GET /api/search/?q=&destino=&start=&end=

    Parâmetros opcionais:
    - q: texto no título do pacote ou do destino
    - destino: slug do destino
    - start / end: intervalo (YYYY-MM-DD) do dia de saída, inclusivo

    Cada item é um pacote com UMA data (`currentDate`), ordenados pela saída.
    """
    try:
        inicio = _ler_data(request, "start")
        fim = _ler_data(request, "end")
    except ValueError as e:
        return Response(
            {"success": False, "message": str(e)},
            status=status.HTTP_400_BAD_REQUEST
        )

    try:
        linhas = buscar_disponibilidade(
            catalogo_disponivel(),
            texto=request.query_params.get("q"),
            destino_slug=request.query_params.get("destino") or None,
            data_inicio=inicio,
            data_fim=fim,
        )
        items = [_linha_resultado(linha) for linha in linhas]
        return Response({"success": True, "total": len(items), "items": items})

    except Exception as e:
        logger.exception("Erro na busca de pacotes")
        return Response(
            {
                "success": False,
                "message": "Erro ao buscar pacotes",
                "errors": [str(e)]
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
