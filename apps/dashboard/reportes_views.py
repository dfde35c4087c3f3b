"""
Views dos relatórios de saídas: JSON para o painel e exportação PDF/Excel.
"""
import logging
from datetime import datetime, timedelta

from django.http import HttpResponse
from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.pacote.models import PacoteDate
from apps.pacote.services import vagas_ocupadas, total_vagas_ofertadas, total_vagas_disponiveis
from .reportes_serializers import SaidaReporteSerializer
from .reportes_utils import gerar_pdf_saidas, gerar_excel_saidas

logger = logging.getLogger(__name__)


# ============================================================================
# UTILIDADES
# ============================================================================

def parsear_data(data_str, default=None):
    """
    Converte uma data YYYY-MM-DD.

    Returns:
        date ou `default` quando ausente/inválida
    """
    if not data_str:
        return default

    try:
        return datetime.strptime(data_str, '%Y-%m-%d').date()
    except ValueError:
        return default


def parsear_id(valor):
    """Id numérico do filtro, ou None quando ausente/inválido."""
    try:
        return int(valor) if valor else None
    except (TypeError, ValueError):
        return None


def _inicio_do_dia(data):
    return timezone.make_aware(datetime.combine(data, datetime.min.time()))


def filtrar_saidas(request):
    """
    Saídas de pacotes ativos com os filtros do relatório.

    Parâmetros:
    - saida_desde / saida_ate: YYYY-MM-DD (dia da saída, inclusivo)
    - destino_id: ID do destino
    - pacote_id: ID do pacote
    - status: disponivel, esgotado, cancelado
    """
    queryset = (
        PacoteDate.objects.filter(
            pacote__deleted_at__isnull=True,
            pacote__destino__deleted_at__isnull=True
        )
        .select_related("pacote", "pacote__destino")
        .order_by("saida", "id")
    )

    saida_desde = parsear_data(request.query_params.get('saida_desde'))
    if saida_desde:
        queryset = queryset.filter(saida__gte=_inicio_do_dia(saida_desde))

    saida_ate = parsear_data(request.query_params.get('saida_ate'))
    if saida_ate:
        queryset = queryset.filter(saida__lt=_inicio_do_dia(saida_ate) + timedelta(days=1))

    destino_id = parsear_id(request.query_params.get('destino_id'))
    if destino_id:
        queryset = queryset.filter(pacote__destino_id=destino_id)

    pacote_id = parsear_id(request.query_params.get('pacote_id'))
    if pacote_id:
        queryset = queryset.filter(pacote_id=pacote_id)

    status_saida = request.query_params.get('status')
    if status_saida:
        queryset = queryset.filter(status=status_saida)

    return queryset


def resumir_saidas(saidas):
    return {
        "total_saidas": len(saidas),
        "vagas_total": total_vagas_ofertadas(saidas),
        "vagas_ocupadas": vagas_ocupadas(saidas),
        "vagas_disponiveis": total_vagas_disponiveis(saidas),
    }


def _filtros(request):
    return {
        "status": request.query_params.get('status'),
        "saida_desde": request.query_params.get('saida_desde'),
        "saida_ate": request.query_params.get('saida_ate'),
    }


# ============================================================================
# RELATÓRIO JSON
# ============================================================================

@api_view(['GET'])
@permission_classes([IsAuthenticated])
def reporte_saidas(request):
    """
    GET /api/dashboard/reportes/saidas/

    Listagem das saídas com vagas, preços formatados e totais.
    """
    try:
        saidas = list(filtrar_saidas(request))
        data = SaidaReporteSerializer(saidas, many=True).data

        return Response({
            "success": True,
            "resumen": resumir_saidas(saidas),
            "filtros": _filtros(request),
            "items": data,
        })

    except Exception as e:
        logger.exception("Erro ao gerar relatório de saídas")
        return Response(
            {
                "success": False,
                "message": "Erro ao gerar relatório de saídas",
                "errors": [str(e)]
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


# ============================================================================
# EXPORTAÇÃO
# ============================================================================

@api_view(['GET'])
@permission_classes([IsAuthenticated])
def exportar_saidas_pdf(request):
    """
    GET /api/dashboard/reportes/saidas/exportar-pdf/
    """
    try:
        saidas = list(filtrar_saidas(request))
        data = SaidaReporteSerializer(saidas, many=True).data

        pdf_buffer = gerar_pdf_saidas(data, _filtros(request), resumir_saidas(saidas))

        data_atual = timezone.localtime().strftime('%Y%m%d_%H%M%S')
        response = HttpResponse(pdf_buffer.getvalue(), content_type='application/pdf')
        response['Content-Disposition'] = f'attachment; filename="saidas_{data_atual}.pdf"'
        return response

    except Exception as e:
        logger.exception("Erro ao exportar PDF de saídas")
        return Response(
            {
                "success": False,
                "message": "Erro ao exportar PDF de saídas",
                "errors": [str(e)]
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def exportar_saidas_excel(request):
    """
    GET /api/dashboard/reportes/saidas/exportar-excel/
    """
    try:
        saidas = list(filtrar_saidas(request))
        data = SaidaReporteSerializer(saidas, many=True).data

        excel_buffer = gerar_excel_saidas(data, _filtros(request), resumir_saidas(saidas))

        data_atual = timezone.localtime().strftime('%Y%m%d_%H%M%S')
        response = HttpResponse(
            excel_buffer.getvalue(),
            content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
        )
        response['Content-Disposition'] = f'attachment; filename="saidas_{data_atual}.xlsx"'
        return response

    except Exception as e:
        logger.exception("Erro ao exportar Excel de saídas")
        return Response(
            {
                "success": False,
                "message": "Erro ao exportar Excel de saídas",
                "errors": [str(e)]
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
