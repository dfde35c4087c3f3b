"""
Dashboard Views
Endpoints de métricas do painel administrativo: ranking de pacotes por
vagas vendidas, fotos mais curtidas/vistas e totais gerais.
"""
import logging

from django.db.models import Prefetch, Sum
from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.conteudo.models import Inscrito
from apps.destino.models import Destino
from apps.pacote.models import Pacote, PacoteFoto, PacoteDate
from apps.pacote.services import (
    ranking_pacotes,
    vagas_ocupadas,
    total_vagas_ofertadas,
    total_vagas_disponiveis,
)

logger = logging.getLogger(__name__)

TOP_PACOTES = 5
TOP_FOTOS = 8


def _foto_dict(foto):
    return {
        "id": foto.id,
        "url": foto.url,
        "caption": foto.caption,
        "tipo": foto.tipo,
        "like": foto.like,
        "view": foto.view,
        "pacoteId": foto.pacote_id,
        "pacoteTitle": foto.pacote.title,
        "slug": foto.pacote.slug,
    }


def _pacotes_ativos():
    return (
        Pacote.objects.filter(deleted_at__isnull=True, destino__deleted_at__isnull=True)
        .prefetch_related(
            "dates",
            Prefetch("fotos", queryset=PacoteFoto.objects.select_related("pacote")),
        )
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def pacotes_stats(request):
    """
    GET /api/dashboard/pacotes-stats/

    Retorna:
    - topPackages: fotos dos 5 pacotes com mais vagas ocupadas
    - topLikedPackages: as 8 fotos mais curtidas
    - topViewedPackages: as 8 fotos mais vistas
    - totalReservations: soma das vagas ocupadas
    - totalSubscribers: inscritos na newsletter
    """
    try:
        pacotes = list(_pacotes_ativos().order_by("id"))

        # ===== MAIS VENDIDOS =====
        top_pacotes = ranking_pacotes(pacotes, limite=TOP_PACOTES)
        top_packages = [
            _foto_dict(foto)
            for pacote in top_pacotes
            for foto in pacote.fotos.all()
        ]

        # ===== FOTOS MAIS CURTIDAS / VISTAS =====
        fotos = PacoteFoto.objects.filter(
            pacote__deleted_at__isnull=True,
            pacote__destino__deleted_at__isnull=True
        ).select_related("pacote")

        top_liked = [_foto_dict(f) for f in fotos.order_by("-like", "id")[:TOP_FOTOS]]
        top_viewed = [_foto_dict(f) for f in fotos.order_by("-view", "id")[:TOP_FOTOS]]

        total_reservas = sum(vagas_ocupadas(p.dates.all()) for p in pacotes)

        return Response({
            "success": True,
            "topPackages": top_packages,
            "topLikedPackages": top_liked,
            "topViewedPackages": top_viewed,
            "totalReservations": total_reservas,
            "totalSubscribers": Inscrito.objects.count(),
        })

    except Exception as e:
        logger.exception("Erro ao obter estatísticas de pacotes")
        return Response(
            {
                "success": False,
                "message": "Erro ao obter estatísticas de pacotes",
                "errors": [str(e)]
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def resumen(request):
    """
    GET /api/dashboard/resumen/

    Totais do catálogo no formato [{"texto", "valor"}].
    """
    try:
        datas = list(
            PacoteDate.objects.filter(
                pacote__deleted_at__isnull=True,
                pacote__destino__deleted_at__isnull=True
            )
        )
        agora = timezone.now()
        futuras = [d for d in datas if d.saida >= agora]

        pacotes = Pacote.objects.filter(deleted_at__isnull=True, destino__deleted_at__isnull=True)
        contadores = pacotes.aggregate(likes=Sum("like"), views=Sum("view"))

        data = [
            {"texto": "Destinos", "valor": str(Destino.objects.filter(deleted_at__isnull=True).count())},
            {"texto": "Pacotes", "valor": str(pacotes.count())},
            {"texto": "Saídas futuras", "valor": str(len(futuras))},
            {"texto": "Vagas ofertadas", "valor": str(total_vagas_ofertadas(datas))},
            {"texto": "Vagas ocupadas", "valor": str(vagas_ocupadas(datas))},
            {"texto": "Vagas disponíveis", "valor": str(total_vagas_disponiveis(datas))},
            {"texto": "Curtidas", "valor": str(contadores["likes"] or 0)},
            {"texto": "Visualizações", "valor": str(contadores["views"] or 0)},
        ]
        return Response({"success": True, "data": data})

    except Exception as e:
        logger.exception("Erro ao obter resumo do dashboard")
        return Response(
            {
                "success": False,
                "message": "Erro ao obter resumo",
                "errors": [str(e)]
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
