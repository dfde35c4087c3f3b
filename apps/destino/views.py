import logging

from django.db.models import Prefetch
from django.shortcuts import get_object_or_404
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.response import Response

from apps.api.respostas import RespostaPadraoMixin
from apps.pacote.models import Pacote
from .filters import DestinoFilter
from .models import Destino
from .serializers import DestinoSerializer

logger = logging.getLogger(__name__)


def pacotes_ativos():
    return Prefetch(
        "pacotes",
        queryset=Pacote.objects.filter(deleted_at__isnull=True).prefetch_related("fotos", "dates"),
    )


# -------------------- VIEWSET --------------------
class DestinoViewSet(RespostaPadraoMixin, viewsets.ModelViewSet):
    """
    ViewSet para Destino com:
    - Pacotes aninhados (criação/atualização junto com o destino)
    - Filtro de busca e ordenação
    - Exclusão lógica do destino e dos seus pacotes
    - Endpoints extra: resumen, todos e slug
    """

    queryset = (
        Destino.objects.filter(deleted_at__isnull=True)
        .prefetch_related(pacotes_ativos())
        .order_by("order", "id")
    )
    serializer_class = DestinoSerializer
    permission_classes = [IsAuthenticatedOrReadOnly]
    filter_backends = [DjangoFilterBackend]
    filterset_class = DestinoFilter
    mensagem_exclusao = "Destino excluído com sucesso."

    def perform_destroy(self, instance):
        instance.excluir()
        logger.info("Destino %s excluído", instance.id)

    # ----- ENDPOINT EXTRA: resumen -----
    @action(detail=False, methods=['get'], url_path='resumen')
    def resumen(self, request):
        destinos = Destino.objects.filter(deleted_at__isnull=True)
        total = destinos.count()
        com_pacotes = destinos.filter(pacotes__deleted_at__isnull=True).distinct().count()
        pacotes = Pacote.objects.filter(deleted_at__isnull=True, destino__deleted_at__isnull=True).count()

        data = [
            {"texto": "Total", "valor": str(total)},
            {"texto": "Com pacotes", "valor": str(com_pacotes)},
            {"texto": "Sem pacotes", "valor": str(total - com_pacotes)},
            {"texto": "Pacotes", "valor": str(pacotes)},
        ]
        return Response({"success": True, "data": data})

    # ----- ENDPOINT EXTRA: todos -----
    @action(detail=False, methods=['get'], url_path='todos', pagination_class=None)
    def todos(self, request):
        queryset = (
            self.filter_queryset(Destino.objects.filter(deleted_at__isnull=True).order_by("order", "id"))
            .values("id", "title", "slug", "order")
        )
        return Response({"success": True, "items": list(queryset)})

    # ----- ENDPOINT EXTRA: detalhe pelo slug -----
    @action(detail=False, methods=['get'], url_path=r'slug/(?P<slug>[-\w]+)')
    def por_slug(self, request, slug=None):
        destino = get_object_or_404(self.get_queryset(), slug=slug)
        serializer = self.get_serializer(destino)
        return Response({"success": True, "data": serializer.data})
