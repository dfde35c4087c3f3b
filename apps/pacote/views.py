import logging

from django.db.models import Sum
from django.http import HttpResponse
from django.shortcuts import get_object_or_404
from django.utils import timezone
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.response import Response

from apps.api.respostas import RespostaPadraoMixin
from .filters import PacoteFilter, PacoteDateFilter
from .models import Pacote, PacoteDate
from .serializers import PacoteSerializer, PacoteDetalheSerializer, PacoteDateEdicaoSerializer
from .utils import gerar_qrcode_png, url_compartilhamento

logger = logging.getLogger(__name__)


# -------------------- VIEWSET PACOTE --------------------
class PacoteViewSet(RespostaPadraoMixin, viewsets.ModelViewSet):
    """
    ViewSet para Pacote com:
    - Fotos e datas aninhadas (atualização por id, contadores preservados)
    - Filtrado por DjangoFilterBackend
    - Exclusão lógica (deleted_at)
    - Endpoints extra: resumen, slug e qrcode
    """

    queryset = (
        Pacote.objects.filter(deleted_at__isnull=True)
        .select_related("destino")
        .prefetch_related("fotos", "dates")
        .order_by("-created_at", "-id")
    )

    serializer_class = PacoteSerializer
    permission_classes = [IsAuthenticatedOrReadOnly]
    filter_backends = [DjangoFilterBackend]
    filterset_class = PacoteFilter
    mensagem_exclusao = "Pacote excluído com sucesso."

    def get_serializer_class(self):
        if self.action == "retrieve":
            return PacoteDetalheSerializer
        return super().get_serializer_class()

    def perform_destroy(self, instance):
        instance.excluir()
        logger.info("Pacote %s excluído", instance.id)

    # ----- ENDPOINT EXTRA: resumen -----
    @action(detail=False, methods=['get'], url_path='resumen')
    def resumen(self, request):
        pacotes = Pacote.objects.filter(deleted_at__isnull=True)
        total = pacotes.count()
        com_saidas = pacotes.filter(dates__saida__gte=timezone.now()).distinct().count()
        contadores = pacotes.aggregate(likes=Sum("like"), views=Sum("view"))

        data = [
            {"texto": "Total", "valor": str(total)},
            {"texto": "Com saídas futuras", "valor": str(com_saidas)},
            {"texto": "Sem saídas futuras", "valor": str(total - com_saidas)},
            {"texto": "Curtidas", "valor": str(contadores["likes"] or 0)},
            {"texto": "Visualizações", "valor": str(contadores["views"] or 0)},
        ]
        return Response({"success": True, "data": data})

    # ----- ENDPOINT EXTRA: detalhe pelo slug -----
    @action(detail=False, methods=['get'], url_path=r'slug/(?P<slug>[-\w]+)')
    def por_slug(self, request, slug=None):
        pacote = get_object_or_404(self.get_queryset(), slug=slug)
        serializer = PacoteDetalheSerializer(pacote, context=self.get_serializer_context())
        return Response({"success": True, "data": serializer.data})

    # ----- ENDPOINT EXTRA: QR code do link de compartilhamento -----
    @action(detail=True, methods=['get'], url_path='qrcode')
    def qrcode(self, request, pk=None):
        pacote = self.get_object()
        png = gerar_qrcode_png(url_compartilhamento(pacote.slug))

        response = HttpResponse(png, content_type="image/png")
        response["Content-Disposition"] = f'inline; filename="qrcode-{pacote.slug}.png"'
        return response


# -------------------- VIEWSET DATAS DE SAÍDA --------------------
class PacoteDateViewSet(RespostaPadraoMixin, viewsets.ModelViewSet):
    """
    Consulta e edição pontual das saídas.
    A criação e a remoção de datas acontecem pela atualização do pacote.

    - GET /api/pacote-datas/?pacote_id=&status=&saida_desde=&saida_ate=&com_vagas=
    - GET/PUT/PATCH /api/pacote-datas/{id}/
    """

    queryset = (
        PacoteDate.objects.filter(pacote__deleted_at__isnull=True)
        .select_related("pacote")
        .order_by("saida", "id")
    )
    serializer_class = PacoteDateEdicaoSerializer
    permission_classes = [IsAuthenticatedOrReadOnly]
    filter_backends = [DjangoFilterBackend]
    filterset_class = PacoteDateFilter
    http_method_names = ["get", "put", "patch", "head", "options"]
