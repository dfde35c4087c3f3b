import logging

import requests
from django.conf import settings
from rest_framework import status, viewsets
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework.response import Response

from apps.api.respostas import RespostaPadraoMixin
from apps.busca.catalogo import carregar_destinos
from apps.destino.serializers import DestinoSerializer
from .models import FAQ, Depoimento, Inscrito
from .serializers import FAQSerializer, DepoimentoSerializer, InscritoSerializer

logger = logging.getLogger(__name__)

GOOGLE_PLACE_DETAILS_URL = "https://maps.googleapis.com/maps/api/place/details/json"


# -------------------- FAQ --------------------
class FAQViewSet(RespostaPadraoMixin, viewsets.ModelViewSet):
    queryset = FAQ.objects.all().order_by("pergunta")
    serializer_class = FAQSerializer
    permission_classes = [IsAuthenticatedOrReadOnly]
    pagination_class = None
    mensagem_exclusao = "Pergunta excluída com sucesso."


# -------------------- DEPOIMENTOS --------------------
class DepoimentoViewSet(RespostaPadraoMixin, viewsets.ModelViewSet):
    queryset = Depoimento.objects.all().order_by("-created_at", "-id")
    serializer_class = DepoimentoSerializer
    permission_classes = [IsAuthenticatedOrReadOnly]
    pagination_class = None
    mensagem_exclusao = "Depoimento excluído com sucesso."


# -------------------- INSCRITOS (newsletter) --------------------
class InscritoViewSet(RespostaPadraoMixin, viewsets.ModelViewSet):
    """
    - POST /api/inscritos/: público (formulário do site)
    - GET/DELETE: somente o painel
    """
    queryset = Inscrito.objects.all().order_by("-created_at", "-id")
    serializer_class = InscritoSerializer
    http_method_names = ["get", "post", "delete", "head", "options"]
    mensagem_exclusao = "Inscrito removido com sucesso."

    def get_permissions(self):
        if self.action == "create":
            return [AllowAny()]
        return [IsAuthenticated()]

    def perform_create(self, serializer):
        inscrito = serializer.save()
        logger.info("Novo inscrito na newsletter: %s", inscrito.id)


# -------------------- HOME --------------------
@api_view(['GET'])
@permission_classes([AllowAny])
def home(request):
    """
    GET /api/home/

    Conteúdo da página inicial: depoimentos, FAQs e destinos com pacotes.
    """
    try:
        destinos = carregar_destinos()
        return Response({
            "success": True,
            "testimonials": DepoimentoSerializer(Depoimento.objects.order_by("-created_at", "-id"), many=True).data,
            "faqs": FAQSerializer(FAQ.objects.order_by("pergunta"), many=True).data,
            "destinos": DestinoSerializer(destinos, many=True).data,
        })

    except Exception as e:
        logger.exception("Erro ao carregar a home")
        return Response(
            {
                "success": False,
                "message": "Erro ao carregar a página inicial",
                "errors": [str(e)]
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


# -------------------- AVALIAÇÕES DO GOOGLE --------------------
@api_view(['GET'])
@permission_classes([AllowAny])
def google_reviews(request):
    """
    GET /api/google-reviews/

    Busca as avaliações do local no Google Places e devolve no mesmo
    formato dos depoimentos: [{id, name, content, starRating, type}].
    """
    if not settings.GOOGLE_MAPS_API_KEY:
        return Response(
            {"success": False, "message": "Chave da API do Google não configurada"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    params = {
        "place_id": settings.GOOGLE_PLACE_ID,
        "fields": "reviews",
        "key": settings.GOOGLE_MAPS_API_KEY,
        "language": "pt-BR",
    }

    try:
        resposta = requests.get(
            GOOGLE_PLACE_DETAILS_URL,
            params=params,
            timeout=settings.GOOGLE_REVIEWS_TIMEOUT
        )
        data = resposta.json()
    except (requests.exceptions.RequestException, ValueError):
        logger.exception("Erro ao consultar avaliações do Google")
        return Response(
            {"success": False, "message": "Erro ao buscar avaliações"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    reviews = (data.get("result") or {}).get("reviews")
    if data.get("status") != "OK" or not reviews:
        logger.error(
            "Resposta inesperada do Google Places: %s %s",
            data.get("status"),
            data.get("error_message", "")
        )
        return Response(
            {"success": False, "message": "Não foi possível obter as avaliações"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    items = [
        {
            "id": review.get("author_url"),
            "name": review.get("author_name"),
            "content": review.get("text"),
            "starRating": review.get("rating"),
            "type": Depoimento.TEXTO,
        }
        for review in reviews
    ]
    return Response({"success": True, "items": items})
