"""
Snapshot do catálogo usado pela busca do site.

Carrega destinos -> pacotes -> datas/fotos uma única vez por requisição
e deixa apenas o que pode ser vendido: pacotes com pelo menos uma saída
futura, cada um com as saídas futuras em ordem e a primeira foto.
"""
from django.db.models import Prefetch
from django.utils import timezone

from apps.destino.models import Destino
from apps.pacote.models import Pacote
from apps.pacote.services import proximas_saidas
from .serializers import DestinoDisponivelSerializer, PacoteDisponivelSerializer


def carregar_destinos():
    return (
        Destino.objects.filter(deleted_at__isnull=True)
        .prefetch_related(
            Prefetch(
                "pacotes",
                queryset=Pacote.objects.filter(deleted_at__isnull=True).prefetch_related("fotos", "dates"),
            )
        )
        .order_by("order", "id")
    )


def catalogo_disponivel(referencia=None):
    """
    Returns:
        list[dict]: destinos (ordem de exibição) com `pacotes`, cada pacote
        com `dates` (somente futuras) e `fotos` (somente a primeira)
    """
    referencia = referencia or timezone.now()
    catalogo = []

    for destino in carregar_destinos():
        datas = {}
        fotos = {}
        pacotes = []
        for pacote in destino.pacotes.all():
            futuras = proximas_saidas(pacote.dates.all(), referencia)
            if not futuras:
                continue
            datas[pacote.id] = futuras
            fotos[pacote.id] = list(pacote.fotos.all())[:1]
            pacotes.append(pacote)

        if not pacotes:
            continue

        contexto = {"datas": datas, "fotos": fotos}
        item = DestinoDisponivelSerializer(destino).data
        item["pacotes"] = PacoteDisponivelSerializer(pacotes, many=True, context=contexto).data
        catalogo.append(item)

    return catalogo
