import logging

from django.db import transaction
from rest_framework import serializers

from apps.destino.models import Destino
from .models import Pacote, PacoteFoto, PacoteDate
from .services import (
    proximas_saidas,
    vagas_ocupadas,
    total_vagas_ofertadas,
    total_vagas_disponiveis,
)
from .utils import formatar_moeda, link_whatsapp, url_compartilhamento, url_pacote

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# Serializers simples
# ---------------------------------------------------------------------
class DestinoNestedSerializer(serializers.ModelSerializer):
    class Meta:
        model = Destino
        fields = ["id", "title", "slug"]


# ---------------------------------------------------------------------
# PacoteFoto Serializer
# ---------------------------------------------------------------------
class PacoteFotoSerializer(serializers.ModelSerializer):
    # id gravável: usado para casar as fotos enviadas com as existentes
    id = serializers.IntegerField(required=False)
    tipo = serializers.CharField(read_only=True)

    class Meta:
        model = PacoteFoto
        fields = ["id", "url", "caption", "tipo", "like", "view", "created_at"]
        read_only_fields = ["like", "view", "created_at"]


# ---------------------------------------------------------------------
# PacoteDate Serializer
# ---------------------------------------------------------------------
class PacoteDateSerializer(serializers.ModelSerializer):
    id = serializers.IntegerField(required=False)
    pacote_id = serializers.IntegerField(read_only=True)
    pacote_title = serializers.CharField(source="pacote.title", read_only=True)

    price_formatado = serializers.SerializerMethodField()
    price_card_formatado = serializers.SerializerMethodField()
    vagas_ocupadas = serializers.SerializerMethodField()

    class Meta:
        model = PacoteDate
        fields = [
            "id",
            "pacote_id",
            "pacote_title",
            "saida",
            "retorno",
            "vagas_total",
            "vagas_disponiveis",
            "vagas_ocupadas",
            "price",
            "price_formatado",
            "price_card",
            "price_card_formatado",
            "status",
            "notes",
        ]

    def get_price_formatado(self, obj):
        return formatar_moeda(obj.price)

    def get_price_card_formatado(self, obj):
        return formatar_moeda(obj.price_card)

    def get_vagas_ocupadas(self, obj):
        return vagas_ocupadas([obj])

    def validate(self, attrs):
        saida = attrs.get("saida", getattr(self.instance, "saida", None))
        retorno = attrs.get("retorno", getattr(self.instance, "retorno", None))
        if saida and retorno and retorno < saida:
            raise serializers.ValidationError({
                "retorno": "A data de retorno não pode ser anterior à data de saída."
            })
        return super().validate(attrs)


class PacoteDateEdicaoSerializer(PacoteDateSerializer):
    """Edição avulsa de uma saída: o id vem da URL, nunca do corpo."""
    id = serializers.IntegerField(read_only=True)


# ---------------------------------------------------------------------
# Gravação de pacotes e filhos (usado também pelo serializer de Destino)
# ---------------------------------------------------------------------
def sincronizar_filhos(pacote, relacionado, modelo, itens):
    """
    Aplica a lista enviada sobre os filhos existentes do pacote, por id:
    - id existente: atualiza só os campos enviados (contadores intactos)
    - sem id (ou id de outro pacote): cria um novo registro
    - ids que não vieram na lista: são removidos
    """
    existentes = {obj.id: obj for obj in getattr(pacote, relacionado).all()}
    mantidos = set()

    for item in itens:
        dados = dict(item)
        item_id = dados.pop("id", None)
        obj = existentes.get(item_id)

        if obj is None:
            modelo.objects.create(pacote=pacote, **dados)
            continue

        for attr, valor in dados.items():
            setattr(obj, attr, valor)
        obj.save(update_fields=list(dados) + ["updated_at"])
        mantidos.add(item_id)

    removidos = [obj_id for obj_id in existentes if obj_id not in mantidos]
    if removidos:
        modelo.objects.filter(id__in=removidos).delete()


def criar_pacote(dados, destino=None):
    dados = dict(dados)
    dados.pop("id", None)
    fotos = dados.pop("fotos", None) or []
    datas = dados.pop("dates", None) or []
    if destino is not None:
        dados["destino"] = destino

    with transaction.atomic():
        pacote = Pacote.objects.create(**dados)
        for foto in fotos:
            foto = {k: v for k, v in foto.items() if k != "id"}
            PacoteFoto.objects.create(pacote=pacote, **foto)
        for data in datas:
            data = {k: v for k, v in data.items() if k != "id"}
            PacoteDate.objects.create(pacote=pacote, **data)

    logger.info("Pacote %s criado (%s fotos, %s datas)", pacote.id, len(fotos), len(datas))
    return pacote


def atualizar_pacote(pacote, dados):
    """
    Atualiza o pacote sem tocar em like/view. Listas de fotos/datas
    ausentes mantêm os filhos como estão.
    """
    dados = dict(dados)
    dados.pop("id", None)
    fotos = dados.pop("fotos", None)
    datas = dados.pop("dates", None)

    with transaction.atomic():
        for attr, valor in dados.items():
            setattr(pacote, attr, valor)
        pacote.save(update_fields=Pacote.CAMPOS_EDITAVEIS)

        if fotos is not None:
            sincronizar_filhos(pacote, "fotos", PacoteFoto, fotos)
        if datas is not None:
            sincronizar_filhos(pacote, "dates", PacoteDate, datas)

    return pacote


# ---------------------------------------------------------------------
# Pacote Serializer
# ---------------------------------------------------------------------
class PacoteSerializer(serializers.ModelSerializer):
    destino = DestinoNestedSerializer(read_only=True)
    destino_id = serializers.PrimaryKeyRelatedField(
        queryset=Destino.objects.filter(deleted_at__isnull=True),
        write_only=True,
        source="destino"
    )

    fotos = PacoteFotoSerializer(many=True, required=False)
    dates = PacoteDateSerializer(many=True, required=False)

    class Meta:
        model = Pacote
        fields = [
            "id",
            "title",
            "subtitle",
            "slug",
            "destino",
            "destino_id",
            "description",
            "like",
            "view",
            "fotos",
            "dates",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["slug", "like", "view", "created_at", "updated_at"]

    def create(self, validated_data):
        return criar_pacote(validated_data)

    def update(self, instance, validated_data):
        return atualizar_pacote(instance, validated_data)


class PacotesAtivosListSerializer(serializers.ListSerializer):
    """Na leitura, ignora pacotes com exclusão lógica."""

    def to_representation(self, data):
        if hasattr(data, "all"):
            data = [p for p in data.all() if p.deleted_at is None]
        return super().to_representation(data)


class PacoteAninhadoSerializer(PacoteSerializer):
    """Pacote enviado dentro do payload de um Destino (o destino vem do pai)."""
    id = serializers.IntegerField(required=False)

    class Meta(PacoteSerializer.Meta):
        list_serializer_class = PacotesAtivosListSerializer
        fields = [f for f in PacoteSerializer.Meta.fields if f not in ("destino", "destino_id")]


class PacoteDetalheSerializer(PacoteSerializer):
    """
    Página pública do pacote: além dos dados do pacote traz as próximas
    saídas, o resumo de vagas e os links de compartilhamento/WhatsApp.
    """
    proximas_datas = serializers.SerializerMethodField()
    vagas = serializers.SerializerMethodField()
    url = serializers.SerializerMethodField()
    share_url = serializers.SerializerMethodField()
    whatsapp_url = serializers.SerializerMethodField()

    class Meta(PacoteSerializer.Meta):
        fields = PacoteSerializer.Meta.fields + [
            "proximas_datas",
            "vagas",
            "url",
            "share_url",
            "whatsapp_url",
        ]

    def _url(self, obj):
        return url_pacote(obj.destino.slug, obj.slug)

    def get_proximas_datas(self, obj):
        datas = proximas_saidas(obj.dates.all(), self.context.get("referencia"))
        return PacoteDateSerializer(datas, many=True).data

    def get_vagas(self, obj):
        datas = obj.dates.all()
        return {
            "total": total_vagas_ofertadas(datas),
            "ocupadas": vagas_ocupadas(datas),
            "disponiveis": total_vagas_disponiveis(datas),
        }

    def get_url(self, obj):
        return self._url(obj)

    def get_share_url(self, obj):
        return url_compartilhamento(obj.slug)

    def get_whatsapp_url(self, obj):
        return link_whatsapp(obj.title, self._url(obj))
