from rest_framework import serializers

from apps.destino.models import Destino
from apps.pacote.models import Pacote
from apps.pacote.serializers import PacoteFotoSerializer, PacoteDateSerializer


class PacoteDisponivelSerializer(serializers.ModelSerializer):
    """
    Pacote no catálogo de disponibilidade. As datas e fotos são passadas
    já filtradas pelo contexto (`datas` e `fotos`, indexados pelo id).
    """
    fotos = serializers.SerializerMethodField()
    dates = serializers.SerializerMethodField()

    class Meta:
        model = Pacote
        fields = ["id", "title", "subtitle", "slug", "like", "view", "fotos", "dates"]

    def get_fotos(self, obj):
        fotos = self.context.get("fotos", {}).get(obj.id, [])
        return PacoteFotoSerializer(fotos, many=True).data

    def get_dates(self, obj):
        datas = self.context.get("datas", {}).get(obj.id, [])
        return PacoteDateSerializer(datas, many=True).data


class DestinoDisponivelSerializer(serializers.ModelSerializer):
    class Meta:
        model = Destino
        fields = ["id", "title", "subtitle", "slug", "order", "image"]
