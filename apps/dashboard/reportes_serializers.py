"""
Serializers dos relatórios do dashboard.
"""
from rest_framework import serializers

from apps.pacote.models import PacoteDate
from apps.pacote.services import vagas_ocupadas
from apps.pacote.utils import formatar_moeda


class SaidaReporteSerializer(serializers.ModelSerializer):
    """Linha do relatório de saídas (uma por PacoteDate)."""
    pacote_id = serializers.IntegerField(read_only=True)
    pacote_title = serializers.CharField(source="pacote.title", read_only=True)
    destino_title = serializers.CharField(source="pacote.destino.title", read_only=True)
    status_display = serializers.CharField(source="get_status_display", read_only=True)
    vagas_ocupadas = serializers.SerializerMethodField()
    price_formatado = serializers.SerializerMethodField()
    price_card_formatado = serializers.SerializerMethodField()

    class Meta:
        model = PacoteDate
        fields = [
            "id",
            "pacote_id",
            "pacote_title",
            "destino_title",
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
            "status_display",
        ]

    def get_vagas_ocupadas(self, obj):
        return vagas_ocupadas([obj])

    def get_price_formatado(self, obj):
        return formatar_moeda(obj.price)

    def get_price_card_formatado(self, obj):
        return formatar_moeda(obj.price_card)
