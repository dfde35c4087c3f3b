import logging

from django.db import transaction
from rest_framework import serializers

from apps.pacote.serializers import PacoteAninhadoSerializer, criar_pacote, atualizar_pacote
from .models import Destino

logger = logging.getLogger(__name__)


class DestinoSerializer(serializers.ModelSerializer):
    """
    Destino com os pacotes aninhados.

    Na gravação, `pacotes` é opcional. Quando enviado:
    - pacote com id do destino: atualizado (fotos/datas por id)
    - pacote sem id: criado no destino
    - pacote ativo que não veio na lista: exclusão lógica
    """
    pacotes = PacoteAninhadoSerializer(many=True, required=False)
    total_pacotes = serializers.SerializerMethodField()

    class Meta:
        model = Destino
        fields = [
            "id",
            "title",
            "subtitle",
            "slug",
            "order",
            "description",
            "image",
            "total_pacotes",
            "pacotes",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["slug", "created_at", "updated_at"]

    def get_total_pacotes(self, obj):
        return len([p for p in obj.pacotes.all() if p.deleted_at is None])

    def create(self, validated_data):
        pacotes_data = validated_data.pop("pacotes", None) or []

        with transaction.atomic():
            destino = Destino.objects.create(**validated_data)
            for pacote_data in pacotes_data:
                criar_pacote(pacote_data, destino=destino)

        logger.info("Destino %s criado com %s pacotes", destino.id, len(pacotes_data))
        return destino

    def update(self, instance, validated_data):
        pacotes_data = validated_data.pop("pacotes", None)

        with transaction.atomic():
            for attr, value in validated_data.items():
                setattr(instance, attr, value)
            instance.save()

            if pacotes_data is not None:
                existentes = {p.id: p for p in instance.pacotes.filter(deleted_at__isnull=True)}
                enviados_ids = []

                for pacote_data in pacotes_data:
                    pacote = existentes.get(pacote_data.get("id"))
                    if pacote is None:
                        criar_pacote(pacote_data, destino=instance)
                    else:
                        atualizar_pacote(pacote, pacote_data)
                        enviados_ids.append(pacote.id)

                for p_id, pacote in existentes.items():
                    if p_id not in enviados_ids:
                        pacote.excluir()

        return instance
