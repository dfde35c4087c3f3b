from rest_framework import serializers
from .models import FAQ, Depoimento, Inscrito


class FAQSerializer(serializers.ModelSerializer):
    class Meta:
        model = FAQ
        fields = ["id", "pergunta", "resposta", "created_at", "updated_at"]
        read_only_fields = ["created_at", "updated_at"]


class DepoimentoSerializer(serializers.ModelSerializer):
    class Meta:
        model = Depoimento
        fields = ["id", "name", "content", "type", "created_at"]
        read_only_fields = ["created_at"]


class InscritoSerializer(serializers.ModelSerializer):
    class Meta:
        model = Inscrito
        fields = ["id", "name", "email", "phone", "created_at"]
        read_only_fields = ["created_at"]