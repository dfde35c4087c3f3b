from datetime import datetime, timedelta

import django_filters
from django.db.models import Q
from django.utils.timezone import make_aware

from .models import Pacote, PacoteDate


def _inicio_do_dia(value):
    return make_aware(datetime.combine(value, datetime.min.time()))


class PacoteFilter(django_filters.FilterSet):
    # 🔹 Destino pelo slug (igualdade exata) ou pelo id
    destino = django_filters.CharFilter(
        field_name="destino__slug",
        lookup_expr="exact"
    )
    destino_id = django_filters.NumberFilter(field_name="destino_id")

    # 🔹 Busca unificada (título, subtítulo ou destino)
    busca = django_filters.CharFilter(method="filter_busca")

    class Meta:
        model = Pacote
        fields = ["destino", "destino_id", "busca"]

    def filter_busca(self, queryset, name, value):
        return queryset.filter(
            Q(title__icontains=value) |
            Q(subtitle__icontains=value) |
            Q(destino__title__icontains=value)
        )


class PacoteDateFilter(django_filters.FilterSet):
    pacote_id = django_filters.NumberFilter(field_name="pacote_id")
    status = django_filters.ChoiceFilter(choices=PacoteDate.STATUS_CHOICES)

    # 🔹 Intervalo de saída, por dia de calendário
    saida_desde = django_filters.DateFilter(method="filter_saida_desde")
    saida_ate = django_filters.DateFilter(method="filter_saida_ate")

    com_vagas = django_filters.BooleanFilter(method="filter_com_vagas")

    class Meta:
        model = PacoteDate
        fields = ["pacote_id", "status", "saida_desde", "saida_ate", "com_vagas"]

    def filter_saida_desde(self, queryset, name, value):
        return queryset.filter(saida__gte=_inicio_do_dia(value))

    def filter_saida_ate(self, queryset, name, value):
        dia_seguinte = _inicio_do_dia(value) + timedelta(days=1)
        return queryset.filter(saida__lt=dia_seguinte)

    def filter_com_vagas(self, queryset, name, value):
        if value:
            return queryset.filter(vagas_disponiveis__gt=0)
        return queryset.filter(vagas_disponiveis=0)
