import django_filters
from django.db.models import Q
from .models import Destino


class DestinoFilter(django_filters.FilterSet):
    # 🔹 Busca por título ou subtítulo
    busca = django_filters.CharFilter(method="filter_busca")

    ordem = django_filters.OrderingFilter(
        fields=(
            ("order", "order"),
            ("title", "title"),
            ("created_at", "created_at"),
        )
    )

    class Meta:
        model = Destino
        fields = ["busca"]

    def filter_busca(self, queryset, name, value):
        return queryset.filter(
            Q(title__icontains=value) |
            Q(subtitle__icontains=value)
        )
