from django.contrib import admin
from .models import Destino


@admin.register(Destino)
class DestinoAdmin(admin.ModelAdmin):
    list_display = (
        'id',
        'title',
        'slug',
        'order',
        'total_pacotes',
        'created_at',
        'deleted_at',
    )
    list_filter = ('created_at', 'deleted_at')
    search_fields = ('title', 'subtitle', 'slug')
    readonly_fields = ('slug', 'created_at', 'updated_at')
    ordering = ('order', 'id')

    @admin.display(description="Pacotes")
    def total_pacotes(self, obj):
        return obj.pacotes.filter(deleted_at__isnull=True).count()
