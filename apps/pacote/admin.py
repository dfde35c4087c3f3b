from django.contrib import admin
from .models import Pacote, PacoteFoto, PacoteDate


class PacoteFotoInline(admin.TabularInline):
    model = PacoteFoto
    extra = 0
    fields = ('url', 'caption', 'like', 'view')
    readonly_fields = ('like', 'view')


class PacoteDateInline(admin.TabularInline):
    model = PacoteDate
    extra = 0
    fields = ('saida', 'retorno', 'vagas_total', 'vagas_disponiveis', 'price', 'price_card', 'status')


@admin.register(Pacote)
class PacoteAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'destino', 'slug', 'like', 'view', 'created_at', 'deleted_at')
    list_filter = ('destino', 'deleted_at')
    search_fields = ('title', 'subtitle', 'slug', 'destino__title')
    readonly_fields = ('slug', 'like', 'view', 'created_at', 'updated_at')
    inlines = [PacoteFotoInline, PacoteDateInline]


@admin.register(PacoteDate)
class PacoteDateAdmin(admin.ModelAdmin):
    list_display = ('id', 'pacote', 'saida', 'retorno', 'vagas_total', 'vagas_disponiveis', 'price', 'status')
    list_filter = ('status',)
    search_fields = ('pacote__title',)
    date_hierarchy = 'saida'
