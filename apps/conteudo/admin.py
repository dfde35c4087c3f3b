from django.contrib import admin
from .models import FAQ, Depoimento, Inscrito


@admin.register(FAQ)
class FAQAdmin(admin.ModelAdmin):
    list_display = ('id', 'pergunta', 'updated_at')
    search_fields = ('pergunta', 'resposta')


@admin.register(Depoimento)
class DepoimentoAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'type', 'created_at')
    list_filter = ('type',)
    search_fields = ('name', 'content')


@admin.register(Inscrito)
class InscritoAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'email', 'phone', 'created_at')
    search_fields = ('name', 'email')
    readonly_fields = ('created_at',)
