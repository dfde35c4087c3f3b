from django.apps import AppConfig


class BuscaConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.busca'
    verbose_name = 'Busca'
