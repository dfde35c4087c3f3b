from django.apps import AppConfig


class DestinoConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.destino'
    verbose_name = 'Destinos'
