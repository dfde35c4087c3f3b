from django.apps import AppConfig


class PacoteConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.pacote'
    verbose_name = 'Pacotes'
