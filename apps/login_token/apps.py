from django.apps import AppConfig


class LoginTokenConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.login_token'
    verbose_name = 'Login'
