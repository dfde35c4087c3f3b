from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from rest_framework.exceptions import AuthenticationFailed


class LoginTokenSerializer(TokenObtainPairSerializer):
    """Par de tokens JWT do painel, com os dados básicos do usuário."""

    def validate(self, attrs):
        try:
            data = super().validate(attrs)
        except AuthenticationFailed:
            raise AuthenticationFailed({'message': 'Credenciais incorretas'})

        nome = self.user.get_full_name() or self.user.username

        data["user"] = {
            "id": self.user.id,
            "username": self.user.username,
            "nome": nome,
            "email": self.user.email,
            "is_admin": self.user.is_superuser,
        }
        return data
