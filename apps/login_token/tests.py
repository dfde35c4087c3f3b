"""
Tests do login do painel (JWT)

Executar tests:
    python manage.py test apps.login_token
"""
from django.contrib.auth import get_user_model
from rest_framework import status
from rest_framework.test import APITestCase


class LoginTokenTestCase(APITestCase):

    def setUp(self):
        self.usuario = get_user_model().objects.create_user(
            username="admin",
            password="senha-forte-123",
            first_name="Ana",
            last_name="Hages",
        )

    def test_login_devolve_tokens_e_usuario(self):
        response = self.client.post(
            "/api/login/",
            {"username": "admin", "password": "senha-forte-123"},
            format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn("access", response.data)
        self.assertIn("refresh", response.data)
        self.assertEqual(response.data["user"]["nome"], "Ana Hages")

    def test_credenciais_incorretas(self):
        response = self.client.post(
            "/api/login/",
            {"username": "admin", "password": "errada"},
            format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertFalse(response.data["success"])
        self.assertEqual(response.data["message"], "Credenciais incorretas")

    def test_token_libera_o_dashboard(self):
        response = self.client.get("/api/dashboard/resumen/")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

        login = self.client.post(
            "/api/login/",
            {"username": "admin", "password": "senha-forte-123"},
            format="json"
        )
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['access']}")

        response = self.client.get("/api/dashboard/resumen/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["success"])
