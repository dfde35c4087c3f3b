"""
Tests dos endpoints de curtidas e visualizações

Executar tests:
    python manage.py test apps.pacote.tests_stats
"""
from unittest import mock

from rest_framework import status
from rest_framework.test import APITestCase

from apps.pacote.factories import PacoteFactory, PacoteFotoFactory
from apps.pacote.models import Pacote


class StatsPacoteTestCase(APITestCase):

    def setUp(self):
        self.pacote = PacoteFactory()

    def test_like_duas_vezes(self):
        primeira = self.client.patch("/api/stats/pacote-like/", {"pacoteId": self.pacote.id}, format="json")
        segunda = self.client.patch("/api/stats/pacote-like/", {"pacoteId": self.pacote.id}, format="json")

        self.assertEqual(primeira.status_code, status.HTTP_200_OK)
        self.assertEqual(primeira.data, {"success": True, "pacote": {"id": self.pacote.id, "like": 1, "view": 0}})
        self.assertEqual(segunda.data["pacote"]["like"], 2)

    def test_view(self):
        response = self.client.patch("/api/stats/pacote-view/", {"pacoteId": self.pacote.id}, format="json")
        self.assertEqual(response.data["pacote"], {"id": self.pacote.id, "like": 0, "view": 1})

    def test_sem_id(self):
        response = self.client.patch("/api/stats/pacote-like/", {}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {"success": False, "message": "ID obrigatório"})

    def test_id_invalido(self):
        response = self.client.patch("/api/stats/pacote-like/", {"pacoteId": "abc"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_pacote_inexistente(self):
        response = self.client.patch("/api/stats/pacote-like/", {"pacoteId": 999999}, format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertFalse(response.data["success"])

    def test_pacote_excluido_nao_conta(self):
        self.pacote.excluir()
        response = self.client.patch("/api/stats/pacote-like/", {"pacoteId": self.pacote.id}, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.pacote.refresh_from_db()
        self.assertEqual(self.pacote.like, 0)

    def test_metodo_nao_permitido(self):
        response = self.client.post("/api/stats/pacote-like/", {"pacoteId": self.pacote.id}, format="json")
        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)

    def test_falha_do_banco_vira_500(self):
        with mock.patch(
            "apps.pacote.stats_views.incrementar_contador",
            side_effect=RuntimeError("conexão perdida")
        ):
            response = self.client.patch("/api/stats/pacote-like/", {"pacoteId": self.pacote.id}, format="json")

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertFalse(response.data["success"])
        self.pacote.refresh_from_db()
        self.assertEqual(self.pacote.like, 0)


class StatsFotoTestCase(APITestCase):

    def setUp(self):
        self.foto = PacoteFotoFactory()

    def test_like_e_view_da_foto(self):
        like = self.client.patch("/api/stats/pacote-foto-like/", {"fotoId": self.foto.id}, format="json")
        view = self.client.patch("/api/stats/pacote-foto-view/", {"fotoId": self.foto.id}, format="json")

        self.assertEqual(like.data, {"success": True, "foto": {"id": self.foto.id, "like": 1, "view": 0}})
        self.assertEqual(view.data["foto"], {"id": self.foto.id, "like": 1, "view": 1})

    def test_contador_da_foto_nao_altera_o_pacote(self):
        self.client.patch("/api/stats/pacote-foto-like/", {"fotoId": self.foto.id}, format="json")
        pacote = Pacote.objects.get(pk=self.foto.pacote_id)
        self.assertEqual(pacote.like, 0)

    def test_foto_inexistente(self):
        response = self.client.patch("/api/stats/pacote-foto-view/", {"fotoId": 999999}, format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_foto_de_pacote_excluido_nao_conta(self):
        self.foto.pacote.excluir()
        response = self.client.patch("/api/stats/pacote-foto-like/", {"fotoId": self.foto.id}, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.foto.refresh_from_db()
        self.assertEqual(self.foto.like, 0)
