"""
Tests do conteúdo do site (FAQ, depoimentos, newsletter, home e avaliações)

Executar tests:
    python manage.py test apps.conteudo
"""
from unittest import mock

import requests
from django.contrib.auth import get_user_model
from django.test import override_settings
from rest_framework import status
from rest_framework.test import APITestCase

from apps.conteudo.models import FAQ, Depoimento, Inscrito
from apps.pacote.factories import DestinoFactory, PacoteFactory


class FAQDepoimentoTestCase(APITestCase):

    def setUp(self):
        self.usuario = get_user_model().objects.create_user(username="admin", password="senha-forte-123")

    def test_faqs_ordenadas_por_pergunta(self):
        FAQ.objects.create(pergunta="Quais formas de pagamento?", resposta="Pix e cartão.")
        FAQ.objects.create(pergunta="Como reservar?", resposta="Pelo WhatsApp.")

        response = self.client.get("/api/faqs/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            [f["pergunta"] for f in response.data["items"]],
            ["Como reservar?", "Quais formas de pagamento?"]
        )

    def test_crud_faq_exige_autenticacao(self):
        payload = {"pergunta": "Tem seguro viagem?", "resposta": "Sim."}
        response = self.client.post("/api/faqs/", payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

        self.client.force_authenticate(user=self.usuario)
        response = self.client.post("/api/faqs/", payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        faq_id = response.data["data"]["id"]

        response = self.client.patch(f"/api/faqs/{faq_id}/", {"resposta": "Sim, incluso."}, format="json")
        self.assertEqual(response.data["data"]["resposta"], "Sim, incluso.")

        response = self.client.delete(f"/api/faqs/{faq_id}/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(FAQ.objects.exists())

    def test_depoimento(self):
        self.client.force_authenticate(user=self.usuario)
        response = self.client.post(
            "/api/depoimentos/",
            {"name": "Ana", "content": "Viagem incrível!"},
            format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["data"]["type"], Depoimento.TEXTO)


class InscritoTestCase(APITestCase):

    def test_inscricao_publica(self):
        response = self.client.post(
            "/api/inscritos/",
            {"name": "Maria", "email": "maria@exemplo.com", "phone": "91999990000"},
            format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(Inscrito.objects.filter(email="maria@exemplo.com").exists())

    def test_email_duplicado(self):
        Inscrito.objects.create(name="Maria", email="maria@exemplo.com")
        response = self.client.post(
            "/api/inscritos/",
            {"name": "Outra Maria", "email": "maria@exemplo.com"},
            format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(response.data["success"])
        self.assertIn("email", response.data["errors"])

    def test_listagem_somente_autenticado(self):
        response = self.client.get("/api/inscritos/")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class HomeTestCase(APITestCase):

    def test_home(self):
        destino = DestinoFactory(title="Nordeste")
        PacoteFactory(destino=destino)
        excluido = PacoteFactory(destino=destino)
        excluido.excluir()
        FAQ.objects.create(pergunta="Como reservar?", resposta="Pelo WhatsApp.")
        Depoimento.objects.create(name="Ana", content="Adorei!")

        response = self.client.get("/api/home/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data["faqs"]), 1)
        self.assertEqual(len(response.data["testimonials"]), 1)
        self.assertEqual(len(response.data["destinos"]), 1)
        self.assertEqual(len(response.data["destinos"][0]["pacotes"]), 1)


class GoogleReviewsTestCase(APITestCase):

    @override_settings(GOOGLE_MAPS_API_KEY="")
    def test_sem_chave(self):
        response = self.client.get("/api/google-reviews/")
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertFalse(response.data["success"])

    @override_settings(GOOGLE_MAPS_API_KEY="chave-teste", GOOGLE_PLACE_ID="place-teste")
    @mock.patch("apps.conteudo.views.requests.get")
    def test_reviews(self, mock_get):
        mock_get.return_value.json.return_value = {
            "status": "OK",
            "result": {
                "reviews": [
                    {
                        "author_url": "https://maps.google.com/u/1",
                        "author_name": "João",
                        "text": "Excelente agência",
                        "rating": 5,
                    }
                ]
            },
        }

        response = self.client.get("/api/google-reviews/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["items"], [{
            "id": "https://maps.google.com/u/1",
            "name": "João",
            "content": "Excelente agência",
            "starRating": 5,
            "type": "text",
        }])

        _, kwargs = mock_get.call_args
        self.assertEqual(kwargs["params"]["place_id"], "place-teste")
        self.assertEqual(kwargs["params"]["key"], "chave-teste")
        self.assertIn("timeout", kwargs)

    @override_settings(GOOGLE_MAPS_API_KEY="chave-teste")
    @mock.patch("apps.conteudo.views.requests.get")
    def test_status_de_erro_do_google(self, mock_get):
        mock_get.return_value.json.return_value = {"status": "REQUEST_DENIED", "error_message": "invalid key"}
        response = self.client.get("/api/google-reviews/")
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @override_settings(GOOGLE_MAPS_API_KEY="chave-teste")
    @mock.patch("apps.conteudo.views.requests.get", side_effect=requests.exceptions.ConnectionError)
    def test_falha_de_rede(self, mock_get):
        response = self.client.get("/api/google-reviews/")
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertFalse(response.data["success"])
