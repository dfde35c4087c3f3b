"""
Tests dos endpoints de destinos

Executar tests:
    python manage.py test apps.destino
"""
from django.contrib.auth import get_user_model
from rest_framework import status
from rest_framework.test import APITestCase

from apps.destino.models import Destino
from apps.pacote.factories import DestinoFactory, PacoteFactory, PacoteFotoFactory
from apps.pacote.models import Pacote


class DestinoModelTestCase(APITestCase):

    def test_slug_com_id(self):
        destino = DestinoFactory(title="Lençóis Maranhenses")
        self.assertEqual(destino.slug, f"lenis-maranhenses-{destino.id}")

    def test_titulos_iguais_nao_colidem(self):
        a = DestinoFactory(title="Nordeste")
        b = DestinoFactory(title="Nordeste")
        self.assertNotEqual(a.slug, b.slug)

    def test_slug_acompanha_o_titulo(self):
        destino = DestinoFactory(title="Chapada")
        destino.title = "Chapada Diamantina"
        destino.save()
        destino.refresh_from_db()
        self.assertEqual(destino.slug, f"chapada-diamantina-{destino.id}")

    def test_excluir_marca_pacotes(self):
        destino = DestinoFactory()
        pacote = PacoteFactory(destino=destino)
        destino.excluir()

        pacote.refresh_from_db()
        self.assertIsNotNone(destino.deleted_at)
        self.assertIsNotNone(pacote.deleted_at)


class DestinoAPITestCase(APITestCase):

    def setUp(self):
        self.usuario = get_user_model().objects.create_user(
            username="admin",
            password="senha-forte-123"
        )

    def _autenticar(self):
        self.client.force_authenticate(user=self.usuario)

    def test_listar_em_ordem(self):
        segundo = DestinoFactory(title="Chapada", order=2)
        primeiro = DestinoFactory(title="Nordeste", order=1)

        response = self.client.get("/api/destinos/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([d["id"] for d in response.data["items"]], [primeiro.id, segundo.id])

    def test_busca(self):
        DestinoFactory(title="Nordeste")
        DestinoFactory(title="Chapada")
        response = self.client.get("/api/destinos/", {"busca": "norde"})
        self.assertEqual(response.data["totalItems"], 1)

    def test_criar_com_pacotes(self):
        self._autenticar()
        payload = {
            "title": "Nordeste",
            "order": 1,
            "pacotes": [
                {
                    "title": "Jeri 5 dias",
                    "fotos": [{"url": "https://cdn.hagesturismo.com.br/jeri/praia.jpg"}],
                    "dates": [
                        {
                            "saida": "2030-01-10T08:00:00-03:00",
                            "retorno": "2030-01-15T20:00:00-03:00",
                            "vagas_total": 40,
                            "vagas_disponiveis": 40,
                            "price": 150000,
                            "price_card": 165000,
                        }
                    ],
                }
            ],
        }
        response = self.client.post("/api/destinos/", payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

        destino = Destino.objects.get(pk=response.data["data"]["id"])
        self.assertEqual(destino.slug, f"nordeste-{destino.id}")
        pacote = destino.pacotes.get()
        self.assertEqual(pacote.fotos.count(), 1)
        self.assertEqual(pacote.dates.count(), 1)

    def test_atualizar_pacotes_por_id(self):
        destino = DestinoFactory(title="Nordeste")
        mantido = PacoteFactory(title="Jeri 5 dias", destino=destino)
        foto = PacoteFotoFactory(pacote=mantido, like=9)
        removido = PacoteFactory(title="Atins", destino=destino)

        self._autenticar()
        payload = {
            "title": "Nordeste Brasileiro",
            "pacotes": [
                {"id": mantido.id, "title": "Jeri 6 dias"},
                {"title": "Canoa Quebrada"},
            ],
        }
        response = self.client.put(f"/api/destinos/{destino.id}/", payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        mantido.refresh_from_db()
        removido.refresh_from_db()
        foto.refresh_from_db()
        self.assertEqual(mantido.title, "Jeri 6 dias")
        self.assertEqual(foto.like, 9)
        self.assertIsNotNone(removido.deleted_at)
        self.assertTrue(Pacote.objects.filter(destino=destino, title="Canoa Quebrada").exists())

        titulos = sorted(p["title"] for p in response.data["data"]["pacotes"])
        self.assertEqual(titulos, ["Canoa Quebrada", "Jeri 6 dias"])

    def test_excluir_e_logico(self):
        destino = DestinoFactory()
        PacoteFactory(destino=destino)
        self._autenticar()

        response = self.client.delete(f"/api/destinos/{destino.id}/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(Destino.objects.filter(pk=destino.id).exists())

        response = self.client.get(f"/api/destinos/{destino.id}/")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertFalse(response.data["success"])

    def test_escrita_anonima_negada(self):
        destino = DestinoFactory()
        response = self.client.delete(f"/api/destinos/{destino.id}/")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_slug_resumen_e_todos(self):
        destino = DestinoFactory(title="Nordeste", order=1)
        PacoteFactory(destino=destino)
        DestinoFactory(title="Chapada", order=2)

        response = self.client.get(f"/api/destinos/slug/{destino.slug}/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data["data"]["pacotes"]), 1)

        response = self.client.get("/api/destinos/resumen/")
        valores = {item["texto"]: item["valor"] for item in response.data["data"]}
        self.assertEqual(valores, {"Total": "2", "Com pacotes": "1", "Sem pacotes": "1", "Pacotes": "1"})

        response = self.client.get("/api/destinos/todos/")
        self.assertEqual([d["title"] for d in response.data["items"]], ["Nordeste", "Chapada"])
