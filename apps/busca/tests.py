"""
Tests da busca de disponibilidade

Executar tests:
    python manage.py test apps.busca
"""
from datetime import datetime, timedelta

from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.busca.catalogo import catalogo_disponivel
from apps.pacote.factories import DestinoFactory, PacoteFactory, PacoteFotoFactory, PacoteDateFactory


def _dia(dias, hora=8):
    """Instante local daqui a `dias` dias, na hora indicada."""
    base = timezone.localdate() + timedelta(days=dias)
    return timezone.make_aware(datetime.combine(base, datetime.min.time()) + timedelta(hours=hora))


class BuscaTestCase(APITestCase):

    def setUp(self):
        self.nordeste = DestinoFactory(title="Nordeste", order=1)
        self.lencois = DestinoFactory(title="Lençóis", order=2)
        self.sem_saidas = DestinoFactory(title="Chapada", order=3)

        self.jeri = PacoteFactory(title="Jeri 5 dias", destino=self.nordeste)
        self.passada = PacoteDateFactory(pacote=self.jeri, saida=_dia(-5))
        self.jeri_fev = PacoteDateFactory(pacote=self.jeri, saida=_dia(40))
        self.jeri_jan = PacoteDateFactory(pacote=self.jeri, saida=_dia(10))
        self.capa = PacoteFotoFactory(pacote=self.jeri)
        PacoteFotoFactory(pacote=self.jeri)

        self.excursao = PacoteFactory(title="Excursão aos Lençóis Maranhenses", destino=self.lencois)
        self.excursao_data = PacoteDateFactory(pacote=self.excursao, saida=_dia(20))

        self.antigo = PacoteFactory(title="Chapada Antiga", destino=self.sem_saidas)
        PacoteDateFactory(pacote=self.antigo, saida=_dia(-30))

        excluido = PacoteFactory(title="Jeri Excluído", destino=self.nordeste)
        PacoteDateFactory(pacote=excluido, saida=_dia(15))
        excluido.excluir()

    # ----- CATÁLOGO -----
    def test_catalogo_somente_futuro(self):
        catalogo = catalogo_disponivel()

        self.assertEqual([d["slug"] for d in catalogo], [self.nordeste.slug, self.lencois.slug])

        jeri = catalogo[0]["pacotes"][0]
        self.assertEqual(len(catalogo[0]["pacotes"]), 1)
        self.assertEqual([d["id"] for d in jeri["dates"]], [self.jeri_jan.id, self.jeri_fev.id])
        self.assertEqual([f["id"] for f in jeri["fotos"]], [self.capa.id])

    def test_endpoint_disponibilidade(self):
        response = self.client.get("/api/search/availability/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["success"])
        self.assertEqual(len(response.data["items"]), 2)

    # ----- BUSCA -----
    def test_sem_filtros(self):
        response = self.client.get("/api/search/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["total"], 3)
        self.assertEqual(
            [item["currentDate"]["id"] for item in response.data["items"]],
            [self.jeri_jan.id, self.excursao_data.id, self.jeri_fev.id]
        )

        item = response.data["items"][0]
        self.assertEqual(item["id"], self.jeri.id)
        self.assertEqual(item["destinoSlug"], self.nordeste.slug)
        self.assertEqual(item["destinoTitle"], "Nordeste")
        self.assertNotIn("dates", item)

    def test_texto_com_acento(self):
        response = self.client.get("/api/search/", {"q": "lençóis"})
        self.assertEqual([item["id"] for item in response.data["items"]], [self.excursao.id])

    def test_por_destino(self):
        response = self.client.get("/api/search/", {"destino": self.nordeste.slug})
        self.assertEqual(
            [item["currentDate"]["id"] for item in response.data["items"]],
            [self.jeri_jan.id, self.jeri_fev.id]
        )

    def test_intervalo(self):
        inicio = (timezone.localdate() + timedelta(days=10)).isoformat()
        fim = (timezone.localdate() + timedelta(days=20)).isoformat()
        response = self.client.get("/api/search/", {"start": inicio, "end": fim})
        self.assertEqual(
            [item["currentDate"]["id"] for item in response.data["items"]],
            [self.jeri_jan.id, self.excursao_data.id]
        )

    def test_somente_fim_nao_filtra(self):
        fim = (timezone.localdate() + timedelta(days=10)).isoformat()
        response = self.client.get("/api/search/", {"end": fim})
        self.assertEqual(response.data["total"], 3)

    def test_sem_resultado(self):
        response = self.client.get("/api/search/", {"q": "patagônia"})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"success": True, "total": 0, "items": []})

    def test_data_invalida(self):
        response = self.client.get("/api/search/", {"start": "10/01/2025"})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(response.data["success"])
