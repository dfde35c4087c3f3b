"""
Tests dos endpoints de pacotes e datas de saída

Executar tests:
    python manage.py test apps.pacote.tests_api
"""
from datetime import timedelta

from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.pacote.factories import DestinoFactory, PacoteFactory, PacoteFotoFactory, PacoteDateFactory
from apps.pacote.models import Pacote, PacoteFoto, PacoteDate


class PacoteAPITestCase(APITestCase):

    def setUp(self):
        self.usuario = get_user_model().objects.create_user(
            username="admin",
            password="senha-forte-123"
        )
        self.destino = DestinoFactory(title="Nordeste")

    def _autenticar(self):
        self.client.force_authenticate(user=self.usuario)

    def _payload(self, **extra):
        payload = {
            "title": "Jeri 5 dias",
            "subtitle": "Jericoacoara com passeio de buggy",
            "destino_id": self.destino.id,
            "description": {"blocks": [{"text": "Roteiro completo"}]},
            "fotos": [
                {"url": "https://cdn.hagesturismo.com.br/jeri/praia.jpg", "caption": "Praia"},
                {"url": "https://cdn.hagesturismo.com.br/jeri/buggy.mp4"},
            ],
            "dates": [
                {
                    "saida": "2030-01-10T08:00:00-03:00",
                    "retorno": "2030-01-15T20:00:00-03:00",
                    "vagas_total": 40,
                    "vagas_disponiveis": 10,
                    "price": 150000,
                    "price_card": 165000,
                },
            ],
        }
        payload.update(extra)
        return payload

    # ----- CRIAÇÃO -----
    def test_criar_exige_autenticacao(self):
        response = self.client.post("/api/pacotes/", self._payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertFalse(response.data["success"])
        self.assertFalse(Pacote.objects.exists())

    def test_criar_com_fotos_e_datas(self):
        self._autenticar()
        response = self.client.post("/api/pacotes/", self._payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(response.data["success"])

        data = response.data["data"]
        pacote = Pacote.objects.get(pk=data["id"])
        self.assertEqual(pacote.slug, f"jeri-5-dias-{pacote.id}")
        self.assertEqual(data["slug"], pacote.slug)
        self.assertEqual(data["destino"]["id"], self.destino.id)
        self.assertEqual(pacote.fotos.count(), 2)
        self.assertEqual(pacote.dates.count(), 1)
        self.assertEqual(
            sorted(foto["tipo"] for foto in data["fotos"]),
            ["imagem", "video"]
        )

        saida = data["dates"][0]
        self.assertEqual(saida["price_formatado"], "R$ 1.500,00")
        self.assertEqual(saida["price_card_formatado"], "R$ 1.650,00")
        self.assertEqual(saida["vagas_ocupadas"], 30)
        self.assertEqual(saida["status"], PacoteDate.DISPONIVEL)

    def test_criar_ignora_contadores_enviados(self):
        self._autenticar()
        response = self.client.post("/api/pacotes/", self._payload(like=50, view=80), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

        pacote = Pacote.objects.get(pk=response.data["data"]["id"])
        self.assertEqual((pacote.like, pacote.view), (0, 0))

    def test_retorno_antes_da_saida_e_rejeitado(self):
        self._autenticar()
        payload = self._payload()
        payload["dates"][0]["retorno"] = "2030-01-01T08:00:00-03:00"

        response = self.client.post("/api/pacotes/", payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(response.data["success"])
        self.assertIn("dates", response.data["errors"])

    def test_destino_excluido_nao_aceito(self):
        self._autenticar()
        self.destino.excluir()
        response = self.client.post("/api/pacotes/", self._payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    # ----- ATUALIZAÇÃO -----
    def test_atualizar_preserva_contadores_das_fotos_mantidas(self):
        pacote = PacoteFactory(title="Jeri 5 dias", destino=self.destino)
        mantida = PacoteFotoFactory(pacote=pacote, like=5, view=7)
        removida = PacoteFotoFactory(pacote=pacote, like=3)
        Pacote.objects.filter(pk=pacote.pk).update(like=12, view=40)

        self._autenticar()
        payload = self._payload(
            title="Jeri e Atins 7 dias",
            like=0,
            view=0,
            fotos=[
                {"id": mantida.id, "url": mantida.url, "caption": "Nova legenda"},
                {"url": "https://cdn.hagesturismo.com.br/jeri/duna.jpg"},
            ],
            dates=[],
        )
        response = self.client.put(f"/api/pacotes/{pacote.id}/", payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        pacote.refresh_from_db()
        self.assertEqual((pacote.like, pacote.view), (12, 40))
        self.assertEqual(pacote.slug, f"jeri-e-atins-7-dias-{pacote.id}")

        mantida.refresh_from_db()
        self.assertEqual((mantida.like, mantida.view), (5, 7))
        self.assertEqual(mantida.caption, "Nova legenda")

        self.assertFalse(PacoteFoto.objects.filter(pk=removida.pk).exists())
        self.assertEqual(pacote.fotos.count(), 2)
        self.assertFalse(pacote.dates.exists())

        ids_resposta = {foto["id"] for foto in response.data["data"]["fotos"]}
        self.assertIn(mantida.id, ids_resposta)
        self.assertNotIn(removida.id, ids_resposta)

    def test_atualizar_data_por_id(self):
        pacote = PacoteFactory(destino=self.destino)
        data = PacoteDateFactory(pacote=pacote, vagas_total=40, vagas_disponiveis=40)

        self._autenticar()
        response = self.client.patch(
            f"/api/pacotes/{pacote.id}/",
            {"dates": [{"id": data.id, "vagas_disponiveis": 12, "status": PacoteDate.ESGOTADO}]},
            format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        data.refresh_from_db()
        self.assertEqual(data.vagas_disponiveis, 12)
        self.assertEqual(data.vagas_total, 40)
        self.assertEqual(data.status, PacoteDate.ESGOTADO)

    def test_patch_sem_listas_mantem_filhos(self):
        pacote = PacoteFactory(destino=self.destino)
        PacoteFotoFactory(pacote=pacote)
        PacoteDateFactory(pacote=pacote)

        self._autenticar()
        response = self.client.patch(f"/api/pacotes/{pacote.id}/", {"subtitle": "Novo"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(pacote.fotos.count(), 1)
        self.assertEqual(pacote.dates.count(), 1)

    # ----- LEITURA -----
    def test_listar_paginado_e_filtrar_por_destino(self):
        PacoteFactory.create_batch(2, destino=self.destino)
        PacoteFactory(destino=DestinoFactory(title="Chapada"))

        response = self.client.get("/api/pacotes/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["success"])
        self.assertEqual(response.data["totalItems"], 3)

        response = self.client.get("/api/pacotes/", {"destino": self.destino.slug})
        self.assertEqual(response.data["totalItems"], 2)

    def test_busca_por_titulo_do_destino(self):
        PacoteFactory(title="Atins Relax", destino=self.destino)
        response = self.client.get("/api/pacotes/", {"busca": "nordes"})
        self.assertEqual(response.data["totalItems"], 1)

    def test_detalhe_por_slug(self):
        pacote = PacoteFactory(title="Jeri 5 dias", destino=self.destino)
        agora = timezone.now()
        PacoteDateFactory(pacote=pacote, saida=agora - timedelta(days=10), vagas_total=10, vagas_disponiveis=0)
        futura = PacoteDateFactory(pacote=pacote, saida=agora + timedelta(days=20), vagas_total=20, vagas_disponiveis=5)

        response = self.client.get(f"/api/pacotes/slug/{pacote.slug}/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        data = response.data["data"]
        self.assertEqual([d["id"] for d in data["proximas_datas"]], [futura.id])
        self.assertEqual(data["vagas"], {"total": 30, "ocupadas": 25, "disponiveis": 5})
        self.assertTrue(data["whatsapp_url"].startswith("https://wa.me/"))
        self.assertTrue(data["share_url"].endswith(f"/share/{pacote.slug}"))
        self.assertTrue(data["url"].endswith(f"/pacotes/{self.destino.slug}/{pacote.slug}"))

    def test_slug_inexistente(self):
        response = self.client.get("/api/pacotes/slug/nao-existe-1/")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertFalse(response.data["success"])

    def test_resumen(self):
        pacote = PacoteFactory(destino=self.destino)
        PacoteDateFactory(pacote=pacote)
        PacoteFactory(destino=self.destino)

        response = self.client.get("/api/pacotes/resumen/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        valores = {item["texto"]: item["valor"] for item in response.data["data"]}
        self.assertEqual(valores["Total"], "2")
        self.assertEqual(valores["Com saídas futuras"], "1")

    def test_qrcode(self):
        pacote = PacoteFactory(destino=self.destino)
        response = self.client.get(f"/api/pacotes/{pacote.id}/qrcode/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response["Content-Type"], "image/png")
        self.assertTrue(response.content.startswith(b"\x89PNG"))

    # ----- EXCLUSÃO -----
    def test_excluir_e_logico(self):
        pacote = PacoteFactory(destino=self.destino)
        self._autenticar()

        response = self.client.delete(f"/api/pacotes/{pacote.id}/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["success"])

        pacote.refresh_from_db()
        self.assertIsNotNone(pacote.deleted_at)

        response = self.client.get(f"/api/pacotes/{pacote.id}/")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class PacoteDateAPITestCase(APITestCase):

    def setUp(self):
        self.pacote = PacoteFactory()
        agora = timezone.now()
        self.lotada = PacoteDateFactory(
            pacote=self.pacote, saida=agora + timedelta(days=5), vagas_total=10, vagas_disponiveis=0
        )
        self.livre = PacoteDateFactory(
            pacote=self.pacote, saida=agora + timedelta(days=40), vagas_total=10, vagas_disponiveis=6
        )
        PacoteDateFactory(saida=agora + timedelta(days=60))

    def test_filtrar_por_pacote_e_vagas(self):
        response = self.client.get("/api/pacote-datas/", {"pacote_id": self.pacote.id})
        self.assertEqual([d["id"] for d in response.data["items"]], [self.lotada.id, self.livre.id])

        response = self.client.get("/api/pacote-datas/", {"pacote_id": self.pacote.id, "com_vagas": "true"})
        self.assertEqual([d["id"] for d in response.data["items"]], [self.livre.id])

    def test_filtrar_por_intervalo_de_saida(self):
        limite = timezone.localdate() + timedelta(days=10)
        response = self.client.get(
            "/api/pacote-datas/",
            {"pacote_id": self.pacote.id, "saida_ate": limite.isoformat()}
        )
        self.assertEqual([d["id"] for d in response.data["items"]], [self.lotada.id])

    def test_atualizar_status_exige_autenticacao(self):
        url = f"/api/pacote-datas/{self.lotada.id}/"
        response = self.client.patch(url, {"status": PacoteDate.ESGOTADO}, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

        usuario = get_user_model().objects.create_user(username="admin", password="senha-forte-123")
        self.client.force_authenticate(user=usuario)
        response = self.client.patch(url, {"status": PacoteDate.ESGOTADO}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["status"], PacoteDate.ESGOTADO)

    def test_id_do_corpo_nao_troca_a_saida_editada(self):
        outra = PacoteDateFactory(vagas_total=50, vagas_disponiveis=50)
        usuario = get_user_model().objects.create_user(username="admin", password="senha-forte-123")
        self.client.force_authenticate(user=usuario)

        response = self.client.patch(
            f"/api/pacote-datas/{self.lotada.id}/",
            {"id": outra.id, "vagas_total": 1, "vagas_disponiveis": 1},
            format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["id"], self.lotada.id)

        self.lotada.refresh_from_db()
        self.assertEqual((self.lotada.vagas_total, self.lotada.vagas_disponiveis), (1, 1))

        outra_pacote_id = outra.pacote_id
        outra.refresh_from_db()
        self.assertEqual(outra.pacote_id, outra_pacote_id)
        self.assertEqual((outra.vagas_total, outra.vagas_disponiveis), (50, 50))
