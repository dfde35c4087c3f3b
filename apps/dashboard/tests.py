"""
Tests do dashboard (estatísticas, resumo e relatórios de saídas)

Executar tests:
    python manage.py test apps.dashboard
"""
from datetime import timedelta
from io import BytesIO, StringIO

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.utils import timezone
from openpyxl import load_workbook
from rest_framework import status
from rest_framework.test import APITestCase

from apps.conteudo.models import Inscrito
from apps.destino.models import Destino
from apps.pacote.factories import DestinoFactory, PacoteFactory, PacoteFotoFactory, PacoteDateFactory
from apps.pacote.models import Pacote, PacoteDate


class DashboardTestCase(APITestCase):

    def setUp(self):
        self.usuario = get_user_model().objects.create_user(username="admin", password="senha-forte-123")
        self.client.force_authenticate(user=self.usuario)

        self.destino = DestinoFactory(title="Nordeste")
        agora = timezone.now()

        # Jeri: 30 vagas ocupadas
        self.jeri = PacoteFactory(title="Jeri 5 dias", destino=self.destino)
        PacoteDateFactory(pacote=self.jeri, saida=agora - timedelta(days=5), vagas_total=40, vagas_disponiveis=10,
                          price=150000, price_card=165000)
        PacoteDateFactory(pacote=self.jeri, saida=agora + timedelta(days=30), vagas_total=20, vagas_disponiveis=20,
                          price=180000, price_card=198000)
        self.foto_jeri = PacoteFotoFactory(pacote=self.jeri, like=3, view=50)

        # Atins: 5 vagas ocupadas
        self.atins = PacoteFactory(title="Atins Relax", destino=self.destino)
        PacoteDateFactory(pacote=self.atins, saida=agora + timedelta(days=10), vagas_total=10, vagas_disponiveis=5,
                          price=90000, price_card=99000, status=PacoteDate.ESGOTADO)
        self.foto_atins = PacoteFotoFactory(pacote=self.atins, like=9, view=2)

        # Dado inconsistente: -3 vagas ocupadas
        self.inconsistente = PacoteFactory(title="Legado", destino=self.destino)
        PacoteDateFactory(pacote=self.inconsistente, saida=agora + timedelta(days=60), vagas_total=5,
                          vagas_disponiveis=8)

        Inscrito.objects.create(name="Maria", email="maria@exemplo.com")

    def test_exige_autenticacao(self):
        self.client.force_authenticate(user=None)
        response = self.client.get("/api/dashboard/pacotes-stats/")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_pacotes_stats(self):
        response = self.client.get("/api/dashboard/pacotes-stats/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        data = response.data
        self.assertEqual(data["totalReservations"], 30 + 5 - 3)
        self.assertEqual(data["totalSubscribers"], 1)

        self.assertEqual([f["id"] for f in data["topPackages"]], [self.foto_jeri.id, self.foto_atins.id])
        self.assertEqual(data["topPackages"][0]["slug"], self.jeri.slug)

        self.assertEqual(data["topLikedPackages"][0]["id"], self.foto_atins.id)
        self.assertEqual(data["topViewedPackages"][0]["id"], self.foto_jeri.id)

    def test_pacote_excluido_fica_fora(self):
        self.jeri.excluir()
        response = self.client.get("/api/dashboard/pacotes-stats/")
        self.assertEqual(response.data["totalReservations"], 5 - 3)
        self.assertNotIn(self.foto_jeri.id, [f["id"] for f in response.data["topLikedPackages"]])

    def test_resumen(self):
        response = self.client.get("/api/dashboard/resumen/")
        valores = {item["texto"]: item["valor"] for item in response.data["data"]}

        self.assertEqual(valores["Destinos"], "1")
        self.assertEqual(valores["Pacotes"], "3")
        self.assertEqual(valores["Saídas futuras"], "3")
        self.assertEqual(valores["Vagas ofertadas"], "75")
        self.assertEqual(valores["Vagas ocupadas"], "32")
        self.assertEqual(valores["Vagas disponíveis"], "43")

    def test_relatorio_saidas(self):
        response = self.client.get("/api/dashboard/reportes/saidas/", {"status": PacoteDate.ESGOTADO})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data["items"]), 1)

        item = response.data["items"][0]
        self.assertEqual(item["pacote_title"], "Atins Relax")
        self.assertEqual(item["destino_title"], "Nordeste")
        self.assertEqual(item["vagas_ocupadas"], 5)
        self.assertEqual(item["price_formatado"], "R$ 900,00")
        self.assertEqual(response.data["resumen"]["total_saidas"], 1)

    def test_relatorio_por_intervalo(self):
        hoje = timezone.localdate()
        response = self.client.get(
            "/api/dashboard/reportes/saidas/",
            {"saida_desde": hoje.isoformat(), "saida_ate": (hoje + timedelta(days=40)).isoformat()}
        )
        self.assertEqual([i["pacote_title"] for i in response.data["items"]], ["Atins Relax", "Jeri 5 dias"])

    def test_relatorio_ignora_id_nao_numerico(self):
        response = self.client.get("/api/dashboard/reportes/saidas/", {"destino_id": "abc", "pacote_id": "x1"})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data["items"]), 4)

        response = self.client.get("/api/dashboard/reportes/saidas/", {"pacote_id": str(self.atins.id)})
        self.assertEqual([i["pacote_title"] for i in response.data["items"]], ["Atins Relax"])

    def test_exportar_excel(self):
        response = self.client.get("/api/dashboard/reportes/saidas/exportar-excel/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            response["Content-Type"],
            "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        )

        wb = load_workbook(BytesIO(response.content))
        self.assertEqual(wb.sheetnames, ["Resumo", "Dados"])
        dados = wb["Dados"]
        self.assertEqual(dados.max_row, 1 + 4)
        self.assertEqual(dados["A1"].value, "Pacote")

    def test_exportar_pdf(self):
        response = self.client.get("/api/dashboard/reportes/saidas/exportar-pdf/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response["Content-Type"], "application/pdf")
        self.assertTrue(response.content.startswith(b"%PDF"))


class PopularCatalogoTestCase(APITestCase):

    def test_popular_e_limpar(self):
        call_command("popular_catalogo", destinos=2, pacotes=2, stdout=StringIO())

        self.assertEqual(Destino.objects.count(), 2)
        self.assertEqual(Pacote.objects.count(), 4)
        self.assertTrue(all(p.dates.exists() and p.fotos.exists() for p in Pacote.objects.all()))

        call_command("popular_catalogo", destinos=1, pacotes=1, clean=True, stdout=StringIO())
        self.assertEqual(Destino.objects.count(), 1)
        self.assertEqual(Pacote.objects.count(), 1)
