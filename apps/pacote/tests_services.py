"""
Tests das regras de disponibilidade (próximas saídas, vagas, busca e contadores)

Executar tests:
    python manage.py test apps.pacote.tests_services
"""
from datetime import datetime

from django.test import SimpleTestCase, TestCase
from django.utils import timezone

from apps.destino.models import Destino
from apps.pacote.factories import PacoteFactory, PacoteFotoFactory, PacoteDateFactory, DestinoFactory
from apps.pacote.models import Pacote, PacoteFoto
from apps.pacote.services import (
    proximas_saidas,
    vagas_ocupadas,
    total_vagas_ofertadas,
    popularidade,
    ranking_pacotes,
    buscar_disponibilidade,
    incrementar_contador,
    incrementar_like,
    incrementar_view,
)


def _dt(ano, mes, dia, hora=0, minuto=0):
    return timezone.make_aware(datetime(ano, mes, dia, hora, minuto))


def _data(id, saida, total=10, disponiveis=10):
    return {"id": id, "saida": saida, "vagas_total": total, "vagas_disponiveis": disponiveis}


def _catalogo_nordeste():
    """Destino "Nordeste" com o pacote "Jeri 5 dias" e duas saídas."""
    return [
        {
            "id": 1,
            "title": "Nordeste",
            "slug": "nordeste",
            "pacotes": [
                {
                    "id": 10,
                    "title": "Jeri 5 dias",
                    "dates": [
                        _data(101, _dt(2025, 2, 10), total=20, disponiveis=20),
                        _data(100, _dt(2025, 1, 10), total=40, disponiveis=10),
                    ],
                },
            ],
        },
        {
            "id": 2,
            "title": "Lençóis",
            "slug": "lencois",
            "pacotes": [
                {
                    "id": 20,
                    "title": "Excursão aos Lençóis Maranhenses",
                    "dates": [_data(200, _dt(2025, 3, 5))],
                },
                {
                    "id": 21,
                    "title": "Atins Relax",
                    "dates": [_data(210, "2025-01-20T09:00:00-03:00")],
                },
            ],
        },
    ]


class ProximasSaidasTestCase(SimpleTestCase):

    def test_filtra_e_ordena(self):
        datas = [
            _data(1, _dt(2025, 3, 1)),
            _data(2, _dt(2025, 1, 1)),
            _data(3, _dt(2025, 2, 1)),
        ]
        resultado = proximas_saidas(datas, referencia=_dt(2025, 1, 15))
        self.assertEqual([d["id"] for d in resultado], [3, 1])

    def test_saida_igual_a_referencia_entra(self):
        referencia = _dt(2025, 1, 15, 8)
        resultado = proximas_saidas([_data(1, referencia)], referencia=referencia)
        self.assertEqual(len(resultado), 1)

    def test_vazio_quando_nada_se_qualifica(self):
        self.assertEqual(proximas_saidas([_data(1, _dt(2024, 1, 1))], _dt(2025, 1, 1)), [])
        self.assertEqual(proximas_saidas(None, _dt(2025, 1, 1)), [])

    def test_empates_mantem_ordem_original(self):
        mesma = _dt(2025, 5, 1)
        datas = [_data(7, mesma), _data(3, _dt(2025, 4, 1)), _data(5, mesma)]
        resultado = proximas_saidas(datas, referencia=_dt(2025, 1, 1))
        self.assertEqual([d["id"] for d in resultado], [3, 7, 5])

    def test_aceita_iso(self):
        datas = [_data(1, "2025-02-10T10:00:00-03:00"), _data(2, "2024-12-01T10:00:00-03:00")]
        resultado = proximas_saidas(datas, referencia="2025-01-15")
        self.assertEqual([d["id"] for d in resultado], [1])


class VagasTestCase(SimpleTestCase):

    def test_casos_basicos(self):
        self.assertEqual(vagas_ocupadas([]), 0)
        self.assertEqual(vagas_ocupadas(None), 0)
        self.assertEqual(vagas_ocupadas([_data(1, None, total=10, disponiveis=10)]), 0)
        self.assertEqual(vagas_ocupadas([_data(1, None, total=10, disponiveis=4)]), 6)

    def test_aditividade(self):
        a = [_data(1, None, 10, 4), _data(2, None, 30, 0)]
        b = [_data(3, None, 15, 15), _data(4, None, 8, 2)]
        self.assertEqual(vagas_ocupadas(a + b), vagas_ocupadas(a) + vagas_ocupadas(b))

    def test_dado_inconsistente_nao_e_corrigido(self):
        self.assertEqual(vagas_ocupadas([_data(1, None, total=5, disponiveis=8)]), -3)

    def test_total_ofertado(self):
        self.assertEqual(total_vagas_ofertadas([_data(1, None, 40, 10), _data(2, None, 20, 20)]), 60)
        self.assertEqual(total_vagas_ofertadas(None), 0)

    def test_ranking_tolera_negativos(self):
        pacotes = [
            {"id": 1, "dates": [_data(1, None, 5, 8)]},
            {"id": 2, "dates": [_data(2, None, 10, 0)]},
            {"id": 3, "dates": []},
        ]
        self.assertEqual([p["id"] for p in ranking_pacotes(pacotes)], [2, 3, 1])
        self.assertEqual([p["id"] for p in ranking_pacotes(pacotes, limite=1)], [2])


class CenarioNordesteTestCase(SimpleTestCase):

    def setUp(self):
        self.catalogo = _catalogo_nordeste()
        self.jeri = self.catalogo[0]["pacotes"][0]

    def test_vagas_ocupadas(self):
        self.assertEqual(vagas_ocupadas(self.jeri["dates"]), 30)
        self.assertEqual(popularidade(self.jeri), 30)

    def test_proximas_saidas(self):
        resultado = proximas_saidas(self.jeri["dates"], referencia=_dt(2025, 1, 15))
        self.assertEqual([d["id"] for d in resultado], [101])

    def test_busca_por_destino(self):
        linhas = buscar_disponibilidade(self.catalogo, destino_slug="nordeste")
        self.assertEqual([linha["data"]["id"] for linha in linhas], [100, 101])
        self.assertTrue(all(linha["destino_slug"] == "nordeste" for linha in linhas))
        self.assertTrue(all(linha["destino_title"] == "Nordeste" for linha in linhas))


class BuscarDisponibilidadeTestCase(SimpleTestCase):

    def setUp(self):
        self.catalogo = _catalogo_nordeste()

    def test_sem_filtros_uma_linha_por_data(self):
        linhas = buscar_disponibilidade(self.catalogo)
        self.assertEqual(len(linhas), 4)

    def test_ordenado_pela_saida(self):
        linhas = buscar_disponibilidade(self.catalogo)
        self.assertEqual([linha["data"]["id"] for linha in linhas], [100, 210, 101, 200])

    def test_texto_com_acento_sem_diferenciar_maiusculas(self):
        linhas = buscar_disponibilidade(self.catalogo, texto="lençóis")
        pacotes = {linha["pacote"]["id"] for linha in linhas}
        # "Atins Relax" entra porque o destino se chama "Lençóis"
        self.assertEqual(pacotes, {20, 21})

        linhas = buscar_disponibilidade(self.catalogo, texto="LENÇÓIS MARANHENSES")
        self.assertEqual({linha["pacote"]["id"] for linha in linhas}, {20})

    def test_texto_sem_resultado_e_lista_vazia(self):
        self.assertEqual(buscar_disponibilidade(self.catalogo, texto="patagônia"), [])

    def test_intervalo_de_datas_inclusivo_por_dia(self):
        linhas = buscar_disponibilidade(self.catalogo, data_inicio="2025-01-10", data_fim="2025-01-20")
        self.assertEqual([linha["data"]["id"] for linha in linhas], [100, 210])

    def test_somente_data_inicio(self):
        linhas = buscar_disponibilidade(self.catalogo, data_inicio="2025-02-10")
        self.assertEqual([linha["data"]["id"] for linha in linhas], [101, 200])

    def test_somente_data_fim_e_ignorada(self):
        linhas = buscar_disponibilidade(self.catalogo, data_fim="2025-01-10")
        self.assertEqual([linha["data"]["id"] for linha in linhas], [100, 210, 101, 200])

    def test_filtros_combinados(self):
        linhas = buscar_disponibilidade(
            self.catalogo, texto="jeri", destino_slug="nordeste", data_inicio="2025-02-01"
        )
        self.assertEqual([linha["data"]["id"] for linha in linhas], [101])


class CatalogoComModelosTestCase(TestCase):
    """As mesmas regras aplicadas a instâncias vindas do banco."""

    def test_busca_e_vagas_com_instancias(self):
        destino = DestinoFactory(title="Nordeste")
        pacote = PacoteFactory(title="Jeri 5 dias", destino=destino)
        PacoteDateFactory(pacote=pacote, saida=_dt(2025, 1, 10), vagas_total=40, vagas_disponiveis=10)
        PacoteDateFactory(pacote=pacote, saida=_dt(2025, 2, 10), vagas_total=20, vagas_disponiveis=20)

        catalogo = Destino.objects.prefetch_related("pacotes__dates")
        self.assertEqual(vagas_ocupadas(pacote.dates.all()), 30)

        linhas = buscar_disponibilidade(catalogo, destino_slug=destino.slug)
        self.assertEqual([linha["data"].saida for linha in linhas], [_dt(2025, 1, 10), _dt(2025, 2, 10)])


class ContadoresTestCase(TestCase):

    def setUp(self):
        self.pacote = PacoteFactory()
        self.foto = PacoteFotoFactory(pacote=self.pacote)

    def test_like_soma_exatamente_um(self):
        self.assertEqual(incrementar_like(Pacote, self.pacote.id), 1)
        self.assertEqual(incrementar_like(Pacote, self.pacote.id), 2)
        self.pacote.refresh_from_db()
        self.assertEqual(self.pacote.like, 2)
        self.assertEqual(self.pacote.view, 0)

    def test_view_da_foto(self):
        self.assertEqual(incrementar_view(PacoteFoto, self.foto.id), 1)
        contadores = incrementar_contador(PacoteFoto, self.foto.id, "view")
        self.assertEqual(contadores, {"id": self.foto.id, "like": 0, "view": 2})

    def test_id_inexistente(self):
        with self.assertRaises(Pacote.DoesNotExist):
            incrementar_like(Pacote, 999999)

    def test_campo_invalido(self):
        with self.assertRaises(ValueError):
            incrementar_contador(Pacote, self.pacote.id, "title")
