"""
Tests das utilidades de pacotes (moeda, slugs, mídia e links)

Executar tests:
    python manage.py test apps.pacote.tests_utils
"""
from urllib.parse import unquote

from django.test import SimpleTestCase, override_settings

from apps.pacote.utils import (
    formatar_moeda,
    slugify,
    gerar_slug,
    tipo_midia,
    link_whatsapp,
    url_compartilhamento,
    url_pacote,
    gerar_qrcode_png,
)


class FormatarMoedaTestCase(SimpleTestCase):

    def test_valores_basicos(self):
        self.assertEqual(formatar_moeda(1500), "R$ 15,00")
        self.assertEqual(formatar_moeda(0), "R$ 0,00")
        self.assertEqual(formatar_moeda(5), "R$ 0,05")

    def test_separador_de_milhar(self):
        self.assertEqual(formatar_moeda(123456), "R$ 1.234,56")
        self.assertEqual(formatar_moeda(100000000), "R$ 1.000.000,00")

    def test_reais_inteiros(self):
        for reais in (1, 42, 1999, 250000):
            texto = formatar_moeda(reais * 100)
            numero = texto.replace("R$ ", "").replace(".", "").replace(",", ".")
            self.assertEqual(float(numero), float(reais))

    def test_deterministico(self):
        self.assertEqual(formatar_moeda(98765), formatar_moeda(98765))


class SlugifyTestCase(SimpleTestCase):

    def test_titulo_simples(self):
        self.assertEqual(slugify("  Jeri 5 dias "), "jeri-5-dias")

    def test_remove_acentos_e_simbolos(self):
        self.assertEqual(slugify("Lençóis Maranhenses!"), "lenis-maranhenses")

    def test_colapsa_e_remove_hifens_nas_pontas(self):
        self.assertEqual(slugify("--a  --  b--"), "a-b")

    def test_vazio(self):
        self.assertEqual(slugify(""), "")
        self.assertEqual(slugify(None), "")

    def test_gerar_slug_com_id(self):
        self.assertEqual(gerar_slug("Jeri 5 dias", 7), "jeri-5-dias-7")
        self.assertEqual(gerar_slug("Jeri 5 dias", None), "jeri-5-dias")

    def test_titulos_iguais_geram_slugs_distintos(self):
        self.assertNotEqual(gerar_slug("Nordeste", 1), gerar_slug("Nordeste", 2))


class TipoMidiaTestCase(SimpleTestCase):

    def test_video(self):
        self.assertEqual(tipo_midia("https://cdn.site/v/passeio.mp4"), "video")
        self.assertEqual(tipo_midia("https://cdn.site/v/passeio.MOV?token=1"), "video")

    def test_imagem(self):
        self.assertEqual(tipo_midia("https://cdn.site/f/praia.jpg"), "imagem")
        self.assertEqual(tipo_midia(""), "imagem")


@override_settings(SITE_URL="https://hagesturismo.com.br", WHATSAPP_NUMERO="5591900000000")
class LinksTestCase(SimpleTestCase):

    def test_url_compartilhamento(self):
        self.assertEqual(
            url_compartilhamento("jeri-5-dias-7"),
            "https://hagesturismo.com.br/share/jeri-5-dias-7"
        )

    def test_url_pacote(self):
        self.assertEqual(
            url_pacote("nordeste-1", "jeri-5-dias-7"),
            "https://hagesturismo.com.br/pacotes/nordeste-1/jeri-5-dias-7"
        )

    def test_link_whatsapp_numero_padrao(self):
        link = link_whatsapp("Jeri 5 dias", "https://hagesturismo.com.br/pacotes/x/y")
        self.assertTrue(link.startswith("https://wa.me/5591900000000?text="))

        mensagem = unquote(link.split("?text=", 1)[1])
        self.assertIn('"Jeri 5 dias"', mensagem)
        self.assertIn("https://hagesturismo.com.br/pacotes/x/y", mensagem)

    def test_link_whatsapp_numero_informado(self):
        link = link_whatsapp("Jeri", "https://x", numero="5511999999999")
        self.assertTrue(link.startswith("https://wa.me/5511999999999?text="))
        self.assertNotIn(" ", link)


class QrCodeTestCase(SimpleTestCase):

    def test_gera_png(self):
        png = gerar_qrcode_png("https://hagesturismo.com.br/share/jeri-5-dias-7")
        self.assertTrue(png.startswith(b"\x89PNG"))
