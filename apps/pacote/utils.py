"""
Utilidades puras dos pacotes: formatação de valores, slugs e links
de compartilhamento.
"""
import re
import uuid
from decimal import Decimal
from io import BytesIO
from urllib.parse import quote

from django.conf import settings


EXTENSOES_VIDEO = (".mp4", ".webm", ".mov", ".ogg", ".m4v")


# ---------------------------------------------------------------------
# VALORES
# ---------------------------------------------------------------------
def formatar_moeda(centavos):
    """
    Formata um valor em centavos como moeda brasileira.

    Args:
        centavos (int): Quantidade inteira de centavos (>= 0)

    Returns:
        str: Valor formatado, ex.: 1500 -> "R$ 15,00", 123456 -> "R$ 1.234,56"
    """
    reais = Decimal(int(centavos)) / Decimal("100")
    texto = f"{reais:,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
    return f"R$ {texto}"


# ---------------------------------------------------------------------
# SLUGS
# ---------------------------------------------------------------------
def slugify(texto):
    """
    Gera o slug de um título: minúsculas, sem espaços nas pontas, espaços
    viram hífen, remove o que estiver fora de [a-z0-9_-], colapsa hífens
    repetidos e remove hífens nas pontas.

    >>> slugify("  Jeri 5 dias ")
    'jeri-5-dias'
    """
    slug = str(texto or "").lower().strip()
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"[^a-z0-9_-]+", "", slug)
    slug = re.sub(r"-{2,}", "-", slug)
    return slug.strip("-")


def slug_provisorio():
    return f"tmp-{uuid.uuid4().hex}"


def gerar_slug(titulo, pk):
    """
    Slug único de Destino/Pacote: sempre o título seguido do id.
    O sufixo é o que garante a unicidade; slugify() sozinho não garante.
    """
    if pk is None:
        return slugify(titulo)
    return slugify(f"{titulo}-{pk}")


# ---------------------------------------------------------------------
# MÍDIA
# ---------------------------------------------------------------------
def tipo_midia(url):
    """Retorna 'video' ou 'imagem' de acordo com a extensão do arquivo."""
    caminho = str(url or "").split("?", 1)[0].split("#", 1)[0].lower()
    if caminho.endswith(EXTENSOES_VIDEO):
        return "video"
    return "imagem"


# ---------------------------------------------------------------------
# COMPARTILHAMENTO
# ---------------------------------------------------------------------
def url_compartilhamento(slug):
    return f"{settings.SITE_URL}/share/{slug}"


def url_pacote(destino_slug, pacote_slug):
    return f"{settings.SITE_URL}/pacotes/{destino_slug}/{pacote_slug}"


def link_whatsapp(titulo, url, numero=None):
    """
    Monta o link wa.me com a mensagem de interesse no pacote.

    Args:
        titulo (str): Título do pacote
        url (str): Endereço público da página do pacote
        numero (str, opcional): Número no formato internacional. Padrão: settings.WHATSAPP_NUMERO

    Returns:
        str: https://wa.me/<numero>?text=<mensagem codificada>
    """
    numero = numero or settings.WHATSAPP_NUMERO
    mensagem = (
        f'Olá, tenho interesse no pacote "{titulo}" ({url}). '
        "Poderia me dar mais informações?"
    )
    return f"https://wa.me/{numero}?text={quote(mensagem, safe='')}"


def gerar_qrcode_png(texto):
    """Gera o PNG de um QR code com o texto informado."""
    import qrcode

    qr = qrcode.QRCode(version=1, box_size=10, border=4)
    qr.add_data(texto)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buffer = BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()
