from django.db import models
from django.utils import timezone

from apps.destino.models import Destino
from .mixins import SlugPorIdMixin
from .utils import tipo_midia


# ---------------------------------------------------------------------
# PACOTE
# ---------------------------------------------------------------------
class Pacote(SlugPorIdMixin, models.Model):
    """
    Pacote de viagem vinculado a um Destino.
    As saídas concretas (datas, vagas e preços) ficam em PacoteDate.
    Os contadores like/view só são alterados pelos endpoints de estatística.
    """
    title = models.CharField(max_length=150)
    subtitle = models.CharField(max_length=255, blank=True, null=True)
    slug = models.SlugField(max_length=200, blank=True, editable=False)

    destino = models.ForeignKey(
        Destino,
        on_delete=models.CASCADE,
        related_name="pacotes"
    )

    description = models.JSONField(
        blank=True,
        null=True,
        help_text="Descrição em rich text (JSON do editor)."
    )

    like = models.PositiveIntegerField(default=0)
    view = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    deleted_at = models.DateTimeField(blank=True, null=True)

    # Campos que a atualização do pacote pode gravar (nunca os contadores)
    CAMPOS_EDITAVEIS = ["title", "subtitle", "slug", "destino", "description", "updated_at"]

    class Meta:
        verbose_name = "Pacote"
        verbose_name_plural = "Pacotes"
        db_table = "Pacote"
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(
                fields=["slug"],
                condition=models.Q(deleted_at__isnull=True),
                name="pacote_slug_unico_ativo",
            ),
        ]

    def __str__(self):
        return self.title

    def excluir(self):
        """Exclusão lógica."""
        self.deleted_at = timezone.now()
        self.save(update_fields=["deleted_at"])


# ---------------------------------------------------------------------
# FOTO / VÍDEO DO PACOTE
# ---------------------------------------------------------------------
class PacoteFoto(models.Model):
    pacote = models.ForeignKey(
        Pacote,
        on_delete=models.CASCADE,
        related_name="fotos"
    )
    url = models.URLField(max_length=500, help_text="URL da imagem ou do vídeo.")
    caption = models.CharField(max_length=255, blank=True, null=True)

    like = models.PositiveIntegerField(default=0)
    view = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Foto do Pacote"
        verbose_name_plural = "Fotos do Pacote"
        db_table = "PacoteFoto"
        ordering = ["id"]

    def __str__(self):
        return f"{self.pacote.title} - {self.caption or self.url}"

    @property
    def tipo(self):
        return tipo_midia(self.url)


# ---------------------------------------------------------------------
# DATA DE SAÍDA
# ---------------------------------------------------------------------
class PacoteDate(models.Model):
    """
    Saída de um pacote, com preços em centavos e estoque de vagas.

    O status é independente das vagas: uma data pode estar "disponivel"
    com zero vagas disponíveis. vagas_disponiveis > vagas_total não é
    rejeitado aqui (ver services.vagas_ocupadas).
    """
    DISPONIVEL = "disponivel"
    ESGOTADO = "esgotado"
    CANCELADO = "cancelado"
    STATUS_CHOICES = [
        (DISPONIVEL, "Disponível"),
        (ESGOTADO, "Esgotado"),
        (CANCELADO, "Cancelado"),
    ]

    pacote = models.ForeignKey(
        Pacote,
        on_delete=models.CASCADE,
        related_name="dates"
    )
    saida = models.DateTimeField()
    retorno = models.DateTimeField()

    vagas_total = models.PositiveIntegerField(default=0)
    vagas_disponiveis = models.PositiveIntegerField(default=0)

    price = models.PositiveIntegerField(default=0, help_text="Preço à vista/Pix, em centavos.")
    price_card = models.PositiveIntegerField(default=0, help_text="Preço no cartão, em centavos.")

    status = models.CharField(
        max_length=12,
        choices=STATUS_CHOICES,
        default=DISPONIVEL
    )
    notes = models.TextField(blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Data de Saída"
        verbose_name_plural = "Datas de Saída"
        db_table = "PacoteDate"
        ordering = ["saida", "id"]

    def __str__(self):
        return f"{self.pacote.title} - {self.saida:%d/%m/%Y}"
