from django.db import models
from django.db.models import Q
from django.utils import timezone

from apps.pacote.mixins import SlugPorIdMixin


class Destino(SlugPorIdMixin, models.Model):
    """
    Destino divulgado no site (ex.: "Nordeste", "Lençóis").
    Agrupa um ou mais pacotes; a ordem define a exibição na home.
    """

    title = models.CharField(max_length=150)
    subtitle = models.CharField(max_length=255, blank=True, null=True)
    slug = models.SlugField(max_length=200, blank=True, editable=False)
    order = models.IntegerField(default=0, help_text="Ordem de exibição no site.")
    description = models.JSONField(
        blank=True,
        null=True,
        help_text="Descrição em rich text (JSON do editor)."
    )
    image = models.URLField(max_length=500, blank=True, null=True, help_text="Imagem de capa.")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    deleted_at = models.DateTimeField(blank=True, null=True)

    class Meta:
        verbose_name = "Destino"
        verbose_name_plural = "Destinos"
        db_table = "Destino"
        ordering = ["order", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["slug"],
                condition=Q(deleted_at__isnull=True),
                name="destino_slug_unico_ativo",
            ),
        ]

    def __str__(self):
        return self.title

    def excluir(self):
        """Exclusão lógica do destino e dos seus pacotes."""
        agora = timezone.now()
        self.pacotes.filter(deleted_at__isnull=True).update(deleted_at=agora)
        self.deleted_at = agora
        self.save(update_fields=["deleted_at"])
