from django.db import transaction

from .utils import gerar_slug, slug_provisorio


class SlugPorIdMixin:
    """
    Mantém o campo slug sempre igual a gerar_slug(title, pk).

    Na criação o id ainda não existe: o registro é inserido com um slug
    provisório e corrigido na mesma transação.
    """

    def save(self, *args, **kwargs):
        if self.pk is None:
            self.slug = slug_provisorio()
            with transaction.atomic():
                super().save(*args, **kwargs)
                self.slug = gerar_slug(self.title, self.pk)
                super().save(update_fields=["slug"])
            return

        self.slug = gerar_slug(self.title, self.pk)
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "title" in update_fields:
            kwargs["update_fields"] = set(update_fields) | {"slug"}
        super().save(*args, **kwargs)
