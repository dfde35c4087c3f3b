from django.db import models


class FAQ(models.Model):
    pergunta = models.CharField(max_length=255)
    resposta = models.TextField()

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Pergunta frequente"
        verbose_name_plural = "Perguntas frequentes"
        db_table = "FAQ"
        ordering = ["pergunta"]

    def __str__(self):
        return self.pergunta


class Depoimento(models.Model):
    """Depoimento de cliente exibido na home (texto ou vídeo)."""
    TEXTO = "text"
    VIDEO = "video"
    TIPO_CHOICES = [
        (TEXTO, "Texto"),
        (VIDEO, "Vídeo"),
    ]

    name = models.CharField(max_length=150)
    content = models.TextField(help_text="Texto do depoimento ou URL do vídeo.")
    type = models.CharField(max_length=10, choices=TIPO_CHOICES, default=TEXTO)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Depoimento"
        verbose_name_plural = "Depoimentos"
        db_table = "Depoimento"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return self.name


class Inscrito(models.Model):
    """Inscrição na newsletter do site."""
    name = models.CharField(max_length=150)
    email = models.EmailField(unique=True)
    phone = models.CharField(max_length=30, blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Inscrito"
        verbose_name_plural = "Inscritos"
        db_table = "Inscrito"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"{self.name} <{self.email}>"
