# apps/pacote/factories.py
from datetime import timedelta

import factory
from django.utils import timezone
from factory.django import DjangoModelFactory
from faker import Faker

from apps.destino.models import Destino
from .models import Pacote, PacoteFoto, PacoteDate

fake = Faker('pt_BR')

REGIOES = ['Nordeste', 'Lençóis', 'Chapada', 'Serra', 'Litoral', 'Amazônia']
ESTILOS = ['Aventura', 'Relax', 'Experiência', 'Expedição', 'Roteiro']


class DestinoFactory(DjangoModelFactory):
    """Factory para criar Destinos"""

    class Meta:
        model = Destino

    title = factory.LazyFunction(
        lambda: f"{fake.random_element(REGIOES)} {fake.city()}"
    )
    subtitle = factory.Faker('sentence', nb_words=6, locale='pt_BR')
    order = factory.Sequence(lambda n: n)
    description = factory.LazyFunction(lambda: {"blocks": [{"text": fake.paragraph()}]})
    image = factory.Faker('image_url')


class PacoteFactory(DjangoModelFactory):
    """Factory para criar Pacotes (sem fotos nem datas)"""

    class Meta:
        model = Pacote

    title = factory.LazyFunction(
        lambda: f"{fake.city()} {fake.random_element(ESTILOS)} {fake.random_int(3, 7)} dias"
    )
    subtitle = factory.Faker('sentence', nb_words=8, locale='pt_BR')
    destino = factory.SubFactory(DestinoFactory)
    description = factory.LazyFunction(lambda: {"blocks": [{"text": fake.paragraph()}]})


class PacoteFotoFactory(DjangoModelFactory):
    """Factory para criar fotos de um pacote"""

    class Meta:
        model = PacoteFoto

    pacote = factory.SubFactory(PacoteFactory)
    url = factory.Sequence(lambda n: f"https://cdn.hagesturismo.com.br/pacotes/foto-{n}.jpg")
    caption = factory.Faker('sentence', nb_words=4, locale='pt_BR')


class PacoteDateFactory(DjangoModelFactory):
    """Factory para criar Datas de Saída"""

    class Meta:
        model = PacoteDate

    pacote = factory.SubFactory(PacoteFactory)

    saida = factory.LazyFunction(
        lambda: timezone.now() + timedelta(days=fake.random_int(30, 180))
    )
    retorno = factory.LazyAttribute(
        lambda obj: obj.saida + timedelta(days=fake.random_int(3, 10))
    )

    vagas_total = factory.LazyFunction(lambda: fake.random_int(20, 45))
    vagas_disponiveis = factory.LazyAttribute(
        lambda obj: fake.random_int(0, obj.vagas_total)
    )

    # Preços em centavos; cartão ~10% acima do Pix
    price = factory.LazyFunction(lambda: fake.random_int(800, 5000) * 100)
    price_card = factory.LazyAttribute(lambda obj: int(obj.price * 1.1))

    status = PacoteDate.DISPONIVEL


class PacoteCompletoFactory(PacoteFactory):
    """Pacote com fotos e datas, usado para popular o catálogo"""

    class Meta:
        model = Pacote
        skip_postgeneration_save = True

    @factory.post_generation
    def criar_fotos(obj, create, extracted, **kwargs):
        """Criar 3 fotos por padrão"""
        if not create:
            return
        for _ in range(3 if extracted is None else extracted):
            PacoteFotoFactory(pacote=obj)

    @factory.post_generation
    def criar_datas(obj, create, extracted, **kwargs):
        """Criar 2 saídas por padrão"""
        if not create:
            return
        for _ in range(2 if extracted is None else extracted):
            PacoteDateFactory(pacote=obj)
