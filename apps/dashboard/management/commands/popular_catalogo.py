# apps/dashboard/management/commands/popular_catalogo.py
"""
Management command para popular o catálogo (destinos, pacotes, fotos e
datas de saída) usando Factory Boy

Uso:
    python manage.py popular_catalogo
    python manage.py popular_catalogo --destinos 6 --pacotes 4
    python manage.py popular_catalogo --clean
"""
from django.core.management.base import BaseCommand
from django.db import transaction


class Command(BaseCommand):
    help = 'Popular o catálogo com Destinos e Pacotes usando Factory Boy'

    def add_arguments(self, parser):
        parser.add_argument(
            '--destinos',
            type=int,
            default=4,
            help='Quantidade de destinos a criar (default: 4)'
        )
        parser.add_argument(
            '--pacotes',
            type=int,
            default=3,
            help='Quantidade de pacotes por destino (default: 3)'
        )
        parser.add_argument(
            '--clean',
            action='store_true',
            help='Apagar o catálogo atual antes de criar'
        )

    def handle(self, *args, **options):
        from apps.pacote.factories import DestinoFactory, PacoteCompletoFactory
        from apps.destino.models import Destino
        from apps.pacote.models import Pacote, PacoteDate

        qtd_destinos = options['destinos']
        qtd_pacotes = options['pacotes']

        self.stdout.write("=" * 70)
        self.stdout.write(self.style.SUCCESS("🌱 POPULAR CATÁLOGO COM FACTORY BOY"))
        self.stdout.write("=" * 70)

        # PASSO 1: Limpar dados se solicitado
        if options['clean']:
            self.stdout.write("\n🧹 Limpando catálogo existente...")
            with transaction.atomic():
                count_destinos = Destino.objects.count()
                count_pacotes = Pacote.objects.count()
                # Pacotes, fotos e datas caem em cascata
                Destino.objects.all().delete()

            self.stdout.write(self.style.WARNING(
                f"   ❌ Removidos: {count_destinos} destinos, {count_pacotes} pacotes"
            ))

        # PASSO 2: Criar destinos e pacotes
        self.stdout.write(f"\n📦 Criando {qtd_destinos} destinos com {qtd_pacotes} pacotes cada...")

        with transaction.atomic():
            destinos = DestinoFactory.create_batch(qtd_destinos)
            for destino in destinos:
                PacoteCompletoFactory.create_batch(qtd_pacotes, destino=destino)

        self.stdout.write(self.style.SUCCESS(f"   ✅ {len(destinos)} destinos criados"))

        self.stdout.write("\n   🔍 Amostra:")
        for i, destino in enumerate(destinos[:5], 1):
            self.stdout.write(f"      {i}. {destino.title} ({destino.pacotes.count()} pacotes)")

        # PASSO 3: Resumo
        self.stdout.write("\n" + "=" * 70)
        self.stdout.write(self.style.SUCCESS("✅ CATÁLOGO POPULADO"))
        self.stdout.write(f"   Destinos: {Destino.objects.count()}")
        self.stdout.write(f"   Pacotes: {Pacote.objects.count()}")
        self.stdout.write(f"   Saídas: {PacoteDate.objects.count()}")
        self.stdout.write("=" * 70)
