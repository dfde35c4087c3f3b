import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('destino', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Pacote',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=150)),
                ('subtitle', models.CharField(blank=True, max_length=255, null=True)),
                ('slug', models.SlugField(blank=True, editable=False, max_length=200)),
                ('description', models.JSONField(blank=True, help_text='Descrição em rich text (JSON do editor).', null=True)),
                ('like', models.PositiveIntegerField(default=0)),
                ('view', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('deleted_at', models.DateTimeField(blank=True, null=True)),
                ('destino', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='pacotes', to='destino.destino')),
            ],
            options={
                'verbose_name': 'Pacote',
                'verbose_name_plural': 'Pacotes',
                'db_table': 'Pacote',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='PacoteFoto',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('url', models.URLField(help_text='URL da imagem ou do vídeo.', max_length=500)),
                ('caption', models.CharField(blank=True, max_length=255, null=True)),
                ('like', models.PositiveIntegerField(default=0)),
                ('view', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('pacote', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='fotos', to='pacote.pacote')),
            ],
            options={
                'verbose_name': 'Foto do Pacote',
                'verbose_name_plural': 'Fotos do Pacote',
                'db_table': 'PacoteFoto',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='PacoteDate',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('saida', models.DateTimeField()),
                ('retorno', models.DateTimeField()),
                ('vagas_total', models.PositiveIntegerField(default=0)),
                ('vagas_disponiveis', models.PositiveIntegerField(default=0)),
                ('price', models.PositiveIntegerField(default=0, help_text='Preço à vista/Pix, em centavos.')),
                ('price_card', models.PositiveIntegerField(default=0, help_text='Preço no cartão, em centavos.')),
                ('status', models.CharField(choices=[('disponivel', 'Disponível'), ('esgotado', 'Esgotado'), ('cancelado', 'Cancelado')], default='disponivel', max_length=12)),
                ('notes', models.TextField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('pacote', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='dates', to='pacote.pacote')),
            ],
            options={
                'verbose_name': 'Data de Saída',
                'verbose_name_plural': 'Datas de Saída',
                'db_table': 'PacoteDate',
                'ordering': ['saida', 'id'],
            },
        ),
        migrations.AddConstraint(
            model_name='pacote',
            constraint=models.UniqueConstraint(condition=models.Q(('deleted_at__isnull', True)), fields=('slug',), name='pacote_slug_unico_ativo'),
        ),
    ]
