from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Destino',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=150)),
                ('subtitle', models.CharField(blank=True, max_length=255, null=True)),
                ('slug', models.SlugField(blank=True, editable=False, max_length=200)),
                ('order', models.IntegerField(default=0, help_text='Ordem de exibição no site.')),
                ('description', models.JSONField(blank=True, help_text='Descrição em rich text (JSON do editor).', null=True)),
                ('image', models.URLField(blank=True, help_text='Imagem de capa.', max_length=500, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('deleted_at', models.DateTimeField(blank=True, null=True)),
            ],
            options={
                'verbose_name': 'Destino',
                'verbose_name_plural': 'Destinos',
                'db_table': 'Destino',
                'ordering': ['order', 'id'],
            },
        ),
        migrations.AddConstraint(
            model_name='destino',
            constraint=models.UniqueConstraint(condition=models.Q(('deleted_at__isnull', True)), fields=('slug',), name='destino_slug_unico_ativo'),
        ),
    ]
