"""
Regras de disponibilidade dos pacotes.

Contém a lógica usada pela busca, pela página do pacote e pelo dashboard:
- proximas_saidas: datas com saída a partir de um instante de referência
- vagas_ocupadas / total_vagas_ofertadas / popularidade: contagem de vagas
- buscar_disponibilidade: cruza destinos x pacotes x datas com os filtros da busca
- incrementar_like / incrementar_view: contadores de engajamento

As funções de leitura não acessam o banco. Recebem o catálogo já carregado,
seja como instâncias de modelo (com prefetch) ou como dicionários vindos
dos serializers (datas em ISO-8601).
"""
import logging
from datetime import date, datetime

from django.db import transaction
from django.db.models import F
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

logger = logging.getLogger(__name__)

CONTADORES = ("like", "view")


# ---------------------------------------------------------------------
# HELPERS
# ---------------------------------------------------------------------
def _valor(item, campo):
    if isinstance(item, dict):
        return item.get(campo)
    return getattr(item, campo, None)


def _lista(itens):
    """Aceita None, lista, queryset ou related manager."""
    if itens is None:
        return []
    if hasattr(itens, "all") and not isinstance(itens, (list, tuple)):
        return list(itens.all())
    return list(itens)


def _filhos(item, campo):
    return _lista(_valor(item, campo))


def _como_datetime(valor):
    """Converte datetime/date/ISO-8601 em datetime aware."""
    if isinstance(valor, datetime):
        dt = valor
    elif isinstance(valor, date):
        dt = datetime.combine(valor, datetime.min.time())
    else:
        texto = str(valor)
        dt = parse_datetime(texto)
        if dt is None:
            dia = parse_date(texto)
            if dia is None:
                raise ValueError(f"Data inválida: {valor!r}")
            dt = datetime.combine(dia, datetime.min.time())

    if timezone.is_naive(dt):
        dt = timezone.make_aware(dt)
    return dt


def _como_dia(valor):
    """Dia de calendário (horário local) de uma data, instante ou string."""
    if valor in (None, ""):
        return None
    if isinstance(valor, date) and not isinstance(valor, datetime):
        return valor
    return timezone.localtime(_como_datetime(valor)).date()


def _saida(item):
    return _como_datetime(_valor(item, "saida"))


# ---------------------------------------------------------------------
# PRÓXIMAS SAÍDAS
# ---------------------------------------------------------------------
def proximas_saidas(datas, referencia=None):
    """
    Retorna as datas com saída igual ou posterior à referência, em ordem
    crescente de saída. Empates mantêm a ordem original.

    Args:
        datas: Lista de PacoteDate (ou dicts com "saida")
        referencia: Instante de corte. Padrão: timezone.now()

    Returns:
        list: Sublista ordenada; vazia quando nenhuma data se qualifica
    """
    referencia = timezone.now() if referencia is None else _como_datetime(referencia)
    futuras = [d for d in _lista(datas) if _saida(d) >= referencia]
    return sorted(futuras, key=_saida)


# ---------------------------------------------------------------------
# VAGAS
# ---------------------------------------------------------------------
def vagas_ocupadas(datas):
    """
    Soma de (vagas_total - vagas_disponiveis) de todas as datas.

    Não faz clamp: se vagas_disponiveis > vagas_total (dado inconsistente)
    a parcela fica negativa e o resultado é devolvido assim mesmo.
    """
    return sum(
        (_valor(d, "vagas_total") or 0) - (_valor(d, "vagas_disponiveis") or 0)
        for d in _lista(datas)
    )


def total_vagas_ofertadas(datas):
    return sum(_valor(d, "vagas_total") or 0 for d in _lista(datas))


def total_vagas_disponiveis(datas):
    return sum(_valor(d, "vagas_disponiveis") or 0 for d in _lista(datas))


def popularidade(pacote):
    """Métrica do ranking "mais vendidos": vagas ocupadas em todas as datas."""
    return vagas_ocupadas(_filhos(pacote, "dates"))


def ranking_pacotes(pacotes, limite=None):
    """Pacotes em ordem decrescente de popularidade (estável nos empates)."""
    ordenados = sorted(_lista(pacotes), key=lambda p: -popularidade(p))
    return ordenados if limite is None else ordenados[:limite]


# ---------------------------------------------------------------------
# BUSCA
# ---------------------------------------------------------------------
def _data_no_intervalo(saida, inicio, fim):
    # Sem data inicial o intervalo não se aplica (o fim sozinho é ignorado)
    if inicio is None:
        return True
    dia = _como_dia(saida)
    if dia < inicio:
        return False
    if fim is not None and dia > fim:
        return False
    return True


def buscar_disponibilidade(catalogo, texto=None, destino_slug=None, data_inicio=None, data_fim=None):
    """
    Achata destinos -> pacotes -> datas em linhas de resultado filtradas.

    Cada linha corresponde a UMA data de um pacote (um pacote com 3 datas
    gera 3 linhas) e é um dict com as chaves:
        pacote, data, destino_title, destino_slug

    Filtros (ausentes = aceita tudo):
    - texto: substring, sem diferenciar maiúsculas, no título do pacote ou do destino
    - destino_slug: igualdade exata com o slug do destino
    - data_inicio / data_fim: dia de calendário da saída dentro de [inicio, fim];
      data_fim só vale junto com data_inicio

    Resultado ordenado pela saída; empates mantêm a ordem de percurso do catálogo.
    """
    termo = (texto or "").lower()
    inicio = _como_dia(data_inicio)
    fim = _como_dia(data_fim)

    linhas = []
    for destino in _lista(catalogo):
        titulo_destino = _valor(destino, "title") or ""
        slug_destino = _valor(destino, "slug")

        if destino_slug and slug_destino != destino_slug:
            continue

        for pacote in _filhos(destino, "pacotes"):
            titulo_pacote = _valor(pacote, "title") or ""
            if termo and termo not in titulo_pacote.lower() and termo not in titulo_destino.lower():
                continue

            for data in _filhos(pacote, "dates"):
                if not _data_no_intervalo(_valor(data, "saida"), inicio, fim):
                    continue
                linhas.append({
                    "pacote": pacote,
                    "data": data,
                    "destino_title": titulo_destino,
                    "destino_slug": slug_destino,
                })

    linhas.sort(key=lambda linha: _saida(linha["data"]))
    return linhas


# ---------------------------------------------------------------------
# CONTADORES (LIKE / VIEW)
# ---------------------------------------------------------------------
def _ativos(modelo):
    """Registros que aceitam contadores: fora da exclusão lógica (própria ou do pacote)."""
    campos = {f.name for f in modelo._meta.get_fields()}
    if "deleted_at" in campos:
        return modelo.objects.filter(deleted_at__isnull=True)
    if "pacote" in campos:
        return modelo.objects.filter(pacote__deleted_at__isnull=True)
    return modelo.objects.all()


def incrementar_contador(modelo, pk, campo):
    """
    Soma 1 ao contador `campo` do registro `pk` e devolve os contadores
    já atualizados.

    O incremento é feito pelo banco (UPDATE ... SET campo = campo + 1), então
    requisições concorrentes não perdem atualizações. Não há deduplicação
    por cliente: cada chamada conta.

    Returns:
        dict: {"id", "like", "view"} após o incremento

    Raises:
        ValueError: campo diferente de "like"/"view"
        modelo.DoesNotExist: id inexistente ou excluído
    """
    if campo not in CONTADORES:
        raise ValueError(f"Contador inválido: {campo}")

    with transaction.atomic():
        atualizados = _ativos(modelo).filter(pk=pk).update(**{campo: F(campo) + 1})
        if not atualizados:
            logger.warning("%s %s não encontrado ao incrementar %s", modelo.__name__, pk, campo)
            raise modelo.DoesNotExist(f"{modelo._meta.verbose_name} {pk} não encontrado")
        # A linha continua bloqueada pelo UPDATE até o commit
        return modelo.objects.values("id", "like", "view").get(pk=pk)


def incrementar_like(modelo, pk):
    return incrementar_contador(modelo, pk, "like")["like"]


def incrementar_view(modelo, pk):
    return incrementar_contador(modelo, pk, "view")["view"]
