"""
Utilidades para exportação de relatórios em PDF e Excel.
"""
from io import BytesIO
from datetime import datetime

from django.utils import timezone
from django.utils.dateparse import parse_datetime

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import cm
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib.enums import TA_CENTER

from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill

from apps.pacote.utils import formatar_moeda


# ============================================================================
# EXPORTAÇÃO PDF
# ============================================================================

def gerar_pdf_saidas(data, filtros, resumen):
    """
    Gera o PDF do relatório de saídas.

    Args:
        data: Lista de saídas (já serializadas)
        filtros: Dict com os filtros aplicados
        resumen: Dict com os totais

    Returns:
        BytesIO com o PDF
    """
    buffer = BytesIO()

    # Documento horizontal
    doc = SimpleDocTemplate(
        buffer,
        pagesize=landscape(A4),
        rightMargin=1*cm,
        leftMargin=1*cm,
        topMargin=2*cm,
        bottomMargin=2*cm
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        'CustomTitle',
        parent=styles['Heading1'],
        fontSize=16,
        textColor=colors.HexColor('#2c3e50'),
        spaceAfter=12,
        alignment=TA_CENTER
    )

    story = []

    story.append(Paragraph("RELATÓRIO DE SAÍDAS", title_style))
    story.append(Spacer(1, 0.5*cm))

    # Filtros
    filtros_text = f"<b>Status:</b> {filtros.get('status') or 'todos'}"
    if filtros.get('saida_desde'):
        filtros_text += f" | <b>Desde:</b> {filtros['saida_desde']}"
    if filtros.get('saida_ate'):
        filtros_text += f" | <b>Até:</b> {filtros['saida_ate']}"
    story.append(Paragraph(filtros_text, styles['Normal']))
    story.append(Spacer(1, 0.3*cm))

    # Resumo
    resumen_text = f"""
    <b>Saídas:</b> {resumen['total_saidas']} |
    <b>Vagas ofertadas:</b> {resumen['vagas_total']} |
    <b>Vagas ocupadas:</b> {resumen['vagas_ocupadas']} |
    <b>Vagas disponíveis:</b> {resumen['vagas_disponiveis']}
    """
    story.append(Paragraph(resumen_text, styles['Normal']))
    story.append(Spacer(1, 0.5*cm))

    table_data = [
        ['Pacote', 'Destino', 'Saída', 'Retorno', 'Vagas', 'Ocupadas', 'Pix', 'Cartão', 'Status']
    ]

    for saida in data:
        table_data.append([
            saida['pacote_title'][:35],
            saida['destino_title'][:25],
            format_datetime(saida['saida']),
            format_datetime(saida['retorno']),
            str(saida['vagas_total']),
            str(saida['vagas_ocupadas']),
            formatar_moeda(saida['price']),
            formatar_moeda(saida['price_card']),
            saida['status_display'],
        ])

    table = Table(table_data, repeatRows=1)
    table.setStyle(TableStyle([
        # Header
        ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#3498db')),
        ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
        ('ALIGN', (0, 0), (-1, 0), 'CENTER'),
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('FONTSIZE', (0, 0), (-1, 0), 10),
        ('BOTTOMPADDING', (0, 0), (-1, 0), 12),

        # Body
        ('FONTNAME', (0, 1), (-1, -1), 'Helvetica'),
        ('FONTSIZE', (0, 1), (-1, -1), 8),
        ('ALIGN', (0, 1), (-1, -1), 'LEFT'),
        ('ALIGN', (4, 1), (7, -1), 'RIGHT'),

        ('GRID', (0, 0), (-1, -1), 0.5, colors.grey),

        # Linhas alternadas
        *[('BACKGROUND', (0, i), (-1, i), colors.HexColor('#ecf0f1'))
          for i in range(2, len(table_data), 2)]
    ]))

    story.append(table)

    story.append(Spacer(1, 1*cm))
    footer_text = f"Gerado: {timezone.localtime().strftime('%d/%m/%Y %H:%M')}"
    story.append(Paragraph(footer_text, styles['Normal']))

    doc.build(story)
    buffer.seek(0)
    return buffer


# ============================================================================
# EXPORTAÇÃO EXCEL
# ============================================================================

def gerar_excel_saidas(data, filtros, resumen):
    """Gera o Excel do relatório de saídas (abas Resumo e Dados)."""
    buffer = BytesIO()
    wb = Workbook()

    # ===== ABA 1: RESUMO =====
    ws_resumen = wb.active
    ws_resumen.title = "Resumo"

    ws_resumen['A1'] = "RELATÓRIO DE SAÍDAS"
    ws_resumen['A1'].font = Font(size=16, bold=True)
    ws_resumen.merge_cells('A1:D1')

    ws_resumen['A3'] = "Saídas:"
    ws_resumen['B3'] = resumen['total_saidas']

    ws_resumen['A4'] = "Vagas ofertadas:"
    ws_resumen['B4'] = resumen['vagas_total']

    ws_resumen['A5'] = "Vagas ocupadas:"
    ws_resumen['B5'] = resumen['vagas_ocupadas']

    ws_resumen['A6'] = "Vagas disponíveis:"
    ws_resumen['B6'] = resumen['vagas_disponiveis']

    ws_resumen['A8'] = "Status:"
    ws_resumen['B8'] = filtros.get('status') or 'todos'

    # ===== ABA 2: DADOS =====
    ws_dados = wb.create_sheet("Dados")

    headers = ['Pacote', 'Destino', 'Saída', 'Retorno', 'Vagas', 'Disponíveis',
               'Ocupadas', 'Pix (R$)', 'Cartão (R$)', 'Pix', 'Cartão', 'Status']
    ws_dados.append(headers)

    header_fill = PatternFill(start_color="3498db", end_color="3498db", fill_type="solid")
    header_font = Font(color="FFFFFF", bold=True)

    for cell in ws_dados[1]:
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = Alignment(horizontal='center', vertical='center')

    for saida in data:
        ws_dados.append([
            saida['pacote_title'],
            saida['destino_title'],
            format_datetime(saida['saida']),
            format_datetime(saida['retorno']),
            saida['vagas_total'],
            saida['vagas_disponiveis'],
            saida['vagas_ocupadas'],
            saida['price'] / 100,
            saida['price_card'] / 100,
            formatar_moeda(saida['price']),
            formatar_moeda(saida['price_card']),
            saida['status_display'],
        ])

    for row in range(2, len(data) + 2):
        ws_dados[f'H{row}'].number_format = '#,##0.00'
        ws_dados[f'I{row}'].number_format = '#,##0.00'

    # Ajustar largura das colunas
    for column in ws_dados.columns:
        max_length = max(len(str(cell.value or "")) for cell in column)
        ws_dados.column_dimensions[column[0].column_letter].width = min(max_length + 2, 50)

    ws_dados.auto_filter.ref = ws_dados.dimensions

    wb.save(buffer)
    buffer.seek(0)
    return buffer


# ============================================================================
# FORMATAÇÃO
# ============================================================================

def format_datetime(value):
    """Formata um datetime (ou string ISO) como dd/mm/aaaa HH:MM no fuso local."""
    if isinstance(value, str):
        dt = parse_datetime(value)
        if dt is None:
            return value
    elif isinstance(value, datetime):
        dt = value
    else:
        return str(value or "")

    if timezone.is_aware(dt):
        dt = timezone.localtime(dt)
    return dt.strftime('%d/%m/%Y %H:%M')
