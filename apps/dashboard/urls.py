"""
Dashboard URLs
"""
from django.urls import path
from . import views
from . import reportes_views

urlpatterns = [
    path('pacotes-stats/', views.pacotes_stats, name='dashboard-pacotes-stats'),
    path('resumen/', views.resumen, name='dashboard-resumen'),

    # Relatório JSON
    path('reportes/saidas/', reportes_views.reporte_saidas, name='reporte-saidas'),

    # Exportação
    path('reportes/saidas/exportar-pdf/', reportes_views.exportar_saidas_pdf, name='exportar-saidas-pdf'),
    path('reportes/saidas/exportar-excel/', reportes_views.exportar_saidas_excel, name='exportar-saidas-excel'),
]
