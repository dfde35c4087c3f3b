from django.urls import path
from . import stats_views

urlpatterns = [
    path('pacote-like/', stats_views.pacote_like, name='stats-pacote-like'),
    path('pacote-view/', stats_views.pacote_view, name='stats-pacote-view'),
    path('pacote-foto-like/', stats_views.pacote_foto_like, name='stats-pacote-foto-like'),
    path('pacote-foto-view/', stats_views.pacote_foto_view, name='stats-pacote-foto-view'),
]
