from django.urls import path
from . import views

urlpatterns = [
    path('', views.buscar, name='busca'),
    path('availability/', views.disponibilidade, name='busca-disponibilidade'),
]
