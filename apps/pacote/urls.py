from django.urls import path
from rest_framework.urlpatterns import format_suffix_patterns
from .views import PacoteViewSet

urlpatterns = [
    path('', PacoteViewSet.as_view({'get': 'list', 'post': 'create'}), name='pacote'),
    path('<int:pk>/', PacoteViewSet.as_view({'get': 'retrieve', 'put': 'update', 'patch': 'partial_update', 'delete': 'destroy'}), name='pacote-detail'),
    path('<int:pk>/qrcode/', PacoteViewSet.as_view({'get': 'qrcode'}), name='pacote-qrcode'),
    path('resumen/', PacoteViewSet.as_view({'get': 'resumen'}), name='pacote-resumen'),
    path('slug/<slug:slug>/', PacoteViewSet.as_view({'get': 'por_slug'}), name='pacote-slug'),
]

urlpatterns = format_suffix_patterns(urlpatterns)
