from django.urls import path
from rest_framework.urlpatterns import format_suffix_patterns
from .views import PacoteDateViewSet

urlpatterns = [
    path('', PacoteDateViewSet.as_view({'get': 'list'}), name='pacote-data'),
    path('<int:pk>/', PacoteDateViewSet.as_view({'get': 'retrieve', 'put': 'update', 'patch': 'partial_update'}), name='pacote-data-detail'),
]

urlpatterns = format_suffix_patterns(urlpatterns)
