from django.urls import path
from rest_framework.urlpatterns import format_suffix_patterns
from . import views

urlpatterns = [
    path('faqs/', views.FAQViewSet.as_view({'get': 'list', 'post': 'create'}), name='faq'),
    path('faqs/<int:pk>/', views.FAQViewSet.as_view({'get': 'retrieve', 'put': 'update', 'patch': 'partial_update', 'delete': 'destroy'}), name='faq-detail'),

    path('depoimentos/', views.DepoimentoViewSet.as_view({'get': 'list', 'post': 'create'}), name='depoimento'),
    path('depoimentos/<int:pk>/', views.DepoimentoViewSet.as_view({'get': 'retrieve', 'put': 'update', 'patch': 'partial_update', 'delete': 'destroy'}), name='depoimento-detail'),

    path('inscritos/', views.InscritoViewSet.as_view({'get': 'list', 'post': 'create'}), name='inscrito'),
    path('inscritos/<int:pk>/', views.InscritoViewSet.as_view({'get': 'retrieve', 'delete': 'destroy'}), name='inscrito-detail'),

    path('home/', views.home, name='home'),
    path('google-reviews/', views.google_reviews, name='google-reviews'),
]

urlpatterns = format_suffix_patterns(urlpatterns)
