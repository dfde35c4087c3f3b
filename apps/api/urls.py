from django.urls import path, include

urlpatterns = [
    path('login/', include('apps.login_token.urls')),
    path('destinos/', include('apps.destino.urls')),
    path('pacotes/', include('apps.pacote.urls')),
    path('pacote-datas/', include('apps.pacote.datas_urls')),
    path('stats/', include('apps.pacote.stats_urls')),
    path('search/', include('apps.busca.urls')),
    path('dashboard/', include('apps.dashboard.urls')),
    path('', include('apps.conteudo.urls')),
]
