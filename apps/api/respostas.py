"""
Envelope padrão das respostas da API: {"success": bool, "data" | "items" | "message"}.
"""
from rest_framework import status
from rest_framework.response import Response


class RespostaPadraoMixin:
    """
    Mixin para ModelViewSet que embrulha as respostas no formato esperado
    pelo site e pelo painel. A listagem paginada já sai no formato de
    PadraoPagination.
    """
    mensagem_exclusao = "Registro excluído com sucesso."

    def list(self, request, *args, **kwargs):
        response = super().list(request, *args, **kwargs)
        if isinstance(response.data, list):
            response.data = {"success": True, "items": response.data}
        return response

    def retrieve(self, request, *args, **kwargs):
        response = super().retrieve(request, *args, **kwargs)
        response.data = {"success": True, "data": response.data}
        return response

    def create(self, request, *args, **kwargs):
        response = super().create(request, *args, **kwargs)
        response.data = {"success": True, "data": response.data}
        return response

    def update(self, request, *args, **kwargs):
        response = super().update(request, *args, **kwargs)
        response.data = {"success": True, "data": response.data}
        return response

    def destroy(self, request, *args, **kwargs):
        super().destroy(request, *args, **kwargs)
        return Response(
            {"success": True, "message": self.mensagem_exclusao},
            status=status.HTTP_200_OK
        )
