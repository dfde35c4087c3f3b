# apps/api/pagination.py
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class PadraoPagination(PageNumberPagination):
    """
    Paginação com os metadados usados pelo painel:
    - totalItems, pageSize, currentPage, totalPages, next, previous
    - items: registros da página
    """
    page_size = 10
    page_size_query_param = 'page_size'
    max_page_size = 100

    def get_paginated_response(self, data):
        return Response({
            'success': True,
            'totalItems': self.page.paginator.count,
            'pageSize': self.get_page_size(self.request),
            'currentPage': self.page.number,
            'totalPages': self.page.paginator.num_pages,
            'next': self.get_next_link(),
            'previous': self.get_previous_link(),
            'items': data,
        })
