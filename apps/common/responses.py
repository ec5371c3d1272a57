"""
Tagged result envelope used by every API view.

    {"success": true,  "data": ...}
    {"success": false, "error": "...", "code": "..."}
"""

from rest_framework import status
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


def success_response(data=None, status_code=status.HTTP_200_OK):
    return Response({'success': True, 'data': data}, status=status_code)


def error_response(exc):
    """Convert a service error into its tagged HTTP response."""
    return Response(
        {
            'success': False,
            'error': str(exc),
            'code': exc.code,
        },
        status=exc.status_code,
    )


class StandardPagination(PageNumberPagination):
    """Page-number pagination wrapped in the success envelope."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100

    def get_paginated_response(self, data):
        return success_response({
            'count': self.page.paginator.count,
            'next': self.get_next_link(),
            'previous': self.get_previous_link(),
            'results': data,
        })
