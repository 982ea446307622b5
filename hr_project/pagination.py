"""
Pagination for record list endpoints

List views hand a queryset to paginated_response(); only the requested
page is fetched and serialized. Page sizes come from HR_RECORDS:

    HR_RECORDS = {
        'PAGE_SIZE': 20,
        'MAX_PAGE_SIZE': 100,
    }

Works with standardized response format:
{
    "status": "success",
    "message": "",
    "data": {"count": ..., "next": ..., "previous": ..., "results": [...]}
}
"""
from django.conf import settings
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response

DEFAULT_PAGE_SIZE = 20
DEFAULT_MAX_PAGE_SIZE = 100


class RecordPagination(PageNumberPagination):
    """
    Page-number pagination sized from HR_RECORDS.

    Query Parameters:
    - page: Page number (default: 1)
    - page_size: Items per page, capped at MAX_PAGE_SIZE
    """
    page_size_query_param = 'page_size'

    def __init__(self):
        config = getattr(settings, 'HR_RECORDS', {})
        self.max_page_size = config.get('MAX_PAGE_SIZE', DEFAULT_MAX_PAGE_SIZE)
        self.page_size = min(config.get('PAGE_SIZE', DEFAULT_PAGE_SIZE), self.max_page_size)

    def get_paginated_response(self, data):
        return Response({
            'status': 'success',
            'message': '',
            'data': {
                'count': self.page.paginator.count,
                'next': self.get_next_link(),
                'previous': self.get_previous_link(),
                'results': data
            }
        })


def paginated_response(request, queryset, serializer_class):
    """
    Serialize one page of the queryset.

    An out-of-range page raises DRF's NotFound, rendered as a 404 by the
    exception handler.
    """
    paginator = RecordPagination()
    page = paginator.paginate_queryset(queryset, request)
    return paginator.get_paginated_response(serializer_class(page, many=True).data)
