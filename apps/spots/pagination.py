"""Pagination for the public spot listing."""

from __future__ import annotations

from rest_framework.exceptions import ValidationError  # type: ignore
from rest_framework.pagination import PageNumberPagination  # type: ignore
from rest_framework.response import Response  # type: ignore

MAX_PAGE_SIZE = 20


def _int_param(request, name: str, default: int) -> int | None:
    raw = request.query_params.get(name)
    if raw in (None, ""):
        return default
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


class SpotPagination(PageNumberPagination):
    """``?page=&size=`` pagination; out-of-range values are a 400, not clamped."""

    page_size = MAX_PAGE_SIZE
    page_size_query_param = "size"
    max_page_size = MAX_PAGE_SIZE

    def paginate_queryset(self, queryset, request, view=None):  # type: ignore
        errors = {}
        page = _int_param(request, self.page_query_param, 1)
        size = _int_param(request, self.page_size_query_param, self.page_size)
        if page is None or page < 1:
            errors["page"] = "Page must be greater than or equal to 1"
        if size is None or not 1 <= size <= self.max_page_size:
            errors["size"] = f"Size must be between 1 and {self.max_page_size}"
        if errors:
            raise ValidationError(errors)
        return super().paginate_queryset(queryset, request, view)

    def get_paginated_response(self, data):  # type: ignore
        return Response(
            {
                "Spots": data,
                "page": self.page.number,
                "size": self.get_page_size(self.request),
            }
        )

    def get_paginated_response_schema(self, schema):  # type: ignore
        return {
            "type": "object",
            "properties": {
                "Spots": schema,
                "page": {"type": "integer"},
                "size": {"type": "integer"},
            },
        }
