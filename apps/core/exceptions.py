"""Project-wide exception handling for the REST API.

Every error body carries a ``message``. Validation failures add an
``errors`` mapping of field name to its first message, e.g.::

    {"message": "Bad Request", "errors": {"endDate": "endDate cannot be before startDate"}}

Database faults are reported as 500 with the underlying error text and are
never retried.
"""

from __future__ import annotations

from typing import Any

import structlog
from django.core.exceptions import PermissionDenied as DjangoPermissionDenied  # type: ignore
from django.db import DatabaseError  # type: ignore
from django.http import Http404  # type: ignore
from rest_framework import exceptions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler, set_rollback  # type: ignore

logger = structlog.get_logger(__name__)

AUTHENTICATION_REQUIRED = "Authentication required"


def _first_message(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return _first_message(value[0]) if value else ""
    if isinstance(value, dict):
        return _first_message(next(iter(value.values()))) if value else ""
    return str(value)


def _flatten_errors(detail: Any) -> dict[str, str]:
    if isinstance(detail, dict):
        return {field: _first_message(value) for field, value in detail.items()}
    return {"non_field_errors": _first_message(detail)}


def _message(detail: Any, default: str) -> str:
    if isinstance(detail, str):
        return detail
    if isinstance(detail, dict) and "detail" in detail:
        return str(detail["detail"])
    return default


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    """Reshape DRF error responses into ``{"message": ..., "errors": ...}``."""

    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.error(
            "api.database_error",
            view=view.__class__.__name__ if view is not None else None,
            error=str(exc),
            exc_info=exc,
        )
        set_rollback()
        return Response(
            {"message": "Internal server error", "error": str(exc)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, Http404):
        exc = exceptions.NotFound()
    elif isinstance(exc, DjangoPermissionDenied):
        exc = exceptions.PermissionDenied()

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, exceptions.ValidationError):
        response.data = {"message": "Bad Request", "errors": _flatten_errors(exc.detail)}
    elif isinstance(exc, exceptions.NotAuthenticated):
        response.data = {"message": AUTHENTICATION_REQUIRED}
    else:
        default = AUTHENTICATION_REQUIRED if response.status_code == status.HTTP_401_UNAUTHORIZED else "Forbidden"
        response.data = {"message": _message(exc.detail, default)}
    return response
