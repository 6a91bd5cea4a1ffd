"""JWT authentication that also accepts the access token from a cookie."""

from __future__ import annotations

import structlog
from django.conf import settings  # type: ignore
from rest_framework import exceptions  # type: ignore
from rest_framework_simplejwt.authentication import JWTAuthentication  # type: ignore

logger = structlog.get_logger(__name__)


class CookieJWTAuthentication(JWTAuthentication):
    """Authenticate with ``Authorization: Bearer <token>`` or the ``token`` cookie.

    A bad token in the header is an authentication failure. A stale or
    invalid cookie is ignored and the request continues as anonymous, so
    a browser holding an expired cookie can still log in again.
    """

    def authenticate(self, request):  # type: ignore
        header = self.get_header(request)
        if header is not None:
            return super().authenticate(request)

        raw_token = request.COOKIES.get(settings.AUTH_COOKIE_NAME)
        if not raw_token:
            return None

        try:
            validated_token = self.get_validated_token(raw_token)
            user = self.get_user(validated_token)
        except exceptions.AuthenticationFailed as exc:
            logger.info("auth.cookie_rejected", reason=str(exc.detail))
            return None
        return user, validated_token
