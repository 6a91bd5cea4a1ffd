"""Views for the session resource (log in, log out, restore user)."""

from __future__ import annotations

import structlog
from django.conf import settings  # type: ignore
from rest_framework import exceptions, status  # type: ignore
from rest_framework.permissions import AllowAny  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore
from rest_framework_simplejwt.settings import api_settings as jwt_settings  # type: ignore
from rest_framework_simplejwt.tokens import RefreshToken  # type: ignore

from .auth_serializers import LoginSerializer
from .serializers import SafeUserSerializer

logger = structlog.get_logger(__name__)


def _tokens_for_user(user) -> dict[str, str]:
    refresh = RefreshToken.for_user(user)
    return {"refresh": str(refresh), "access": str(refresh.access_token)}


def session_response(user, *, status_code: int = status.HTTP_200_OK) -> Response:
    """Build the ``{"user", "tokens"}`` body and set the access token cookie."""

    tokens = _tokens_for_user(user)
    response = Response(
        {"user": SafeUserSerializer(user).data, "tokens": tokens},
        status=status_code,
    )
    response.set_cookie(
        settings.AUTH_COOKIE_NAME,
        tokens["access"],
        max_age=int(jwt_settings.ACCESS_TOKEN_LIFETIME.total_seconds()),
        httponly=True,
        secure=settings.AUTH_COOKIE_SECURE,
        samesite=settings.AUTH_COOKIE_SAMESITE,
    )
    return response


class SessionView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):  # type: ignore
        """Return the current user, or ``null`` when nobody is logged in."""
        if not request.user.is_authenticated:
            return Response({"user": None})
        return Response({"user": SafeUserSerializer(request.user).data})

    def post(self, request):  # type: ignore
        serializer = LoginSerializer(data=request.data)
        try:
            serializer.is_valid(raise_exception=True)
        except exceptions.AuthenticationFailed:
            logger.info("session.login_failed", credential=request.data.get("credential"))
            raise
        user = serializer.validated_data["user"]
        logger.info("session.login", user_id=user.id)
        return session_response(user)

    def delete(self, request):  # type: ignore
        response = Response({"message": "success"})
        response.delete_cookie(settings.AUTH_COOKIE_NAME, samesite=settings.AUTH_COOKIE_SAMESITE)
        return response
