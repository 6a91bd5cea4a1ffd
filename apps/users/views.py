"""User API views: signup and the current user."""

from __future__ import annotations

import structlog
from rest_framework import permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from .auth_serializers import SignupSerializer
from .auth_views import session_response
from .serializers import SafeUserSerializer

logger = structlog.get_logger(__name__)


class SignupView(APIView):
    """Create an account and log it in straight away."""

    permission_classes = [permissions.AllowAny]

    def post(self, request):  # type: ignore
        serializer = SignupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info("user.signed_up", user_id=user.id)
        return session_response(user, status_code=status.HTTP_201_CREATED)


class CurrentUserView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):  # type: ignore
        return Response({"user": SafeUserSerializer(request.user).data})
