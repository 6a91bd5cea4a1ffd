"""URL routing for the session resource (namespace: session)."""

from __future__ import annotations

from django.urls import path  # type: ignore
from rest_framework_simplejwt.views import TokenRefreshView  # type: ignore

from .auth_views import SessionView

app_name = "session"

urlpatterns = [
    path("", SessionView.as_view(), name="session"),
    path("token/refresh/", TokenRefreshView.as_view(), name="token-refresh"),
]
