"""URL declarations for the users app (namespace: users)."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import CurrentUserView, SignupView

app_name = "users"

urlpatterns = [
    path("", SignupView.as_view(), name="signup"),
    path("current/", CurrentUserView.as_view(), name="current"),
]
