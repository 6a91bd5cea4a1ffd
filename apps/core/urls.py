"""URL routing for cross-cutting endpoints."""

from django.urls import path  # type: ignore

from .views import healthz

urlpatterns = [
    path("healthz/", healthz, name="healthz"),
]
