"""URL routing for spots and spot images."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import SpotImageDestroyView, SpotViewSet

router = SimpleRouter()
router.register(r"spots", SpotViewSet, basename="spot")

urlpatterns = [
    path("", include(router.urls)),
    path("spot-images/<int:pk>/", SpotImageDestroyView.as_view(), name="spot-image-detail"),
]
