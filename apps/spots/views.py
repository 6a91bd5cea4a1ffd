"""Spot API views."""

from __future__ import annotations

import structlog
from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import generics, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.exceptions import NotFound  # type: ignore
from rest_framework.response import Response  # type: ignore

from .filters import SpotFilterSet
from .models import Spot, SpotImage
from .pagination import SpotPagination
from .selectors import get_spot_or_404, spot_detail_queryset, with_rating_summary
from .serializers import (
    SpotDetailSerializer,
    SpotImageSerializer,
    SpotListSerializer,
    SpotSerializer,
)

logger = structlog.get_logger(__name__)

SUCCESSFULLY_DELETED = {"message": "Successfully deleted"}


class IsSpotOwner(permissions.BasePermission):
    """Writes to a spot are limited to its owner."""

    message = "Forbidden"

    def has_object_permission(self, request, view, obj: Spot):  # type: ignore
        if request.method in permissions.SAFE_METHODS:
            return True
        return obj.is_owned_by(request.user)


class SpotViewSet(viewsets.ModelViewSet):
    """Browse, create and manage spots."""

    permission_classes = [permissions.IsAuthenticatedOrReadOnly, IsSpotOwner]
    filter_backends = [DjangoFilterBackend]
    filterset_class = SpotFilterSet
    pagination_class = SpotPagination
    lookup_value_regex = r"\d+"
    http_method_names = ["get", "post", "put", "delete", "head", "options"]

    def get_queryset(self):  # type: ignore
        if self.action == "list":
            return with_rating_summary(Spot.objects.all())
        return spot_detail_queryset()

    def get_serializer_class(self):  # type: ignore
        if self.action == "list":
            return SpotListSerializer
        if self.action == "retrieve":
            return SpotDetailSerializer
        if self.action == "images":
            return SpotImageSerializer
        return SpotSerializer

    def get_object(self):  # type: ignore
        spot = get_spot_or_404(self.kwargs[self.lookup_field], self.get_queryset())
        self.check_object_permissions(self.request, spot)
        return spot

    def perform_create(self, serializer):  # type: ignore
        spot = serializer.save(owner=self.request.user)
        logger.info("spot.created", spot_id=spot.id, owner_id=spot.owner_id)

    def destroy(self, request, *args, **kwargs):  # type: ignore
        spot = self.get_object()
        spot_id = spot.id
        spot.delete()
        logger.info("spot.deleted", spot_id=spot_id, owner_id=request.user.id)
        return Response(SUCCESSFULLY_DELETED, status=status.HTTP_200_OK)

    @action(detail=False, methods=["get"], permission_classes=[permissions.IsAuthenticated])
    def current(self, request):  # type: ignore
        """Spots owned by the logged-in user."""
        queryset = with_rating_summary(Spot.objects.filter(owner=request.user))
        serializer = SpotListSerializer(queryset, many=True, context=self.get_serializer_context())
        return Response({"Spots": serializer.data})

    @action(
        detail=True,
        methods=["post"],
        permission_classes=[permissions.IsAuthenticated, IsSpotOwner],
    )
    def images(self, request, pk=None):  # type: ignore
        spot = self.get_object()
        serializer = SpotImageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        image = serializer.save(spot=spot)
        logger.info("spot.image_added", spot_id=spot.id, image_id=image.id)
        return Response(serializer.data, status=status.HTTP_201_CREATED)


class SpotImageDestroyView(generics.DestroyAPIView):
    """Delete an image from a spot the user owns."""

    permission_classes = [permissions.IsAuthenticated]
    queryset = SpotImage.objects.select_related("spot")

    def get_object(self):  # type: ignore
        try:
            image = self.get_queryset().get(pk=self.kwargs["pk"])
        except SpotImage.DoesNotExist:
            raise NotFound("Spot Image couldn't be found")
        self.check_object_permissions(self.request, image.spot)
        return image

    def check_object_permissions(self, request, obj):  # type: ignore
        if not IsSpotOwner().has_object_permission(request, self, obj):
            self.permission_denied(request, message=IsSpotOwner.message)

    def destroy(self, request, *args, **kwargs):  # type: ignore
        image = self.get_object()
        logger.info("spot.image_deleted", spot_id=image.spot_id, image_id=image.id)
        image.delete()
        return Response(SUCCESSFULLY_DELETED, status=status.HTTP_200_OK)
