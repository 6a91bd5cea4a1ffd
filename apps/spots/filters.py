"""FilterSet for the public spot listing."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Spot


def _decimal(message: str, **kwargs) -> django_filters.NumberFilter:
    return django_filters.NumberFilter(error_messages={"invalid": message, "min_value": message}, **kwargs)


class SpotFilterSet(django_filters.FilterSet):
    """Bounding box and price range filters using camelCase query params."""

    minLat = _decimal("Minimum latitude is invalid", field_name="lat", lookup_expr="gte")
    maxLat = _decimal("Maximum latitude is invalid", field_name="lat", lookup_expr="lte")
    minLng = _decimal("Minimum longitude is invalid", field_name="lng", lookup_expr="gte")
    maxLng = _decimal("Maximum longitude is invalid", field_name="lng", lookup_expr="lte")
    minPrice = _decimal(
        "Minimum price must be greater than or equal to 0",
        field_name="price",
        lookup_expr="gte",
        min_value=0,
    )
    maxPrice = _decimal(
        "Maximum price must be greater than or equal to 0",
        field_name="price",
        lookup_expr="lte",
        min_value=0,
    )

    class Meta:
        model = Spot
        fields: list[str] = []
