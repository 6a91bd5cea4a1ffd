"""Read-side helpers for spots.

Aggregates that list and detail payloads need (average stars, review count,
preview image URL) are attached here as annotations so serializers never walk
relations row by row.
"""

from __future__ import annotations

from django.db.models import Avg, Count, FloatField, OuterRef, Prefetch, QuerySet, Subquery  # type: ignore
from rest_framework.exceptions import NotFound  # type: ignore

from .models import Spot, SpotImage

SPOT_NOT_FOUND = "Spot couldn't be found"


def preview_image_subquery(spot_ref: str = "pk") -> Subquery:
    """URL of the first preview image of the spot referenced by ``spot_ref``."""

    images = SpotImage.objects.filter(spot_id=OuterRef(spot_ref), preview=True).order_by("id")
    return Subquery(images.values("url")[:1])


def with_preview_image(queryset: QuerySet, spot_ref: str = "pk") -> QuerySet:
    return queryset.annotate(preview_image=preview_image_subquery(spot_ref))


def with_rating_summary(queryset: QuerySet | None = None) -> QuerySet:
    """Annotate ``avg_rating``, ``num_reviews`` and ``preview_image`` on spots."""

    if queryset is None:
        queryset = Spot.objects.all()
    return queryset.annotate(
        avg_rating=Avg("reviews__stars", output_field=FloatField()),
        num_reviews=Count("reviews", distinct=True),
        preview_image=preview_image_subquery(),
    ).order_by("id")


def spot_detail_queryset() -> QuerySet:
    return with_rating_summary(Spot.objects.select_related("owner").prefetch_related("images"))


def get_spot_or_404(spot_id, queryset: QuerySet | None = None) -> Spot:
    """Fetch a spot or raise ``NotFound`` with the API's message."""

    if queryset is None:
        queryset = Spot.objects.all()
    try:
        return queryset.get(pk=spot_id)
    except (Spot.DoesNotExist, ValueError, TypeError):
        raise NotFound(SPOT_NOT_FOUND)


def prefetch_spot_summary(lookup: str = "spot") -> Prefetch:
    """Prefetch the related spot with its ``preview_image`` annotation."""

    return Prefetch(lookup, queryset=with_preview_image(Spot.objects.all()))
