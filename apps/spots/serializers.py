"""Serializers for spots and spot images."""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers  # type: ignore

from apps.users.serializers import UserSummarySerializer

from .models import Spot, SpotImage


def _required(message: str) -> dict[str, str]:
    return {"required": message, "blank": message, "null": message}


def _rounded(value: float | None) -> float | None:
    if value is None:
        return None
    return round(float(value), 1)


class SpotSerializer(serializers.ModelSerializer):
    """Create, update and plain representation of a spot."""

    ownerId = serializers.IntegerField(source="owner_id", read_only=True)
    address = serializers.CharField(max_length=255, error_messages=_required("Street address is required"))
    city = serializers.CharField(max_length=100, error_messages=_required("City is required"))
    state = serializers.CharField(max_length=50, error_messages=_required("State is required"))
    country = serializers.CharField(max_length=50, error_messages=_required("Country is required"))
    lat = serializers.FloatField(
        min_value=-90,
        max_value=90,
        error_messages={
            key: "Latitude must be within -90 and 90"
            for key in ("required", "null", "invalid", "min_value", "max_value")
        },
    )
    lng = serializers.FloatField(
        min_value=-180,
        max_value=180,
        error_messages={
            key: "Longitude must be within -180 and 180"
            for key in ("required", "null", "invalid", "min_value", "max_value")
        },
    )
    name = serializers.CharField(
        max_length=50,
        error_messages={**_required("Name is required"), "max_length": "Name must be less than 50 characters"},
    )
    description = serializers.CharField(max_length=1000, error_messages=_required("Description is required"))
    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        coerce_to_string=False,
        error_messages={
            key: "Price per day must be a positive number"
            for key in ("required", "null", "invalid", "max_digits", "max_decimal_places", "max_whole_digits")
        },
    )
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Spot
        fields = [
            "id",
            "ownerId",
            "address",
            "city",
            "state",
            "country",
            "lat",
            "lng",
            "name",
            "description",
            "price",
            "createdAt",
            "updatedAt",
        ]

    def validate_price(self, value: Decimal) -> Decimal:
        if value <= 0:
            raise serializers.ValidationError("Price per day must be a positive number")
        return value


class SpotListSerializer(SpotSerializer):
    """List row: adds the rounded average rating and preview image URL."""

    avgRating = serializers.SerializerMethodField()
    previewImage = serializers.SerializerMethodField()

    class Meta(SpotSerializer.Meta):
        fields = SpotSerializer.Meta.fields + ["avgRating", "previewImage"]

    def get_avgRating(self, obj: Spot) -> float | None:
        return _rounded(getattr(obj, "avg_rating", None))

    def get_previewImage(self, obj: Spot) -> str | None:
        return getattr(obj, "preview_image", None)


class SpotImageSerializer(serializers.ModelSerializer):
    url = serializers.URLField(
        max_length=500,
        error_messages={**_required("Image url is required"), "invalid": "Image url must be a valid URL"},
    )
    preview = serializers.BooleanField(required=False, default=False)

    class Meta:
        model = SpotImage
        fields = ["id", "url", "preview"]


class SpotDetailSerializer(SpotSerializer):
    """Single spot with review aggregates, images and owner."""

    numReviews = serializers.SerializerMethodField()
    avgStarRating = serializers.SerializerMethodField()
    SpotImages = SpotImageSerializer(source="images", many=True, read_only=True)
    Owner = UserSummarySerializer(source="owner", read_only=True)

    class Meta(SpotSerializer.Meta):
        fields = SpotSerializer.Meta.fields + ["numReviews", "avgStarRating", "SpotImages", "Owner"]

    def get_numReviews(self, obj: Spot) -> int:
        return getattr(obj, "num_reviews", 0) or 0

    def get_avgStarRating(self, obj: Spot) -> float | None:
        return _rounded(getattr(obj, "avg_rating", None))


class SpotSummarySerializer(serializers.ModelSerializer):
    """Spot block embedded in booking and review payloads.

    ``previewImage`` is read from a ``preview_image`` annotation; see
    :func:`apps.spots.selectors.with_preview_image`.
    """

    ownerId = serializers.IntegerField(source="owner_id", read_only=True)
    lat = serializers.FloatField(read_only=True)
    lng = serializers.FloatField(read_only=True)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, coerce_to_string=False, read_only=True)
    previewImage = serializers.SerializerMethodField()

    class Meta:
        model = Spot
        fields = [
            "id",
            "ownerId",
            "address",
            "city",
            "state",
            "country",
            "lat",
            "lng",
            "name",
            "price",
            "previewImage",
        ]
        read_only_fields = fields

    def get_previewImage(self, obj: Spot) -> str | None:
        return getattr(obj, "preview_image", None)
