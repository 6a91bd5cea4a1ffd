"""Serializers for the booking domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.spots.serializers import SpotSummarySerializer
from apps.users.serializers import UserSummarySerializer

from .models import Booking

START_DATE_MESSAGE = "Please provide a valid start date."
END_DATE_MESSAGE = "Please provide a valid end date."


def _date_errors(message: str) -> dict[str, str]:
    return {key: message for key in ("required", "null", "invalid", "datetime")}


class BookingDatesSerializer(serializers.Serializer):
    """Validates ``startDate``/``endDate`` before any availability check."""

    startDate = serializers.DateField(error_messages=_date_errors(START_DATE_MESSAGE))
    endDate = serializers.DateField(error_messages=_date_errors(END_DATE_MESSAGE))

    def validate(self, attrs):  # type: ignore
        if attrs["endDate"] < attrs["startDate"]:
            raise serializers.ValidationError({"endDate": "endDate cannot be before startDate"})
        return attrs


class BookingSerializer(serializers.ModelSerializer):
    """Full booking record."""

    spotId = serializers.IntegerField(source="spot_id", read_only=True)
    userId = serializers.IntegerField(source="user_id", read_only=True)
    startDate = serializers.DateField(source="start_date", read_only=True)
    endDate = serializers.DateField(source="end_date", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Booking
        fields = ["id", "spotId", "userId", "startDate", "endDate", "createdAt", "updatedAt"]
        read_only_fields = fields


class SpotOwnerBookingSerializer(BookingSerializer):
    """What the spot owner sees: the full record plus who booked."""

    User = UserSummarySerializer(source="user", read_only=True)

    class Meta(BookingSerializer.Meta):
        fields = ["User"] + BookingSerializer.Meta.fields
        read_only_fields = fields


class PublicBookingSerializer(serializers.ModelSerializer):
    """What everyone else sees: only which days are taken."""

    spotId = serializers.IntegerField(source="spot_id", read_only=True)
    startDate = serializers.DateField(source="start_date", read_only=True)
    endDate = serializers.DateField(source="end_date", read_only=True)

    class Meta:
        model = Booking
        fields = ["spotId", "startDate", "endDate"]
        read_only_fields = fields


class CurrentUserBookingSerializer(BookingSerializer):
    """The booker's own bookings, each with a summary of the spot."""

    Spot = SpotSummarySerializer(source="spot", read_only=True)

    class Meta(BookingSerializer.Meta):
        fields = ["id", "spotId", "Spot", "userId", "startDate", "endDate", "createdAt", "updatedAt"]
        read_only_fields = fields
