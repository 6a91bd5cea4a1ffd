"""API views for the booking domain."""

from __future__ import annotations

from rest_framework import exceptions, permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.spots.mixins import SpotNestedMixin
from apps.spots.models import Spot
from apps.spots.selectors import SPOT_NOT_FOUND, prefetch_spot_summary

from .models import Booking
from .serializers import (
    BookingDatesSerializer,
    BookingSerializer,
    CurrentUserBookingSerializer,
    PublicBookingSerializer,
    SpotOwnerBookingSerializer,
)
from .services import (
    BookingAvailabilityChecker,
    BookingConflictError,
    cancel_booking,
    create_booking,
    reschedule_booking,
)

BOOKING_NOT_FOUND = "Booking couldn't be found"


class AvailabilityCheckerMixin:
    """Supplies the availability checker; override the class to substitute it."""

    availability_checker_class = BookingAvailabilityChecker

    def get_availability_checker(self) -> BookingAvailabilityChecker:
        return self.availability_checker_class()

    def validated_dates(self, request):  # type: ignore
        serializer = BookingDatesSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return serializer.validated_data["startDate"], serializer.validated_data["endDate"]


class SpotBookingsView(SpotNestedMixin, AvailabilityCheckerMixin, APIView):
    """``/api/spots/<spot_id>/bookings/``: list a spot's bookings or book it."""

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request, spot_id):  # type: ignore
        spot = self.get_spot()
        bookings = Booking.objects.filter(spot=spot)
        if spot.is_owned_by(request.user):
            data = SpotOwnerBookingSerializer(bookings.select_related("user"), many=True).data
        else:
            data = PublicBookingSerializer(bookings, many=True).data
        return Response({"Bookings": data})

    def post(self, request, spot_id):  # type: ignore
        start_date, end_date = self.validated_dates(request)
        spot = self.get_spot()
        if spot.is_owned_by(request.user):
            raise exceptions.PermissionDenied("You cannot book your own spot.")
        try:
            booking = create_booking(
                spot=spot,
                user=request.user,
                start_date=start_date,
                end_date=end_date,
                checker=self.get_availability_checker(),
            )
        except BookingConflictError as exc:
            raise exceptions.PermissionDenied(str(exc))
        except Spot.DoesNotExist:
            raise exceptions.NotFound(SPOT_NOT_FOUND)
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)


class CurrentBookingsView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):  # type: ignore
        bookings = Booking.objects.filter(user=request.user).prefetch_related(prefetch_spot_summary())
        return Response({"Bookings": CurrentUserBookingSerializer(bookings, many=True).data})


class BookingDetailView(AvailabilityCheckerMixin, APIView):
    """``/api/bookings/<pk>/``: reschedule (booker) or delete (booker or host)."""

    permission_classes = [permissions.IsAuthenticated]

    def get_booking(self, pk) -> Booking:
        try:
            return Booking.objects.select_related("spot").get(pk=pk)
        except Booking.DoesNotExist:
            raise exceptions.NotFound(BOOKING_NOT_FOUND)

    def put(self, request, pk):  # type: ignore
        booking = self.get_booking(pk)
        if booking.user_id != request.user.id:
            raise exceptions.PermissionDenied("Forbidden")
        start_date, end_date = self.validated_dates(request)
        try:
            booking = reschedule_booking(
                booking,
                start_date=start_date,
                end_date=end_date,
                checker=self.get_availability_checker(),
            )
        except BookingConflictError as exc:
            raise exceptions.PermissionDenied(str(exc))
        except Spot.DoesNotExist:
            raise exceptions.NotFound(SPOT_NOT_FOUND)
        return Response(BookingSerializer(booking).data)

    def delete(self, request, pk):  # type: ignore
        booking = self.get_booking(pk)
        if request.user.id not in (booking.user_id, booking.spot.owner_id):
            raise exceptions.PermissionDenied("Forbidden")
        cancel_booking(booking, actor=request.user)
        return Response({"message": "Successfully deleted"})
