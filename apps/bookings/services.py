"""Domain services for booking workflows.

Both ends of a booking are inclusive, so two bookings of the same spot
conflict when ``existing.start_date <= end and start <= existing.end_date``.
Ranges that merely touch on a boundary day conflict too.

Writes go through :func:`create_booking` and :func:`reschedule_booking`,
which lock the spot row and run the availability check and the write in
one transaction.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import structlog
from django.db import transaction  # type: ignore
from django.db.models import Q, QuerySet  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore

from shared.domain.value_objects import DateRange

from .models import Booking

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from apps.spots.models import Spot

logger = structlog.get_logger(__name__)

BOOKING_CONFLICT_MESSAGE = "Spot is already booked for the specified dates."


class BookingConflictError(Exception):
    """Raised when a spot is already booked for some of the requested days."""

    def __init__(self, conflicting: Booking, message: str = BOOKING_CONFLICT_MESSAGE) -> None:
        super().__init__(message)
        self.conflicting = conflicting


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


def overlap_filter(start_date: date, end_date: date) -> Q:
    return Q(start_date__lte=end_date) & Q(end_date__gte=start_date)


class BookingAvailabilityChecker:
    """Answers whether a spot is free for an inclusive range of days.

    The bookings queryset is injected; by default every stored booking is
    considered. A database failure propagates to the caller unchanged.
    """

    def __init__(self, bookings: QuerySet | None = None) -> None:
        self._bookings = bookings

    @property
    def bookings(self) -> QuerySet:
        if self._bookings is None:
            return Booking.objects.all()
        return self._bookings

    def find_conflict(
        self,
        spot_id: int,
        start_date: date,
        end_date: date,
        *,
        exclude_booking_id: int | None = None,
    ) -> Booking | None:
        """Return the earliest booking that overlaps the range, if any.

        Raises ``ValueError`` when ``end_date`` is before ``start_date``.
        """

        requested = DateRange(start_date, end_date)
        queryset = self.bookings.filter(spot_id=spot_id).filter(
            overlap_filter(requested.start_date, requested.end_date)
        )
        if exclude_booking_id is not None:
            queryset = queryset.exclude(pk=exclude_booking_id)
        queryset = _lock_queryset_if_possible(queryset)
        return queryset.order_by("start_date", "id").first()

    def is_available(
        self,
        spot_id: int,
        start_date: date,
        end_date: date,
        *,
        exclude_booking_id: int | None = None,
    ) -> bool:
        conflict = self.find_conflict(
            spot_id,
            start_date,
            end_date,
            exclude_booking_id=exclude_booking_id,
        )
        return conflict is None

    def ensure_available(
        self,
        spot_id: int,
        start_date: date,
        end_date: date,
        *,
        exclude_booking_id: int | None = None,
    ) -> None:
        conflict = self.find_conflict(
            spot_id,
            start_date,
            end_date,
            exclude_booking_id=exclude_booking_id,
        )
        if conflict is not None:
            logger.info(
                "booking.conflict",
                spot_id=spot_id,
                start_date=start_date.isoformat(),
                end_date=end_date.isoformat(),
                conflicting_booking_id=conflict.pk,
                excluded_booking_id=exclude_booking_id,
            )
            raise BookingConflictError(conflict)


def _lock_spot(spot_id: int) -> "Spot":
    """Serialise writers for one spot; raises ``Spot.DoesNotExist`` if it is gone."""

    from apps.spots.models import Spot  # Local import to prevent circular dependency

    return _lock_queryset_if_possible(Spot.objects.filter(pk=spot_id)).get()


def create_booking(
    *,
    spot: "Spot",
    user,
    start_date: date,
    end_date: date,
    checker: BookingAvailabilityChecker | None = None,
) -> Booking:
    """Book ``spot`` for ``user`` if no existing booking overlaps the range."""

    checker = checker or BookingAvailabilityChecker()
    with transaction.atomic():
        _lock_spot(spot.pk)
        checker.ensure_available(spot.pk, start_date, end_date)
        booking = Booking.objects.create(
            spot=spot,
            user=user,
            start_date=start_date,
            end_date=end_date,
        )
    logger.info(
        "booking.created",
        booking_id=booking.pk,
        spot_id=spot.pk,
        user_id=user.pk,
        start_date=start_date.isoformat(),
        end_date=end_date.isoformat(),
    )
    return booking


def reschedule_booking(
    booking: Booking,
    *,
    start_date: date,
    end_date: date,
    checker: BookingAvailabilityChecker | None = None,
) -> Booking:
    """Move ``booking`` to new dates; the booking never conflicts with itself."""

    checker = checker or BookingAvailabilityChecker()
    with transaction.atomic():
        _lock_spot(booking.spot_id)
        checker.ensure_available(
            booking.spot_id,
            start_date,
            end_date,
            exclude_booking_id=booking.pk,
        )
        booking.start_date = start_date
        booking.end_date = end_date
        booking.save(update_fields=["start_date", "end_date", "updated_at"])
    logger.info(
        "booking.rescheduled",
        booking_id=booking.pk,
        spot_id=booking.spot_id,
        start_date=start_date.isoformat(),
        end_date=end_date.isoformat(),
    )
    return booking


def cancel_booking(booking: Booking, *, actor) -> None:
    booking_id = booking.pk
    booking.delete()
    logger.info("booking.deleted", booking_id=booking_id, actor_id=actor.pk)
