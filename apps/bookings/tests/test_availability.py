"""Tests for the booking availability checker and booking services."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from itertools import product
from unittest import mock

import pytest
from django.db import transaction

from apps.bookings import services
from apps.bookings.models import Booking
from apps.bookings.services import (
    BOOKING_CONFLICT_MESSAGE,
    BookingAvailabilityChecker,
    BookingConflictError,
    create_booking,
    reschedule_booking,
)
from apps.spots.models import Spot
from apps.users.models import User
from shared.domain.value_objects import DateRange

pytestmark = pytest.mark.django_db


@pytest.fixture
def host() -> User:
    return User.objects.create_user(username="host", email="host@user.io", password="password")


@pytest.fixture
def guest() -> User:
    return User.objects.create_user(username="guest", email="guest@user.io", password="password")


def _spot(owner: User, name: str) -> Spot:
    return Spot.objects.create(
        owner=owner,
        address="1 Main St",
        city="Springfield",
        state="Oregon",
        country="USA",
        lat=Decimal("44.0462"),
        lng=Decimal("-123.0220"),
        name=name,
        description="A place",
        price=Decimal("80.00"),
    )


@pytest.fixture
def spot(host: User) -> Spot:
    return _spot(host, "Lake house")


@pytest.fixture
def booked(spot: Spot, guest: User) -> Booking:
    return Booking.objects.create(
        spot=spot, user=guest, start_date=date(2024, 10, 1), end_date=date(2024, 10, 5)
    )


def test_touching_end_day_conflicts(spot, booked):
    checker = BookingAvailabilityChecker()

    conflict = checker.find_conflict(spot.id, date(2024, 10, 5), date(2024, 10, 8))

    assert conflict == booked


def test_touching_start_day_conflicts(spot, booked):
    assert not BookingAvailabilityChecker().is_available(spot.id, date(2024, 9, 28), date(2024, 10, 1))


def test_day_after_is_free(spot, booked):
    assert BookingAvailabilityChecker().is_available(spot.id, date(2024, 10, 6), date(2024, 10, 8))


def test_contained_range_conflicts(spot, guest):
    Booking.objects.create(spot=spot, user=guest, start_date=date(2024, 10, 1), end_date=date(2024, 10, 10))

    assert not BookingAvailabilityChecker().is_available(spot.id, date(2024, 10, 3), date(2024, 10, 5))


def test_enclosing_range_conflicts(spot, booked):
    assert not BookingAvailabilityChecker().is_available(spot.id, date(2024, 9, 1), date(2024, 11, 1))


def test_excluded_booking_does_not_conflict_with_itself(spot, booked):
    checker = BookingAvailabilityChecker()

    assert checker.is_available(
        spot.id, date(2024, 10, 1), date(2024, 10, 5), exclude_booking_id=booked.id
    )


def test_other_spots_are_not_considered(host, spot, booked):
    other = _spot(host, "Cabin")

    assert BookingAvailabilityChecker().is_available(other.id, date(2024, 10, 1), date(2024, 10, 5))


def test_end_before_start_is_a_value_error(spot):
    with pytest.raises(ValueError):
        BookingAvailabilityChecker().find_conflict(spot.id, date(2024, 10, 5), date(2024, 10, 1))


def test_injected_queryset_limits_what_is_checked(spot, booked):
    checker = BookingAvailabilityChecker(Booking.objects.exclude(user=booked.user))

    assert checker.is_available(spot.id, date(2024, 10, 1), date(2024, 10, 5))


def test_ensure_available_raises_with_conflicting_booking(spot, booked):
    with pytest.raises(BookingConflictError) as excinfo:
        BookingAvailabilityChecker().ensure_available(spot.id, date(2024, 10, 4), date(2024, 10, 4))

    assert excinfo.value.conflicting == booked
    assert str(excinfo.value) == BOOKING_CONFLICT_MESSAGE


def test_checker_agrees_with_date_range_overlap(spot, booked):
    checker = BookingAvailabilityChecker()
    existing = booked.date_range
    days = [date(2024, 9, 29) + timedelta(days=offset) for offset in range(10)]

    for start, end in product(days, days):
        if end < start:
            continue
        expected = not existing.overlaps_with(DateRange(start, end))
        assert checker.is_available(spot.id, start, end) is expected, (start, end)


def test_create_booking_persists_when_free(spot, guest, booked):
    booking = create_booking(spot=spot, user=guest, start_date=date(2024, 10, 6), end_date=date(2024, 10, 6))

    assert booking.pk is not None
    assert Booking.objects.filter(spot=spot).count() == 2


def test_create_booking_refuses_conflict(spot, host, booked):
    with pytest.raises(BookingConflictError):
        create_booking(spot=spot, user=host, start_date=date(2024, 10, 5), end_date=date(2024, 10, 9))

    assert Booking.objects.filter(spot=spot).count() == 1


def test_reschedule_overlapping_itself(booked):
    reschedule_booking(booked, start_date=date(2024, 10, 3), end_date=date(2024, 10, 7))

    booked.refresh_from_db()
    assert booked.date_range == DateRange(date(2024, 10, 3), date(2024, 10, 7))


def test_reschedule_refuses_conflict_and_keeps_dates(spot, guest, booked):
    other = Booking.objects.create(
        spot=spot, user=guest, start_date=date(2024, 10, 10), end_date=date(2024, 10, 12)
    )

    with pytest.raises(BookingConflictError):
        reschedule_booking(other, start_date=date(2024, 10, 5), end_date=date(2024, 10, 10))

    other.refresh_from_db()
    assert other.start_date == date(2024, 10, 10)


def _record_locks(calls: list):
    def lock(queryset):
        calls.append((queryset.model, len(transaction.get_connection().atomic_blocks)))
        return queryset

    return lock


def test_create_booking_locks_spot_and_bookings_in_one_transaction(spot, guest):
    calls: list = []
    outer_depth = len(transaction.get_connection().atomic_blocks)

    with mock.patch.object(services, "_lock_queryset_if_possible", side_effect=_record_locks(calls)):
        create_booking(spot=spot, user=guest, start_date=date(2024, 11, 1), end_date=date(2024, 11, 2))

    assert [model for model, _ in calls] == [Spot, Booking]
    assert {depth for _, depth in calls} == {outer_depth + 1}


def test_reschedule_booking_locks_spot_and_bookings_in_one_transaction(spot, booked):
    calls: list = []
    outer_depth = len(transaction.get_connection().atomic_blocks)

    with mock.patch.object(services, "_lock_queryset_if_possible", side_effect=_record_locks(calls)):
        reschedule_booking(booked, start_date=date(2024, 10, 2), end_date=date(2024, 10, 6))

    assert [model for model, _ in calls] == [Spot, Booking]
    assert {depth for _, depth in calls} == {outer_depth + 1}
