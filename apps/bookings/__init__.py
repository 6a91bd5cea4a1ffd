"""Bookings app package.

Bookings reserve a spot for an inclusive range of days. All writes go
through :mod:`apps.bookings.services`, which checks availability and
stores the booking in a single transaction.
"""
