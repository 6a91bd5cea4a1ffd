"""URL routing for the booking domain."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import BookingDetailView, CurrentBookingsView, SpotBookingsView

urlpatterns = [
    path("bookings/current/", CurrentBookingsView.as_view(), name="booking-current"),
    path("bookings/<int:pk>/", BookingDetailView.as_view(), name="booking-detail"),
    path("spots/<int:spot_id>/bookings/", SpotBookingsView.as_view(), name="spot-bookings"),
]
