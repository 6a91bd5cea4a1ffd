"""Booking domain models for SpotBnB."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.value_objects import DateRange


class Booking(models.Model):
    """A reservation of a spot for an inclusive range of days."""

    spot = models.ForeignKey(
        "spots.Spot",
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    start_date = models.DateField()
    end_date = models.DateField(help_text=_("Last booked day, inclusive."))
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["start_date", "id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_date__gte=models.F("start_date")),
                name="booking_end_on_or_after_start",
            ),
        ]
        indexes = [
            models.Index(fields=["spot", "start_date", "end_date"], name="booking_spot_dates_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.pk} spot={self.spot_id} {self.date_range}"

    @property
    def date_range(self) -> DateRange:
        return DateRange(self.start_date, self.end_date)
