"""Spot domain models for SpotBnB."""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Spot(models.Model):
    """A listing that guests can book for whole days."""

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="spots",
    )
    address = models.CharField(max_length=255)
    city = models.CharField(max_length=100)
    state = models.CharField(max_length=50)
    country = models.CharField(max_length=50)
    lat = models.DecimalField(
        max_digits=10,
        decimal_places=7,
        validators=[MinValueValidator(Decimal("-90")), MaxValueValidator(Decimal("90"))],
    )
    lng = models.DecimalField(
        max_digits=10,
        decimal_places=7,
        validators=[MinValueValidator(Decimal("-180")), MaxValueValidator(Decimal("180"))],
    )
    name = models.CharField(max_length=50)
    description = models.CharField(max_length=1000)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        help_text=_("Price per day."),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Spot")
        verbose_name_plural = _("Spots")
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="spot_price_positive",
            ),
        ]
        indexes = [
            models.Index(fields=["lat", "lng"], name="spot_lat_lng_idx"),
            models.Index(fields=["price"], name="spot_price_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.city}, {self.country})"

    def is_owned_by(self, user) -> bool:
        return bool(user and user.is_authenticated and self.owner_id == user.id)


class SpotImage(models.Model):
    """Image attached to a spot; ``preview`` images represent the spot in lists."""

    spot = models.ForeignKey(Spot, on_delete=models.CASCADE, related_name="images")
    url = models.URLField(max_length=500)
    preview = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Spot image")
        verbose_name_plural = _("Spot images")
        ordering = ["id"]
        indexes = [
            models.Index(fields=["spot", "preview"], name="spotimage_spot_preview_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.spot_id}: {self.url}"
