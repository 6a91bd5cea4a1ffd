"""User domain model for SpotBnB.

Users log in with either their username or their email (the
"credential"), so both are unique.
"""

from __future__ import annotations

from django.contrib.auth.models import AbstractUser, UserManager  # type: ignore
from django.db import models  # type: ignore
from django.db.models import Q  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class CustomUserManager(UserManager):
    """Manager that can resolve a login credential to a user."""

    use_in_migrations = True

    def get_by_credential(self, credential: str):
        """Return the user whose username or email matches ``credential``."""
        credential = (credential or "").strip()
        if not credential:
            return None
        return self.filter(Q(username=credential) | Q(email__iexact=credential)).first()


class CustomUser(AbstractUser):
    """Marketplace user: guest on other people's spots, owner of their own."""

    email = models.EmailField(_("email address"), unique=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CustomUserManager()

    REQUIRED_FIELDS = ["email", "first_name", "last_name"]

    class Meta:
        verbose_name = _("user")
        verbose_name_plural = _("users")
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.username} <{self.email}>"


User = CustomUser
