"""Mixins shared by views nested under ``/api/spots/<spot_id>/``."""

from __future__ import annotations

from .models import Spot
from .selectors import get_spot_or_404


class SpotNestedMixin:
    """Load the spot named in the URL on first use and cache it per request.

    A missing spot is a 404 with the API's message. Handlers that validate
    the request body call :meth:`get_spot` afterwards, so a malformed body
    is a 400 whether or not the spot exists.
    """

    spot_lookup_url_kwarg = "spot_id"
    _spot = None

    def get_spot(self) -> Spot:
        if self._spot is None:
            self._spot = get_spot_or_404(self.kwargs.get(self.spot_lookup_url_kwarg))
        return self._spot
