from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol

from ..common.validators import require_float_in_range
from ..core.constants import MSG_GEO_UNAVAILABLE
from ..core.exceptions import LocationUnavailableError, ValidationError


@dataclass(frozen=True)
class Position:
    latitude: float
    longitude: float


class LocationProvider(Protocol):
    """Source of a single position fix (one-shot, never a continuous watch)."""

    def is_supported(self) -> bool:
        raise NotImplementedError

    def current_position(self) -> Position:
        raise NotImplementedError


class FormLocationProvider:
    """Position fix acquired by the browser and posted with the check-in form.

    The page calls ``navigator.geolocation.getCurrentPosition`` once and fills
    ``geo_supported``, ``latitude``/``longitude`` or ``geo_error`` before
    submitting.
    """

    def __init__(self, form: Mapping[str, str]):
        self._form = form

    def is_supported(self) -> bool:
        return self._form.get("geo_supported") == "1"

    def current_position(self) -> Position:
        if self._form.get("geo_error"):
            raise LocationUnavailableError(MSG_GEO_UNAVAILABLE)
        try:
            latitude = require_float_in_range(self._form.get("latitude"), "Latitud", -90.0, 90.0)
            longitude = require_float_in_range(self._form.get("longitude"), "Longitud", -180.0, 180.0)
        except ValidationError:
            raise LocationUnavailableError(MSG_GEO_UNAVAILABLE) from None
        return Position(latitude=latitude, longitude=longitude)
