from __future__ import annotations

from typing import Optional


class ClientError(Exception):
    """Base exception for every failure surfaced to the user."""


class ValidationError(ClientError):
    """Raised when user input is rejected before contacting the backend."""


class AuthorizationError(ClientError):
    """Raised when the current credential does not allow an action."""


class BackendError(ClientError):
    """Base for failures coming from the remote backend."""


class BackendConnectionError(BackendError):
    """Transport failure or a response body that could not be read."""


class ApiError(BackendError):
    """Non-2xx response carrying an ``error`` message."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SessionExpiredError(ApiError):
    """The backend no longer recognises the session (HTTP 401)."""


class GeolocationError(ClientError):
    """Client-local geolocation failure; the backend is never contacted."""


class GeolocationUnsupportedError(GeolocationError):
    pass


class LocationUnavailableError(GeolocationError):
    pass
