from __future__ import annotations

import logging

from ..api.client import BackendClient
from ..common.validators import require_non_empty
from ..core.constants import MSG_FORBIDDEN, MSG_GEO_UNSUPPORTED
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, GeolocationUnsupportedError
from ..session.model import Credential
from .location import LocationProvider

logger = logging.getLogger(__name__)


class AttendanceSubmitter:
    """Use case: student check-in with the device's current position."""

    def __init__(self, backend: BackendClient):
        self._backend = backend

    def mark_attendance(self, credential: Credential, course: str, locator: LocationProvider) -> str:
        if credential is None or credential.role != Role.STUDENT:
            raise AuthorizationError(MSG_FORBIDDEN)
        course = require_non_empty(course, "Curso")

        if not locator.is_supported():
            raise GeolocationUnsupportedError(MSG_GEO_UNSUPPORTED)
        position = locator.current_position()

        logger.info("submitting attendance course=%s", course)
        return self._backend.mark_attendance(
            credential,
            course=course,
            latitude=position.latitude,
            longitude=position.longitude,
        )
