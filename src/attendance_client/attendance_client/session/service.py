from __future__ import annotations

import logging

from ..api.client import BackendClient
from ..common.validators import require_non_empty
from ..core.constants import MSG_LOGIN_OK, MSG_SESSION_EXPIRED
from ..core.exceptions import ClientError, SessionExpiredError
from .model import Session, SessionResult

logger = logging.getLogger(__name__)


class SessionController:
    """Use case: own the login state and emit a new snapshot per transition.

    Failures never mutate state: the caller gets back the session it passed in
    together with a message for the user.
    """

    def __init__(self, backend: BackendClient):
        self._backend = backend

    def login(self, current: Session, email: str, password: str) -> SessionResult:
        try:
            email = require_non_empty(email, "Correo")
            password = require_non_empty(password, "Código")
            credential = self._backend.login(email, password)
        except ClientError as e:
            return SessionResult(session=current, message=str(e), ok=False)

        logger.info("login ok role=%s", credential.role.value)
        return SessionResult(session=Session.logged_in(credential), message=MSG_LOGIN_OK, ok=True)

    def logout(self, current: Session) -> SessionResult:
        if not current.is_logged_in:
            return SessionResult(session=Session.anonymous(), message="", ok=True)
        try:
            message = self._backend.logout(current.credential)
        except SessionExpiredError:
            # Already rejected by the backend: drop it locally too.
            return self.expire(current)
        except ClientError as e:
            return SessionResult(session=current, message=str(e), ok=False)

        logger.info("logout ok role=%s", current.role.value)
        return SessionResult(session=Session.anonymous(), message=message, ok=True)

    def expire(self, current: Session) -> SessionResult:
        """Drop the session after the backend rejected it."""
        if current.is_logged_in:
            logger.info("session expired role=%s", current.role.value)
        return SessionResult(session=Session.anonymous(), message=MSG_SESSION_EXPIRED, ok=True)
