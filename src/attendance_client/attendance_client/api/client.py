from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from ..core.constants import (
    MSG_ATTENDANCE_FAILED,
    MSG_CONNECTION_ERROR,
    MSG_FORBIDDEN,
    MSG_INVALID_RESPONSE,
    MSG_LOGIN_FAILED,
    MSG_LOGOUT_FAILED,
    MSG_REPORT_FAILED,
    MSG_UNKNOWN_ROLE,
    MSG_UPDATE_FAILED,
)
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import (
    ApiError,
    AuthorizationError,
    BackendConnectionError,
    BackendError,
    SessionExpiredError,
)
from ..reports.model import AttendanceRecord, Report
from ..session.model import Credential

logger = logging.getLogger(__name__)


class BackendClient:
    """Single gateway to the remote attendance API.

    Every call is one best-effort request: no retry, and no timeout unless one
    is configured. Protected calls receive the caller's ``Credential`` and send
    its cookies explicitly; no cookie jar is shared between users.
    """

    def __init__(self, base_url: str, *, http: Any = None, timeout: Optional[float] = None):
        if not base_url:
            raise ValueError("base_url is required")
        self._base_url = base_url.rstrip("/")
        # ``requests`` module-level API: a fresh session per call.
        self._http = http or requests
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    def _call(
        self,
        method: str,
        path: str,
        *,
        default_error: str,
        credential: Optional[Credential] = None,
        payload: Optional[dict] = None,
        params: Optional[dict] = None,
    ):
        url = f"{self._base_url}{path}"
        logger.debug("backend %s %s params=%s", method, path, params)
        try:
            response = self._http.request(
                method,
                url,
                json=payload,
                params=params,
                cookies=dict(credential.cookies) if credential else None,
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.warning("backend %s %s failed: %s", method, path, e)
            raise BackendConnectionError(MSG_CONNECTION_ERROR) from e

        try:
            data = response.json()
        except ValueError as e:
            logger.warning("backend %s %s returned a non-JSON body (status=%s)", method, path, response.status_code)
            raise BackendConnectionError(MSG_CONNECTION_ERROR) from e

        if not response.ok:
            message = (data.get("error") if isinstance(data, dict) else None) or default_error
            logger.info("backend %s %s rejected (status=%s): %s", method, path, response.status_code, message)
            if response.status_code == 401:
                raise SessionExpiredError(message, response.status_code)
            raise ApiError(message, response.status_code)

        if not isinstance(data, dict):
            raise BackendError(MSG_INVALID_RESPONSE)
        return data, response

    def login(self, email: str, password: str) -> Credential:
        data, response = self._call(
            "POST",
            "/login",
            payload={"email": email, "password": password},
            default_error=MSG_LOGIN_FAILED,
        )
        try:
            role = Role(data.get("user_type"))
        except ValueError:
            raise ApiError(MSG_UNKNOWN_ROLE, response.status_code) from None
        return Credential(role=role, cookies=dict(response.cookies or {}))

    def logout(self, credential: Credential) -> str:
        data, _ = self._call("POST", "/logout", credential=credential, default_error=MSG_LOGOUT_FAILED)
        return data.get("message") or ""

    def mark_attendance(self, credential: Credential, *, course: str, latitude: float, longitude: float) -> str:
        data, _ = self._call(
            "POST",
            "/attendance",
            credential=credential,
            payload={"course": course, "latitude": latitude, "longitude": longitude},
            default_error=MSG_ATTENDANCE_FAILED,
        )
        return data.get("message") or ""

    def get_report(self, credential: Credential, *, date: Optional[str] = None) -> Report:
        _require_teacher(credential)
        data, _ = self._call(
            "GET",
            "/admin/attendance",
            credential=credential,
            params={"date": date} if date else None,
            default_error=MSG_REPORT_FAILED,
        )
        return Report.from_payload(data)

    def update_status(self, credential: Credential, record: AttendanceRecord, new_status: AttendanceStatus) -> str:
        _require_teacher(credential)
        if record.attendance_id is not None:
            payload = {"attendance_id": record.attendance_id}
        else:
            # Backend resolves the current day's record for this code.
            payload = {"student_code": record.student_code}
        payload["new_status"] = AttendanceStatus(new_status).value
        data, _ = self._call(
            "POST",
            "/admin/update_status",
            credential=credential,
            payload=payload,
            default_error=MSG_UPDATE_FAILED,
        )
        return data.get("message") or ""


def _require_teacher(credential: Credential) -> None:
    if credential is None or credential.role != Role.TEACHER:
        raise AuthorizationError(MSG_FORBIDDEN)
