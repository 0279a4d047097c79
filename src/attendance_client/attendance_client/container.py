from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .api.client import BackendClient
from .attendance.service import AttendanceSubmitter
from .reports.service import ReportService
from .session.service import SessionController


@dataclass(frozen=True)
class Container:
    backend: BackendClient

    session_controller: SessionController
    attendance_submitter: AttendanceSubmitter
    report_service: ReportService


def build_container(*, backend_base_url: str, timeout: Optional[float] = None, http: Any = None) -> Container:
    backend = BackendClient(backend_base_url, http=http, timeout=timeout)

    session_controller = SessionController(backend)
    attendance_submitter = AttendanceSubmitter(backend)
    report_service = ReportService(backend)

    return Container(
        backend=backend,
        session_controller=session_controller,
        attendance_submitter=attendance_submitter,
        report_service=report_service,
    )
