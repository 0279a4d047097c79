from __future__ import annotations

from typing import Callable, Optional

from ..api.client import BackendClient
from ..common.datetime_utils import parse_iso_date, today_utc
from ..core.constants import CATEGORY_TITLES, MODE_TITLES, MSG_SELECT_DATE, REPORT_CATEGORIES
from ..core.enums import AttendanceStatus, ReportMode
from ..core.exceptions import ValidationError
from ..session.model import Credential
from .model import AttendanceRecord, ChartData, Report


class ReportService:
    """Use case: read and correct attendance reports (teacher only)."""

    def __init__(self, backend: BackendClient, *, today: Callable[[], str] = today_utc):
        self._backend = backend
        self._today = today

    def query_date(self, mode: ReportMode, date: str = "") -> Optional[str]:
        """Resolve the ``date`` query parameter for a mode; ``None`` means all time."""
        mode = ReportMode(mode)
        if mode == ReportMode.ALL:
            return None
        if mode == ReportMode.TODAY:
            return self._today()
        if not date:
            raise ValidationError(MSG_SELECT_DATE)
        return parse_iso_date(date).isoformat()

    def fetch(self, credential: Credential, mode: ReportMode, date: str = "") -> Report:
        return self._backend.get_report(credential, date=self.query_date(mode, date))

    def update_status(self, credential: Credential, record: AttendanceRecord, new_status: AttendanceStatus) -> str:
        return self._backend.update_status(credential, record, new_status)

    @staticmethod
    def chart_data(report: Report) -> ChartData:
        return ChartData.from_report(report)

    @staticmethod
    def heading(mode: ReportMode, date: str = "") -> str:
        mode = ReportMode(mode)
        if mode == ReportMode.FILTER:
            return f"Reporte del {date}"
        return MODE_TITLES[mode.value]

    @staticmethod
    def export_rows(report: Report) -> list[dict]:
        rows: list[dict] = []
        for category in REPORT_CATEGORIES:
            for r in report.records_for(category):
                rows.append(
                    {
                        "category": category,
                        "category_title": CATEGORY_TITLES[category],
                        "student_code": r.student_code,
                        "first_name": r.first_name,
                        "paternal_surname": r.paternal_surname,
                        "maternal_surname": r.maternal_surname,
                        "status": r.status.value if r.status else "",
                        "time": r.time_label,
                        "attendance_id": "" if r.attendance_id is None else r.attendance_id,
                    }
                )
        return rows
