from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from ..common.datetime_utils import format_time
from ..core.constants import (
    CATEGORY_TITLES,
    CHART_COLORS,
    CHART_DATASET_LABEL,
    CHART_LABELS,
    CHART_TITLE,
    MSG_INVALID_RESPONSE,
    REPORT_CATEGORIES,
)
from ..core.enums import AttendanceStatus
from ..core.exceptions import BackendError


@dataclass(frozen=True)
class AttendanceRecord:
    """One student's check-in outcome as returned by the backend."""

    student_code: str
    first_name: str = ""
    paternal_surname: str = ""
    maternal_surname: str = ""
    status: Optional[AttendanceStatus] = None
    timestamp: Optional[str] = None
    attendance_id: Optional[Union[int, str]] = None

    @property
    def surnames(self) -> str:
        return f"{self.paternal_surname} {self.maternal_surname}".strip()

    @property
    def time_label(self) -> str:
        return format_time(self.timestamp)

    @property
    def edit_key(self) -> str:
        """Stable key used by the edit links: the id when known, else the code."""
        if self.attendance_id is not None:
            return f"id:{self.attendance_id}"
        return f"code:{self.student_code}"

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "AttendanceRecord":
        if not isinstance(data, Mapping):
            raise BackendError(MSG_INVALID_RESPONSE)
        attendance_id = data.get("attendance_id")
        return cls(
            student_code=str(data.get("student_code") or ""),
            first_name=data.get("first_name") or "",
            paternal_surname=data.get("paternal_surname") or "",
            maternal_surname=data.get("maternal_surname") or "",
            status=AttendanceStatus.parse_optional(data.get("status")),
            timestamp=data.get("timestamp") or None,
            attendance_id=attendance_id if attendance_id not in (None, "") else None,
        )


@dataclass(frozen=True)
class ReportSection:
    category: str
    title: str
    records: tuple[AttendanceRecord, ...]

    @property
    def count(self) -> int:
        return len(self.records)


@dataclass(frozen=True)
class Report:
    """Attendance records of one queried scope, partitioned by status category."""

    on_time: tuple[AttendanceRecord, ...] = ()
    late: tuple[AttendanceRecord, ...] = ()
    outside_campus: tuple[AttendanceRecord, ...] = ()
    absent: tuple[AttendanceRecord, ...] = ()

    @classmethod
    def from_payload(cls, data: Any) -> "Report":
        if not isinstance(data, Mapping):
            raise BackendError(MSG_INVALID_RESPONSE)
        parts = {}
        for category in REPORT_CATEGORIES:
            items = data.get(category) or []
            if not isinstance(items, list):
                raise BackendError(MSG_INVALID_RESPONSE)
            parts[category] = tuple(AttendanceRecord.from_payload(item) for item in items)
        return cls(**parts)

    def records_for(self, category: str) -> tuple[AttendanceRecord, ...]:
        return getattr(self, category)

    def counts(self) -> tuple[int, ...]:
        return tuple(len(self.records_for(c)) for c in REPORT_CATEGORIES)

    def sections(self) -> list[ReportSection]:
        return [
            ReportSection(category=c, title=CATEGORY_TITLES[c], records=self.records_for(c))
            for c in REPORT_CATEGORIES
        ]

    def find(self, edit_key: str) -> Optional[AttendanceRecord]:
        for category in REPORT_CATEGORIES:
            for record in self.records_for(category):
                if record.edit_key == edit_key:
                    return record
        return None


@dataclass(frozen=True)
class ChartData:
    """Bar chart dataset derived only from the lengths of the report arrays."""

    values: tuple[int, ...]
    labels: tuple[str, ...] = CHART_LABELS
    colors: tuple[str, ...] = CHART_COLORS
    title: str = CHART_TITLE
    dataset_label: str = CHART_DATASET_LABEL

    @classmethod
    def from_report(cls, report: Report) -> "ChartData":
        return cls(values=report.counts())

    def to_chartjs(self) -> dict:
        return {
            "type": "bar",
            "data": {
                "labels": list(self.labels),
                "datasets": [
                    {
                        "label": self.dataset_label,
                        "data": list(self.values),
                        "backgroundColor": list(self.colors),
                        "borderRadius": 4,
                    }
                ],
            },
            "options": {
                "responsive": True,
                "maintainAspectRatio": False,
                "plugins": {
                    "legend": {"position": "top", "labels": {"font": {"size": 14}}},
                    "title": {"display": True, "text": self.title, "font": {"size": 16, "weight": "600"}},
                },
            },
        }
