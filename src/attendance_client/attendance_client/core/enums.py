from __future__ import annotations

from enum import Enum
from typing import Optional

from .exceptions import ValidationError


class Role(str, Enum):
    """Role returned by the backend as ``user_type`` after login."""

    STUDENT = "student"
    TEACHER = "teacher"


class AttendanceStatus(str, Enum):
    """Status category of a check-in, exactly as the backend stores it."""

    ON_TIME = "on_time"
    LATE = "late"
    ABSENT = "absent"
    OUTSIDE_CAMPUS = "outside_campus"

    @classmethod
    def parse(cls, value: str) -> "AttendanceStatus":
        try:
            return cls((value or "").strip())
        except ValueError:
            raise ValidationError("Estado no válido") from None

    @classmethod
    def parse_optional(cls, value: Optional[str]) -> Optional["AttendanceStatus"]:
        if not value:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class ReportMode(str, Enum):
    """Scope of the teacher report view."""

    ALL = "all"
    TODAY = "today"
    FILTER = "filter"

    @property
    def auto_fetch(self) -> bool:
        return self in (ReportMode.ALL, ReportMode.TODAY)

    @classmethod
    def parse(cls, value: Optional[str], default: Optional["ReportMode"] = None) -> "ReportMode":
        try:
            return cls(value)
        except ValueError:
            return default or cls.ALL
