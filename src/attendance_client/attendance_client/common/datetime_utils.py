from __future__ import annotations

from datetime import date, datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Optional

from ..core.constants import MSG_INVALID_DATE, NO_TIME_LABEL
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(MSG_INVALID_DATE) from None


def today_utc() -> str:
    """Current UTC date as YYYY-MM-DD.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now(timezone.utc).date().isoformat()


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Accept ISO-8601 and RFC 1123 (Flask ``jsonify``) timestamps."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        pass
    try:
        return parsedate_to_datetime(str(value))
    except (TypeError, ValueError):
        return None


def format_time(value: Optional[str]) -> str:
    if not value:
        return NO_TIME_LABEL
    parsed = parse_timestamp(value)
    if parsed is None:
        return str(value)
    return parsed.strftime("%H:%M:%S")
