from __future__ import annotations

import itertools
import logging
import threading
from dataclasses import dataclass, replace
from typing import Optional

from ..core.enums import AttendanceStatus, ReportMode
from ..core.exceptions import ClientError, SessionExpiredError
from ..session.model import Credential
from .model import AttendanceRecord, ChartData, Report
from .service import ReportService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditDraft:
    record: AttendanceRecord
    status: AttendanceStatus


@dataclass(frozen=True)
class ViewerState:
    """Snapshot rendered by the report page."""

    mode: ReportMode = ReportMode.ALL
    date: str = ""
    report: Optional[Report] = None
    error: str = ""
    success: str = ""
    edit: Optional[EditDraft] = None

    @property
    def chart(self) -> Optional[ChartData]:
        return ReportService.chart_data(self.report) if self.report is not None else None


class ReportViewer:
    """State machine over the ``all`` / ``today`` / ``filter`` modes.

    ``all`` and ``today`` fetch on entry; ``filter`` waits for a date and an
    explicit trigger. Each fetch replaces the whole report. Results are
    accepted only for the latest issued ticket, so a slow stale response can
    never overwrite a newer one.

    Tickets are per instance. The web routes build one viewer per request and
    issue at most one fetch on it, so the guard only matters for a viewer
    shared by concurrent callers.
    """

    def __init__(self, reports: ReportService, credential: Credential, *, state: Optional[ViewerState] = None):
        self._reports = reports
        self._credential = credential
        self._state = state or ViewerState()
        self._tickets = itertools.count(1)
        self._latest = 0
        self._lock = threading.Lock()

    @property
    def state(self) -> ViewerState:
        return self._state

    def mount(self, *, trigger: bool = False) -> ViewerState:
        if self._state.mode.auto_fetch or trigger:
            self.refresh()
        return self._state

    def select_mode(self, mode: ReportMode) -> ViewerState:
        mode = ReportMode(mode)
        if mode == self._state.mode:
            return self._state
        self._state = replace(self._state, mode=mode, edit=None)
        if mode.auto_fetch:
            self.refresh()
        return self._state

    def set_date(self, value: str) -> ViewerState:
        self._state = replace(self._state, date=(value or "").strip())
        return self._state

    def apply_filter(self, value: Optional[str] = None) -> ViewerState:
        if value is not None:
            self.set_date(value)
        return self.refresh()

    def begin_fetch(self) -> int:
        with self._lock:
            ticket = next(self._tickets)
            self._latest = ticket
            self._state = replace(self._state, report=None, error="", success="")
        return ticket

    def complete_fetch(self, ticket: int, *, report: Optional[Report] = None, error: str = "") -> bool:
        with self._lock:
            if ticket != self._latest:
                logger.debug("discarding stale report response ticket=%s latest=%s", ticket, self._latest)
                return False
            self._state = replace(self._state, report=report, error=error)
        return True

    def refresh(self) -> ViewerState:
        ticket = self.begin_fetch()
        try:
            report = self._reports.fetch(self._credential, self._state.mode, self._state.date)
        except SessionExpiredError:
            raise
        except ClientError as e:
            self.complete_fetch(ticket, error=str(e))
        else:
            self.complete_fetch(ticket, report=report)
        return self._state

    def open_edit(self, record: AttendanceRecord) -> ViewerState:
        status = record.status or AttendanceStatus.ON_TIME
        self._state = replace(self._state, edit=EditDraft(record=record, status=status))
        return self._state

    def choose_status(self, value: str) -> ViewerState:
        if self._state.edit is None:
            return self._state
        try:
            status = AttendanceStatus.parse(value)
        except ClientError as e:
            self._state = replace(self._state, error=str(e))
            return self._state
        self._state = replace(self._state, edit=replace(self._state.edit, status=status))
        return self._state

    def cancel_edit(self) -> ViewerState:
        self._state = replace(self._state, edit=None)
        return self._state

    def save_edit(self, *, reload: bool = True) -> ViewerState:
        """Send the draft status. With ``reload=False`` the caller re-reads the report itself."""
        draft = self._state.edit
        if draft is None:
            return self._state

        self._state = replace(self._state, error="", success="")
        try:
            message = self._reports.update_status(self._credential, draft.record, draft.status)
        except SessionExpiredError:
            raise
        except ClientError as e:
            self._state = replace(self._state, error=str(e))
            return self._state

        # Re-read after write: no local patch of the edited record.
        self._state = replace(self._state, edit=None)
        if reload:
            self.refresh()
        self._state = replace(self._state, success=message)
        return self._state
