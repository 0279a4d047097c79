from __future__ import annotations

import csv
import io
import logging

from flask import Flask, flash, redirect, render_template, request, url_for

from ..container import Container
from ..core.enums import AttendanceStatus, ReportMode, Role
from ..core.exceptions import ClientError, SessionExpiredError
from ..session.guards import role_required
from ..session.store import load_session
from .model import AttendanceRecord
from .viewer import ReportViewer, ViewerState

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _viewer(args) -> ReportViewer:
        state = ViewerState(
            mode=ReportMode.parse(args.get("tab")),
            date=(args.get("date") or "").strip(),
        )
        return ReportViewer(container.report_service, load_session().credential, state=state)

    def _record_from_form(form) -> AttendanceRecord:
        raw_id = (form.get("attendance_id") or "").strip()
        attendance_id = int(raw_id) if raw_id.isdigit() else (raw_id or None)
        return AttendanceRecord(
            student_code=(form.get("student_code") or "").strip(),
            status=AttendanceStatus.parse_optional(form.get("status")),
            attendance_id=attendance_id,
        )

    def _back_to_report(state: ViewerState, **extra):
        apply = "1" if state.mode == ReportMode.FILTER and state.date else None
        return redirect(
            url_for("admin_report", tab=state.mode.value, date=state.date or None, apply=apply, **extra)
        )

    def _render(viewer: ReportViewer):
        state = viewer.state
        return render_template(
            "admin/report.html",
            state=state,
            modes=list(ReportMode),
            statuses=list(AttendanceStatus),
            heading=container.report_service.heading(state.mode, state.date),
            chart=state.chart.to_chartjs() if state.chart else None,
            active_page="admin_report",
        )

    @app.route("/admin/attendance", methods=["GET"], endpoint="admin_report")
    @role_required(Role.TEACHER)
    def admin_report():
        viewer = _viewer(request.args)
        try:
            viewer.mount(trigger=request.args.get("apply") == "1")
        except SessionExpiredError:
            raise
        except Exception:
            logger.exception("unexpected error while loading the report")
            flash("Error del sistema al obtener reporte", "danger")

        edit_key = request.args.get("edit")
        if edit_key and viewer.state.report is not None:
            record = viewer.state.report.find(edit_key)
            if record is not None:
                viewer.open_edit(record)

        return _render(viewer)

    @app.route("/admin/update_status", methods=["POST"], endpoint="admin_update_status")
    @role_required(Role.TEACHER)
    def admin_update_status():
        """Save the edit modal, then redirect so the report page re-reads the active scope."""

        viewer = _viewer(request.form)
        record = _record_from_form(request.form)
        viewer.open_edit(record)
        try:
            viewer.choose_status(request.form.get("new_status", ""))
            if not viewer.state.error:
                viewer.save_edit(reload=False)
        except SessionExpiredError:
            raise
        except Exception:
            logger.exception("unexpected error while updating attendance status")
            flash("Error del sistema al actualizar", "danger")
            return _back_to_report(viewer.state, edit=record.edit_key)

        state = viewer.state
        if state.error:
            flash(state.error, "danger")
            return _back_to_report(state, edit=record.edit_key)
        if state.success:
            flash(state.success, "success")
        return _back_to_report(state)

    @app.route("/admin/attendance.csv", methods=["GET"], endpoint="admin_report_csv")
    @role_required(Role.TEACHER)
    def admin_report_csv():
        mode = ReportMode.parse(request.args.get("tab"))
        date = (request.args.get("date") or "").strip()
        try:
            report = container.report_service.fetch(load_session().credential, mode, date)
        except SessionExpiredError:
            raise
        except ClientError as e:
            flash(str(e), "danger")
            return redirect(url_for("admin_report", tab=mode.value, date=date or None))
        except Exception:
            logger.exception("unexpected error while exporting the report")
            flash("Error del sistema al exportar reporte", "danger")
            return redirect(url_for("admin_report", tab=mode.value, date=date or None))

        out = io.StringIO()
        writer = csv.DictWriter(
            out,
            fieldnames=[
                "category",
                "category_title",
                "student_code",
                "first_name",
                "paternal_surname",
                "maternal_surname",
                "status",
                "time",
                "attendance_id",
            ],
        )
        writer.writeheader()
        for row in container.report_service.export_rows(report):
            writer.writerow(row)

        scope = container.report_service.query_date(mode, date) or "all"
        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename=attendance_{scope}.csv"},
        )
