from __future__ import annotations

import logging

from flask import Flask, flash, redirect, request, session, url_for

from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ClientError, GeolocationError, SessionExpiredError
from ..session.guards import role_required
from ..session.store import load_session
from .location import FormLocationProvider

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/attendance", methods=["POST"], endpoint="mark_attendance")
    @role_required(Role.STUDENT)
    def mark_attendance():
        course = request.form.get("course", "")
        session["course"] = course

        try:
            message = container.attendance_submitter.mark_attendance(
                load_session().credential,
                course,
                FormLocationProvider(request.form),
            )
            flash(message or "Asistencia registrada", "success")
        except SessionExpiredError:
            raise
        except GeolocationError as e:
            flash(str(e), "warning")
        except ClientError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("unexpected error while marking attendance")
            flash("Error del sistema al marcar asistencia", "danger")
        return redirect(url_for("home"))
