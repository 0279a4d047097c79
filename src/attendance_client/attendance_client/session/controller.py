from __future__ import annotations

import logging

from flask import Flask, current_app, flash, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.constants import MSG_SESSION_EXPIRED
from ..core.enums import Role
from ..core.exceptions import SessionExpiredError
from .guards import login_required
from .store import load_session, save_session

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.errorhandler(SessionExpiredError)
    def session_expired(e: SessionExpiredError):
        result = container.session_controller.expire(load_session())
        save_session(result.session)
        flash(result.message, "warning")
        return redirect(url_for("login"))

    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        if load_session().is_logged_in:
            return redirect(url_for("home"))

        email = ""
        if request.method == "POST":
            email = request.form.get("email", "")
            password = request.form.get("password", "")

            try:
                result = container.session_controller.login(load_session(), email, password)
            except Exception:
                logger.exception("unexpected error during login")
                flash("Error del sistema al iniciar sesión", "danger")
                return render_template("login.html", email=email)

            if result.ok:
                save_session(result.session)
                flash(result.message, "success")
                return redirect(url_for("home"))
            flash(result.message, "danger")

        return render_template("login.html", email=email)

    @app.route("/logout", methods=["POST"], endpoint="logout")
    @login_required
    def logout():
        try:
            result = container.session_controller.logout(load_session())
        except Exception:
            logger.exception("unexpected error during logout")
            flash("Error del sistema al cerrar sesión", "danger")
            return redirect(url_for("home"))

        save_session(result.session)
        if not result.ok:
            flash(result.message, "danger")
            return redirect(url_for("home"))

        session.pop("course", None)
        if result.message:
            flash(result.message, "warning" if result.message == MSG_SESSION_EXPIRED else "success")
        return redirect(url_for("login"))

    @app.route("/home", endpoint="home")
    @login_required
    def home():
        current = load_session()
        if current.role == Role.TEACHER:
            return redirect(url_for("admin_report"))

        course = session.get("course") or current_app.config["DEFAULT_COURSE"]
        return render_template("home.html", role=current.role, course=course)
