from __future__ import annotations

from functools import wraps

from flask import flash, redirect, render_template, url_for

from ..core.enums import Role
from .store import load_session


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not load_session().is_logged_in:
            flash("Por favor inicie sesión para continuar.", "warning")
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def role_required(role: Role):
    """Allow only users whose backend role matches ``role``."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            current = load_session()
            if not current.is_logged_in:
                return redirect(url_for("login"))

            if current.role != role:
                return render_template("403.html", role=current.role), 403

            return view(*args, **kwargs)

        return wrapper

    return decorator
