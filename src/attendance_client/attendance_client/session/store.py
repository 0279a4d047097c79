from __future__ import annotations

from flask import session as flask_session

from .model import Credential, Session

SESSION_KEY = "auth"


def load_session() -> Session:
    """Rebuild the Session snapshot stored in the signed browser cookie."""
    data = flask_session.get(SESSION_KEY)
    if not data:
        return Session.anonymous()
    try:
        return Session.logged_in(Credential.from_dict(data))
    except (KeyError, TypeError, ValueError):
        flask_session.pop(SESSION_KEY, None)
        return Session.anonymous()


def save_session(current: Session) -> None:
    if current.is_logged_in and current.credential is not None:
        flask_session[SESSION_KEY] = current.credential.to_dict()
    else:
        flask_session.pop(SESSION_KEY, None)
