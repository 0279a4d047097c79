from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .attendance.controller import register as register_attendance
from .reports.controller import register as register_reports
from .session.controller import register as register_session

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["DEFAULT_COURSE"] = getattr(settings, "DEFAULT_COURSE")

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    backend_base_url = getattr(settings, "BACKEND_BASE_URL", "")
    if container is None:
        if not backend_base_url:
            raise RuntimeError("BACKEND_BASE_URL is not configured")
        container = build_container(
            backend_base_url=backend_base_url,
            timeout=getattr(settings, "REQUEST_TIMEOUT", None),
        )

    logger.info("settings=%s backend=%s", settings_module, container.backend.base_url)

    register_session(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
