from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .attendance.controller import register as register_attendance
from .metrics.controller import register as register_metrics
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    seed_demo_data = bool(getattr(settings, "SEED_DEMO_DATA", True))
    container = build_container(seed_records=None if seed_demo_data else ())
    app.extensions["attendance_tracker"] = container
    logger.info(
        "attendance-tracker started (settings=%s, seeded records=%d)",
        settings_module,
        len(container.attendance_repo),
    )

    register_users(app, container)
    register_attendance(app, container)
    register_metrics(app, container)

    return app
