from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.web import register_error_handlers
from .container import Container, build_container, build_store
from .departments.controller import register as register_departments
from .reports.controller import register as register_reports
from .students.controller import register as register_students
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        backend = getattr(settings, "STORAGE_BACKEND", "file")
        store = build_store(
            backend,
            data_dir=getattr(settings, "DATA_DIR", None),
            db_config=getattr(settings, "DB_CONFIG", None),
        )
        container = build_container(
            store=store,
            periods_per_day=int(getattr(settings, "PERIODS_PER_DAY", 5)),
            auth_latency_seconds=float(getattr(settings, "AUTH_LATENCY_SECONDS", 0.0)),
        )
        logger.info("settings=%s storage=%s", settings_module, backend)

    app.extensions["gasc_container"] = container

    register_error_handlers(app)
    register_users(app, container)
    register_departments(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
