from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .announcements.controller import register as register_announcements
from .attendance.controller import register as register_attendance
from .container import build_container
from .dashboard.controller import register as register_dashboard
from .documents.controller import register as register_documents
from .leaves.controller import register as register_leaves
from .notifications.controller import register as register_notifications
from .payroll.controller import register as register_payroll
from .tasks.controller import register as register_tasks
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(settings_module: str | None = None) -> Flask:
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

    store_config = dict(getattr(settings, "STORE_CONFIG"))
    logger.info(
        "settings=%s store=%s namespace=%s",
        settings_module,
        store_config.get("path") or "<memory>",
        store_config.get("namespace"),
    )

    container = build_container(
        store_config=store_config,
        assist_config=dict(getattr(settings, "ASSIST_CONFIG", {})),
        simulated_latency=bool(getattr(settings, "SIMULATED_LATENCY", False)),
        seed_on_startup=bool(getattr(settings, "SEED_ON_STARTUP", False)),
    )
    app.extensions["nexus_container"] = container

    register_users(app, container)
    register_attendance(app, container)
    register_leaves(app, container)
    register_announcements(app, container)
    register_documents(app, container)
    register_tasks(app, container)
    register_payroll(app, container)
    register_notifications(app, container)
    register_dashboard(app, container)

    return app
