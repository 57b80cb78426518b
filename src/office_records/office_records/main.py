from __future__ import annotations

import importlib
import os
from datetime import timedelta
from logging.config import dictConfig
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .core.constants import DEFAULT_SESSION_HOURS
from .common.responses import register_error_handlers
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_users, list_tables
from .notifications.mail import MailSettings

from .container import Container, build_container
from .admins.controller import register as register_admins
from .auth.controller import register as register_auth
from .dashboards.controller import register as register_dashboards
from .departments.controller import register as register_departments
from .employees.controller import register as register_employees
from .files.controller import register as register_files
from .forwarding.controller import register as register_forwarding
from .leaves.controller import register as register_leaves
from .performance.controller import register as register_performance
from .proposals.controller import register as register_proposals
from .records.controller import register as register_records
from .roles.controller import register as register_roles
from .tasks.controller import register as register_tasks

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def _configure_logging(path: str) -> None:
    if path and os.path.exists(path):
        with open(path, encoding="utf-8") as f:
            dictConfig(yaml.safe_load(f))


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    _configure_logging(getattr(settings, "LOGGING_CONFIG", ""))

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.permanent_session_lifetime = timedelta(hours=int(getattr(settings, "SESSION_HOURS", DEFAULT_SESSION_HOURS)))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        app.logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
            app.logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
            ensure_demo_users(db_config)
            app.logger.info("demo seed ready")

        container = build_container(
            db_config=db_config,
            mail_settings=MailSettings(
                host=getattr(settings, "SMTP_HOST", "localhost"),
                port=int(getattr(settings, "SMTP_PORT", 25)),
                sender=getattr(settings, "MAIL_SENDER", "no-reply@localhost"),
                enabled=bool(getattr(settings, "MAIL_ENABLED", False)),
                base_url=getattr(settings, "APP_BASE_URL", "http://localhost:5000"),
            ),
        )

    register_error_handlers(app)

    register_auth(app, container)
    register_admins(app, container)
    register_departments(app, container)
    register_employees(app, container)
    register_roles(app, container)
    register_files(app, container)
    register_records(app, container)
    register_forwarding(app, container)
    register_leaves(app, container)
    register_tasks(app, container)
    register_performance(app, container)
    register_proposals(app, container)
    register_dashboards(app, container)

    return app
