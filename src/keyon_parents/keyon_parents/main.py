from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.datetime_utils import parse_clock_time
from .container import Container, build_container
from .database.bootstrap import apply_schema, ensure_demo_parent, list_tables

from .classes.controller import register as register_classes
from .metrics.controller import register as register_metrics
from .notifications.controller import register as register_notifications
from .permits.controller import register as register_permits
from .reports.controller import register as register_reports
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            ensure_demo_parent(db_config)
            logger.info("demo parent ready")

        container = build_container(
            db_config=db_config,
            late_cutoff=parse_clock_time(getattr(settings, "LATE_CUTOFF", "07:15")),
            campus_window_days=int(getattr(settings, "TIME_ON_CAMPUS_DAYS", 7)),
            fanout_workers=int(getattr(settings, "FANOUT_WORKERS", 8)),
        )

    register_users(app, container)
    register_metrics(app, container)
    register_reports(app, container)
    register_permits(app, container)
    register_classes(app, container)
    register_notifications(app, container)

    return app
