from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .admins.controller import register as register_admins
from .certificates.controller import register as register_certificates
from .checkin.controller import register as register_checkin
from .common.datetime_utils import now_local
from .common.http import register_error_handlers
from .container import Container, build_container
from .database.bootstrap import apply_schema, ensure_default_admin, list_tables, seed_default_settings
from .evaluations.controller import register as register_evaluations
from .registrations.controller import register as register_registrations
from .settings.controller import register as register_settings

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.permanent_session_lifetime = timedelta(hours=int(getattr(settings, "SESSION_HOURS", 8)))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            seed_default_settings(db_config)
            admin = getattr(settings, "DEFAULT_ADMIN", None)
            if admin:
                ensure_default_admin(db_config, **admin)
            logger.info("default settings/admin ready")

        container = build_container(db_config=db_config, mail_config=getattr(settings, "MAIL_CONFIG", None))

    register_error_handlers(app)
    register_admins(app, container)
    register_registrations(app, container)
    register_checkin(app, container)
    register_settings(app, container)
    register_certificates(app, container)
    register_evaluations(app, container)

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok", "timestamp": now_local().isoformat()})

    return app
