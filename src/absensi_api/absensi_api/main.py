from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_jwt_extended import JWTManager

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.errors import register_error_handlers
from .container import Container, build_container
from .core.constants import DEFAULT_TOKEN_EXPIRES_HOURS
from .database.bootstrap import apply_schema, apply_sql_file, ensure_demo_users, list_tables
from .database.connection import DBConfig
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.json.sort_keys = False
    app.config["JWT_SECRET_KEY"] = getattr(settings, "JWT_SECRET")
    expires_hours = int(getattr(settings, "TOKEN_EXPIRES_HOURS", DEFAULT_TOKEN_EXPIRES_HOURS))
    JWTManager(app)

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            ensure_demo_users(db_config)
            apply_sql_file(db_config, sql_path=REPO_ROOT / "database" / "seed.sql")
            logger.info("demo seed ready")

        container = build_container(db_config=db_config, token_expires_hours=expires_hours)

    register_error_handlers(app)
    register_users(app, container)
    register_attendance(app, container)

    @app.get("/health")
    def health():
        return {"status": "success", "message": "API is running"}

    return app
