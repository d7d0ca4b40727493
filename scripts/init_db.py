"""Create the database (if missing) and apply database/schema.sql."""
from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.absensi_api.absensi_api.database.bootstrap import apply_schema, list_tables
from src.absensi_api.absensi_api.database.connection import DBConfig

logger = logging.getLogger("init_db")


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format="%(levelname)s [%(name)s] %(message)s")
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
    tables = list_tables(db_config)
    logger.info("schema applied to %s (tables=%s)", DBConfig.from_dict(db_config).describe(), ", ".join(tables))


if __name__ == "__main__":
    main()
