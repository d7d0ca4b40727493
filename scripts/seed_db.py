"""Upsert the demo accounts, then load database/seed.sql."""
from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.absensi_api.absensi_api.database.bootstrap import apply_sql_file, ensure_demo_users
from src.absensi_api.absensi_api.database.connection import DBConfig

logger = logging.getLogger("seed_db")


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format="%(levelname)s [%(name)s] %(message)s")
    db_config = dict(settings.DB_CONFIG)

    # seed.sql looks users up by username
    ensure_demo_users(db_config)
    apply_sql_file(db_config, sql_path=REPO_ROOT / "database" / "seed.sql")
    logger.info("demo data seeded into %s", DBConfig.from_dict(db_config).describe())


if __name__ == "__main__":
    main()
