import os


def get_settings_module() -> str:
    # Ambil environment dari APP_ENV, default 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def db_config_from_env(*, default_password: str = "") -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        # DB_PASS is the name used by older .env files
        "password": os.getenv("DB_PASSWORD", os.getenv("DB_PASS", default_password)),
        "database": os.getenv("DB_NAME", "absensi_db"),
    }
