from __future__ import annotations

import importlib

from config import get_settings_module

from src.absensi_api.absensi_api import create_app
from src.absensi_api.absensi_api.core.constants import DEFAULT_PORT

app = create_app()

if __name__ == "__main__":
    settings = importlib.import_module(get_settings_module())
    app.run(
        host="0.0.0.0",
        port=int(getattr(settings, "PORT", DEFAULT_PORT)),
        debug=bool(getattr(settings, "DEBUG", False)),
    )
