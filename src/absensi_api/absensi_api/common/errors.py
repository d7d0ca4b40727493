from __future__ import annotations

import logging

from flask import Flask
from werkzeug.exceptions import HTTPException

from ..core.exceptions import DomainError, StoreError
from .http import error

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(StoreError)
    def store_error(e: StoreError):
        if app.config.get("DEBUG"):
            return error(f"Kesalahan database: {e}", status=e.status_code)
        return error("Terjadi kesalahan pada server.", status=e.status_code)

    @app.errorhandler(DomainError)
    def domain_error(e: DomainError):
        return error(str(e), status=e.status_code)

    @app.errorhandler(HTTPException)
    def http_error(e: HTTPException):
        return error(e.description or e.name, status=e.code or 500)

    @app.errorhandler(Exception)
    def unhandled_error(e: Exception):
        logger.exception("Unhandled error")
        return error("Terjadi kesalahan pada server.", status=500)
