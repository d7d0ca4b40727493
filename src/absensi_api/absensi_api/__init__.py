"""Absensi API package.

REST API for attendance tracking, organized by feature modules (users,
attendance, reports) with a thin Flask controller layer over service and
repository layers.
"""
from __future__ import annotations

from .main import create_app

__all__ = ["create_app"]
