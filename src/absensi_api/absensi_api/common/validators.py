from __future__ import annotations

from datetime import date, time
from typing import Any

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date, parse_time_of_day


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} wajib diisi")
    return str(value).strip()


def require_int(value: Any, field_name: str) -> int:
    text = require_non_empty(value, field_name)
    try:
        return int(text)
    except ValueError:
        raise ValidationError(f"{field_name} harus berupa angka")


def require_int_range(value: Any, field_name: str, low: int, high: int) -> int:
    number = require_int(value, field_name)
    if number < low or number > high:
        raise ValidationError(f"{field_name} harus di antara {low} dan {high}")
    return number


def require_date(value: Any, field_name: str) -> date:
    text = require_non_empty(value, field_name)
    try:
        return parse_iso_date(text)
    except ValueError:
        raise ValidationError(f"{field_name} harus berformat YYYY-MM-DD")


def require_time(value: Any, field_name: str) -> time:
    text = require_non_empty(value, field_name)
    try:
        return parse_time_of_day(text)
    except ValueError:
        raise ValidationError(f"{field_name} harus berformat HH:MM atau HH:MM:SS")
