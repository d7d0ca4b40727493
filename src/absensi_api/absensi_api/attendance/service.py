from __future__ import annotations

from typing import Sequence

from ..common.validators import require_date, require_int, require_non_empty, require_time
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import AttendanceRecord
from .repository import AttendanceRepository


class AttendanceService:
    """Use case: mencatat kehadiran dan membaca riwayatnya."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def record(self, *, user_id, attendance_date, attendance_time, status) -> int:
        if not all([user_id, attendance_date, attendance_time, status]):
            raise ValidationError("Semua field wajib diisi")

        uid = require_int(user_id, "user_id")
        day = require_date(attendance_date, "attendance_date")
        at = require_time(attendance_time, "attendance_time")
        status_s = require_non_empty(status, "status")
        try:
            st = AttendanceStatus.parse(status_s)
        except ValueError:
            allowed = ", ".join(s.value for s in AttendanceStatus)
            raise ValidationError(f"Status tidak valid. Gunakan salah satu dari: {allowed}")

        # Duplicate (user_id, attendance_date) rows are not rejected here.
        return self._attendance.create_record(
            user_id=uid,
            attendance_date=day,
            attendance_time=at,
            status=st,
        )

    def history(self, user_id: int) -> Sequence[AttendanceRecord]:
        records = self._attendance.list_for_user(user_id)
        if not records:
            raise NotFoundError("Riwayat kehadiran untuk user ini tidak ditemukan.")
        return records
