from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Entitas domain: satu catatan kehadiran (tidak bisa diubah setelah dibuat)."""

    attendance_id: int
    user_id: int
    attendance_date: date
    attendance_time: Optional[time]
    status: str

    def to_history_item(self) -> dict:
        return {
            "id": self.attendance_id,
            "attendance_date": self.attendance_date.strftime("%Y-%m-%d"),
            "attendance_time": self.attendance_time.strftime("%H:%M:%S") if self.attendance_time else None,
            "status": self.status,
        }


@dataclass(frozen=True)
class MonthlyStatusCounts:
    """Read-model untuk rekap bulanan satu user."""

    user_id: int
    user_name: str
    present: int
    absent: int


@dataclass(frozen=True)
class GroupStatusCount:
    """Satu baris hasil GROUP BY (role, status) untuk analisis."""

    group_key: Optional[str]
    status: Optional[str]
    count: int
    total_users: int
