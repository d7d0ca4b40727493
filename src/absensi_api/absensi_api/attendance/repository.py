from __future__ import annotations

from datetime import date, time
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, GroupStatusCount, MonthlyStatusCounts


class AttendanceRepository(Protocol):
    def create_record(
        self,
        *,
        user_id: int,
        attendance_date: date,
        attendance_time: time,
        status: AttendanceStatus,
    ) -> int:
        raise NotImplementedError

    def list_for_user(self, user_id: int) -> Sequence[AttendanceRecord]:
        """All records of a user, most recent date first."""

        raise NotImplementedError

    def get_monthly_counts(self, *, user_id: int, month: int, year: int) -> Optional[MonthlyStatusCounts]:
        """None when the user has no attendance rows in that month."""

        raise NotImplementedError

    def get_group_status_counts(
        self,
        *,
        start_date: date,
        end_date: date,
        role: str,
    ) -> Sequence[GroupStatusCount]:
        raise NotImplementedError
