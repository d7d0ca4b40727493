from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

from ..attendance.model import GroupStatusCount
from ..attendance.repository import AttendanceRepository
from ..common.validators import require_date, require_int_range, require_non_empty
from ..core.constants import UNSPECIFIED_GROUP
from ..core.enums import ANALYSIS_GROUPS, AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


@dataclass
class StatusTotals:
    """Fixed per-status counters used by the grouped analysis."""

    present: int = 0
    absent: int = 0
    sick: int = 0
    alpa: int = 0

    def add(self, status: AttendanceStatus, count: int) -> None:
        setattr(self, status.value, getattr(self, status.value) + int(count))

    @property
    def total(self) -> int:
        return self.present + self.absent + self.sick + self.alpa

    def percentages(self) -> dict:
        total = self.total
        out = {}
        for status in AttendanceStatus:
            count = getattr(self, status.value)
            out[f"{status.value}_percentage"] = (count * 100 / total) if total else 0
        return out

    def to_dict(self) -> dict:
        return {s.value: getattr(self, s.value) for s in AttendanceStatus}


@dataclass
class GroupAnalysis:
    group: str
    total_users: int = 0
    totals: StatusTotals = field(default_factory=StatusTotals)

    def to_dict(self) -> dict:
        return {
            "group": self.group,
            "total_users": self.total_users,
            "total_attendance": self.totals.to_dict(),
            "attendance_rate": self.totals.percentages(),
        }


@dataclass(frozen=True)
class MonthlySummary:
    user_id: int
    month: int
    year: int
    hadir: int
    alpa: int
    # TODO: izin/sakit are placeholders until a leave status exists and the monthly query counts 'sick'.
    izin: int = 0
    sakit: int = 0

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "month": f"{self.month}-{self.year}",
            "attendance_summary": {
                "hadir": self.hadir,
                "izin": self.izin,
                "sakit": self.sakit,
                "alpa": self.alpa,
            },
        }


@dataclass(frozen=True)
class AnalysisReport:
    start_date: date
    end_date: date
    groups: list[GroupAnalysis]

    def to_dict(self) -> dict:
        return {
            "analysis_period": {
                "start_date": self.start_date.strftime("%Y-%m-%d"),
                "end_date": self.end_date.strftime("%Y-%m-%d"),
            },
            "grouped_analysis": [g.to_dict() for g in self.groups],
        }


def group_status_counts(rows: Sequence[GroupStatusCount]) -> list[GroupAnalysis]:
    """Bucket (role, status) rows per role and accumulate the four known statuses.

    Status strings are compared case-insensitively. Unknown statuses are
    logged and left out of the totals.
    """
    groups: dict[str, GroupAnalysis] = {}

    for r in rows:
        key = r.group_key or UNSPECIFIED_GROUP
        g = groups.get(key)
        if not g:
            g = GroupAnalysis(group=key)
            groups[key] = g
        g.total_users = max(g.total_users, int(r.total_users or 0))

        try:
            status = AttendanceStatus.parse(r.status or "")
        except ValueError:
            logger.warning("Status kehadiran tidak dikenal %r (group=%s, count=%s) diabaikan", r.status, key, r.count)
            continue
        g.totals.add(status, r.count or 0)

    return list(groups.values())


class AttendanceReportService:
    """Rekap bulanan per user dan analisis kehadiran per grup (role)."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def monthly_summary(self, user_id: int, *, month: Optional[str], year: Optional[str]) -> MonthlySummary:
        if not month or not year:
            raise ValidationError("Month and year are required in query parameters.")
        m = require_int_range(month, "month", 1, 12)
        y = require_int_range(year, "year", 1, 9999)

        counts = self._attendance.get_monthly_counts(user_id=user_id, month=m, year=y)
        if not counts:
            raise NotFoundError("Tidak ada data kehadiran.")

        return MonthlySummary(user_id=user_id, month=m, year=y, hadir=counts.present, alpa=counts.absent)

    def analyze(self, *, start_date, end_date, group_by) -> AnalysisReport:
        if not start_date or not end_date:
            raise ValidationError("Parameter start_date dan end_date diperlukan.")
        if not group_by or group_by not in ANALYSIS_GROUPS:
            raise ValidationError("Parameter group_by tidak valid. Gunakan 'siswa' atau 'karyawan'.")

        start = require_date(start_date, "start_date")
        end = require_date(end_date, "end_date")
        if start > end:
            raise ValidationError("start_date tidak boleh setelah end_date")
        role = require_non_empty(group_by, "group_by")

        rows = self._attendance.get_group_status_counts(start_date=start, end_date=end, role=role)
        return AnalysisReport(start_date=start, end_date=end, groups=group_status_counts(rows))
