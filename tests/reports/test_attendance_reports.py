from __future__ import annotations

import logging
from datetime import date

import pytest

from src.absensi_api.absensi_api.attendance.model import GroupStatusCount
from src.absensi_api.absensi_api.core.exceptions import NotFoundError, ValidationError
from src.absensi_api.absensi_api.reports.service import (
    AttendanceReportService,
    StatusTotals,
    group_status_counts,
)


class FakeAttendanceRepo:
    def __init__(self, rows=None, monthly=None):
        self._rows = rows or []
        self._monthly = monthly
        self.last_args = None

    def get_group_status_counts(self, *, start_date: date, end_date: date, role: str):
        self.last_args = {"start_date": start_date, "end_date": end_date, "role": role}
        return self._rows

    def get_monthly_counts(self, *, user_id: int, month: int, year: int):
        self.last_args = {"user_id": user_id, "month": month, "year": year}
        return self._monthly


def test_group_percentages_for_three_present_one_absent_one_alpa():
    rows = [
        GroupStatusCount(group_key="karyawan", status="present", count=3, total_users=2),
        GroupStatusCount(group_key="karyawan", status="absent", count=1, total_users=1),
        GroupStatusCount(group_key="karyawan", status="ALPA", count=1, total_users=1),
    ]

    (group,) = group_status_counts(rows)
    data = group.to_dict()

    assert data["group"] == "karyawan"
    assert data["total_users"] == 2
    assert data["total_attendance"] == {"present": 3, "absent": 1, "sick": 0, "alpa": 1}
    rate = data["attendance_rate"]
    assert rate["present_percentage"] == 60.0
    assert rate["alpa_percentage"] == 20.0
    assert rate["sick_percentage"] == 0
    assert sum(rate.values()) == pytest.approx(100.0)


def test_unknown_status_is_logged_and_not_counted(caplog):
    rows = [
        GroupStatusCount(group_key="siswa", status="present", count=4, total_users=3),
        GroupStatusCount(group_key="siswa", status="izin", count=2, total_users=1),
    ]

    with caplog.at_level(logging.WARNING):
        (group,) = group_status_counts(rows)

    assert group.totals.total == 4
    assert group.totals.percentages()["present_percentage"] == 100.0
    assert "izin" in caplog.text


def test_missing_group_key_is_unspecified():
    (group,) = group_status_counts([GroupStatusCount(group_key=None, status="sick", count=1, total_users=1)])

    assert group.group == "Unspecified"


def test_empty_totals_have_zero_percentages():
    assert StatusTotals().percentages() == {
        "present_percentage": 0,
        "absent_percentage": 0,
        "sick_percentage": 0,
        "alpa_percentage": 0,
    }


def test_analyze_forwards_parsed_period_and_role():
    repo = FakeAttendanceRepo()

    report = AttendanceReportService(repo).analyze(start_date="2025-01-01", end_date="2025-01-31", group_by="siswa")

    assert repo.last_args == {"start_date": date(2025, 1, 1), "end_date": date(2025, 1, 31), "role": "siswa"}
    assert report.to_dict() == {
        "analysis_period": {"start_date": "2025-01-01", "end_date": "2025-01-31"},
        "grouped_analysis": [],
    }


@pytest.mark.parametrize(
    "start,end,group_by",
    [
        (None, "2025-01-31", "siswa"),
        ("2025-01-01", None, "siswa"),
        ("2025-01-01", "2025-01-31", None),
        ("2025-01-01", "2025-01-31", "guru"),
        ("2025-02-01", "2025-01-31", "siswa"),
        ("01-01-2025", "2025-01-31", "siswa"),
    ],
)
def test_analyze_rejects_invalid_parameters_before_query(start, end, group_by):
    repo = FakeAttendanceRepo()

    with pytest.raises(ValidationError):
        AttendanceReportService(repo).analyze(start_date=start, end_date=end, group_by=group_by)

    assert repo.last_args is None


@pytest.mark.parametrize("month,year", [(None, "2025"), ("1", None), ("13", "2025"), ("jan", "2025")])
def test_summary_validates_month_and_year_before_query(month, year):
    repo = FakeAttendanceRepo()

    with pytest.raises(ValidationError):
        AttendanceReportService(repo).monthly_summary(1, month=month, year=year)

    assert repo.last_args is None


def test_summary_without_rows_is_not_found():
    with pytest.raises(NotFoundError):
        AttendanceReportService(FakeAttendanceRepo()).monthly_summary(1, month="1", year="2025")


def test_summary_counts_present_and_absent(attendance_repo):
    attendance_repo.add(2, date(2025, 1, 6), "present")
    attendance_repo.add(2, date(2025, 1, 7), "present")
    attendance_repo.add(2, date(2025, 1, 8), "absent")
    attendance_repo.add(2, date(2025, 1, 9), "sick")
    attendance_repo.add(2, date(2025, 2, 3), "present")

    summary = AttendanceReportService(attendance_repo).monthly_summary(2, month="1", year="2025")

    assert summary.to_dict() == {
        "user_id": 2,
        "month": "1-2025",
        "attendance_summary": {"hadir": 2, "izin": 0, "sakit": 0, "alpa": 1},
    }
