from __future__ import annotations

from datetime import date, time
from typing import Optional, Sequence

from ..common.datetime_utils import normalize_mysql_date, normalize_mysql_time
from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, query
from .model import AttendanceRecord, GroupStatusCount, MonthlyStatusCounts
from .repository import AttendanceRepository

# Column name is misspelled in the existing schema; keep it for compatibility.
TIME_COLUMN = "attendace_time"


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_record(
        self,
        *,
        user_id: int,
        attendance_date: date,
        attendance_time: time,
        status: AttendanceStatus,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO attendance(user_id, attendance_date, {TIME_COLUMN}, status)
                VALUES(%s,%s,%s,%s)
                """,
                (user_id, attendance_date, attendance_time, status.value),
            )
            return int(cur.lastrowid)

    def list_for_user(self, user_id: int) -> Sequence[AttendanceRecord]:
        rows = query(
            self._conn_factory,
            f"""
            SELECT id, user_id, attendance_date, {TIME_COLUMN} AS attendance_time, status
            FROM attendance
            WHERE user_id=%s
            ORDER BY attendance_date DESC
            """,
            (user_id,),
        )
        return [
            AttendanceRecord(
                attendance_id=int(r["id"]),
                user_id=int(r["user_id"]),
                attendance_date=normalize_mysql_date(r["attendance_date"]),
                attendance_time=normalize_mysql_time(r.get("attendance_time")),
                status=r["status"],
            )
            for r in rows
        ]

    def get_monthly_counts(self, *, user_id: int, month: int, year: int) -> Optional[MonthlyStatusCounts]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    u.id AS user_id,
                    u.name AS user_name,
                    SUM(CASE WHEN a.status = 'present' THEN 1 ELSE 0 END) AS present,
                    SUM(CASE WHEN a.status = 'absent' THEN 1 ELSE 0 END) AS absent
                FROM users u
                LEFT JOIN attendance a ON u.id = a.user_id
                WHERE u.id = %s AND MONTH(a.attendance_date) = %s AND YEAR(a.attendance_date) = %s
                GROUP BY u.id, u.name
                """,
                (user_id, month, year),
            )
            r = fetchone(cur)
            if not r:
                return None
            return MonthlyStatusCounts(
                user_id=int(r["user_id"]),
                user_name=r.get("user_name") or "",
                present=int(r.get("present") or 0),
                absent=int(r.get("absent") or 0),
            )

    def get_group_status_counts(
        self,
        *,
        start_date: date,
        end_date: date,
        role: str,
    ) -> Sequence[GroupStatusCount]:
        rows = query(
            self._conn_factory,
            """
            SELECT
                users.role AS group_key,
                attendance.status AS status,
                COUNT(attendance.status) AS count,
                COUNT(DISTINCT users.id) AS total_users
            FROM attendance
            INNER JOIN users ON attendance.user_id = users.id
            WHERE attendance.attendance_date BETWEEN %s AND %s
              AND users.role = %s
            GROUP BY users.role, attendance.status
            """,
            (start_date, end_date, role),
        )
        return [
            GroupStatusCount(
                group_key=r.get("group_key"),
                status=r.get("status"),
                count=int(r.get("count") or 0),
                total_users=int(r.get("total_users") or 0),
            )
            for r in rows
        ]
