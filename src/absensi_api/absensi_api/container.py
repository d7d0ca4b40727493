from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import AttendanceReportService
from .security.tokens import TokenService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    attendance_repo: AttendanceRepository

    token_service: TokenService
    auth_service: AuthService
    user_service: UserService
    attendance_service: AttendanceService
    report_service: AttendanceReportService


def build_services(
    *,
    users_repo: UserRepository,
    attendance_repo: AttendanceRepository,
    token_expires_hours: int = 3,
) -> Container:
    token_service = TokenService(expires_hours=token_expires_hours)
    return Container(
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        token_service=token_service,
        auth_service=AuthService(users_repo, token_service),
        user_service=UserService(users_repo),
        attendance_service=AttendanceService(attendance_repo),
        report_service=AttendanceReportService(attendance_repo),
    )


def build_container(*, db_config: dict, token_expires_hours: int = 3) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))
    return build_services(
        users_repo=MySQLUserRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        token_expires_hours=token_expires_hours,
    )
