from __future__ import annotations

from datetime import date, time
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.absensi_api.absensi_api.attendance.model import AttendanceRecord, GroupStatusCount, MonthlyStatusCounts
from src.absensi_api.absensi_api.container import build_services
from src.absensi_api.absensi_api.core.enums import AttendanceStatus, Role
from src.absensi_api.absensi_api.main import create_app
from src.absensi_api.absensi_api.users.model import User


class InMemoryUsers:
    def __init__(self):
        self.users: dict[int, User] = {}
        self._id = 0

    def add(self, *, username: str, password: str, role, name: str = "", email: str = "") -> User:
        self._id += 1
        user = User(
            user_id=self._id,
            username=username,
            name=name or username.title(),
            email=email or f"{username}@example.com",
            password_hash=generate_password_hash(password),
            role=getattr(role, "value", role),
        )
        self.users[user.user_id] = user
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        for u in self.users.values():
            if u.username == username:
                return u
        return None

    def create_user(self, *, username, name, email, password_hash, role) -> int:
        self._id += 1
        self.users[self._id] = User(
            user_id=self._id,
            username=username,
            name=name,
            email=email,
            password_hash=password_hash,
            role=role.value,
        )
        return self._id

    def update_user(self, user_id: int, *, name: str, email: str, role: Role) -> bool:
        u = self.users.get(user_id)
        if not u:
            return False
        self.users[user_id] = User(
            user_id=u.user_id,
            username=u.username,
            name=name,
            email=email,
            password_hash=u.password_hash,
            role=role.value,
        )
        return True

    def delete_by_id(self, user_id: int) -> bool:
        return self.users.pop(user_id, None) is not None


class InMemoryAttendance:
    """Mirrors the SQL of MySQLAttendanceRepository over a list of records."""

    def __init__(self, users: InMemoryUsers):
        self._users = users
        self.records: list[AttendanceRecord] = []
        self.calls: list[str] = []

    def add(self, user_id: int, day: date, status: str, at: time = time(8, 0)) -> None:
        self.records.append(
            AttendanceRecord(
                attendance_id=len(self.records) + 1,
                user_id=user_id,
                attendance_date=day,
                attendance_time=at,
                status=status,
            )
        )

    def create_record(self, *, user_id, attendance_date, attendance_time, status: AttendanceStatus) -> int:
        self.calls.append("create_record")
        self.add(user_id, attendance_date, status.value, attendance_time)
        return len(self.records)

    def list_for_user(self, user_id: int):
        self.calls.append("list_for_user")
        items = [r for r in self.records if r.user_id == user_id]
        items.sort(key=lambda r: r.attendance_date, reverse=True)
        return items

    def get_monthly_counts(self, *, user_id: int, month: int, year: int):
        self.calls.append("get_monthly_counts")
        items = [
            r
            for r in self.records
            if r.user_id == user_id and r.attendance_date.month == month and r.attendance_date.year == year
        ]
        user = self._users.get_by_id(user_id)
        if not items or not user:
            return None
        return MonthlyStatusCounts(
            user_id=user_id,
            user_name=user.name,
            present=sum(1 for r in items if r.status == "present"),
            absent=sum(1 for r in items if r.status == "absent"),
        )

    def get_group_status_counts(self, *, start_date: date, end_date: date, role: str):
        self.calls.append("get_group_status_counts")
        buckets: dict[tuple[str, str], list[AttendanceRecord]] = {}
        for r in self.records:
            user = self._users.get_by_id(r.user_id)
            if not user or user.role != role:
                continue
            if not (start_date <= r.attendance_date <= end_date):
                continue
            buckets.setdefault((user.role, r.status), []).append(r)
        return [
            GroupStatusCount(
                group_key=key[0],
                status=key[1],
                count=len(items),
                total_users=len({r.user_id for r in items}),
            )
            for key, items in buckets.items()
        ]


@pytest.fixture
def users_repo() -> InMemoryUsers:
    repo = InMemoryUsers()
    repo.add(username="admin", password="admin123", role=Role.KARYAWAN, name="Admin")
    repo.add(username="budi", password="siswa123", role=Role.SISWA, name="Budi")
    return repo


@pytest.fixture
def attendance_repo(users_repo) -> InMemoryAttendance:
    return InMemoryAttendance(users_repo)


@pytest.fixture
def container(users_repo, attendance_repo):
    return build_services(users_repo=users_repo, attendance_repo=attendance_repo)


@pytest.fixture
def app(container):
    app = create_app(container, settings_module="config.testing")
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


def _login(client, username: str, password: str) -> dict:
    resp = client.post("/api/auth/login", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.get_json()
    return {"Authorization": f"Bearer {resp.get_json()['token']}"}


@pytest.fixture
def karyawan_headers(client) -> dict:
    return _login(client, "admin", "admin123")


@pytest.fixture
def siswa_headers(client) -> dict:
    return _login(client, "budi", "siswa123")
