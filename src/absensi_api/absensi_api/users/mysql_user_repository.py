from __future__ import annotations

from typing import Optional

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import User
from .repository import UserRepository

_USER_COLUMNS = "id, username, name, email, password, role"


def _to_user(row: dict) -> User:
    return User(
        user_id=int(row["id"]),
        username=row["username"],
        name=row.get("name") or "",
        email=row.get("email") or "",
        password_hash=row["password"],
        role=str(row["role"] or ""),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_USER_COLUMNS} FROM users WHERE id=%s", (user_id,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_username(self, username: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_USER_COLUMNS} FROM users WHERE username=%s", (username,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def create_user(
        self,
        *,
        username: str,
        name: str,
        email: str,
        password_hash: str,
        role: Role,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(username, name, email, password, role)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (username, name, email, password_hash, role.value),
            )
            return int(cur.lastrowid)

    def update_user(self, user_id: int, *, name: str, email: str, role: Role) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id FROM users WHERE id=%s", (user_id,))
            if not fetchone(cur):
                return False
            cur.execute(
                "UPDATE users SET name=%s, email=%s, role=%s WHERE id=%s",
                (name, email, role.value, user_id),
            )
            return True

    def delete_by_id(self, user_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM users WHERE id=%s", (user_id,))
            return cur.rowcount > 0
