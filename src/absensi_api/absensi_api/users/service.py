from __future__ import annotations

import logging

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, NotFoundError, ServerError, ValidationError
from ..security.tokens import TokenService
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


def _parse_role(value) -> Role:
    role_s = require_non_empty(value, "Role").lower()
    try:
        return Role(role_s)
    except ValueError:
        allowed = ", ".join(r.value for r in Role)
        raise ValidationError(f"Role tidak valid. Gunakan salah satu dari: {allowed}")


class AuthService:
    """Use case: login dengan username/password, menghasilkan token sesi."""

    def __init__(self, users: UserRepository, tokens: TokenService):
        self._users = users
        self._tokens = tokens

    def authenticate(self, username: str, password: str) -> User:
        if not username or not password:
            raise ValidationError("Username dan password wajib diisi!")

        user = self._users.get_by_username(username)
        if not user:
            logger.warning("Login gagal: username %r tidak ditemukan", username)
            raise NotFoundError("Username tidak ditemukan.")

        try:
            ok = check_password_hash(user.password_hash, password)
        except (ValueError, TypeError) as e:
            # e.g. bcrypt hashes from an older deployment
            logger.error("Verifikasi password gagal untuk %r: %s", username, e)
            raise ServerError("Terjadi kesalahan saat memverifikasi password.") from e

        if not ok:
            logger.warning("Login gagal: password salah untuk %r", username)
            raise AuthenticationError("Password salah.")

        return user

    def login(self, username: str, password: str) -> str:
        user = self.authenticate(username, password)
        return self._tokens.issue(user)


class UserService:
    """Use case: CRUD pengguna (khusus karyawan)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def get_user(self, user_id: int) -> User:
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User tidak ditemukan")
        return user

    def create_user(self, *, username, name, email, password, role) -> dict:
        username = require_non_empty(username, "Username")
        name = require_non_empty(name, "Nama")
        email = require_non_empty(email, "Email")
        require_non_empty(password, "Password")
        role = _parse_role(role)

        if self._users.get_by_username(username):
            raise ValidationError("Username sudah digunakan")

        user_id = self._users.create_user(
            username=username,
            name=name,
            email=email,
            password_hash=generate_password_hash(str(password)),
            role=role,
        )
        return {"id": user_id, "name": name, "username": username, "role": role.value}

    def update_user(self, user_id: int, *, name, email, role, username) -> dict:
        """Update name/email/role.

        The response echoes the submitted fields rather than re-reading the
        row, so ``username`` is reported as sent even though it is never
        written.
        """
        name = require_non_empty(name, "Nama")
        email = require_non_empty(email, "Email")
        username = require_non_empty(username, "Username")
        role = _parse_role(role)

        if not self._users.update_user(user_id, name=name, email=email, role=role):
            raise NotFoundError("User tidak ditemukan")

        return {"id": user_id, "name": name, "username": username, "role": role.value}

    def delete_user(self, user_id: int) -> None:
        if not self._users.delete_by_id(user_id):
            raise NotFoundError("User tidak ditemukan")
