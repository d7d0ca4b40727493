from __future__ import annotations

import pytest

from src.absensi_api.absensi_api.core.exceptions import (
    AuthenticationError,
    NotFoundError,
    ServerError,
    ValidationError,
)
from src.absensi_api.absensi_api.security.tokens import TokenService
from src.absensi_api.absensi_api.users.model import User
from src.absensi_api.absensi_api.users.service import AuthService, UserService


@pytest.mark.parametrize("username,password", [("", "x"), ("admin", ""), (None, None)])
def test_authenticate_requires_both_fields(users_repo, username, password):
    auth = AuthService(users_repo, TokenService())

    with pytest.raises(ValidationError):
        auth.authenticate(username, password)


def test_authenticate_unknown_username_is_not_found(users_repo):
    auth = AuthService(users_repo, TokenService())

    with pytest.raises(NotFoundError):
        auth.authenticate("nobody", "pw")


def test_authenticate_wrong_password_raises(users_repo):
    auth = AuthService(users_repo, TokenService())

    with pytest.raises(AuthenticationError):
        auth.authenticate("admin", "wrong")


def test_authenticate_unsupported_hash_method_is_server_error(users_repo):
    users_repo.users[99] = User(
        user_id=99,
        username="legacy",
        name="Legacy",
        email="legacy@example.com",
        password_hash="$2b$12$R9h/cIPz0gi.URNNX3kh2OPST9/PgBkqquzi.Ss7KIUgO2t0jWMUW",
        role="siswa",
    )
    auth = AuthService(users_repo, TokenService())

    with pytest.raises(ServerError):
        auth.authenticate("legacy", "anything")


def test_authenticate_returns_user(users_repo):
    auth = AuthService(users_repo, TokenService())

    user = auth.authenticate("admin", "admin123")

    assert user.username == "admin"
    assert user.role == "karyawan"


def test_password_with_surrounding_spaces_logs_in_as_typed(users_repo):
    UserService(users_repo).create_user(
        username="u7", name="N", email="e@x.com", password=" secret ", role="siswa"
    )
    auth = AuthService(users_repo, TokenService())

    assert auth.authenticate("u7", " secret ").username == "u7"
    with pytest.raises(AuthenticationError):
        auth.authenticate("u7", "secret")


def test_authenticate_user_with_legacy_role(users_repo):
    users_repo.add(username="pak_guru", password="guru123", role="guru")
    auth = AuthService(users_repo, TokenService())

    assert auth.authenticate("pak_guru", "guru123").role == "guru"
