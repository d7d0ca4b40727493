from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from flask_jwt_extended import create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt import ExpiredSignatureError, PyJWTError

from ..core.constants import DEFAULT_TOKEN_EXPIRES_HOURS
from ..core.enums import Role
from ..core.exceptions import AuthenticationError
from ..users.model import User


@dataclass(frozen=True)
class TokenClaims:
    """Decoded session token payload attached to ``flask.g.current_user``."""

    user_id: int
    username: str
    role: str

    @property
    def is_karyawan(self) -> bool:
        return self.role == Role.KARYAWAN.value

    def to_dict(self) -> dict:
        return {"id": self.user_id, "username": self.username, "role": self.role}


class TokenService:
    """Issue and verify stateless JWT session tokens.

    Must be called inside a Flask app context with ``JWTManager`` initialized.
    """

    def __init__(self, *, expires_hours: int = DEFAULT_TOKEN_EXPIRES_HOURS):
        self._expires = timedelta(hours=int(expires_hours))

    def issue(self, user: User) -> str:
        return create_access_token(
            identity=str(user.user_id),
            additional_claims={
                "id": user.user_id,
                "username": user.username,
                "role": user.role,
            },
            expires_delta=self._expires,
        )

    def verify(self, token: str) -> TokenClaims:
        try:
            payload = decode_token(token)
        except ExpiredSignatureError:
            raise AuthenticationError("Token sudah kedaluwarsa!")
        except (PyJWTError, JWTExtendedException):
            raise AuthenticationError("Token tidak valid!")

        try:
            return TokenClaims(
                user_id=int(payload["id"]),
                username=str(payload["username"]),
                role=str(payload["role"]),
            )
        except (KeyError, TypeError, ValueError):
            raise AuthenticationError("Token tidak valid!")
