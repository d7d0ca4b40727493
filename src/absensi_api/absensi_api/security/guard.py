"""Access guard decorators for JSON routes.

``token_required`` must wrap every protected view; ``karyawan_required`` is
stacked under it on the routes reserved for employees::

    @app.get("/api/users/<int:user_id>")
    @token_required(tokens)
    @karyawan_required
    def get_user(user_id): ...
"""
from __future__ import annotations

from functools import wraps

from flask import g, request

from ..core.exceptions import AuthenticationError, AuthorizationError
from .tokens import TokenClaims, TokenService


def extract_bearer_token(header_value: str | None) -> str:
    if not header_value:
        raise AuthorizationError("Token tidak ditemukan, akses ditolak!")

    parts = header_value.split()
    if len(parts) < 2:
        raise AuthenticationError("Format header Authorization harus 'Bearer <token>'")
    return parts[1]


def current_user() -> TokenClaims:
    claims = g.get("current_user")
    if claims is None:
        raise AuthorizationError("Token tidak ditemukan, akses ditolak!")
    return claims


def token_required(tokens: TokenService):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            token = extract_bearer_token(request.headers.get("Authorization"))
            g.current_user = tokens.verify(token)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def karyawan_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not current_user().is_karyawan:
            raise AuthorizationError("Akses ditolak! Hanya karyawan yang dapat mengakses rute ini.")
        return view(*args, **kwargs)

    return wrapper
