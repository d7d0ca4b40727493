from __future__ import annotations

from typing import Optional, Protocol

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Interface repository untuk User.

    Catatan (DIP): layer service bergantung pada interface ini, bukan langsung ke DB.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(
        self,
        *,
        username: str,
        name: str,
        email: str,
        password_hash: str,
        role: Role,
    ) -> int:
        raise NotImplementedError

    def update_user(self, user_id: int, *, name: str, email: str, role: Role) -> bool:
        """Return True when a row with ``user_id`` exists."""

        raise NotImplementedError

    def delete_by_id(self, user_id: int) -> bool:
        raise NotImplementedError
