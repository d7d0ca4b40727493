from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Entitas domain: User.

    Catatan: objek data murni (tidak berisi kode akses DB). ``password_hash``
    tidak pernah dikirim ke klien, gunakan ``to_public()``.
    """

    user_id: int
    username: str
    name: str
    email: str
    password_hash: str
    # Stored value as-is; older rows may hold roles outside `Role`.
    role: str

    def to_public(self) -> dict:
        return {
            "id": self.user_id,
            "name": self.name,
            "username": self.username,
            "role": self.role,
        }
