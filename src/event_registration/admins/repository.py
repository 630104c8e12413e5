from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Admin


class AdminRepository(Protocol):
    def get_by_id(self, admin_id: int) -> Optional[Admin]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Admin]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Admin]:
        raise NotImplementedError

    def create_admin(self, *, full_name: str, email: str, password_hash: str) -> int:
        raise NotImplementedError

    def update_admin(
        self,
        admin_id: int,
        *,
        full_name: str,
        email: str,
        password_hash: Optional[str] = None,
    ) -> bool:
        """Keeps the current password when ``password_hash`` is None."""

        raise NotImplementedError

    def delete_by_id(self, admin_id: int) -> bool:
        raise NotImplementedError
