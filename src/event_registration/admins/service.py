from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.exceptions import AuthenticationError, ConflictError, NotFoundError, ValidationError
from .model import Admin
from .repository import AdminRepository


@dataclass(frozen=True)
class SessionAdmin:
    """What we store into Flask session after login."""

    admin_id: int
    full_name: str
    email: str


class AuthService:
    """Use case: authenticate admin (login)."""

    def __init__(self, admins: AdminRepository):
        self._admins = admins

    def authenticate(self, email: str, password: str) -> SessionAdmin:
        if not email or not password:
            raise ValidationError("E-mail e senha são obrigatórios")

        admin = self._admins.get_by_email(email.strip().lower())
        if not admin:
            raise AuthenticationError("Credenciais inválidas")

        try:
            ok = check_password_hash(admin.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("Credenciais inválidas")

        return SessionAdmin(admin_id=admin.admin_id, full_name=admin.full_name, email=admin.email)


class AdminService:
    """Use case: manage admin accounts."""

    def __init__(self, admins: AdminRepository):
        self._admins = admins

    def list_admins(self) -> list[dict]:
        return [a.to_public_dict() for a in self._admins.list_all()]

    def create_admin(self, *, full_name: str, email: str, password: str) -> Admin:
        full_name = require_non_empty(full_name, "Nome")
        email = require_non_empty(email, "E-mail").lower()
        require_non_empty(password, "Senha")
        require_min_length(password, "A senha", MIN_PASSWORD_LENGTH)

        if self._admins.get_by_email(email):
            raise ConflictError("Já existe um administrador com este e-mail")

        password_hash = generate_password_hash(password)
        admin_id = self._admins.create_admin(full_name=full_name, email=email, password_hash=password_hash)
        return Admin(admin_id=admin_id, full_name=full_name, email=email, password_hash=password_hash)

    def update_admin(self, admin_id: int, *, full_name: str, email: str, password: Optional[str] = None) -> None:
        full_name = require_non_empty(full_name, "Nome")
        email = require_non_empty(email, "E-mail").lower()

        if not self._admins.get_by_id(admin_id):
            raise NotFoundError("Administrador não encontrado")

        other = self._admins.get_by_email(email)
        if other and other.admin_id != int(admin_id):
            raise ConflictError("Já existe outro administrador com este e-mail")

        password_hash = None
        if password and password.strip():
            require_min_length(password, "A senha", MIN_PASSWORD_LENGTH)
            password_hash = generate_password_hash(password)

        self._admins.update_admin(admin_id, full_name=full_name, email=email, password_hash=password_hash)

    def delete_admin(self, *, current_admin_id: int, admin_id: int) -> None:
        if int(admin_id) == int(current_admin_id):
            raise ValidationError("Você não pode excluir sua própria conta")

        if not self._admins.get_by_id(admin_id):
            raise NotFoundError("Administrador não encontrado")

        if not self._admins.delete_by_id(admin_id):
            raise NotFoundError("Administrador não encontrado")
