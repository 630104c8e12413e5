from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .enums import EnrollmentDay, EventDay


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidEnrollmentDay(ValidationError):
    def __init__(self, message: str = "Dia de participação inválido"):
        super().__init__(message)


class InvalidIdentifier(ValidationError):
    def __init__(self, message: str = "CPF inválido"):
        super().__init__(message)


class InvalidDay(ValidationError):
    def __init__(self, message: str = "Dia de check-in inválido"):
        super().__init__(message)


class NotEnrolledForDay(ValidationError):
    """Participant exists but is not enrolled for the requested day."""

    def __init__(self, enrolled_day: "EnrollmentDay"):
        self.enrolled_day = enrolled_day
        super().__init__(f"Participante inscrito apenas para o {enrolled_day.label}")


class ConflictError(DomainError):
    """Raised when the request clashes with existing state."""


class DuplicateRegistration(ConflictError):
    def __init__(self, message: str = "CPF já inscrito neste evento"):
        super().__init__(message)


class CapacityExceeded(ConflictError):
    def __init__(self, day: "EventDay"):
        self.day = day
        super().__init__(f"Vagas esgotadas para o {day.label}")


class NotFoundError(DomainError):
    """Raised when an id or CPF does not match any record."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class InfrastructureError(Exception):
    """Raised when the store cannot be reached or a statement fails."""
