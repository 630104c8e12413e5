from __future__ import annotations

import re

from ..core.constants import CPF_LENGTH
from ..core.exceptions import InvalidIdentifier, ValidationError

_NON_DIGITS = re.compile(r"[^0-9]")


def require_non_empty(value: str, field_name: str) -> str:
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} é obrigatório")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} deve ter no mínimo {min_len} caracteres")
    return value


def normalize_cpf(value: str) -> str:
    """Strip everything but ASCII digits; the result must have exactly 11 digits."""
    digits = _NON_DIGITS.sub("", str(value or ""))
    if len(digits) != CPF_LENGTH:
        raise InvalidIdentifier()
    return digits


def parse_non_negative_int(value: object, default: int) -> int:
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return parsed if parsed >= 0 else default
