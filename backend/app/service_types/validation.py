"""Shared value types and input checks for the quote engines."""

from __future__ import annotations

import enum
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

_CENT = Decimal("0.01")

MAX_DIMENSION_FT = 500

E = TypeVar("E", bound=enum.Enum)


class QuoteValidationError(ValueError):
    """Raised before any pricing happens when an input is out of range or unknown.

    ``field_errors`` maps every offending field to a short reason code so the
    HTTP layer can render field-level messages.
    """

    def __init__(self, field_errors: Mapping[str, str], message: str = "Invalid quote input"):
        self.field_errors: Dict[str, str] = dict(field_errors)
        self.message = message
        super().__init__(f"{message}: {self.field_errors}")


class ServiceType(str, enum.Enum):
    DRIVEWAY_RESTORATION = "driveway_restoration"
    PATIO_RESTORATION = "patio_restoration"
    WALKWAY_RESTORATION = "walkway_restoration"
    POOL_DECK_RESTORATION = "pool_deck_restoration"


class SurfaceType(str, enum.Enum):
    INTERLOCKING_PAVERS = "interlocking_pavers"
    POURED_CONCRETE = "poured_concrete"
    STAMPED_CONCRETE = "stamped_concrete"
    BRICK_PAVERS = "brick_pavers"


class Condition(str, enum.Enum):
    LIGHTLY_DIRTY = "lightly_dirty"
    HEAVILY_SOILED = "heavily_soiled"
    STAINED_DAMAGED = "stained_damaged"


class Tier(str, enum.Enum):
    BASIC = "basic"
    RECOMMENDED = "recommended"
    PREMIUM = "premium"


def quantize_money(value: Decimal) -> Decimal:
    return value.quantize(_CENT, rounding=ROUND_HALF_UP)


def check_enum(
    errors: Dict[str, str], field: str, value: Any, enum_cls: Type[E]
) -> Optional[E]:
    """Return the enum member for ``value`` or record ``unknown_value``.

    Only exact members or their exact string values are accepted.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value)
        except ValueError:
            pass
    errors[field] = "unknown_value"
    return None


def check_int_range(
    errors: Dict[str, str], field: str, value: Any, low: int, high: int
) -> Optional[int]:
    # bool is an int subclass; True must not read as 1
    if isinstance(value, bool) or not isinstance(value, int):
        errors[field] = "not_an_integer"
        return None
    if value < low or value > high:
        errors[field] = f"out_of_range_{low}_{high}"
        return None
    return value


def check_bool(errors: Dict[str, str], field: str, value: Any) -> Optional[bool]:
    if not isinstance(value, bool):
        errors[field] = "not_a_boolean"
        return None
    return value


def check_choice(
    errors: Dict[str, str], field: str, value: Any, choices: frozenset[Decimal]
) -> Optional[Decimal]:
    """Return ``value`` as a Decimal if it equals one of ``choices``."""
    if isinstance(value, bool) or value is None:
        errors[field] = "not_allowed"
        return None
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        errors[field] = "not_a_number"
        return None
    if amount.is_finite():
        for choice in sorted(choices):
            if amount == choice:
                return choice
    errors[field] = "not_allowed"
    return None


def check_field_names(
    data: Mapping[str, Any], required: tuple[str, ...], optional: tuple[str, ...] = ()
) -> Dict[str, str]:
    """Record ``missing`` required fields and ``unknown_field`` extra keys."""
    errors: Dict[str, str] = {}
    for field in required:
        if field not in data:
            errors[field] = "missing"
    allowed = set(required) | set(optional)
    for key in data:
        if key not in allowed:
            errors[str(key)] = "unknown_field"
    return errors
