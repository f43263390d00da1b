from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Tuple

from ..validation import (
    QuoteValidationError,
    check_bool,
    check_choice,
    check_field_names,
    check_int_range,
    quantize_money,
)

SURFACE_PRICE = Decimal("300")
MINIMUM_SERVICE_CHARGE = Decimal("975")
FENCE_PRICES_PER_SIDE = frozenset({Decimal("75"), Decimal("150")})
MAX_FENCE_SIDES = 4
SELECTION_FIELDS = ("driveway", "roof", "siding", "gutters", "fence_sides", "fence_price_per_side")

# Breakdown order is part of the contract.
SURFACE_LINES: Tuple[Tuple[str, str], ...] = (
    ("driveway", "Driveway Cleaning"),
    ("roof", "Roof Cleaning"),
    ("siding", "House Siding"),
    ("gutters", "Gutters Cleaning"),
)


@dataclass(frozen=True)
class CleaningSelection:
    driveway: bool = False
    roof: bool = False
    siding: bool = False
    gutters: bool = False
    fence_sides: int = 0
    fence_price_per_side: Decimal = Decimal("75")

    @property
    def has_any_service(self) -> bool:
        return any(getattr(self, key) for key, _ in SURFACE_LINES) or self.fence_sides > 0


@dataclass(frozen=True)
class LineItem:
    service: str
    price: Decimal


@dataclass(frozen=True)
class CleaningQuoteResult:
    breakdown: Tuple[LineItem, ...]
    itemized_total: Decimal
    minimum_service_charge: Decimal
    minimum_applied: bool
    final_total: Decimal


def validate_cleaning_selection(
    *,
    driveway: Any = False,
    roof: Any = False,
    siding: Any = False,
    gutters: Any = False,
    fence_sides: Any = 0,
    fence_price_per_side: Any = Decimal("75"),
) -> CleaningSelection:
    errors: Dict[str, str] = {}
    flags = {
        "driveway": check_bool(errors, "driveway", driveway),
        "roof": check_bool(errors, "roof", roof),
        "siding": check_bool(errors, "siding", siding),
        "gutters": check_bool(errors, "gutters", gutters),
    }
    sides = check_int_range(errors, "fence_sides", fence_sides, 0, MAX_FENCE_SIDES)
    # Checked even when no fence sides are selected.
    per_side = check_choice(errors, "fence_price_per_side", fence_price_per_side, FENCE_PRICES_PER_SIDE)
    if errors:
        raise QuoteValidationError(errors, "Invalid property cleaning selection")
    return CleaningSelection(fence_sides=sides, fence_price_per_side=per_side, **flags)


def fence_label(sides: int) -> str:
    return f"Fence Cleaning ({sides} {'side' if sides == 1 else 'sides'})"


def calculate_cleaning_quote(selection: CleaningSelection | Mapping[str, Any]) -> CleaningQuoteResult:
    """Sum the selected surfaces and apply the minimum service charge."""
    if isinstance(selection, CleaningSelection):
        fields = {
            "driveway": selection.driveway,
            "roof": selection.roof,
            "siding": selection.siding,
            "gutters": selection.gutters,
            "fence_sides": selection.fence_sides,
            "fence_price_per_side": selection.fence_price_per_side,
        }
    else:
        fields = dict(selection)
        name_errors = check_field_names(fields, (), SELECTION_FIELDS)
        if name_errors:
            raise QuoteValidationError(name_errors, "Invalid property cleaning selection")
    checked = validate_cleaning_selection(**fields)

    items: List[LineItem] = []
    for key, label in SURFACE_LINES:
        if getattr(checked, key):
            items.append(LineItem(service=label, price=quantize_money(SURFACE_PRICE)))
    if checked.fence_sides > 0:
        items.append(
            LineItem(
                service=fence_label(checked.fence_sides),
                price=quantize_money(checked.fence_price_per_side * checked.fence_sides),
            )
        )

    itemized = quantize_money(sum((item.price for item in items), Decimal("0")))
    minimum = quantize_money(MINIMUM_SERVICE_CHARGE)
    return CleaningQuoteResult(
        breakdown=tuple(items),
        itemized_total=itemized,
        minimum_service_charge=minimum,
        minimum_applied=itemized < minimum,
        final_total=max(itemized, minimum),
    )


def cleaning_quote_payload(result: CleaningQuoteResult) -> dict:
    return {
        "breakdown": [{"service": item.service, "price": item.price} for item in result.breakdown],
        "itemized_total": result.itemized_total,
        "minimum_service_charge": result.minimum_service_charge,
        "minimum_applied": result.minimum_applied,
        "final_total": result.final_total,
    }
