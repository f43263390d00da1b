from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Mapping, Tuple

from ..validation import (
    MAX_DIMENSION_FT,
    Condition,
    QuoteValidationError,
    ServiceType,
    SurfaceType,
    Tier,
    check_bool,
    check_enum,
    check_field_names,
    check_int_range,
    quantize_money,
)
from .catalog import TIER_CONTENT
from .pricing import TIER_ORDER, rate_per_sq_ft

REQUIRED_FIELDS = ("service_type", "surface_type", "length", "width", "condition")
OPTIONAL_FIELDS = ("include_sealer", "include_polymeric_sand")


@dataclass(frozen=True)
class RestorationQuoteInput:
    service_type: ServiceType
    surface_type: SurfaceType
    length: int
    width: int
    condition: Condition
    include_sealer: bool = True
    include_polymeric_sand: bool = False

    @property
    def square_footage(self) -> int:
        return self.length * self.width


@dataclass(frozen=True)
class TierQuote:
    name: str
    description: str
    features: Tuple[str, ...]
    price: Decimal


@dataclass(frozen=True)
class RestorationQuoteResult:
    square_footage: int
    basic: TierQuote
    recommended: TierQuote
    premium: TierQuote

    @property
    def tiers(self) -> Dict[Tier, TierQuote]:
        return {
            Tier.BASIC: self.basic,
            Tier.RECOMMENDED: self.recommended,
            Tier.PREMIUM: self.premium,
        }

    def price_per_sq_ft(self, tier: Tier) -> Decimal:
        return quantize_money(self.tiers[tier].price / self.square_footage)


def validate_restoration_input(
    *,
    service_type: Any,
    surface_type: Any,
    length: Any,
    width: Any,
    condition: Any,
    include_sealer: Any = True,
    include_polymeric_sand: Any = False,
) -> RestorationQuoteInput:
    """Return a checked input or raise with every bad field listed."""
    errors: Dict[str, str] = {}
    svc = check_enum(errors, "service_type", service_type, ServiceType)
    surface = check_enum(errors, "surface_type", surface_type, SurfaceType)
    cond = check_enum(errors, "condition", condition, Condition)
    length_ft = check_int_range(errors, "length", length, 1, MAX_DIMENSION_FT)
    width_ft = check_int_range(errors, "width", width, 1, MAX_DIMENSION_FT)
    sealer = check_bool(errors, "include_sealer", include_sealer)
    sand = check_bool(errors, "include_polymeric_sand", include_polymeric_sand)
    if errors:
        raise QuoteValidationError(errors, "Invalid restoration quote input")
    return RestorationQuoteInput(
        service_type=svc,
        surface_type=surface,
        length=length_ft,
        width=width_ft,
        condition=cond,
        include_sealer=sealer,
        include_polymeric_sand=sand,
    )


def calculate_restoration_quote(data: RestorationQuoteInput | Mapping[str, Any]) -> RestorationQuoteResult:
    """Price the three restoration tiers for a surface.

    Accepts a :class:`RestorationQuoteInput` or a plain mapping of the same
    fields; either way every field is re-checked before any arithmetic.
    """
    if isinstance(data, RestorationQuoteInput):
        fields = {
            "service_type": data.service_type,
            "surface_type": data.surface_type,
            "length": data.length,
            "width": data.width,
            "condition": data.condition,
            "include_sealer": data.include_sealer,
            "include_polymeric_sand": data.include_polymeric_sand,
        }
    else:
        fields = dict(data)
        name_errors = check_field_names(fields, REQUIRED_FIELDS, OPTIONAL_FIELDS)
        if name_errors:
            raise QuoteValidationError(name_errors, "Invalid restoration quote input")
    checked = validate_restoration_input(**fields)

    sq_ft = checked.square_footage
    tiers = {}
    for tier in TIER_ORDER:
        rate = rate_per_sq_ft(
            tier,
            checked.surface_type,
            checked.condition,
            include_sealer=checked.include_sealer,
            include_polymeric_sand=checked.include_polymeric_sand,
        )
        content = TIER_CONTENT[tier]
        tiers[tier.value] = TierQuote(
            name=content["name"],
            description=content["description"],
            features=tuple(content["features"]),
            price=quantize_money(Decimal(sq_ft) * rate),
        )
    return RestorationQuoteResult(square_footage=sq_ft, **tiers)


def restoration_quote_payload(result: RestorationQuoteResult) -> dict:
    return {
        "square_footage": result.square_footage,
        "tiers": {
            tier.value: {
                "name": quote.name,
                "description": quote.description,
                "features": list(quote.features),
                "price": quote.price,
                "price_per_sq_ft": result.price_per_sq_ft(tier),
            }
            for tier, quote in result.tiers.items()
        },
    }
