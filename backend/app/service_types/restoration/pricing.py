"""Published restoration rate tables (USD per square foot).

Cleaning rates are the surface base rate scaled by the condition multiplier
(light x1.0, heavy x1.25, stained/damaged x1.5), written out per combination
so every surface/condition pair is listed explicitly. Tune prices here; the
engine in :mod:`.estimate` only reads these tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict

from ..validation import Condition, SurfaceType, Tier

CLEANING_RATES: Dict[SurfaceType, Dict[Condition, Decimal]] = {
    SurfaceType.INTERLOCKING_PAVERS: {
        Condition.LIGHTLY_DIRTY: Decimal("0.35"),
        Condition.HEAVILY_SOILED: Decimal("0.4375"),
        Condition.STAINED_DAMAGED: Decimal("0.525"),
    },
    SurfaceType.POURED_CONCRETE: {
        Condition.LIGHTLY_DIRTY: Decimal("0.25"),
        Condition.HEAVILY_SOILED: Decimal("0.3125"),
        Condition.STAINED_DAMAGED: Decimal("0.375"),
    },
    SurfaceType.STAMPED_CONCRETE: {
        Condition.LIGHTLY_DIRTY: Decimal("0.30"),
        Condition.HEAVILY_SOILED: Decimal("0.375"),
        Condition.STAINED_DAMAGED: Decimal("0.45"),
    },
    SurfaceType.BRICK_PAVERS: {
        Condition.LIGHTLY_DIRTY: Decimal("0.40"),
        Condition.HEAVILY_SOILED: Decimal("0.50"),
        Condition.STAINED_DAMAGED: Decimal("0.60"),
    },
}

ACRYLIC_SEALER_RATE = Decimal("0.75")
PENETRATING_SEALER_RATE = Decimal("1.25")
POLYMERIC_SAND_RATE = Decimal("0.50")


@dataclass(frozen=True)
class TierRates:
    sealer_rate: Decimal  # charged only when the sealer add-on is selected
    includes_joint_sand: bool  # polymeric sand add-on applies to this tier


# Each tier must be at least as inclusive as the one before it.
TIER_RATES: Dict[Tier, TierRates] = {
    Tier.BASIC: TierRates(sealer_rate=ACRYLIC_SEALER_RATE, includes_joint_sand=False),
    Tier.RECOMMENDED: TierRates(sealer_rate=ACRYLIC_SEALER_RATE, includes_joint_sand=True),
    Tier.PREMIUM: TierRates(sealer_rate=PENETRATING_SEALER_RATE, includes_joint_sand=True),
}

TIER_ORDER = (Tier.BASIC, Tier.RECOMMENDED, Tier.PREMIUM)


def cleaning_rate_per_sq_ft(surface_type: SurfaceType, condition: Condition) -> Decimal:
    """Cleaning pass rate shared by every tier; tiers differ only by add-ons."""
    return CLEANING_RATES[surface_type][condition]


def rate_per_sq_ft(
    tier: Tier,
    surface_type: SurfaceType,
    condition: Condition,
    *,
    include_sealer: bool,
    include_polymeric_sand: bool,
) -> Decimal:
    tier_rates = TIER_RATES[tier]
    rate = cleaning_rate_per_sq_ft(surface_type, condition)
    if include_sealer:
        rate += tier_rates.sealer_rate
    if include_polymeric_sand and tier_rates.includes_joint_sand:
        rate += POLYMERIC_SAND_RATE
    return rate


def _check_tier_ordering() -> None:
    prev = None
    for tier in TIER_ORDER:
        rates = TIER_RATES[tier]
        if prev is not None:
            if rates.sealer_rate < prev.sealer_rate:
                raise RuntimeError(f"sealer rate for {tier.value} is below the previous tier")
            if prev.includes_joint_sand and not rates.includes_joint_sand:
                raise RuntimeError(f"{tier.value} drops joint sand included by the previous tier")
        prev = rates
    for surface in SurfaceType:
        for condition in Condition:
            if CLEANING_RATES[surface][condition] < 0:
                raise RuntimeError(f"negative cleaning rate for {surface.value}/{condition.value}")


_check_tier_ordering()
