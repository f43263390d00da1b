from decimal import Decimal

import pytest

from app.service_types.restoration import (
    RestorationQuoteInput,
    calculate_restoration_quote,
    restoration_quote_payload,
    validate_restoration_input,
)
from app.service_types.restoration.pricing import CLEANING_RATES, cleaning_rate_per_sq_ft, rate_per_sq_ft
from app.service_types.validation import (
    Condition,
    QuoteValidationError,
    ServiceType,
    SurfaceType,
    Tier,
)


def _input(**overrides):
    data = {
        "service_type": "driveway_restoration",
        "surface_type": "interlocking_pavers",
        "length": 30,
        "width": 60,
        "condition": "lightly_dirty",
        "include_sealer": True,
        "include_polymeric_sand": False,
    }
    data.update(overrides)
    return data


def test_default_driveway_scenario_matches_rate_table():
    result = calculate_restoration_quote(_input())
    assert result.square_footage == 1800
    # cleaning 0.35 + acrylic 0.75 for basic/recommended, penetrating 1.25 for premium
    assert result.basic.price == Decimal("1980.00")
    assert result.recommended.price == Decimal("1980.00")
    assert result.premium.price == Decimal("2880.00")
    assert result.price_per_sq_ft(Tier.BASIC) == Decimal("1.10")
    assert result.price_per_sq_ft(Tier.PREMIUM) == Decimal("1.60")


def test_polymeric_sand_applies_to_recommended_and_premium_only():
    result = calculate_restoration_quote(_input(include_polymeric_sand=True))
    assert result.basic.price == Decimal("1980.00")
    assert result.recommended.price == Decimal("2880.00")
    assert result.premium.price == Decimal("3780.00")


def test_without_sealer_tiers_price_the_cleaning_pass():
    result = calculate_restoration_quote(
        _input(surface_type="brick_pavers", condition="heavily_soiled", length=10, width=10, include_sealer=False)
    )
    assert result.basic.price == Decimal("50.00")
    assert result.recommended.price == Decimal("50.00")
    assert result.premium.price == Decimal("50.00")


def test_condition_raises_price():
    light = calculate_restoration_quote(_input(condition="lightly_dirty"))
    heavy = calculate_restoration_quote(_input(condition="heavily_soiled"))
    stained = calculate_restoration_quote(_input(condition="stained_damaged"))
    assert light.basic.price < heavy.basic.price < stained.basic.price
    # 1800 * (0.525 + 0.75)
    assert stained.basic.price == Decimal("2295.00")


def test_prices_round_half_up_to_cents():
    # 2 sq ft * 0.3125 = 0.625 -> 0.63 (bankers rounding would give 0.62)
    result = calculate_restoration_quote(
        _input(surface_type="poured_concrete", condition="heavily_soiled", length=1, width=2, include_sealer=False)
    )
    assert result.basic.price == Decimal("0.63")


def test_tier_ordering_holds_across_inputs():
    for surface in SurfaceType:
        for condition in Condition:
            for sealer in (True, False):
                for sand in (True, False):
                    for length, width in ((1, 1), (7, 13), (250, 3), (500, 500)):
                        result = calculate_restoration_quote(
                            _input(
                                surface_type=surface.value,
                                condition=condition.value,
                                length=length,
                                width=width,
                                include_sealer=sealer,
                                include_polymeric_sand=sand,
                            )
                        )
                        assert result.square_footage == length * width
                        assert Decimal("0") <= result.basic.price
                        assert result.basic.price <= result.recommended.price <= result.premium.price


def test_every_surface_and_condition_has_a_rate():
    for surface in SurfaceType:
        for condition in Condition:
            assert CLEANING_RATES[surface][condition] > 0
            assert cleaning_rate_per_sq_ft(surface, condition) == CLEANING_RATES[surface][condition]
            assert rate_per_sq_ft(
                Tier.BASIC, surface, condition, include_sealer=False, include_polymeric_sand=False
            ) == CLEANING_RATES[surface][condition]


def test_same_input_gives_identical_output():
    first = calculate_restoration_quote(_input(include_polymeric_sand=True))
    second = calculate_restoration_quote(_input(include_polymeric_sand=True))
    assert first == second
    assert restoration_quote_payload(first) == restoration_quote_payload(second)


def test_accepts_typed_input():
    data = RestorationQuoteInput(
        service_type=ServiceType.PATIO_RESTORATION,
        surface_type=SurfaceType.STAMPED_CONCRETE,
        length=20,
        width=20,
        condition=Condition.LIGHTLY_DIRTY,
    )
    result = calculate_restoration_quote(data)
    # 400 * (0.30 + 0.75)
    assert result.basic.price == Decimal("420.00")


def test_tier_content_is_static():
    result = calculate_restoration_quote(_input())
    assert result.basic.name == "Basic Restoration"
    assert result.recommended.features[0] == "Everything in Basic package"
    assert result.premium.name == "Premium Protection"
    payload = restoration_quote_payload(result)
    assert list(payload["tiers"]) == ["basic", "recommended", "premium"]
    assert payload["tiers"]["premium"]["features"][1] == "Upgrade to Penetrating Siloxane/Silane Sealer"


def test_dimension_bounds_are_rejected():
    for field, value in (("length", 0), ("length", 501), ("width", -3), ("width", 1000)):
        with pytest.raises(QuoteValidationError) as exc:
            calculate_restoration_quote(_input(**{field: value}))
        assert exc.value.field_errors == {field: "out_of_range_1_500"}


def test_boundary_dimensions_are_accepted():
    assert calculate_restoration_quote(_input(length=1, width=1)).square_footage == 1
    assert calculate_restoration_quote(_input(length=500, width=500)).square_footage == 250000


def test_unknown_enum_literals_are_not_coerced():
    with pytest.raises(QuoteValidationError) as exc:
        calculate_restoration_quote(_input(surface_type="cobblestone"))
    assert exc.value.field_errors == {"surface_type": "unknown_value"}

    with pytest.raises(QuoteValidationError) as exc:
        calculate_restoration_quote(_input(condition="Lightly_Dirty"))
    assert exc.value.field_errors == {"condition": "unknown_value"}


def test_all_bad_fields_are_reported_together():
    with pytest.raises(QuoteValidationError) as exc:
        validate_restoration_input(
            service_type="roof_restoration",
            surface_type="interlocking_pavers",
            length=True,
            width="60",
            condition="lightly_dirty",
            include_sealer="yes",
        )
    assert exc.value.field_errors == {
        "service_type": "unknown_value",
        "length": "not_an_integer",
        "width": "not_an_integer",
        "include_sealer": "not_a_boolean",
    }
    assert isinstance(exc.value, ValueError)


def test_missing_and_unexpected_keys_are_validation_errors():
    data = _input(colour="grey")
    del data["condition"]
    with pytest.raises(QuoteValidationError) as exc:
        calculate_restoration_quote(data)
    assert exc.value.field_errors == {"condition": "missing", "colour": "unknown_field"}


def test_optional_flags_may_be_omitted():
    data = _input()
    del data["include_sealer"]
    del data["include_polymeric_sand"]
    assert calculate_restoration_quote(data).basic.price == Decimal("1980.00")


def test_tiers_share_the_cleaning_pass_and_differ_by_add_ons():
    surface, condition = SurfaceType.BRICK_PAVERS, Condition.HEAVILY_SOILED
    cleaning = cleaning_rate_per_sq_ft(surface, condition)
    rates = {
        tier: rate_per_sq_ft(tier, surface, condition, include_sealer=True, include_polymeric_sand=True)
        for tier in Tier
    }
    assert rates[Tier.BASIC] == cleaning + Decimal("0.75")
    assert rates[Tier.RECOMMENDED] == cleaning + Decimal("0.75") + Decimal("0.50")
    assert rates[Tier.PREMIUM] == cleaning + Decimal("1.25") + Decimal("0.50")
