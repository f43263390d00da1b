from decimal import Decimal

import pytest

from app.service_types.property_cleaning import (
    CleaningSelection,
    calculate_cleaning_quote,
    cleaning_quote_payload,
    validate_cleaning_selection,
)
from app.service_types.validation import QuoteValidationError


def _lines(result):
    return [(item.service, item.price) for item in result.breakdown]


def test_small_selection_gets_minimum_charge():
    result = calculate_cleaning_quote(
        {"driveway": True, "roof": True, "fence_sides": 2, "fence_price_per_side": 75}
    )
    assert _lines(result) == [
        ("Driveway Cleaning", Decimal("300.00")),
        ("Roof Cleaning", Decimal("300.00")),
        ("Fence Cleaning (2 sides)", Decimal("150.00")),
    ]
    assert result.itemized_total == Decimal("750.00")
    assert result.minimum_service_charge == Decimal("975.00")
    assert result.minimum_applied is True
    assert result.final_total == Decimal("975.00")


def test_full_selection_is_above_the_floor():
    result = calculate_cleaning_quote(
        CleaningSelection(
            driveway=True,
            roof=True,
            siding=True,
            gutters=True,
            fence_sides=4,
            fence_price_per_side=Decimal("150"),
        )
    )
    assert [service for service, _ in _lines(result)] == [
        "Driveway Cleaning",
        "Roof Cleaning",
        "House Siding",
        "Gutters Cleaning",
        "Fence Cleaning (4 sides)",
    ]
    assert result.breakdown[-1].price == Decimal("600.00")
    assert result.itemized_total == Decimal("1800.00")
    assert result.minimum_applied is False
    assert result.final_total == Decimal("1800.00")


def test_exactly_the_minimum_is_not_flagged():
    # 3 * 300 + 1 * 75 = 975
    result = calculate_cleaning_quote(
        {"driveway": True, "roof": True, "siding": True, "fence_sides": 1, "fence_price_per_side": 75}
    )
    assert result.breakdown[-1].service == "Fence Cleaning (1 side)"
    assert result.itemized_total == Decimal("975.00")
    assert result.minimum_applied is False
    assert result.final_total == Decimal("975.00")


def test_nothing_selected_still_prices_at_the_floor():
    result = calculate_cleaning_quote(CleaningSelection())
    assert result.breakdown == ()
    assert result.itemized_total == Decimal("0.00")
    assert result.minimum_applied is True
    assert result.final_total == Decimal("975.00")


def test_zero_fence_sides_ignore_price_per_side():
    cheap = calculate_cleaning_quote({"gutters": True, "fence_sides": 0, "fence_price_per_side": 75})
    dear = calculate_cleaning_quote({"gutters": True, "fence_sides": 0, "fence_price_per_side": 150})
    assert cheap.itemized_total == dear.itemized_total == Decimal("300.00")
    assert [item.service for item in cheap.breakdown] == ["Gutters Cleaning"]


def test_more_fence_sides_never_lower_the_total():
    for per_side in (75, 150):
        totals = [
            calculate_cleaning_quote(
                {"siding": True, "fence_sides": sides, "fence_price_per_side": per_side}
            ).itemized_total
            for sides in range(0, 5)
        ]
        assert totals == sorted(totals)


def test_floor_holds_for_every_selection():
    for mask in range(16):
        for sides in range(0, 5):
            for per_side in (75, 150):
                result = calculate_cleaning_quote(
                    {
                        "driveway": bool(mask & 1),
                        "roof": bool(mask & 2),
                        "siding": bool(mask & 4),
                        "gutters": bool(mask & 8),
                        "fence_sides": sides,
                        "fence_price_per_side": per_side,
                    }
                )
                assert result.final_total >= Decimal("975")
                assert result.final_total == max(result.itemized_total, result.minimum_service_charge)
                assert result.minimum_applied == (result.itemized_total < Decimal("975"))


def test_price_per_side_accepts_numeric_forms():
    for value in (150, "150", 150.0, Decimal("150.00")):
        selection = validate_cleaning_selection(fence_sides=1, fence_price_per_side=value)
        assert selection.fence_price_per_side == Decimal("150")


def test_invalid_fence_inputs_are_rejected():
    with pytest.raises(QuoteValidationError) as exc:
        calculate_cleaning_quote({"fence_sides": 5})
    assert exc.value.field_errors == {"fence_sides": "out_of_range_0_4"}

    with pytest.raises(QuoteValidationError) as exc:
        calculate_cleaning_quote({"fence_sides": 2, "fence_price_per_side": 100})
    assert exc.value.field_errors == {"fence_price_per_side": "not_allowed"}

    # validated even when no fence is selected
    with pytest.raises(QuoteValidationError) as exc:
        calculate_cleaning_quote({"driveway": True, "fence_sides": 0, "fence_price_per_side": "abc"})
    assert exc.value.field_errors == {"fence_price_per_side": "not_a_number"}


def test_non_boolean_flags_are_rejected():
    with pytest.raises(QuoteValidationError) as exc:
        validate_cleaning_selection(driveway="yes", roof=1, fence_sides=False)
    assert exc.value.field_errors == {
        "driveway": "not_a_boolean",
        "roof": "not_a_boolean",
        "fence_sides": "not_an_integer",
    }


def test_payload_and_repeat_calls_are_stable():
    selection = {"roof": True, "gutters": True, "fence_sides": 3, "fence_price_per_side": 75}
    first = cleaning_quote_payload(calculate_cleaning_quote(selection))
    second = cleaning_quote_payload(calculate_cleaning_quote(selection))
    assert first == second
    assert first["breakdown"] == [
        {"service": "Roof Cleaning", "price": Decimal("300.00")},
        {"service": "Gutters Cleaning", "price": Decimal("300.00")},
        {"service": "Fence Cleaning (3 sides)", "price": Decimal("225.00")},
    ]
    assert first["final_total"] == Decimal("975.00")


def test_unknown_selection_keys_are_validation_errors():
    with pytest.raises(QuoteValidationError) as exc:
        calculate_cleaning_quote({"driveway": True, "fence": 2})
    assert exc.value.field_errors == {"fence": "unknown_field"}
