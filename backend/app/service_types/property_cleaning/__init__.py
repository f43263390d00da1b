from .estimate import (
    MINIMUM_SERVICE_CHARGE,
    CleaningQuoteResult,
    CleaningSelection,
    LineItem,
    calculate_cleaning_quote,
    cleaning_quote_payload,
    validate_cleaning_selection,
)

__all__ = [
    "MINIMUM_SERVICE_CHARGE",
    "CleaningQuoteResult",
    "CleaningSelection",
    "LineItem",
    "calculate_cleaning_quote",
    "cleaning_quote_payload",
    "validate_cleaning_selection",
]
