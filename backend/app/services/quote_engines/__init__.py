"""Quote engines split by service type."""

from app.service_types.property_cleaning import (
    CleaningSelection,
    calculate_cleaning_quote,
    cleaning_quote_payload,
)
from app.service_types.restoration import (
    RestorationQuoteInput,
    calculate_restoration_quote,
    restoration_quote_payload,
)
from app.service_types.validation import QuoteValidationError

__all__ = [
    "CleaningSelection",
    "QuoteValidationError",
    "RestorationQuoteInput",
    "calculate_cleaning_quote",
    "calculate_restoration_quote",
    "cleaning_quote_payload",
    "restoration_quote_payload",
]
