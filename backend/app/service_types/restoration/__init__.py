from .estimate import (
    RestorationQuoteInput,
    RestorationQuoteResult,
    TierQuote,
    calculate_restoration_quote,
    restoration_quote_payload,
    validate_restoration_input,
)

__all__ = [
    "RestorationQuoteInput",
    "RestorationQuoteResult",
    "TierQuote",
    "calculate_restoration_quote",
    "restoration_quote_payload",
    "validate_restoration_input",
]
