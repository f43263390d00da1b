from .quote_request import (
    CleaningQuoteRequest,
    QuoteRequestStatus,
    RestorationQuoteRequest,
)

__all__ = [
    "CleaningQuoteRequest",
    "QuoteRequestStatus",
    "RestorationQuoteRequest",
]
