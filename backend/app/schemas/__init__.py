from .quote_request import (
    CleaningCustomerInfo,
    CleaningLineItemOut,
    CleaningQuoteOut,
    CleaningQuoteRequestCreate,
    CleaningQuoteRequestRead,
    CleaningSelectionIn,
    QuoteRequestCreated,
    QuoteRequestStatusUpdate,
    RestorationQuoteIn,
    RestorationQuoteOut,
    RestorationQuoteRequestCreate,
    RestorationQuoteRequestRead,
    SendQuoteIn,
    SendResult,
    TierQuoteOut,
)

__all__ = [
    "CleaningCustomerInfo",
    "CleaningLineItemOut",
    "CleaningQuoteOut",
    "CleaningQuoteRequestCreate",
    "CleaningQuoteRequestRead",
    "CleaningSelectionIn",
    "QuoteRequestCreated",
    "QuoteRequestStatusUpdate",
    "RestorationQuoteIn",
    "RestorationQuoteOut",
    "RestorationQuoteRequestCreate",
    "RestorationQuoteRequestRead",
    "SendQuoteIn",
    "SendResult",
    "TierQuoteOut",
]
