from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated, List, Literal, Optional

from pydantic import BaseModel, Field, PlainSerializer, StrictBool, StrictInt

from ..models.quote_request import QuoteRequestStatus
from ..service_types.validation import Condition, ServiceType, SurfaceType

# Money stays Decimal in Python and goes out as a JSON number.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


def _choices(enum_cls) -> dict:
    return {"enum": [member.value for member in enum_cls]}


# ─── Stateless calculators ─────────────────────────────────────────────────
# Enum literals and ranges are checked by the quote engines so every bad
# field is reported together; the schemas only pin JSON types.


class RestorationQuoteIn(BaseModel):
    service_type: str = Field(json_schema_extra=_choices(ServiceType))
    surface_type: str = Field(json_schema_extra=_choices(SurfaceType))
    length: StrictInt
    width: StrictInt
    condition: str = Field(json_schema_extra=_choices(Condition))
    include_sealer: StrictBool = True
    include_polymeric_sand: StrictBool = False


class TierQuoteOut(BaseModel):
    name: str
    description: str
    features: List[str]
    price: Money
    price_per_sq_ft: Money


class RestorationTiersOut(BaseModel):
    basic: TierQuoteOut
    recommended: TierQuoteOut
    premium: TierQuoteOut


class RestorationQuoteOut(BaseModel):
    square_footage: int
    tiers: RestorationTiersOut


class CleaningSelectionIn(BaseModel):
    driveway: StrictBool = False
    roof: StrictBool = False
    siding: StrictBool = False
    gutters: StrictBool = False
    fence_sides: StrictInt = 0
    fence_price_per_side: Decimal = Decimal("75")


class CleaningLineItemOut(BaseModel):
    service: str
    price: Money


class CleaningQuoteOut(BaseModel):
    breakdown: List[CleaningLineItemOut]
    itemized_total: Money
    minimum_service_charge: Money
    minimum_applied: bool
    final_total: Money


# ─── Stored quote requests ─────────────────────────────────────────────────


class RestorationQuoteRequestCreate(RestorationQuoteIn):
    name: str = Field(min_length=2)
    email: str = Field(pattern=_EMAIL_PATTERN)
    phone: str = Field(min_length=10)
    address: str = Field(min_length=5)
    selected_tier: Optional[Literal["basic", "recommended", "premium"]] = None


class RestorationQuoteRequestRead(BaseModel):
    id: str
    reference: str
    name: str
    email: str
    phone: str
    address: str
    service_type: str
    surface_type: str
    length: int
    width: int
    condition: str
    include_sealer: bool
    include_polymeric_sand: bool
    square_footage: int
    basic_tier_price: Money
    recommended_tier_price: Money
    premium_tier_price: Money
    selected_tier: Optional[str] = None
    status: QuoteRequestStatus
    created_at: datetime

    model_config = {"from_attributes": True}


class CleaningCustomerInfo(BaseModel):
    customer_name: str = Field(min_length=2)
    customer_email: str = Field(pattern=_EMAIL_PATTERN)
    customer_phone: str = Field(min_length=10)
    property_address: str = Field(min_length=10)
    additional_notes: Optional[str] = None


class CleaningQuoteRequestCreate(BaseModel):
    customer_info: CleaningCustomerInfo
    services: CleaningSelectionIn


class CleaningQuoteRequestRead(BaseModel):
    id: str
    reference: str
    customer_name: str
    customer_email: str
    customer_phone: str
    property_address: str
    additional_notes: Optional[str] = None
    driveway: bool
    roof: bool
    siding: bool
    gutters: bool
    fence_sides: int
    fence_price_per_side: Money
    breakdown: List[CleaningLineItemOut]
    itemized_total: Money
    minimum_applied: bool
    final_total: Money
    status: QuoteRequestStatus
    created_at: datetime

    model_config = {"from_attributes": True}


class QuoteRequestStatusUpdate(BaseModel):
    status: QuoteRequestStatus


class QuoteRequestCreated(BaseModel):
    success: bool = True
    quote_id: str
    reference: str


# ─── Sending stored quotes ────────────────────────────────────────────────


class SendQuoteIn(BaseModel):
    quote_id: str
    quote_type: Literal["restoration", "cleaning"]
    recipient: str = Field(min_length=3)


class SendResult(BaseModel):
    success: bool
    message: str
