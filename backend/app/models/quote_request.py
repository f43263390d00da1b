import enum
import uuid

from sqlalchemy import (
    Boolean,
    Column,
    Integer,
    Numeric,
    String,
    Text,
    JSON,
    Enum as SQLAlchemyEnum,
)

from .base import BaseModel


class QuoteRequestStatus(str, enum.Enum):
    NEW = "new"
    CONTACTED = "contacted"
    BOOKED = "booked"
    CLOSED = "closed"


def _new_id() -> str:
    return uuid.uuid4().hex


def _status_column():
    # Persist lowercase values
    return Column(
        SQLAlchemyEnum(
            QuoteRequestStatus,
            name="quoterequeststatus",
            values_callable=lambda enum: [e.value for e in enum],
        ),
        nullable=False,
        default=QuoteRequestStatus.NEW,
    )


class RestorationQuoteRequest(BaseModel):
    """A customer's request for a paver restoration quote with the priced tiers."""

    __tablename__ = "restoration_quote_requests"

    id = Column(String(32), primary_key=True, default=_new_id)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, index=True)
    phone = Column(String, nullable=False)
    address = Column(String, nullable=False)

    service_type = Column(String, nullable=False)
    surface_type = Column(String, nullable=False)
    length = Column(Integer, nullable=False)
    width = Column(Integer, nullable=False)
    condition = Column(String, nullable=False)
    include_sealer = Column(Boolean, nullable=False, default=True)
    include_polymeric_sand = Column(Boolean, nullable=False, default=False)

    square_footage = Column(Integer, nullable=False)
    basic_tier_price = Column(Numeric(10, 2), nullable=False)
    recommended_tier_price = Column(Numeric(10, 2), nullable=False)
    premium_tier_price = Column(Numeric(10, 2), nullable=False)
    selected_tier = Column(String, nullable=True)

    status = _status_column()

    @property
    def reference(self) -> str:
        return (self.id or "")[:8].upper()


class CleaningQuoteRequest(BaseModel):
    """A submitted property cleaning quote with its itemized totals."""

    __tablename__ = "cleaning_quote_requests"

    id = Column(String(32), primary_key=True, default=_new_id)
    customer_name = Column(String, nullable=False)
    customer_email = Column(String, nullable=False, index=True)
    customer_phone = Column(String, nullable=False)
    property_address = Column(String, nullable=False)
    additional_notes = Column(Text, nullable=True)

    driveway = Column(Boolean, nullable=False, default=False)
    roof = Column(Boolean, nullable=False, default=False)
    siding = Column(Boolean, nullable=False, default=False)
    gutters = Column(Boolean, nullable=False, default=False)
    fence_sides = Column(Integer, nullable=False, default=0)
    fence_price_per_side = Column(Numeric(10, 2), nullable=False)

    breakdown = Column(JSON, nullable=False, default=list)
    itemized_total = Column(Numeric(10, 2), nullable=False)
    minimum_applied = Column(Boolean, nullable=False)
    final_total = Column(Numeric(10, 2), nullable=False)

    status = _status_column()

    @property
    def reference(self) -> str:
        return (self.id or "")[:8].upper()
