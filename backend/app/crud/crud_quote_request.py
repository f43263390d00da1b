from typing import List, Optional, Union
import logging

from sqlalchemy.orm import Session

from .. import models, schemas
from ..services.quote_engines import (
    QuoteValidationError,
    calculate_cleaning_quote,
    calculate_restoration_quote,
)
from ..service_types.property_cleaning import validate_cleaning_selection

logger = logging.getLogger(__name__)


def create_restoration_request(
    db: Session, request_in: schemas.RestorationQuoteRequestCreate
) -> models.RestorationQuoteRequest:
    """Price the request server-side and store it with the tier prices."""
    result = calculate_restoration_quote(
        request_in.model_dump(
            include={
                "service_type",
                "surface_type",
                "length",
                "width",
                "condition",
                "include_sealer",
                "include_polymeric_sand",
            }
        )
    )
    db_request = models.RestorationQuoteRequest(
        name=request_in.name.strip(),
        email=request_in.email.strip().lower(),
        phone=request_in.phone.strip(),
        address=request_in.address.strip(),
        service_type=request_in.service_type,
        surface_type=request_in.surface_type,
        length=request_in.length,
        width=request_in.width,
        condition=request_in.condition,
        include_sealer=request_in.include_sealer,
        include_polymeric_sand=request_in.include_polymeric_sand,
        square_footage=result.square_footage,
        basic_tier_price=result.basic.price,
        recommended_tier_price=result.recommended.price,
        premium_tier_price=result.premium.price,
        selected_tier=request_in.selected_tier,
        status=models.QuoteRequestStatus.NEW,
    )
    db.add(db_request)
    db.commit()
    db.refresh(db_request)
    logger.info(
        "Stored restoration quote request %s (%s sq ft)",
        db_request.id,
        db_request.square_footage,
    )
    return db_request


def get_restoration_request(db: Session, request_id: str) -> Optional[models.RestorationQuoteRequest]:
    return (
        db.query(models.RestorationQuoteRequest)
        .filter(models.RestorationQuoteRequest.id == request_id)
        .first()
    )


def list_restoration_requests(
    db: Session, skip: int = 0, limit: int = 100
) -> List[models.RestorationQuoteRequest]:
    return (
        db.query(models.RestorationQuoteRequest)
        .order_by(models.RestorationQuoteRequest.created_at.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def create_cleaning_request(
    db: Session, request_in: schemas.CleaningQuoteRequestCreate
) -> models.CleaningQuoteRequest:
    """Store a property cleaning quote; a quote with nothing selected is refused."""
    selection = validate_cleaning_selection(**request_in.services.model_dump())
    if not selection.has_any_service:
        raise QuoteValidationError({"services": "nothing_selected"}, "Select at least one service")
    result = calculate_cleaning_quote(selection)

    customer = request_in.customer_info
    db_request = models.CleaningQuoteRequest(
        customer_name=customer.customer_name.strip(),
        customer_email=customer.customer_email.strip().lower(),
        customer_phone=customer.customer_phone.strip(),
        property_address=customer.property_address.strip(),
        additional_notes=customer.additional_notes,
        driveway=selection.driveway,
        roof=selection.roof,
        siding=selection.siding,
        gutters=selection.gutters,
        fence_sides=selection.fence_sides,
        fence_price_per_side=selection.fence_price_per_side,
        breakdown=[{"service": item.service, "price": float(item.price)} for item in result.breakdown],
        itemized_total=result.itemized_total,
        minimum_applied=result.minimum_applied,
        final_total=result.final_total,
        status=models.QuoteRequestStatus.NEW,
    )
    db.add(db_request)
    db.commit()
    db.refresh(db_request)
    logger.info(
        "Stored property cleaning quote %s (final total %s, minimum applied %s)",
        db_request.id,
        db_request.final_total,
        db_request.minimum_applied,
    )
    return db_request


def get_cleaning_request(db: Session, request_id: str) -> Optional[models.CleaningQuoteRequest]:
    return (
        db.query(models.CleaningQuoteRequest)
        .filter(models.CleaningQuoteRequest.id == request_id)
        .first()
    )


def list_cleaning_requests(
    db: Session, skip: int = 0, limit: int = 100
) -> List[models.CleaningQuoteRequest]:
    return (
        db.query(models.CleaningQuoteRequest)
        .order_by(models.CleaningQuoteRequest.created_at.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def update_request_status(
    db: Session,
    quote: Union[models.RestorationQuoteRequest, models.CleaningQuoteRequest],
    status: models.QuoteRequestStatus,
) -> Union[models.RestorationQuoteRequest, models.CleaningQuoteRequest]:
    """Move a stored quote request through the follow-up pipeline."""
    prev_status = quote.status
    quote.status = status
    db.add(quote)
    db.commit()
    db.refresh(quote)
    logger.info("Quote request %s status %s -> %s", quote.id, prev_status.value, quote.status.value)
    return quote
