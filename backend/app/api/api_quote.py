from fastapi import APIRouter, BackgroundTasks, Depends, Query, status
from sqlalchemy.orm import Session
import logging
from typing import List

from .. import crud, schemas
from ..services.quote_engines import (
    calculate_cleaning_quote,
    calculate_restoration_quote,
    cleaning_quote_payload,
    restoration_quote_payload,
)
from ..services.quote_notifications import email_quote, notify_new_quote_request, sms_quote
from ..utils import error_response
from .dependencies import get_db, require_admin

router = APIRouter(tags=["Quotes"])
logger = logging.getLogger(__name__)


@router.post("/quotes/restoration/calculate", response_model=schemas.RestorationQuoteOut)
def calculate_restoration(body: schemas.RestorationQuoteIn):
    """Stateless three-tier restoration estimate (nothing is stored)."""
    result = calculate_restoration_quote(body.model_dump())
    return restoration_quote_payload(result)


@router.post("/quotes/property-cleaning/calculate", response_model=schemas.CleaningQuoteOut)
def calculate_property_cleaning(body: schemas.CleaningSelectionIn):
    """Stateless itemized property cleaning estimate with the minimum charge applied."""
    result = calculate_cleaning_quote(body.model_dump())
    return cleaning_quote_payload(result)


@router.post(
    "/quotes/restoration/requests",
    response_model=schemas.QuoteRequestCreated,
    status_code=status.HTTP_201_CREATED,
)
def create_restoration_request(
    body: schemas.RestorationQuoteRequestCreate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
):
    quote = crud.create_restoration_request(db, body)
    background_tasks.add_task(notify_new_quote_request, quote)
    return schemas.QuoteRequestCreated(quote_id=quote.id, reference=quote.reference)


@router.get(
    "/quotes/restoration/requests",
    response_model=List[schemas.RestorationQuoteRequestRead],
    dependencies=[Depends(require_admin)],
)
def list_restoration_requests(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
):
    return crud.list_restoration_requests(db, skip=skip, limit=limit)


@router.get(
    "/quotes/restoration/requests/{quote_id}",
    response_model=schemas.RestorationQuoteRequestRead,
    dependencies=[Depends(require_admin)],
)
def read_restoration_request(quote_id: str, db: Session = Depends(get_db)):
    quote = crud.get_restoration_request(db, quote_id)
    if not quote:
        logger.info("Restoration quote request %s not found", quote_id)
        raise error_response(
            "Restoration quote not found",
            {"quote_id": "not_found"},
            status.HTTP_404_NOT_FOUND,
        )
    return quote


@router.patch(
    "/quotes/restoration/requests/{quote_id}/status",
    response_model=schemas.RestorationQuoteRequestRead,
    dependencies=[Depends(require_admin)],
)
def update_restoration_request_status(
    quote_id: str,
    status_update: schemas.QuoteRequestStatusUpdate,
    db: Session = Depends(get_db),
):
    """Record follow-up progress on a restoration quote request."""
    quote = crud.get_restoration_request(db, quote_id)
    if not quote:
        raise error_response(
            "Restoration quote not found",
            {"quote_id": "not_found"},
            status.HTTP_404_NOT_FOUND,
        )
    return crud.update_request_status(db, quote, status_update.status)


@router.post(
    "/quotes/property-cleaning/requests",
    response_model=schemas.QuoteRequestCreated,
    status_code=status.HTTP_201_CREATED,
)
def create_cleaning_request(
    body: schemas.CleaningQuoteRequestCreate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
):
    quote = crud.create_cleaning_request(db, body)
    background_tasks.add_task(notify_new_quote_request, quote)
    return schemas.QuoteRequestCreated(quote_id=quote.id, reference=quote.reference)


@router.get(
    "/quotes/property-cleaning/requests",
    response_model=List[schemas.CleaningQuoteRequestRead],
    dependencies=[Depends(require_admin)],
)
def list_cleaning_requests(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
):
    return crud.list_cleaning_requests(db, skip=skip, limit=limit)


@router.get(
    "/quotes/property-cleaning/requests/{quote_id}",
    response_model=schemas.CleaningQuoteRequestRead,
    dependencies=[Depends(require_admin)],
)
def read_cleaning_request(quote_id: str, db: Session = Depends(get_db)):
    quote = crud.get_cleaning_request(db, quote_id)
    if not quote:
        logger.info("Property cleaning quote %s not found", quote_id)
        raise error_response(
            "Property cleaning quote not found",
            {"quote_id": "not_found"},
            status.HTTP_404_NOT_FOUND,
        )
    return quote


@router.patch(
    "/quotes/property-cleaning/requests/{quote_id}/status",
    response_model=schemas.CleaningQuoteRequestRead,
    dependencies=[Depends(require_admin)],
)
def update_cleaning_request_status(
    quote_id: str,
    status_update: schemas.QuoteRequestStatusUpdate,
    db: Session = Depends(get_db),
):
    quote = crud.get_cleaning_request(db, quote_id)
    if not quote:
        raise error_response(
            "Property cleaning quote not found",
            {"quote_id": "not_found"},
            status.HTTP_404_NOT_FOUND,
        )
    return crud.update_request_status(db, quote, status_update.status)


def _load_quote(db: Session, body: schemas.SendQuoteIn):
    if body.quote_type == "cleaning":
        quote = crud.get_cleaning_request(db, body.quote_id)
    else:
        quote = crud.get_restoration_request(db, body.quote_id)
    if not quote:
        raise error_response(
            f"{body.quote_type.capitalize()} quote not found",
            {"quote_id": "not_found"},
            status.HTTP_404_NOT_FOUND,
        )
    return quote


@router.post(
    "/quotes/send/email",
    response_model=schemas.SendResult,
    dependencies=[Depends(require_admin)],
)
def send_quote_email(body: schemas.SendQuoteIn, db: Session = Depends(get_db)):
    quote = _load_quote(db, body)
    success, message = email_quote(quote, body.recipient)
    return schemas.SendResult(success=success, message=message)


@router.post(
    "/quotes/send/sms",
    response_model=schemas.SendResult,
    dependencies=[Depends(require_admin)],
)
def send_quote_sms(body: schemas.SendQuoteIn, db: Session = Depends(get_db)):
    quote = _load_quote(db, body)
    success, message = sms_quote(quote, body.recipient)
    return schemas.SendResult(success=success, message=message)
