from . import crud_quote_request
from .crud_quote_request import (
    create_cleaning_request,
    create_restoration_request,
    get_cleaning_request,
    get_restoration_request,
    list_cleaning_requests,
    list_restoration_requests,
    update_request_status,
)
