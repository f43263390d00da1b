import hmac
import logging
from typing import Optional

from fastapi import Header, status

from ..core.config import settings
from ..database import get_db  # re-exported so tests can override one symbol
from ..utils import error_response

logger = logging.getLogger(__name__)

__all__ = ["get_db", "require_admin"]


def require_admin(x_admin_token: Optional[str] = Header(default=None)) -> None:
    """Gate admin-only routes on the shared ``X-Admin-Token`` secret."""
    expected = settings.ADMIN_API_TOKEN
    if not expected:
        logger.warning("Admin route called but ADMIN_API_TOKEN is not configured")
        raise error_response(
            "Admin access is disabled",
            {"admin": "not_configured"},
            status.HTTP_403_FORBIDDEN,
        )
    if not x_admin_token or not hmac.compare_digest(expected.encode(), x_admin_token.encode()):
        raise error_response(
            "Invalid admin token",
            {"x_admin_token": "invalid"},
            status.HTTP_401_UNAUTHORIZED,
        )
