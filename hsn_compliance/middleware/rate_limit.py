"""
Rate limiting for customs API endpoints
"""
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from starlette.requests import Request
import logging

from ..core.config import settings

logger = logging.getLogger(__name__)

CLIENT_ID_HEADER = "X-Client-Id"


def get_client_id_from_request(request: Request) -> str:
    """
    Extract client identifier for rate limiting
    Fallback to IP address if the caller does not identify itself
    """
    client_id = request.headers.get(CLIENT_ID_HEADER)
    if client_id:
        return f"client:{client_id.strip()}"

    return f"ip:{get_remote_address(request)}"


# Create limiter instance
limiter = Limiter(
    key_func=get_client_id_from_request,
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    enabled=settings.RATE_LIMIT_ENABLED,
)


def setup_rate_limiting(app):
    """Setup rate limiting for the FastAPI application"""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    logger.info(f"Rate limiting configured (enabled={settings.RATE_LIMIT_ENABLED})")
