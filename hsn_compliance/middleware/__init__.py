"""
Middleware package for FastAPI application
"""
from .rate_limit import limiter, setup_rate_limiting, get_client_id_from_request

__all__ = ["limiter", "setup_rate_limiting", "get_client_id_from_request"]
