"""
API v1 endpoints package
"""
from .customs import router as customs_router

__all__ = [
    "customs_router",
]
