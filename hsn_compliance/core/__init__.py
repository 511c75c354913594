"""
Core configuration package
"""
from .config import settings, get_settings, Settings

__all__ = [
    "settings",
    "get_settings",
    "Settings",
]
