"""
Configuration Module

Application configuration loaded from environment variables.

Usage:
======
    from panshare.config.settings import settings

    db_url = settings.DATABASE_URL
    delay = settings.SECRET_REVEAL_DELAY_MS
"""

from panshare.config.settings import settings, get_settings, Settings

__all__ = [
    "settings",
    "get_settings",
    "Settings",
]
