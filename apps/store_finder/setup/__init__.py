"""Application setup."""

from store_finder.setup.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
