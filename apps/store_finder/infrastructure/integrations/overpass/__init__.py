"""Overpass API integration."""

from store_finder.infrastructure.integrations.overpass.overpass_client import (
    OverpassHttpClient,
    build_convenience_query,
)

__all__ = ["OverpassHttpClient", "build_convenience_query"]
