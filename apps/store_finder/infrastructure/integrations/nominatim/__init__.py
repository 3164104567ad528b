"""Nominatim integration."""

from store_finder.infrastructure.integrations.nominatim.nominatim_client import (
    NominatimHttpClient,
)

__all__ = ["NominatimHttpClient"]
