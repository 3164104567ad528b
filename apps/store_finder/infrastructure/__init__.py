"""Store Finder Infrastructure Layer."""

from store_finder.infrastructure.integrations.nominatim import NominatimHttpClient
from store_finder.infrastructure.integrations.overpass import OverpassHttpClient

__all__ = ["NominatimHttpClient", "OverpassHttpClient"]
