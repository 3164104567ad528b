"""HTTP Schemas."""

from store_finder.presentation.http.schemas.location import CoordinatesSchema, GeoResponse
from store_finder.presentation.http.schemas.store import StoreItem, StoreResponse

__all__ = ["CoordinatesSchema", "GeoResponse", "StoreItem", "StoreResponse"]
