"""Store Finder Domain Layer."""

from store_finder.domain.entities import PointOfInterest
from store_finder.domain.enums import StoreBrand
from store_finder.domain.services import haversine_km
from store_finder.domain.value_objects import Coordinates

__all__ = ["PointOfInterest", "Coordinates", "StoreBrand", "haversine_km"]
