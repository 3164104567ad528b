"""Domain Value Objects."""

from store_finder.domain.value_objects.coordinates import Coordinates

__all__ = ["Coordinates"]
