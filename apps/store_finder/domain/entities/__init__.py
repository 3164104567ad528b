"""Domain Entities."""

from store_finder.domain.entities.point_of_interest import PointOfInterest

__all__ = ["PointOfInterest"]
