"""Domain Enums."""

from store_finder.domain.enums.store_brand import StoreBrand

__all__ = ["StoreBrand"]
