"""Application Services."""

from store_finder.application.stores.services.brand_classifier import (
    BRAND_PATTERNS,
    BrandClassifierService,
    BrandPattern,
)
from store_finder.application.stores.services.location_resolver import (
    DEFAULT_COORDINATES,
    RequesterLocationResolver,
)
from store_finder.application.stores.services.store_result_builder import StoreResultBuilder

__all__ = [
    "BRAND_PATTERNS",
    "BrandClassifierService",
    "BrandPattern",
    "DEFAULT_COORDINATES",
    "RequesterLocationResolver",
    "StoreResultBuilder",
]
