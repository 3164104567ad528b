"""Store Finder Application Layer."""

from store_finder.application.stores import (
    BrandClassifierService,
    GetCurrentLocationQuery,
    RequesterLocationResolver,
    SearchStoresQuery,
    StoreResponseDTO,
    StoreResultBuilder,
)

__all__ = [
    "StoreResponseDTO",
    "SearchStoresQuery",
    "GetCurrentLocationQuery",
    "BrandClassifierService",
    "StoreResultBuilder",
    "RequesterLocationResolver",
]
