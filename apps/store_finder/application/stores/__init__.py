"""Store Search Application Layer."""

from store_finder.application.stores.dto import (
    AddressLookupDTO,
    CurrentLocationDTO,
    StoreResponseDTO,
    StoreResultDTO,
)
from store_finder.application.stores.ports import GeocodingClientPort, GeodataClientPort
from store_finder.application.stores.queries import GetCurrentLocationQuery, SearchStoresQuery
from store_finder.application.stores.services import (
    BrandClassifierService,
    RequesterLocationResolver,
    StoreResultBuilder,
)

__all__ = [
    "AddressLookupDTO",
    "CurrentLocationDTO",
    "StoreResponseDTO",
    "StoreResultDTO",
    "GeocodingClientPort",
    "GeodataClientPort",
    "GetCurrentLocationQuery",
    "SearchStoresQuery",
    "BrandClassifierService",
    "RequesterLocationResolver",
    "StoreResultBuilder",
]
