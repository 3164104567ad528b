"""Application DTOs."""

from store_finder.application.stores.dto.address_lookup import AddressLookupDTO
from store_finder.application.stores.dto.current_location import CurrentLocationDTO
from store_finder.application.stores.dto.store_response import StoreResponseDTO
from store_finder.application.stores.dto.store_result import StoreResultDTO

__all__ = ["AddressLookupDTO", "CurrentLocationDTO", "StoreResponseDTO", "StoreResultDTO"]
