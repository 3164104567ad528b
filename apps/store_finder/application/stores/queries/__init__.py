"""Application Queries."""

from store_finder.application.stores.queries.get_current_location import (
    GetCurrentLocationQuery,
)
from store_finder.application.stores.queries.search_stores import SearchStoresQuery

__all__ = ["GetCurrentLocationQuery", "SearchStoresQuery"]
