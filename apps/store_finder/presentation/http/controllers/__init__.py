"""HTTP Controllers."""

from store_finder.presentation.http.controllers.health import router as health_router
from store_finder.presentation.http.controllers.location import router as location_router
from store_finder.presentation.http.controllers.stores import router as stores_router

__all__ = ["health_router", "location_router", "stores_router"]
