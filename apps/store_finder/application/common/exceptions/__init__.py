"""Application Exceptions."""

from store_finder.application.common.exceptions.base import ApplicationError
from store_finder.application.common.exceptions.upstream import (
    GeocodingUnavailableError,
    GeodataUnavailableError,
    UpstreamUnavailableError,
)

__all__ = [
    "ApplicationError",
    "GeocodingUnavailableError",
    "GeodataUnavailableError",
    "UpstreamUnavailableError",
]
