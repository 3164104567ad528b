"""Application Ports."""

from store_finder.application.stores.ports.geocoding_client import GeocodingClientPort
from store_finder.application.stores.ports.geodata_client import GeodataClientPort

__all__ = ["GeocodingClientPort", "GeodataClientPort"]
