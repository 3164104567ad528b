"""Location HTTP Schemas."""

from __future__ import annotations

from pydantic import BaseModel

from store_finder.domain.value_objects import Coordinates


class CoordinatesSchema(BaseModel):
    """좌표 스키마."""

    lat: float
    lon: float

    @classmethod
    def from_domain(cls, coordinates: Coordinates) -> CoordinatesSchema:
        return cls(lat=coordinates.latitude, lon=coordinates.longitude)


class GeoResponse(BaseModel):
    """요청자 위치 응답 스키마."""

    coordinates: CoordinatesSchema
    formatted_address: str
