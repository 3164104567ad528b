"""Current Location DTO."""

from __future__ import annotations

from dataclasses import dataclass

from store_finder.domain.value_objects import Coordinates


@dataclass(frozen=True)
class CurrentLocationDTO:
    """요청자 위치 응답 DTO."""

    coordinates: Coordinates
    formatted_address: str
