"""Store Result DTO."""

from __future__ import annotations

from dataclasses import dataclass

from store_finder.domain.value_objects import Coordinates


@dataclass(frozen=True)
class StoreResultDTO:
    """매장 검색 결과 한 건."""

    name: str
    distance_km: float
    address: str
    coordinates: Coordinates
