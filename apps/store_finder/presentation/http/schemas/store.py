"""Store HTTP Schemas."""

from __future__ import annotations

from pydantic import BaseModel

from store_finder.application.stores.dto import StoreResponseDTO
from store_finder.presentation.http.schemas.location import CoordinatesSchema


class StoreItem(BaseModel):
    """매장 정보 스키마."""

    name: str
    distance_km: float
    address: str
    coordinates: CoordinatesSchema


class StoreResponse(BaseModel):
    """브랜드별 매장 목록 응답 스키마."""

    brand: str
    found: bool
    count: int
    stores: list[StoreItem]
    message: str

    @classmethod
    def from_dto(cls, dto: StoreResponseDTO) -> StoreResponse:
        return cls(
            brand=dto.brand,
            found=dto.found,
            count=dto.count,
            stores=[
                StoreItem(
                    name=s.name,
                    distance_km=s.distance_km,
                    address=s.address,
                    coordinates=CoordinatesSchema.from_domain(s.coordinates),
                )
                for s in dto.stores
            ],
            message=dto.message,
        )
