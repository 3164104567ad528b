"""Store Response DTO."""

from __future__ import annotations

from dataclasses import dataclass, field

from store_finder.application.stores.dto.store_result import StoreResultDTO


@dataclass(frozen=True)
class StoreResponseDTO:
    """브랜드별 매장 검색 응답 DTO.

    count와 found는 stores에서 파생됩니다.
    """

    brand: str
    message: str
    stores: tuple[StoreResultDTO, ...] = field(default_factory=tuple)

    @property
    def count(self) -> int:
        return len(self.stores)

    @property
    def found(self) -> bool:
        return self.count > 0
