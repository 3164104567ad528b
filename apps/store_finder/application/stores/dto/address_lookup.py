"""Address Lookup DTO."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

UNKNOWN_LOCATION = "Unknown Location"


@dataclass(frozen=True)
class AddressLookupDTO:
    """역지오코딩 결과 DTO."""

    display_name: str
    address_parts: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def unknown(cls) -> AddressLookupDTO:
        """조회 실패 시 사용하는 sentinel 값."""
        return cls(display_name=UNKNOWN_LOCATION, address_parts={})
