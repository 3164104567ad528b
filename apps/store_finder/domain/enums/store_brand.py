"""Store Brand Enum."""

from __future__ import annotations

from enum import Enum


class StoreBrand(str, Enum):
    """편의점 브랜드 분류.

    값은 HTTP 경로 slug로 사용됩니다.
    """

    CIRCLE_K = "circle-k"
    FAMILY_MART = "family-mart"
    OTHERS = "others"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES: dict[StoreBrand, str] = {
    StoreBrand.CIRCLE_K: "Circle K",
    StoreBrand.FAMILY_MART: "FamilyMart",
    StoreBrand.OTHERS: "Other Stores",
}
