"""Brand Classifier Service.

매장 이름을 기반으로 편의점 브랜드를 분류합니다.
Port 의존성이 없는 순수 로직입니다.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from store_finder.domain.enums import StoreBrand


@dataclass(frozen=True)
class BrandPattern:
    """브랜드 이름 패턴."""

    brand: StoreBrand
    pattern: re.Pattern[str]

    def matches(self, name: str) -> bool:
        return self.pattern.search(name) is not None


# 순서대로 검사하며 처음 매칭된 브랜드를 사용합니다.
BRAND_PATTERNS: tuple[BrandPattern, ...] = (
    BrandPattern(StoreBrand.CIRCLE_K, re.compile(r"circle\s?k", re.IGNORECASE)),
    BrandPattern(StoreBrand.FAMILY_MART, re.compile(r"family\s?mart", re.IGNORECASE)),
)

DEFAULT_BRAND = StoreBrand.OTHERS


class BrandClassifierService:
    """브랜드 분류 서비스."""

    @staticmethod
    def classify(
        name: str,
        patterns: tuple[BrandPattern, ...] = BRAND_PATTERNS,
    ) -> StoreBrand:
        """매장 이름을 브랜드로 분류합니다.

        어떤 패턴에도 매칭되지 않으면 OTHERS를 반환합니다.
        """
        for pattern in patterns:
            if pattern.matches(name):
                return pattern.brand
        return DEFAULT_BRAND

    @classmethod
    def is_brand(cls, name: str | None, brand: StoreBrand) -> bool:
        """이름이 비어 있지 않고 주어진 브랜드로 분류되는지 확인합니다."""
        if not name:
            return False
        return cls.classify(name) is brand
