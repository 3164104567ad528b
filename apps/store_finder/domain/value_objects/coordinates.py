"""Coordinates Value Object."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    """위도/경도 좌표 Value Object."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90 <= self.latitude <= 90:
            raise ValueError(f"Invalid latitude: {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise ValueError(f"Invalid longitude: {self.longitude}")

    @classmethod
    def parse(cls, latitude: object, longitude: object) -> Coordinates:
        """문자열/숫자 값으로부터 좌표를 생성합니다.

        Raises:
            ValueError: 숫자로 해석할 수 없거나 범위를 벗어난 경우
        """
        try:
            lat = float(latitude)  # type: ignore[arg-type]
            lon = float(longitude)  # type: ignore[arg-type]
        except (TypeError, ValueError) as e:
            raise ValueError(f"Unparseable coordinates: {latitude!r}, {longitude!r}") from e
        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise ValueError(f"Non-finite coordinates: {lat}, {lon}")
        return cls(latitude=lat, longitude=lon)
