"""Location Controller."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from store_finder.application.stores import GetCurrentLocationQuery
from store_finder.domain.value_objects import Coordinates
from store_finder.presentation.http.schemas import CoordinatesSchema, GeoResponse
from store_finder.setup.dependencies import (
    get_current_location_query,
    get_requester_coordinates,
)

router = APIRouter(tags=["location"])


@router.get("/", response_model=GeoResponse, summary="My Location")
async def my_location(
    coordinates: Annotated[Coordinates, Depends(get_requester_coordinates)],
    query: Annotated[GetCurrentLocationQuery, Depends(get_current_location_query)],
) -> GeoResponse:
    """요청자 좌표와 역지오코딩 주소를 반환합니다."""
    result = await query.execute(coordinates)
    return GeoResponse(
        coordinates=CoordinatesSchema.from_domain(result.coordinates),
        formatted_address=result.formatted_address,
    )
