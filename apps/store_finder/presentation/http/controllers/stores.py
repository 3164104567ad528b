"""Stores Controller."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from store_finder.application.stores import SearchStoresQuery
from store_finder.domain.enums import StoreBrand
from store_finder.domain.value_objects import Coordinates
from store_finder.presentation.http.schemas import StoreResponse
from store_finder.setup.dependencies import get_requester_coordinates, get_search_stores_query

router = APIRouter(prefix="/stores", tags=["stores"])

RequesterCoordinates = Annotated[Coordinates, Depends(get_requester_coordinates)]
SearchQuery = Annotated[SearchStoresQuery, Depends(get_search_stores_query)]


async def _search(
    query: SearchStoresQuery, center: Coordinates, brand: StoreBrand
) -> StoreResponse:
    result = await query.execute(center, brand)
    return StoreResponse.from_dto(result)


@router.get("/circle-k", response_model=StoreResponse, summary="List of Circle Ks")
async def circle_k(coordinates: RequesterCoordinates, query: SearchQuery) -> StoreResponse:
    """반경 내 Circle K 매장을 거리순으로 반환합니다."""
    return await _search(query, coordinates, StoreBrand.CIRCLE_K)


@router.get("/family-mart", response_model=StoreResponse, summary="List of FamilyMarts")
async def family_mart(coordinates: RequesterCoordinates, query: SearchQuery) -> StoreResponse:
    """반경 내 FamilyMart 매장을 거리순으로 반환합니다."""
    return await _search(query, coordinates, StoreBrand.FAMILY_MART)


@router.get("/others", response_model=StoreResponse, summary="List of Other Stores")
async def other_stores(coordinates: RequesterCoordinates, query: SearchQuery) -> StoreResponse:
    """Circle K/FamilyMart 이외의 편의점을 거리순으로 반환합니다."""
    return await _search(query, coordinates, StoreBrand.OTHERS)
