"""Regional category search endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query, Request, status

from artyatra.api.auth import require_session
from artyatra.api.errors import ApiError
from artyatra.api.serializers import serialize_category, serialize_category_match
from artyatra.services.search import CategoryNotFoundError, OutOfBoundsError

if TYPE_CHECKING:
    from artyatra.containers import AppContainer

router = APIRouter(
    prefix="/api/categories",
    tags=["search"],
    dependencies=[Depends(require_session)],
)


@router.get("")
async def list_categories(request: Request) -> list[dict[str, object]]:
    """Return every regional category."""
    container: AppContainer = request.app.state.container
    return [
        serialize_category(category)
        for category in container.search_service.list_categories()
    ]


@router.get("/search")
async def search_category(
    request: Request, category: str = Query(min_length=1)
) -> dict[str, object]:
    """Look up a category by its exact name."""
    container: AppContainer = request.app.state.container
    try:
        info = container.search_service.get_category(category)
    except CategoryNotFoundError as exc:
        raise ApiError(status.HTTP_404_NOT_FOUND, "Category not found") from exc
    return serialize_category(info)


@router.get("/nearby")
async def search_nearby(
    request: Request, lat: float, lng: float, radius_km: float = 5.0
) -> dict[str, object]:
    """Return categories within a radius of a point, nearest first."""
    container: AppContainer = request.app.state.container
    try:
        matches = await container.search_service.search_nearby(lat, lng, radius_km)
    except OutOfBoundsError as exc:
        raise ApiError(
            status.HTTP_400_BAD_REQUEST, "Point out of bounds", str(exc)
        ) from exc
    return {"matches": [serialize_category_match(match) for match in matches]}
