"""Art style catalog, classification and map endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, File, Request, UploadFile, status

from artyatra.api.errors import ApiError
from artyatra.api.serializers import (
    serialize_art_style,
    serialize_classification,
    serialize_classification_result,
    serialize_map_view,
)
from artyatra.services.classifications import ArtStyleNotFoundError
from artyatra.services.map_view import build_map_view
from artyatra.services.vision import ClassificationError

if TYPE_CHECKING:
    from artyatra.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["artstyles"])


@router.get("/artstyles")
async def list_art_styles(request: Request) -> list[dict[str, object]]:
    """Return every art style with its origin."""
    container: AppContainer = request.app.state.container
    try:
        styles = container.art_style_service.list_art_styles()
    except Exception as exc:
        logger.exception("Failed to fetch art styles")
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to fetch art styles",
            str(exc),
        ) from exc
    return [serialize_art_style(style) for style in styles]


@router.get("/artstyles/{art_style_id}")
async def get_art_style(art_style_id: str, request: Request) -> dict[str, object]:
    """Return one art style."""
    container: AppContainer = request.app.state.container
    try:
        style = container.art_style_service.get_art_style(art_style_id)
    except Exception as exc:
        logger.exception("Failed to fetch art style", extra={"id": art_style_id})
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to fetch art style",
            str(exc),
        ) from exc
    if style is None:
        raise ApiError(status.HTTP_404_NOT_FOUND, "Art style not found")
    return serialize_art_style(style)


@router.post("/classify")
async def classify(
    request: Request, image: UploadFile | None = File(default=None)
) -> dict[str, object]:
    """Classify an uploaded artwork image and record the result."""
    container: AppContainer = request.app.state.container
    if image is None:
        raise ApiError(status.HTTP_400_BAD_REQUEST, "No image file provided")
    content_type = image.content_type or ""
    if not content_type.startswith("image/"):
        raise ApiError(
            status.HTTP_400_BAD_REQUEST,
            "Only image files are allowed",
            f"Unsupported content type: {content_type or 'unknown'}",
        )
    max_bytes = container.settings.max_image_bytes
    data = await image.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise ApiError(
            status.HTTP_400_BAD_REQUEST,
            "File too large",
            f"Images must be at most {max_bytes // (1024 * 1024)}MB",
        )
    if not data:
        raise ApiError(status.HTTP_400_BAD_REQUEST, "No image file provided")

    try:
        outcome = await container.classification_service.classify(data)
    except ArtStyleNotFoundError as exc:
        raise ApiError(
            status.HTTP_404_NOT_FOUND,
            "Art style not found in database",
            classificationResult=serialize_classification_result(exc.result),
        ) from exc
    except ClassificationError as exc:
        logger.exception("Artwork classification failed")
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to classify image",
            str(exc),
        ) from exc
    except Exception as exc:
        logger.exception("Failed to store classification")
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to save classification",
            str(exc),
        ) from exc

    return {
        "classification": {
            "id": outcome.record.id,
            "confidence": outcome.result.confidence,
            "reasoning": outcome.result.reasoning,
        },
        "artStyle": serialize_art_style(outcome.art_style),
    }


@router.get("/classifications/{art_style_id}")
async def list_classifications(
    art_style_id: str, request: Request
) -> list[dict[str, object]]:
    """Return the classification history for an art style."""
    container: AppContainer = request.app.state.container
    try:
        records = container.classification_service.list_for_art_style(art_style_id)
    except Exception as exc:
        logger.exception(
            "Failed to fetch classifications", extra={"art_style_id": art_style_id}
        )
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to fetch classifications",
            str(exc),
        ) from exc
    return [serialize_classification(record) for record in records]


@router.get("/map")
async def map_view(request: Request, highlight: str | None = None) -> dict[str, object]:
    """Return marker data for every art style, optionally highlighting one."""
    container: AppContainer = request.app.state.container
    styles = container.art_style_service.list_art_styles()
    if highlight and not any(style.id == highlight for style in styles):
        raise ApiError(status.HTTP_404_NOT_FOUND, "Art style not found")
    return serialize_map_view(build_map_view(styles, highlight))
