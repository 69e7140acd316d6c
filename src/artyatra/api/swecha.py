"""Relay endpoints for uploading records to the Swecha Corpus archive."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import (
    APIRouter,
    Depends,
    File,
    Form,
    Header,
    Request,
    Response,
    UploadFile,
    status,
)

from artyatra.api.auth import require_session
from artyatra.api.errors import ApiError
from artyatra.domain.uploads import UploadJob, UpstreamResponse
from artyatra.services.relay import RelayNetworkError
from artyatra.services.sessions import to_bearer

if TYPE_CHECKING:
    from artyatra.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/swecha",
    tags=["swecha"],
    dependencies=[Depends(require_session)],
)


@router.post("/upload")
async def upload_finalize_only(  # noqa: PLR0913
    request: Request,
    title: str | None = Form(default=None),
    latitude: str | None = Form(default=None),
    longitude: str | None = Form(default=None),
    total_chunks: str = Form(default="1"),
    filename: str | None = Form(default=None),
    use_uid_filename: str = Form(default="false"),
    release_rights: str = Form(default="creator"),
    user_id: str | None = Form(default=None),
    media_type: str = Form(default="image"),
    upload_uuid: str | None = Form(default=None),
    description: str = Form(default=""),
    category_id: str | None = Form(default=None),
    authorization: str | None = Header(default=None),
) -> Response:
    """Forward a finalize-only upload form to the archive."""
    container: AppContainer = request.app.state.container
    if not title or _missing(latitude) or _missing(longitude):
        raise ApiError(
            status.HTTP_400_BAD_REQUEST, "title, latitude and longitude are required"
        )
    form = {
        "total_chunks": total_chunks,
        "latitude": str(latitude),
        "longitude": str(longitude),
        "use_uid_filename": use_uid_filename,
        "release_rights": release_rights,
        "media_type": media_type,
        "title": title,
        "description": description,
    }
    optional = {
        "filename": filename,
        "user_id": user_id,
        "upload_uuid": upload_uuid,
        "category_id": category_id,
    }
    form.update({key: value for key, value in optional.items() if value})
    try:
        upstream = await container.relay_service.finalize_only(
            form, _forwarded_authorization(authorization)
        )
    except RelayNetworkError as exc:
        logger.exception("Swecha upload proxy error")
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to upload to Swecha"
        ) from exc
    return _forward(upstream)


@router.post("/upload/simple")
async def upload_simple(  # noqa: PLR0913
    request: Request,
    file: UploadFile | None = File(default=None),
    title: str | None = Form(default=None),
    description: str = Form(default=""),
    latitude: str | None = Form(default=None),
    longitude: str | None = Form(default=None),
    user_id: str | None = Form(default=None),
    category_id: str | None = Form(default=None),
    release_rights: str = Form(default="creator"),
    use_uid_filename: str = Form(default="false"),
    media_type: str = Form(default="image"),
    filename: str | None = Form(default=None),
    upload_uuid: str | None = Form(default=None),
    authorization: str | None = Header(default=None),
) -> Response:
    """Upload one image as a single chunk, then finalize the record."""
    container: AppContainer = request.app.state.container
    if not title:
        raise ApiError(status.HTTP_400_BAD_REQUEST, "title is required")
    if _missing(latitude) or _missing(longitude):
        raise ApiError(status.HTTP_400_BAD_REQUEST, "latitude & longitude required")
    if not user_id:
        raise ApiError(status.HTTP_400_BAD_REQUEST, "user_id is required")
    if file is None:
        raise ApiError(status.HTTP_400_BAD_REQUEST, "file is required")
    if not upload_uuid:
        raise ApiError(status.HTTP_400_BAD_REQUEST, "upload_uuid is required")

    max_bytes = container.settings.max_relay_bytes
    content = await file.read(max_bytes + 1)
    if len(content) > max_bytes:
        raise ApiError(
            status.HTTP_400_BAD_REQUEST,
            "File too large",
            f"Uploads must be at most {max_bytes // (1024 * 1024)}MB",
        )

    job = UploadJob(
        upload_uuid=upload_uuid,
        title=title,
        latitude=str(latitude),
        longitude=str(longitude),
        user_id=user_id,
        filename=filename or file.filename or "upload.jpg",
        category_id=category_id or container.settings.swecha_default_category_id,
        description=description,
        release_rights=release_rights,
        use_uid_filename=use_uid_filename,
        media_type=media_type,
    )
    try:
        outcome = await container.relay_service.submit(
            job,
            content,
            file.content_type or "application/octet-stream",
            _forwarded_authorization(authorization),
        )
    except RelayNetworkError as exc:
        logger.exception(
            "Swecha simple upload error",
            extra={"upload_uuid": upload_uuid, "stage": exc.stage},
        )
        extra = {"state": "partially_submitted"} if exc.partially_submitted else {}
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to upload file to Swecha",
            **extra,
        ) from exc

    response = _forward(outcome.response)
    response.headers["X-Upload-Stage"] = outcome.stage
    if outcome.partially_submitted:
        response.headers["X-Upload-State"] = "partially_submitted"
    return response


def _missing(value: str | None) -> bool:
    return value is None or value.strip() == ""


def _forwarded_authorization(authorization: str | None) -> str | None:
    if not authorization:
        return None
    return to_bearer(authorization)


def _forward(upstream: UpstreamResponse) -> Response:
    """Relay an upstream reply's status, body and content type unchanged."""
    return Response(
        content=upstream.content,
        status_code=upstream.status_code,
        media_type=upstream.content_type,
    )
