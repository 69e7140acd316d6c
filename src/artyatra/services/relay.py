"""Two-phase upload relay to the Swecha Corpus archive."""

import logging
from dataclasses import dataclass

from artyatra.adapters.swecha_archive_client import SwechaArchiveClient
from artyatra.domain.uploads import RelayOutcome, UploadJob, UpstreamResponse

logger = logging.getLogger(__name__)

STAGE_CHUNK = "chunk"
STAGE_FINALIZE = "finalize"


class RelayNetworkError(RuntimeError):
    """Raised when an archive call fails before a response arrives."""

    def __init__(self, stage: str, cause: Exception) -> None:
        super().__init__(f"{stage} call failed: {cause}")
        self.stage = stage

    @property
    def partially_submitted(self) -> bool:
        """Return true when the chunk had already been accepted."""
        return self.stage == STAGE_FINALIZE


@dataclass
class UploadRelayService:
    """Reshapes one incoming upload into the archive's chunk and finalize calls.

    The chunk call must succeed before finalize is attempted. Nothing is
    retried or rolled back: a failed finalize leaves an unfinalized chunk on
    the archive side, reported through ``RelayOutcome.partially_submitted``.
    """

    client: SwechaArchiveClient

    async def submit(
        self,
        job: UploadJob,
        content: bytes,
        content_type: str,
        authorization: str | None,
    ) -> RelayOutcome:
        """Upload a single-chunk record and finalize it."""
        try:
            chunk = await self.client.upload_chunk(
                upload_uuid=job.upload_uuid,
                chunk_index=0,
                total_chunks=1,
                filename=job.filename,
                content=content,
                content_type=content_type,
                authorization=authorization,
            )
        except Exception as exc:
            raise RelayNetworkError(STAGE_CHUNK, exc) from exc
        if not chunk.ok:
            logger.warning(
                "Archive rejected chunk upload",
                extra={"upload_uuid": job.upload_uuid, "status": chunk.status_code},
            )
            return RelayOutcome(stage=STAGE_CHUNK, response=chunk)

        try:
            final = await self.client.finalize_upload(
                finalize_form(job), authorization
            )
        except Exception as exc:
            raise RelayNetworkError(STAGE_FINALIZE, exc) from exc
        outcome = RelayOutcome(stage=STAGE_FINALIZE, response=final)
        if outcome.partially_submitted:
            logger.warning(
                "Archive rejected finalize after chunk was accepted",
                extra={"upload_uuid": job.upload_uuid, "status": final.status_code},
            )
        return outcome

    async def finalize_only(
        self, form: dict[str, str], authorization: str | None
    ) -> UpstreamResponse:
        """Forward a prepared finalize form as-is."""
        try:
            return await self.client.finalize_upload(form, authorization)
        except Exception as exc:
            raise RelayNetworkError(STAGE_FINALIZE, exc) from exc


def finalize_form(job: UploadJob) -> dict[str, str]:
    """Build the URL-encoded finalize payload for a single-chunk upload."""
    return {
        "total_chunks": "1",
        "filename": job.filename,
        "latitude": job.latitude,
        "longitude": job.longitude,
        "use_uid_filename": job.use_uid_filename,
        "release_rights": job.release_rights,
        "user_id": job.user_id,
        "media_type": job.media_type,
        "title": job.title,
        "upload_uuid": job.upload_uuid,
        "description": job.description,
        "category_id": job.category_id,
    }

