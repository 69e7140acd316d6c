"""Swecha Corpus record upload client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from artyatra.domain.uploads import UpstreamResponse


class SwechaArchiveClient(Protocol):
    """Interface for the archive's chunk and finalize upload endpoints."""

    async def upload_chunk(  # noqa: PLR0913
        self,
        *,
        upload_uuid: str,
        chunk_index: int,
        total_chunks: int,
        filename: str,
        content: bytes,
        content_type: str,
        authorization: str | None,
    ) -> UpstreamResponse:
        """Send one binary chunk of a record upload."""

    async def finalize_upload(
        self, form: dict[str, str], authorization: str | None
    ) -> UpstreamResponse:
        """Finalize a record upload with its metadata."""


@dataclass
class HttpxSwechaArchiveClient(SwechaArchiveClient):
    """Archive client using httpx; non-2xx replies are returned, not raised."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 30.0

    @classmethod
    def create(cls, base_url: str, timeout: float = 30.0) -> "HttpxSwechaArchiveClient":
        """Create an archive client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def upload_chunk(  # noqa: PLR0913
        self,
        *,
        upload_uuid: str,
        chunk_index: int,
        total_chunks: int,
        filename: str,
        content: bytes,
        content_type: str,
        authorization: str | None,
    ) -> UpstreamResponse:
        """POST a multipart chunk; the binary goes under the ``chunk`` field."""
        response = await self.http_client.post(
            f"{self.base_url}/records/upload/chunk",
            headers=_headers(authorization),
            data={
                "upload_uuid": upload_uuid,
                "chunk_index": str(chunk_index),
                "filename": filename,
                "total_chunks": str(total_chunks),
            },
            files={"chunk": (filename, content, content_type)},
            timeout=self.timeout,
        )
        return _to_upstream(response)

    async def finalize_upload(
        self, form: dict[str, str], authorization: str | None
    ) -> UpstreamResponse:
        """POST the URL-encoded finalize form."""
        response = await self.http_client.post(
            f"{self.base_url}/records/upload",
            headers=_headers(authorization),
            data=form,
            timeout=self.timeout,
        )
        return _to_upstream(response)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _headers(authorization: str | None) -> dict[str, str]:
    headers = {"accept": "application/json"}
    if authorization:
        headers["Authorization"] = authorization
    return headers


def _to_upstream(response: httpx.Response) -> UpstreamResponse:
    return UpstreamResponse(
        status_code=response.status_code,
        content=response.content,
        content_type=response.headers.get("content-type", "application/json"),
    )
