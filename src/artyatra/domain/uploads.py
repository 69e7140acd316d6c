"""Domain models for archive uploads."""

import json
from dataclasses import dataclass, field


@dataclass(frozen=True)
class UploadJob:
    """Metadata for one chunk-then-finalize upload attempt."""

    upload_uuid: str
    title: str
    latitude: str
    longitude: str
    user_id: str
    filename: str
    category_id: str
    description: str = ""
    release_rights: str = "creator"
    use_uid_filename: str = "false"
    media_type: str = "image"


@dataclass(frozen=True)
class UpstreamResponse:
    """Raw response returned by a Swecha API."""

    status_code: int
    content: bytes
    content_type: str
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Return true for 2xx responses."""
        return 200 <= self.status_code < 300

    def json(self) -> object | None:
        """Decode the body as JSON, or return None when it isn't JSON."""
        try:
            return json.loads(self.content)
        except ValueError:
            return None


@dataclass(frozen=True)
class RelayOutcome:
    """Result of a relay attempt and the stage it stopped at."""

    stage: str
    response: UpstreamResponse

    @property
    def partially_submitted(self) -> bool:
        """Return true when the chunk landed but finalize was rejected."""
        return self.stage == "finalize" and not self.response.ok
