"""Shared test fixtures."""

import json
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from artyatra.adapters.memory_art_style_repository import InMemoryArtStyleRepository
from artyatra.adapters.memory_classification_repository import (
    InMemoryClassificationRepository,
)
from artyatra.adapters.swecha_archive_client import SwechaArchiveClient
from artyatra.adapters.swecha_auth_client import SwechaAuthClient
from artyatra.config import Settings
from artyatra.containers import AppContainer
from artyatra.domain.uploads import UpstreamResponse
from artyatra.seed_data import ART_STYLE_HINTS, ART_STYLES, CATEGORIES
from artyatra.services.accounts import AccountService
from artyatra.services.art_styles import ArtStyleService
from artyatra.services.classifications import ClassificationService
from artyatra.services.relay import UploadRelayService
from artyatra.services.search import CategorySearchService, PlaceholderImageSource
from artyatra.services.sessions import InMemorySessionRepository, SessionService
from artyatra.services.vision import ArtClassifier, VisionClient, labels_for

SESSION_TOKEN = "Bearer test-token"


def json_response(status_code: int, payload: object) -> UpstreamResponse:
    return UpstreamResponse(
        status_code=status_code,
        content=json.dumps(payload).encode(),
        content_type="application/json",
    )


@dataclass
class FakeVisionClient(VisionClient):
    """Fake vision client returning a fixed payload."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "art_style_name": "Warli Art",
            "confidence": 87.5,
            "reasoning": "White geometric figures on a mud background.",
        }
    )
    error: Exception | None = None
    calls: list[dict[str, object]] = field(default_factory=list)

    async def extract(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        image_data_url: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        self.calls.append({"image_data_url": image_data_url, "prompt": prompt})
        if self.error:
            raise self.error
        return self.payload


@dataclass
class FakeArchiveClient(SwechaArchiveClient):
    """Fake archive client that records chunk and finalize calls."""

    chunk_response: UpstreamResponse = field(
        default_factory=lambda: json_response(200, {"status": "chunk_received"})
    )
    finalize_response: UpstreamResponse = field(
        default_factory=lambda: json_response(
            201, {"uid": "record-1", "status": "uploaded"}
        )
    )
    chunk_error: Exception | None = None
    finalize_error: Exception | None = None
    chunk_calls: list[dict[str, object]] = field(default_factory=list)
    finalize_calls: list[tuple[dict[str, str], str | None]] = field(
        default_factory=list
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
        self.chunk_calls.append(
            {
                "upload_uuid": upload_uuid,
                "chunk_index": chunk_index,
                "total_chunks": total_chunks,
                "filename": filename,
                "content": content,
                "content_type": content_type,
                "authorization": authorization,
            }
        )
        if self.chunk_error:
            raise self.chunk_error
        return self.chunk_response

    async def finalize_upload(
        self, form: dict[str, str], authorization: str | None
    ) -> UpstreamResponse:
        self.finalize_calls.append((form, authorization))
        if self.finalize_error:
            raise self.finalize_error
        return self.finalize_response


@dataclass
class FakeAuthClient(SwechaAuthClient):
    """Fake Swecha auth client with canned replies."""

    login_response: UpstreamResponse = field(
        default_factory=lambda: json_response(
            200, {"access_token": "abc123", "token_type": "bearer"}
        )
    )
    me_response: UpstreamResponse = field(
        default_factory=lambda: json_response(200, {"id": "user-42", "name": "Asha"})
    )
    signup_response: UpstreamResponse = field(
        default_factory=lambda: json_response(201, {"id": "user-43"})
    )
    login_error: Exception | None = None
    logins: list[tuple[str, str]] = field(default_factory=list)
    profile_tokens: list[str] = field(default_factory=list)
    signups: list[dict[str, object]] = field(default_factory=list)

    async def login(self, phone: str, password: str) -> UpstreamResponse:
        self.logins.append((phone, password))
        if self.login_error:
            raise self.login_error
        return self.login_response

    async def me(self, authorization: str) -> UpstreamResponse:
        self.profile_tokens.append(authorization)
        return self.me_response

    async def create_user(self, payload: dict[str, object]) -> UpstreamResponse:
        self.signups.append(payload)
        return self.signup_response


@dataclass
class FakeClock:
    """Manually advanced clock."""

    now: datetime = field(
        default_factory=lambda: datetime(2025, 1, 1, 9, 0, tzinfo=UTC)
    )

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="openai-key", environment="test")


@pytest.fixture
def vision_client() -> FakeVisionClient:
    return FakeVisionClient()


@pytest.fixture
def archive_client() -> FakeArchiveClient:
    return FakeArchiveClient()


@pytest.fixture
def auth_client() -> FakeAuthClient:
    return FakeAuthClient()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def container(
    settings: Settings,
    vision_client: FakeVisionClient,
    archive_client: FakeArchiveClient,
    auth_client: FakeAuthClient,
    clock: FakeClock,
) -> AppContainer:
    art_style_repository = InMemoryArtStyleRepository(ART_STYLES)
    art_style_service = ArtStyleService(art_style_repository)
    classifier = ArtClassifier(
        client=vision_client,
        model=settings.openai_model,
        reasoning_effort=settings.openai_reasoning_effort,
        store=settings.openai_store,
        labels=labels_for(art_style_service.label_names(), ART_STYLE_HINTS),
    )
    session_service = SessionService(
        auth_client=auth_client,
        repository=InMemorySessionRepository(),
        idle_timeout=timedelta(minutes=settings.idle_timeout_minutes),
        max_session=timedelta(minutes=settings.max_session_minutes),
        clock=clock,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        art_style_service=art_style_service,
        classification_service=ClassificationService(
            classifier=classifier,
            art_style_repository=art_style_repository,
            repository=InMemoryClassificationRepository(),
        ),
        relay_service=UploadRelayService(archive_client),
        session_service=session_service,
        account_service=AccountService(auth_client),
        search_service=CategorySearchService(
            categories=CATEGORIES, image_source=PlaceholderImageSource()
        ),
        close_resources=close_resources,
    )


@pytest.fixture
def auth_headers(container: AppContainer) -> dict[str, str]:
    container.session_service.start(SESSION_TOKEN, user_id="user-42")
    return {"Authorization": SESSION_TOKEN}
