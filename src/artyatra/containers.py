"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from artyatra.adapters.memory_art_style_repository import InMemoryArtStyleRepository
from artyatra.adapters.memory_classification_repository import (
    InMemoryClassificationRepository,
)
from artyatra.adapters.openai_vision_client import OpenAIVisionClient
from artyatra.adapters.swecha_archive_client import HttpxSwechaArchiveClient
from artyatra.adapters.swecha_auth_client import HttpxSwechaAuthClient
from artyatra.config import Settings
from artyatra.seed_data import ART_STYLE_HINTS, ART_STYLES, CATEGORIES
from artyatra.services.accounts import AccountService
from artyatra.services.art_styles import ArtStyleService
from artyatra.services.classifications import ClassificationService
from artyatra.services.relay import UploadRelayService
from artyatra.services.search import CategorySearchService, PlaceholderImageSource
from artyatra.services.sessions import (
    InMemorySessionRepository,
    SessionService,
    timeout_from_minutes,
)
from artyatra.services.vision import ArtClassifier, labels_for


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    art_style_service: ArtStyleService
    classification_service: ClassificationService
    relay_service: UploadRelayService
    session_service: SessionService
    account_service: AccountService
    search_service: CategorySearchService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    art_style_repository = InMemoryArtStyleRepository(ART_STYLES)
    art_style_service = ArtStyleService(art_style_repository)

    vision_client = OpenAIVisionClient.create(resolved_settings.openai_api_key)
    classifier = ArtClassifier(
        client=vision_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
        labels=labels_for(art_style_service.label_names(), ART_STYLE_HINTS),
    )
    classification_service = ClassificationService(
        classifier=classifier,
        art_style_repository=art_style_repository,
        repository=InMemoryClassificationRepository(),
    )

    archive_client = HttpxSwechaArchiveClient.create(
        resolved_settings.swecha_api_base,
        timeout=resolved_settings.http_timeout_seconds,
    )
    auth_client = HttpxSwechaAuthClient.create(
        resolved_settings.swecha_api_base,
        timeout=resolved_settings.http_timeout_seconds,
    )
    session_service = SessionService(
        auth_client=auth_client,
        repository=InMemorySessionRepository(),
        idle_timeout=timeout_from_minutes(resolved_settings.idle_timeout_minutes),
        max_session=timeout_from_minutes(resolved_settings.max_session_minutes),
    )

    async def close_resources() -> None:
        await vision_client.close()
        await archive_client.close()
        await auth_client.close()

    return AppContainer(
        settings=resolved_settings,
        art_style_service=art_style_service,
        classification_service=classification_service,
        relay_service=UploadRelayService(archive_client),
        session_service=session_service,
        account_service=AccountService(auth_client),
        search_service=CategorySearchService(
            categories=CATEGORIES, image_source=PlaceholderImageSource()
        ),
        close_resources=close_resources,
    )
