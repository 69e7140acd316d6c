"""Classification of uploaded artwork against the catalog."""

import base64
import logging
from dataclasses import dataclass
from typing import Protocol

from artyatra.domain.art_styles import ArtStyle
from artyatra.domain.classifications import ArtClassification, ClassificationRecord
from artyatra.services.art_styles import ArtStyleRepository
from artyatra.services.vision import ArtClassifier

logger = logging.getLogger(__name__)


class ClassificationRepository(Protocol):
    """Persistence interface for classification records."""

    def create_classification(
        self, art_style_id: str, image_data: str, confidence: float
    ) -> ClassificationRecord:
        """Store a classification and return the created record."""

    def list_by_art_style(self, art_style_id: str) -> list[ClassificationRecord]:
        """Return the classifications recorded for an art style."""


class ArtStyleNotFoundError(LookupError):
    """Raised when the classified label matches no catalog entry."""

    def __init__(self, result: ArtClassification) -> None:
        super().__init__(f"Art style not found: {result.art_style_name}")
        self.result = result


@dataclass(frozen=True)
class ClassificationOutcome:
    """A persisted classification and the art style it resolved to."""

    record: ClassificationRecord
    result: ArtClassification
    art_style: ArtStyle


@dataclass
class ClassificationService:
    """Runs the classifier and records results for known art styles."""

    classifier: ArtClassifier
    art_style_repository: ArtStyleRepository
    repository: ClassificationRepository

    async def classify(self, image_bytes: bytes) -> ClassificationOutcome:
        """Classify an image and persist the result.

        The returned label is matched against the catalog by exact name. A miss
        raises ``ArtStyleNotFoundError`` and nothing is stored.
        """
        result = await self.classifier.classify(image_bytes)
        art_style = self.art_style_repository.get_art_style_by_name(
            result.art_style_name
        )
        if art_style is None:
            logger.info(
                "Classification label not in catalog",
                extra={"label": result.art_style_name},
            )
            raise ArtStyleNotFoundError(result)
        record = self.repository.create_classification(
            art_style_id=art_style.id,
            image_data=base64.b64encode(image_bytes).decode("utf-8"),
            confidence=result.confidence,
        )
        return ClassificationOutcome(record=record, result=result, art_style=art_style)

    def list_for_art_style(self, art_style_id: str) -> list[ClassificationRecord]:
        """Return classification history for an art style."""
        return self.repository.list_by_art_style(art_style_id)
