"""In-memory classification repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import uuid4

from artyatra.domain.classifications import ClassificationRecord
from artyatra.services.classifications import ClassificationRepository


@dataclass
class InMemoryClassificationRepository(ClassificationRepository):
    """Unsynchronized list of classification records."""

    _records: list[ClassificationRecord]

    def __init__(self) -> None:
        self._records = []

    def create_classification(
        self, art_style_id: str, image_data: str, confidence: float
    ) -> ClassificationRecord:
        """Append and return a new record."""
        record = ClassificationRecord(
            id=str(uuid4()),
            art_style_id=art_style_id,
            image_data=image_data,
            confidence=confidence,
            created_at=datetime.now(tz=UTC),
        )
        self._records.append(record)
        return record

    def list_by_art_style(self, art_style_id: str) -> list[ClassificationRecord]:
        """Return records for one art style in creation order."""
        return [r for r in self._records if r.art_style_id == art_style_id]
