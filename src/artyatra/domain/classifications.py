"""Models for AI-assisted artwork classification."""

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel


class ArtClassification(BaseModel):
    """Structured output returned by the vision model."""

    art_style_name: str
    confidence: float
    reasoning: str


@dataclass(frozen=True)
class ClassificationRecord:
    """A stored classification result."""

    id: str
    art_style_id: str
    image_data: str
    confidence: float
    created_at: datetime
