"""Domain models for the art style catalog."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class GeoPoint:
    """Latitude/longitude pair."""

    lat: float
    lng: float


@dataclass(frozen=True)
class ArtStyle:
    """A traditional art style and its place of origin."""

    id: str
    name: str
    origin: GeoPoint
    description: str
    fun_facts: tuple[str, ...]
    cultural_significance: str
    state: str
    image_url: str | None
    created_at: datetime
