"""In-memory art style repository seeded from the static catalog."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import uuid4

from artyatra.domain.art_styles import ArtStyle, GeoPoint
from artyatra.services.art_styles import ArtStyleRepository


@dataclass
class InMemoryArtStyleRepository(ArtStyleRepository):
    """Process-memory catalog; resets on restart."""

    _styles: list[ArtStyle]

    def __init__(self, seed: Iterable[ArtStyle] = ()) -> None:
        self._styles = list(seed)

    def list_art_styles(self) -> list[ArtStyle]:
        """Return a copy of the catalog."""
        return list(self._styles)

    def get_art_style(self, art_style_id: str) -> ArtStyle | None:
        """Return an art style by id."""
        return next((s for s in self._styles if s.id == art_style_id), None)

    def get_art_style_by_name(self, name: str) -> ArtStyle | None:
        """Return an art style by exact name."""
        return next((s for s in self._styles if s.name == name), None)

    def create_art_style(self, payload: dict[str, object]) -> ArtStyle:
        """Append a new art style built from a payload."""
        origin = payload["origin"]
        if not isinstance(origin, dict):
            raise ValueError("origin must be a mapping with lat and lng")
        style = ArtStyle(
            id=str(uuid4()),
            name=str(payload["name"]),
            origin=GeoPoint(lat=float(origin["lat"]), lng=float(origin["lng"])),
            description=str(payload.get("description", "")),
            fun_facts=tuple(str(fact) for fact in payload.get("fun_facts", ())),
            cultural_significance=str(payload.get("cultural_significance", "")),
            state=str(payload.get("state", "")),
            image_url=payload.get("image_url"),
            created_at=datetime.now(tz=UTC),
        )
        self._styles.append(style)
        return style
