"""Art style catalog lookups."""

from dataclasses import dataclass
from typing import Protocol

from artyatra.domain.art_styles import ArtStyle


class ArtStyleRepository(Protocol):
    """Persistence interface for the art style catalog."""

    def list_art_styles(self) -> list[ArtStyle]:
        """Return every art style in catalog order."""

    def get_art_style(self, art_style_id: str) -> ArtStyle | None:
        """Return an art style by id, if present."""

    def get_art_style_by_name(self, name: str) -> ArtStyle | None:
        """Return the art style with this exact name, if present."""

    def create_art_style(self, payload: dict[str, object]) -> ArtStyle:
        """Create and return a new art style."""


@dataclass
class ArtStyleService:
    """Read access to the art style catalog."""

    repository: ArtStyleRepository

    def list_art_styles(self) -> list[ArtStyle]:
        """Return all catalog entries."""
        return self.repository.list_art_styles()

    def get_art_style(self, art_style_id: str) -> ArtStyle | None:
        """Return one catalog entry by id."""
        return self.repository.get_art_style(art_style_id)

    def label_names(self) -> list[str]:
        """Return the closed set of names the classifier may answer with."""
        return [style.name for style in self.repository.list_art_styles()]
