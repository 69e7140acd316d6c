"""Map presentation models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MapMarker:
    """A single marker placed at an art style origin."""

    art_style_id: str
    name: str
    state: str
    lat: float
    lng: float
    color: str
    size: int
    highlighted: bool


@dataclass(frozen=True)
class LegendEntry:
    """Name, state and marker color shown beside the map."""

    name: str
    state: str
    color: str


@dataclass(frozen=True)
class MapView:
    """Markers plus the viewport to show them in."""

    center: tuple[float, float]
    zoom: int
    markers: list[MapMarker]
    legend: list[LegendEntry]
    highlighted_id: str | None
