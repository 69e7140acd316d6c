"""Marker layout for the art style origin map."""

from collections.abc import Sequence

from artyatra.domain.art_styles import ArtStyle
from artyatra.domain.map import LegendEntry, MapMarker, MapView

INDIA_CENTER = (20.5937, 78.9629)
DEFAULT_ZOOM = 5
HIGHLIGHT_ZOOM = 6
HIGHLIGHT_COLOR = "#F97316"
DEFAULT_COLOR = "#F97316"
MARKER_SIZE = 30
HIGHLIGHT_MARKER_SIZE = 40

MARKER_COLORS: dict[str, str] = {
    "Warli Art": "#F97316",
    "Pochampally Ikat": "#EA580C",
    "Thanjavur Painting": "#FB923C",
    "Madhubani Painting": "#C2410C",
    "Kalamkari": "#FDBA74",
    "Pattachitra": "#FED7AA",
    "Gond Art": "#9A3412",
    "Pichwai Painting": "#FEF3C7",
}


def build_map_view(
    art_styles: Sequence[ArtStyle], highlighted_id: str | None = None
) -> MapView:
    """Place one marker per art style and center on the highlighted one.

    Highlighting matches on id only.
    """
    markers = [_marker(style, style.id == highlighted_id) for style in art_styles]
    legend = [
        LegendEntry(name=marker.name, state=marker.state, color=marker.color)
        for marker in markers
    ]
    highlighted = next((m for m in markers if m.highlighted), None)
    if highlighted is None:
        return MapView(
            center=INDIA_CENTER,
            zoom=DEFAULT_ZOOM,
            markers=markers,
            legend=legend,
            highlighted_id=None,
        )
    return MapView(
        center=(highlighted.lat, highlighted.lng),
        zoom=HIGHLIGHT_ZOOM,
        markers=markers,
        legend=legend,
        highlighted_id=highlighted.art_style_id,
    )


def _marker(style: ArtStyle, highlighted: bool) -> MapMarker:
    if highlighted:
        color = HIGHLIGHT_COLOR
    else:
        color = MARKER_COLORS.get(style.name, DEFAULT_COLOR)
    return MapMarker(
        art_style_id=style.id,
        name=style.name,
        state=style.state,
        lat=style.origin.lat,
        lng=style.origin.lng,
        color=color,
        size=HIGHLIGHT_MARKER_SIZE if highlighted else MARKER_SIZE,
        highlighted=highlighted,
    )
