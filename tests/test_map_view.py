"""Tests for map marker layout."""

from dataclasses import replace

from artyatra.seed_data import ART_STYLES
from artyatra.services.map_view import (
    DEFAULT_ZOOM,
    HIGHLIGHT_COLOR,
    HIGHLIGHT_MARKER_SIZE,
    HIGHLIGHT_ZOOM,
    INDIA_CENTER,
    MARKER_SIZE,
    build_map_view,
)


def test_warli_is_the_only_highlighted_marker() -> None:
    view = build_map_view(ART_STYLES, "warli-art-001")

    highlighted = [marker for marker in view.markers if marker.highlighted]
    assert len(highlighted) == 1
    assert highlighted[0].name == "Warli Art"
    assert (highlighted[0].lat, highlighted[0].lng) == (19.076, 72.8777)
    assert highlighted[0].size == HIGHLIGHT_MARKER_SIZE
    assert view.center == (19.076, 72.8777)
    assert view.zoom == HIGHLIGHT_ZOOM == 6


def test_no_highlight_centers_on_india() -> None:
    view = build_map_view(ART_STYLES)

    assert not any(marker.highlighted for marker in view.markers)
    assert all(marker.size == MARKER_SIZE for marker in view.markers)
    assert view.center == INDIA_CENTER
    assert view.zoom == DEFAULT_ZOOM
    assert len(view.markers) == len(ART_STYLES)


def test_highlight_matches_identity_not_name() -> None:
    lookalike = replace(ART_STYLES[0], id="warli-copy")
    styles = [*ART_STYLES, lookalike]

    view = build_map_view(styles, "warli-copy")

    highlighted = [marker for marker in view.markers if marker.highlighted]
    assert [marker.art_style_id for marker in highlighted] == ["warli-copy"]


def test_legend_follows_marker_colors() -> None:
    view = build_map_view(ART_STYLES, "kalamkari-001")

    assert [entry.name for entry in view.legend] == [
        style.name for style in ART_STYLES
    ]
    assert [entry.color for entry in view.legend] == [
        marker.color for marker in view.markers
    ]
    kalamkari = next(entry for entry in view.legend if entry.name == "Kalamkari")
    assert kalamkari.color == HIGHLIGHT_COLOR
