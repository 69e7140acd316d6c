"""Conversions from domain objects to API JSON."""

from artyatra.domain.art_styles import ArtStyle
from artyatra.domain.categories import CategoryInfo, CategoryMatch
from artyatra.domain.classifications import ArtClassification, ClassificationRecord
from artyatra.domain.map import MapMarker, MapView


def serialize_art_style(style: ArtStyle) -> dict[str, object]:
    return {
        "id": style.id,
        "name": style.name,
        "originLocation": {"lat": style.origin.lat, "lng": style.origin.lng},
        "description": style.description,
        "funFacts": list(style.fun_facts),
        "imageUrl": style.image_url,
        "culturalSignificance": style.cultural_significance,
        "state": style.state,
        "createdAt": style.created_at.isoformat(),
    }


def serialize_classification_result(result: ArtClassification) -> dict[str, object]:
    return {
        "artStyleName": result.art_style_name,
        "confidence": result.confidence,
        "reasoning": result.reasoning,
    }


def serialize_classification(record: ClassificationRecord) -> dict[str, object]:
    return {
        "id": record.id,
        "artStyleId": record.art_style_id,
        "imageData": record.image_data,
        "confidence": record.confidence,
        "createdAt": record.created_at.isoformat(),
    }


def serialize_category(category: CategoryInfo) -> dict[str, object]:
    return {
        "name": category.name,
        "originName": category.origin_name,
        "lat": category.lat,
        "lng": category.lng,
        "description": category.description,
        "funFacts": list(category.fun_facts),
    }


def serialize_category_match(match: CategoryMatch) -> dict[str, object]:
    return {
        "key": match.category.name,
        "info": serialize_category(match.category),
        "distKm": round(match.distance_km, 3),
        "imageUrl": match.image_url,
    }


def serialize_map_view(view: MapView) -> dict[str, object]:
    return {
        "center": {"lat": view.center[0], "lng": view.center[1]},
        "zoom": view.zoom,
        "highlightedId": view.highlighted_id,
        "markers": [_serialize_marker(marker) for marker in view.markers],
        "legend": [
            {"name": entry.name, "state": entry.state, "color": entry.color}
            for entry in view.legend
        ],
    }


def _serialize_marker(marker: MapMarker) -> dict[str, object]:
    return {
        "artStyleId": marker.art_style_id,
        "name": marker.name,
        "state": marker.state,
        "lat": marker.lat,
        "lng": marker.lng,
        "color": marker.color,
        "size": marker.size,
        "highlighted": marker.highlighted,
    }
