"""Search over the static regional category catalog."""

import asyncio
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol
from urllib.parse import quote

from artyatra.domain.categories import CategoryInfo, CategoryMatch

EARTH_RADIUS_KM = 6371.0
MIN_RADIUS_KM = 1.0
MAX_RADIUS_KM = 100.0

# Andhra Pradesh + Telangana, (south-west, north-east) corners.
SEARCH_BOUNDS: tuple[tuple[float, float], tuple[float, float]] = (
    (12.5, 76.5),
    (20.8, 85.5),
)


class CategoryNotFoundError(LookupError):
    """Raised when a category name is not in the catalog."""


class OutOfBoundsError(ValueError):
    """Raised when a search point falls outside the supported region."""


class ImageSource(Protocol):
    """Looks up a display image for a category."""

    async def image_url(self, category: CategoryInfo) -> str:
        """Return an image URL for the category."""


@dataclass
class PlaceholderImageSource(ImageSource):
    """Image source that renders the category name on a placeholder."""

    base_url: str = "https://placehold.co/480x320/png"

    async def image_url(self, category: CategoryInfo) -> str:
        return f"{self.base_url}?text={quote(category.name)}"


@dataclass
class CategorySearchService:
    """Name lookup and radius search over regional categories."""

    categories: Sequence[CategoryInfo]
    image_source: ImageSource

    def list_categories(self) -> list[CategoryInfo]:
        """Return categories in display order."""
        return list(self.categories)

    def get_category(self, name: str) -> CategoryInfo:
        """Return a category by exact name."""
        for category in self.categories:
            if category.name == name:
                return category
        raise CategoryNotFoundError(name)

    async def search_nearby(
        self, lat: float, lng: float, radius_km: float
    ) -> list[CategoryMatch]:
        """Return categories within a radius of a point, nearest first."""
        if not within_bounds(lat, lng):
            raise OutOfBoundsError(
                "Please choose a point within Andhra Pradesh or Telangana."
            )
        radius = clamp_radius(radius_km)
        nearby = [
            (category, haversine_km(lat, lng, category.lat, category.lng))
            for category in self.categories
        ]
        nearby = [(category, dist) for category, dist in nearby if dist <= radius]
        urls = await asyncio.gather(
            *(self.image_source.image_url(category) for category, _ in nearby)
        )
        matches = [
            CategoryMatch(category=category, distance_km=dist, image_url=url)
            for (category, dist), url in zip(nearby, urls, strict=True)
        ]
        return sorted(matches, key=lambda match: match.distance_km)


def within_bounds(lat: float, lng: float) -> bool:
    """Return true when the point lies inside the search region."""
    (min_lat, min_lng), (max_lat, max_lng) = SEARCH_BOUNDS
    return min_lat <= lat <= max_lat and min_lng <= lng <= max_lng


def clamp_radius(radius_km: float) -> float:
    """Clamp a search radius into the supported range."""
    return max(MIN_RADIUS_KM, min(MAX_RADIUS_KM, radius_km))


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two points in kilometres."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lng / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(h)))
