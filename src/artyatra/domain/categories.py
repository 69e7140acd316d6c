"""Domain models for regional art and craft categories."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CategoryInfo:
    """Origin and descriptive details of a regional category."""

    name: str
    origin_name: str
    lat: float
    lng: float
    description: str
    fun_facts: tuple[str, ...]


@dataclass(frozen=True)
class CategoryMatch:
    """A category found near a point, with its distance."""

    category: CategoryInfo
    distance_km: float
    image_url: str
