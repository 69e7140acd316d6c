"""Tests for the classification service."""

import asyncio
import base64

import pytest

from artyatra.adapters.memory_art_style_repository import InMemoryArtStyleRepository
from artyatra.adapters.memory_classification_repository import (
    InMemoryClassificationRepository,
)
from artyatra.services.classifications import (
    ArtStyleNotFoundError,
    ClassificationService,
)
from artyatra.services.vision import ArtClassifier


def test_classify_persists_record_for_known_style(container) -> None:
    service = container.classification_service

    outcome = asyncio.run(service.classify(b"warli-bytes"))

    assert outcome.art_style.id == "warli-art-001"
    assert outcome.record.art_style_id == "warli-art-001"
    assert outcome.record.image_data == base64.b64encode(b"warli-bytes").decode()
    assert service.list_for_art_style("warli-art-001") == [outcome.record]


def test_classify_unknown_label_raises_and_stores_nothing(
    container, vision_client
) -> None:
    vision_client.payload = {
        "art_style_name": "Mughal Miniature",
        "confidence": 55,
        "reasoning": "Fine brushwork",
    }
    service = container.classification_service

    with pytest.raises(ArtStyleNotFoundError) as excinfo:
        asyncio.run(service.classify(b"image"))

    assert excinfo.value.result.art_style_name == "Mughal Miniature"
    for style in container.art_style_service.list_art_styles():
        assert service.list_for_art_style(style.id) == []


def test_label_match_is_exact(container, vision_client) -> None:
    vision_client.payload = {
        "art_style_name": "warli art",
        "confidence": 90,
        "reasoning": "lowercase",
    }

    with pytest.raises(ArtStyleNotFoundError):
        asyncio.run(container.classification_service.classify(b"image"))


def test_created_art_style_becomes_classifiable(vision_client) -> None:
    repository = InMemoryArtStyleRepository()
    created = repository.create_art_style(
        {
            "name": "Cheriyal Scroll",
            "origin": {"lat": 18.994, "lng": 78.89},
            "fun_facts": ["Painted on khadi"],
            "state": "Telangana",
        }
    )
    service = ClassificationService(
        classifier=ArtClassifier(
            client=vision_client,
            model="gpt-5.2",
            reasoning_effort=None,
            store=False,
            labels={"Cheriyal Scroll": ""},
        ),
        art_style_repository=repository,
        repository=InMemoryClassificationRepository(),
    )
    vision_client.payload = {
        "art_style_name": "Cheriyal Scroll",
        "confidence": 60,
        "reasoning": "Narrative panels.",
    }

    outcome = asyncio.run(service.classify(b"scroll"))

    assert outcome.art_style == created
    assert created.fun_facts == ("Painted on khadi",)
    assert repository.get_art_style(created.id) == created
