"""Artwork classification using LLM vision models."""

import base64
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from artyatra.domain.classifications import ArtClassification

CLASSIFICATION_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "art_style_name": {"type": "string"},
        "confidence": {"type": "number"},
        "reasoning": {"type": "string"},
    },
    "required": ["art_style_name", "confidence", "reasoning"],
    "additionalProperties": False,
}


class ClassificationError(RuntimeError):
    """Raised when the vision model returns no usable classification."""


class VisionClient(Protocol):
    """Interface for LLM vision extraction."""

    async def extract(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        image_data_url: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Return structured vision extraction data."""


@dataclass
class ArtClassifier:
    """Prepares classification prompts and validates model replies."""

    client: VisionClient
    model: str
    reasoning_effort: str | None
    store: bool
    labels: dict[str, str]

    async def classify(self, image_bytes: bytes) -> ArtClassification:
        """Classify an artwork image into one of the known art styles."""
        try:
            raw = await self.client.extract(
                model=self.model,
                reasoning_effort=self.reasoning_effort,
                store=self.store,
                image_data_url=_to_data_url(image_bytes),
                schema=CLASSIFICATION_SCHEMA,
                prompt=build_prompt(self.labels),
            )
        except ClassificationError:
            raise
        except Exception as exc:
            raise ClassificationError(f"Failed to classify artwork: {exc}") from exc
        try:
            result = ArtClassification.model_validate(raw)
        except ValidationError as exc:
            raise ClassificationError(
                "Vision model returned an unexpected structure"
            ) from exc
        return result.model_copy(
            update={"confidence": clamp_confidence(result.confidence)}
        )


def build_prompt(labels: dict[str, str]) -> str:
    """Build the classification prompt listing every allowed label."""
    lines = [
        "Analyze this image and classify it as one of these traditional "
        "Indian art styles:",
        "",
    ]
    lines.extend(
        f"{index}. {name} - {hint}"
        for index, (name, hint) in enumerate(labels.items(), start=1)
    )
    lines.extend(
        [
            "",
            "Set art_style_name to the exact name from the list above, "
            "confidence to a number between 0 and 100, and reasoning to a "
            "brief explanation of why this classification was chosen.",
            "If the image doesn't clearly match any of these styles, choose the "
            "closest match and indicate lower confidence.",
        ]
    )
    return "\n".join(lines)


def labels_for(names: Sequence[str], hints: dict[str, str]) -> dict[str, str]:
    """Pair catalog names with their prompt hints, preserving order."""
    return {name: hints.get(name, "") for name in names}


def clamp_confidence(value: float) -> float:
    """Clamp a confidence score into the 0-100 range."""
    return max(0.0, min(100.0, float(value)))


def _to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    mime_type = _detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    if image_bytes[:6] in {b"GIF87a", b"GIF89a"}:
        return "image/gif"
    return "image/jpeg"
