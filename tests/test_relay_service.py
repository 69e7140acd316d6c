"""Tests for the two-phase archive relay."""

import asyncio

import pytest

from artyatra.domain.uploads import UploadJob
from artyatra.services.relay import (
    RelayNetworkError,
    UploadRelayService,
    finalize_form,
)
from tests.conftest import FakeArchiveClient, json_response


def _job() -> UploadJob:
    return UploadJob(
        upload_uuid="5b1f0c9e-job",
        title="Warli mural",
        latitude="19.076",
        longitude="72.8777",
        user_id="user-42",
        filename="mural.jpg",
        category_id="4366cab1-031e-4b37-816b-311ee34461a9",
        description="Village wall",
    )


def test_submit_uploads_chunk_then_finalizes() -> None:
    archive = FakeArchiveClient()
    service = UploadRelayService(archive)

    outcome = asyncio.run(
        service.submit(_job(), b"jpeg-bytes", "image/jpeg", "Bearer t")
    )

    assert outcome.stage == "finalize"
    assert outcome.response.status_code == 201
    assert not outcome.partially_submitted
    chunk = archive.chunk_calls[0]
    assert chunk["chunk_index"] == 0
    assert chunk["total_chunks"] == 1
    assert chunk["content"] == b"jpeg-bytes"
    form, authorization = archive.finalize_calls[0]
    assert form["upload_uuid"] == chunk["upload_uuid"] == "5b1f0c9e-job"
    assert form["filename"] == chunk["filename"] == "mural.jpg"
    assert authorization == "Bearer t"


def test_chunk_failure_skips_finalize() -> None:
    archive = FakeArchiveClient(
        chunk_response=json_response(500, {"detail": "storage unavailable"})
    )
    service = UploadRelayService(archive)

    outcome = asyncio.run(service.submit(_job(), b"bytes", "image/jpeg", None))

    assert outcome.stage == "chunk"
    assert outcome.response.status_code == 500
    assert len(archive.chunk_calls) == 1
    assert len(archive.finalize_calls) == 0
    assert not outcome.partially_submitted


def test_finalize_failure_is_partial_submission() -> None:
    archive = FakeArchiveClient(
        finalize_response=json_response(422, {"detail": "bad category"})
    )
    service = UploadRelayService(archive)

    outcome = asyncio.run(service.submit(_job(), b"bytes", "image/jpeg", None))

    assert outcome.stage == "finalize"
    assert outcome.partially_submitted
    assert outcome.response.json() == {"detail": "bad category"}


def test_network_error_reports_stage() -> None:
    archive = FakeArchiveClient(finalize_error=ConnectionError("reset"))
    service = UploadRelayService(archive)

    with pytest.raises(RelayNetworkError) as excinfo:
        asyncio.run(service.submit(_job(), b"bytes", "image/jpeg", None))

    assert excinfo.value.stage == "finalize"
    assert excinfo.value.partially_submitted


def test_finalize_form_contains_all_metadata() -> None:
    form = finalize_form(_job())

    assert form == {
        "total_chunks": "1",
        "filename": "mural.jpg",
        "latitude": "19.076",
        "longitude": "72.8777",
        "use_uid_filename": "false",
        "release_rights": "creator",
        "user_id": "user-42",
        "media_type": "image",
        "title": "Warli mural",
        "upload_uuid": "5b1f0c9e-job",
        "description": "Village wall",
        "category_id": "4366cab1-031e-4b37-816b-311ee34461a9",
    }
