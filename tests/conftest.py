"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import Any

import pytest

from podcast_form.models.form import FormValues, UploadedFile
from podcast_form.submission.transport import SubmitResult


class FakeTransport:
    """Transport double that returns a canned result and records calls."""

    def __init__(
        self,
        result: SubmitResult | None = None,
        raises: Exception | None = None,
    ) -> None:
        self.result = result
        self.raises = raises
        self.calls: list[FormValues] = []

    async def submit(self, values: FormValues) -> SubmitResult:
        self.calls.append(values)
        if self.raises is not None:
            raise self.raises
        assert self.result is not None
        return self.result


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def audio_file(tmp_path: Path) -> Path:
    """Write a small audio file to disk."""
    path = tmp_path / "episode.mp3"
    path.write_bytes(b"ID3" + b"\x00" * 1021)
    return path


@pytest.fixture
def audio_upload(audio_file: Path) -> UploadedFile:
    """An uploaded audio file handle."""
    return UploadedFile.from_path(audio_file)


@pytest.fixture
def valid_fields(audio_upload: UploadedFile) -> dict[str, Any]:
    """Field values that pass every rule."""
    return {
        "name": "Asha Rao",
        "email": "asha@example.com",
        "age": "29",
        "location": "Pune",
        "topic": "Screen time at dinner",
        "description": "How our family put phones away during meals.",
        "audiofile": audio_upload,
        "category": "whatsapp-etiquette",
    }


@pytest.fixture
def valid_values(valid_fields: dict[str, Any]) -> FormValues:
    """FormValues built from valid_fields."""
    return FormValues.model_validate(valid_fields)
