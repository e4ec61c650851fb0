"""Tests for the podcast-form CLI."""

import json
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from podcast_form.cli import app
from podcast_form.cli.contribute import load_values
from podcast_form.models.form import SubmitOutcome, UploadedFile
from podcast_form.submission import SubmitErr, SubmitOk, TransportError
from tests.conftest import FakeTransport

runner = CliRunner()


@pytest.fixture
def form_file(tmp_path: Path) -> Path:
    """A complete form that references an already uploaded audio file."""
    path = tmp_path / "episode.json"
    path.write_text(
        json.dumps(
            {
                "name": "Asha Rao",
                "email": "asha@example.com",
                "age": "29",
                "location": "Pune",
                "topic": "Screen time at dinner",
                "description": "How our family put phones away during meals.",
                "audiofile": "uploads/episode-1.mp3",
                "category": "whatsapp-etiquette",
            }
        )
    )
    return path


def _write(tmp_path: Path, data: Any, name: str = "form.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(data))
    return path


class TestLoadValues:
    """Tests for load_values."""

    def test_attaches_files(self, form_file: Path, audio_file: Path) -> None:
        """--audio replaces the audiofile value with an upload handle."""
        raw = load_values(form_file, audio=audio_file)

        assert isinstance(raw["audiofile"], UploadedFile)
        assert raw["audiofile"].filename == "episode.mp3"

    def test_rejects_unknown_fields(self, tmp_path: Path) -> None:
        """Keys that are not form fields are rejected."""
        path = _write(tmp_path, {"name": "Asha", "nickname": "Ash"})

        with pytest.raises(ValueError, match="nickname"):
            load_values(path)

    def test_rejects_non_object(self, tmp_path: Path) -> None:
        """The file must contain a JSON object."""
        path = _write(tmp_path, ["Asha"])

        with pytest.raises(ValueError, match="JSON object"):
            load_values(path)


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_form(self, form_file: Path) -> None:
        """A complete form exits cleanly."""
        result = runner.invoke(app, ["validate", str(form_file)])

        assert result.exit_code == 0
        assert "ready to submit" in result.output

    def test_invalid_form(self, tmp_path: Path) -> None:
        """Field errors are listed and the exit code is 1."""
        path = _write(tmp_path, {"name": "Asha", "age": "abc"})

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Age must be a number" in result.output
        assert "Audio file is required" in result.output

    def test_null_category_is_reported(self, form_file: Path) -> None:
        """An unselected category shows up in the table, not as a crash."""
        data = json.loads(form_file.read_text())
        data["category"] = None
        form_file.write_text(json.dumps(data))

        result = runner.invoke(app, ["validate", str(form_file)])

        assert result.exit_code == 1
        assert "Category is required" in result.output

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Malformed JSON is reported."""
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Invalid JSON file" in result.output


class TestSubmitCommand:
    """Tests for the submit command."""

    def test_successful_submit(self, form_file: Path) -> None:
        """A successful submission prints the server message."""
        transport = FakeTransport(
            SubmitOk(SubmitOutcome(success=True, message="Received"))
        )
        with patch(
            "podcast_form.cli.contribute.create_transport", return_value=transport
        ):
            result = runner.invoke(
                app, ["submit", str(form_file), "--base-url", "https://api.test"]
            )

        assert result.exit_code == 0
        assert "Received" in result.output
        assert len(transport.calls) == 1

    def test_failed_submit(self, form_file: Path) -> None:
        """A transport failure exits with code 1."""
        transport = FakeTransport(SubmitErr(TransportError("Network error: down")))
        with patch(
            "podcast_form.cli.contribute.create_transport", return_value=transport
        ):
            result = runner.invoke(
                app, ["submit", str(form_file), "--base-url", "https://api.test"]
            )

        assert result.exit_code == 1
        assert "Network error: down" in result.output

    def test_json_output(self, form_file: Path) -> None:
        """--json prints the status as JSON."""
        transport = FakeTransport(SubmitOk(SubmitOutcome(success=False)))
        with patch(
            "podcast_form.cli.contribute.create_transport", return_value=transport
        ):
            result = runner.invoke(
                app,
                ["submit", str(form_file), "--base-url", "https://api.test", "--json"],
            )

        assert result.exit_code == 1
        assert '"status": "rejected"' in result.output

    def test_blocked_submit_does_not_send(self, tmp_path: Path) -> None:
        """An invalid form is not sent."""
        path = _write(tmp_path, {"name": "Asha"})
        transport = FakeTransport(SubmitOk(SubmitOutcome(success=True)))
        with patch(
            "podcast_form.cli.contribute.create_transport", return_value=transport
        ):
            result = runner.invoke(
                app, ["submit", str(path), "--base-url", "https://api.test"]
            )

        assert result.exit_code == 1
        assert transport.calls == []
        assert "Email is required" in result.output

    def test_missing_base_url(self, form_file: Path, monkeypatch) -> None:
        """Without a base URL the command reports a configuration error."""
        monkeypatch.delenv("PODCAST_API_BASE_URL", raising=False)

        result = runner.invoke(app, ["submit", str(form_file)])

        assert result.exit_code == 1
        assert "PODCAST_API_BASE_URL" in result.output


class TestCategoriesCommand:
    """Tests for the categories command."""

    def test_lists_categories(self) -> None:
        """Every category value and label is shown."""
        result = runner.invoke(app, ["categories"])

        assert result.exit_code == 0
        assert "whatsapp-etiquette" in result.output
        assert "Social Media De-Addiction" in result.output
