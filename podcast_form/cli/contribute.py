"""CLI commands for validating and submitting podcast contributions.

The form values are read from a JSON object whose keys are field names.
Audio and thumbnail files can be attached from disk with options; a string
value in the JSON for either file field is treated as an already-uploaded
reference.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.markup import escape

from podcast_form.cli.display import (
    console,
    create_categories_table,
    create_validation_table,
    format_status,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from podcast_form.models.enums import SubmissionStatus
from podcast_form.models.form import FormValues, UploadedFile
from podcast_form.submission.controller import SubmissionController
from podcast_form.submission.notifier import ConsoleNotifier
from podcast_form.submission.transport import TransportConfig, create_transport
from podcast_form.validation.rules import validation_state

logger = logging.getLogger(__name__)

FormFileArgument = Annotated[
    Path,
    typer.Argument(
        help="Path to JSON file containing form values",
        exists=True,
        readable=True,
    ),
]
AudioOption = Annotated[
    Path | None,
    typer.Option(
        "--audio",
        "-a",
        help="Audio file to attach",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
]
ThumbnailOption = Annotated[
    Path | None,
    typer.Option(
        "--thumbnail",
        "-t",
        help="Thumbnail image to attach",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
]


def load_values(
    file_path: Path,
    audio: Path | None = None,
    thumbnail: Path | None = None,
) -> dict[str, Any]:
    """Load raw field values from a JSON file and attach files.

    Args:
        file_path: JSON file with a top level object of field values.
        audio: Optional audio file to use for ``audiofile``.
        thumbnail: Optional image to use for ``thumbnail``.

    Returns:
        Mapping of field name to raw value.

    Raises:
        ValueError: If the JSON is not an object, names an unknown field or
            holds a value of the wrong type.
    """
    with open(file_path) as f:
        raw = json.load(f)

    if not isinstance(raw, dict):
        raise ValueError("Form file must contain a JSON object")

    unknown = sorted(set(raw) - set(FormValues.field_names()))
    if unknown:
        raise ValueError(f"Unknown form field(s): {', '.join(unknown)}")

    if audio is not None:
        raw["audiofile"] = UploadedFile.from_path(audio)
    if thumbnail is not None:
        raw["thumbnail"] = UploadedFile.from_path(thumbnail)

    # Raises pydantic.ValidationError (a ValueError) on wrongly typed fields
    FormValues.model_validate(raw)
    return raw


def _load_or_exit(
    file_path: Path, audio: Path | None, thumbnail: Path | None
) -> dict[str, Any]:
    try:
        return load_values(file_path, audio, thumbnail)
    except json.JSONDecodeError as e:
        print_error(f"Invalid JSON file: {e}")
        raise typer.Exit(code=1) from None
    except ValueError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from None


def validate_command(
    file_path: FormFileArgument,
    audio: AudioOption = None,
    thumbnail: ThumbnailOption = None,
) -> None:
    """Check form values without sending anything.

    Example:
        podcast-form validate episode.json --audio episode.mp3
    """
    raw = _load_or_exit(file_path, audio, thumbnail)
    values = FormValues.model_validate(raw)
    state = validation_state(values)

    console.print(create_validation_table(values, state.errors))

    if not state.is_valid:
        print_error(f"{len(state.errors)} field(s) need attention.")
        raise typer.Exit(code=1)
    print_success("Form is ready to submit.")


def submit_command(
    file_path: FormFileArgument,
    audio: AudioOption = None,
    thumbnail: ThumbnailOption = None,
    base_url: Annotated[
        str | None,
        typer.Option(
            "--base-url",
            "-u",
            help="API base URL (defaults to PODCAST_API_BASE_URL)",
        ),
    ] = None,
    output_json: Annotated[
        bool,
        typer.Option(
            "--json",
            "-j",
            help="Output result as JSON instead of formatted display",
        ),
    ] = False,
) -> None:
    """Validate form values and submit them to the contribution endpoint.

    Example:
        podcast-form submit episode.json --audio episode.mp3 --thumbnail cover.png
    """
    raw = _load_or_exit(file_path, audio, thumbnail)

    try:
        config = (
            TransportConfig(base_url=base_url)
            if base_url
            else TransportConfig.from_env()
        )
    except ValueError as e:
        print_error(f"Configuration error: {e}")
        print_info("Pass --base-url or set PODCAST_API_BASE_URL")
        raise typer.Exit(code=1) from None

    controller = SubmissionController(
        transport=create_transport(config),
        notifier=ConsoleNotifier(console),
    )
    controller.set_values(**raw)

    status = asyncio.run(controller.submit())
    logger.debug("Submit finished with status %s", status.value)

    if output_json:
        console.print_json(
            json.dumps({"status": status.value, "errors": controller.errors})
        )
    elif status is SubmissionStatus.BLOCKED:
        console.print(create_validation_table(controller.values, controller.errors))
        if not controller.errors:
            print_warning("Nothing to submit: the form is empty.")
    else:
        console.print(format_status(status))

    if status is not SubmissionStatus.SUCCEEDED:
        raise typer.Exit(code=1)


def categories_command() -> None:
    """List the categories a contribution can be filed under."""
    console.print(create_categories_table())
