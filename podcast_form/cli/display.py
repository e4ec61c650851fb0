"""Rich display utilities for CLI output."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from podcast_form.models.enums import Category, SubmissionStatus
from podcast_form.models.form import (
    EmptyFile,
    FileRef,
    FormValues,
    RemoteFile,
    UploadedFile,
)

console = Console()


def format_file_ref(ref: FileRef) -> str:
    """Describe a file field value for display."""
    if isinstance(ref, EmptyFile):
        return "-"
    if isinstance(ref, RemoteFile):
        return f"remote:{ref.id}"
    if isinstance(ref, UploadedFile):
        return f"{ref.filename} ({ref.content_type or 'unknown'}, {ref.size} bytes)"
    return str(ref)


def format_status(status: SubmissionStatus) -> Text:
    """Format a submission status with color coding.

    Args:
        status: Submission status.

    Returns:
        Colored text representation.
    """
    style_map = {
        SubmissionStatus.SUCCEEDED: "green",
        SubmissionStatus.REJECTED: "yellow",
        SubmissionStatus.FAILED: "red",
        SubmissionStatus.BLOCKED: "dim",
    }
    return Text(status.value.upper(), style=style_map.get(status, "white"))


def create_validation_table(values: FormValues, errors: dict[str, str]) -> Table:
    """Create a table listing every field with its value and error.

    Args:
        values: Current form values.
        errors: Field name to error message.

    Returns:
        Rich Table object.
    """
    table = Table(title="Contribution Form", show_header=True)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_column("Status")

    for field in FormValues.field_names():
        value = getattr(values, field)
        if isinstance(value, (EmptyFile, UploadedFile, RemoteFile)):
            shown = format_file_ref(value)
        else:
            shown = str(value) if value != "" else "-"
            if len(shown) > 40:
                shown = shown[:40] + "..."

        error = errors.get(field)
        status = Text(error, style="red") if error else Text("ok", style="green")
        table.add_row(field, Text(shown), status)

    return table


def create_categories_table() -> Table:
    """Create a table of the selectable categories."""
    table = Table(title="Categories", show_header=True)
    table.add_column("Value", style="cyan", no_wrap=True)
    table.add_column("Label")

    for category in Category:
        table.add_row(category.value, category.label)

    return table


def print_error(message: str) -> None:
    """Print an error message.

    Args:
        message: Error message to display.
    """
    console.print(f"[bold red]Error:[/bold red] {message}")


def print_success(message: str) -> None:
    """Print a success message.

    Args:
        message: Success message to display.
    """
    console.print(f"[bold green]Success:[/bold green] {message}")


def print_warning(message: str) -> None:
    """Print a warning message.

    Args:
        message: Warning message to display.
    """
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def print_info(message: str) -> None:
    """Print an info message.

    Args:
        message: Info message to display.
    """
    console.print(f"[bold blue]Info:[/bold blue] {message}")
