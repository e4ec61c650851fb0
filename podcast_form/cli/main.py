"""Main CLI entry point for podcast contributions."""

import logging
from typing import Annotated

import typer

from podcast_form.cli.contribute import (
    categories_command,
    submit_command,
    validate_command,
)

# Create main Typer app
app = typer.Typer(
    name="podcast-form",
    help="Validate and submit podcast contributions.",
    no_args_is_help=True,
)


@app.callback()
def configure(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register commands
app.command("validate")(validate_command)
app.command("submit")(submit_command)
app.command("categories")(categories_command)


def main() -> None:
    """Entry point for the podcast-form CLI."""
    app()


if __name__ == "__main__":
    main()
