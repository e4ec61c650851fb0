"""CLI module for podcast contributions."""

from podcast_form.cli.main import app, main

__all__ = ["app", "main"]
