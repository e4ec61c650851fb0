"""Podcast contribution intake: field validation and submission lifecycle."""

__version__ = "0.1.0"
