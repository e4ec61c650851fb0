"""Data models for the podcast contribution form."""

from podcast_form.models.enums import Category, SubmissionStatus, SubmitState
from podcast_form.models.form import (
    FILE_FIELDS,
    EmptyFile,
    FileRef,
    FormValues,
    RemoteFile,
    SubmitOutcome,
    UploadedFile,
)

__all__ = [
    # Enums
    "Category",
    "SubmissionStatus",
    "SubmitState",
    # Form models
    "FILE_FIELDS",
    "EmptyFile",
    "FileRef",
    "FormValues",
    "RemoteFile",
    "SubmitOutcome",
    "UploadedFile",
]
