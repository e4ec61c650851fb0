"""Form value models for a podcast contribution."""

import mimetypes
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, field_validator

FILE_FIELDS = ("audiofile", "thumbnail")


class EmptyFile(BaseModel):
    """Placeholder for a file input with nothing selected."""

    kind: Literal["empty"] = "empty"


class UploadedFile(BaseModel):
    """A local file picked by the user, not yet sent anywhere."""

    kind: Literal["upload"] = "upload"
    filename: str = Field(..., description="Name of the file")
    content_type: str | None = Field(default=None, description="MIME type")
    size: int = Field(..., ge=0, description="File size in bytes")
    path: Path | None = Field(
        default=None, description="Where the file content is read from"
    )

    @classmethod
    def from_path(cls, path: Path | str) -> "UploadedFile":
        """Build a handle from a file on disk.

        Args:
            path: Path to an existing file.

        Returns:
            UploadedFile with MIME type guessed from the file name.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        content_type, _ = mimetypes.guess_type(path.name)
        return cls(
            filename=path.name,
            content_type=content_type,
            size=path.stat().st_size,
            path=path,
        )


class RemoteFile(BaseModel):
    """Reference to a file that was already uploaded."""

    kind: Literal["remote"] = "remote"
    id: str = Field(..., min_length=1, description="Server side file reference")


FileRef = Annotated[
    EmptyFile | UploadedFile | RemoteFile, Field(discriminator="kind")
]


class FormValues(BaseModel):
    """The single record a contributor edits.

    Text fields start empty. ``age`` keeps whatever the user typed so that
    non-numeric input can be reported instead of rejected on assignment.
    """

    name: str = Field(default="", description="Contributor name")
    email: str = Field(default="", description="Contact email")
    age: str | int | float = Field(default="", description="Contributor age")
    location: str = Field(default="", description="City or region")
    topic: str = Field(default="", description="Episode topic")
    description: str = Field(default="", description="Episode description")
    audiofile: FileRef = Field(
        default_factory=EmptyFile, description="Recorded audio (required)"
    )
    thumbnail: FileRef = Field(
        default_factory=EmptyFile, description="Cover image (optional)"
    )
    category: str = Field(default="", description="Selected category value")

    @field_validator("audiofile", "thumbnail", mode="before")
    @classmethod
    def coerce_file_ref(cls, v: Any) -> Any:
        """Map raw file input values onto the tagged variants."""
        if v is None or v == "":
            return EmptyFile()
        if isinstance(v, str):
            return RemoteFile(id=v)
        return v

    @field_validator(
        "name",
        "email",
        "age",
        "location",
        "topic",
        "description",
        "category",
        mode="before",
    )
    @classmethod
    def coerce_missing(cls, v: Any) -> Any:
        """Treat a cleared input or an unselected option as empty."""
        if v is None:
            return ""
        return v

    @classmethod
    def field_names(cls) -> list[str]:
        """Return the editable field names in declaration order."""
        return list(cls.model_fields)


class SubmitOutcome(BaseModel):
    """Response envelope returned by the contribution endpoint."""

    success: bool = Field(..., description="Whether the server accepted it")
    data: Any | None = Field(default=None, description="Opaque response payload")
    message: str | None = Field(default=None, description="Human readable message")
