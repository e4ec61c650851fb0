"""HTTP transport for posting contributions to the remote endpoint."""

import logging
import os
from dataclasses import dataclass
from typing import Any, Protocol, assert_never

import httpx
from pydantic import ValidationError

from podcast_form.models.form import (
    FILE_FIELDS,
    EmptyFile,
    FileRef,
    FormValues,
    RemoteFile,
    SubmitOutcome,
    UploadedFile,
)

logger = logging.getLogger(__name__)

CONTRIBUTE_PATH = "podcast/contribute"
DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass
class TransportConfig:
    """Configuration for the contribution transport."""

    base_url: str
    timeout: float | None = None  # None waits for the server indefinitely

    @classmethod
    def from_env(cls) -> "TransportConfig":
        """Create config from environment variables.

        Required environment variables:
            PODCAST_API_BASE_URL: Base URL of the contribution API

        Optional environment variables:
            PODCAST_API_TIMEOUT: Request timeout in seconds (default: none)

        Raises:
            ValueError: If required environment variables are missing.
        """
        base_url = os.getenv("PODCAST_API_BASE_URL")
        if not base_url:
            raise ValueError("PODCAST_API_BASE_URL environment variable is required")

        timeout_str = os.getenv("PODCAST_API_TIMEOUT")
        return cls(
            base_url=base_url,
            timeout=float(timeout_str) if timeout_str else None,
        )

    @property
    def contribute_url(self) -> str:
        """Absolute URL of the contribution endpoint."""
        return f"{self.base_url.rstrip('/')}/{CONTRIBUTE_PATH}"


class TransportError(Exception):
    """The submission call itself failed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class SubmitOk:
    """The server answered with a well-formed envelope."""

    outcome: SubmitOutcome


@dataclass(frozen=True)
class SubmitErr:
    """The call failed before a usable envelope was received."""

    error: TransportError


SubmitResult = SubmitOk | SubmitErr


class ContributionTransport(Protocol):
    """Anything that can deliver form values and report the result."""

    async def submit(self, values: FormValues) -> SubmitResult: ...


def _encode_file(field: str, ref: FileRef) -> tuple[str | None, Any]:
    """Encode one file field as either a form value or a file part.

    Returns:
        Tuple of (form_value, file_part); at most one is set.

    Raises:
        TransportError: If an uploaded file has no readable content.
    """
    if isinstance(ref, EmptyFile):
        return None, None
    if isinstance(ref, RemoteFile):
        return ref.id, None
    if isinstance(ref, UploadedFile):
        if ref.path is None:
            raise TransportError(f"No content available for {field}: {ref.filename}")
        try:
            content = ref.path.read_bytes()
        except OSError as e:
            raise TransportError(f"Could not read {ref.filename}: {e}") from e
        return None, (ref.filename, content, ref.content_type or DEFAULT_CONTENT_TYPE)
    assert_never(ref)


def encode_form(values: FormValues) -> tuple[dict[str, str], dict[str, Any]]:
    """Split form values into multipart form data and file parts.

    Args:
        values: The form values to encode.

    Returns:
        Tuple of (data, files) suitable for ``httpx`` multipart requests.

    Raises:
        TransportError: If an uploaded file cannot be read.
    """
    data: dict[str, str] = {}
    files: dict[str, Any] = {}

    for field in FormValues.field_names():
        if field in FILE_FIELDS:
            form_value, file_part = _encode_file(field, getattr(values, field))
            if form_value is not None:
                data[field] = form_value
            if file_part is not None:
                files[field] = file_part
        else:
            data[field] = str(getattr(values, field))

    return data, files


@dataclass
class HttpContributionTransport:
    """Posts contributions with ``httpx`` and decodes the response envelope.

    Failures never raise out of :meth:`submit`; they come back as
    :class:`SubmitErr` so callers can branch on the result type.
    """

    config: TransportConfig
    http_transport: httpx.AsyncBaseTransport | None = None

    async def submit(self, values: FormValues) -> SubmitResult:
        """Send the values and return the structured result."""
        try:
            data, files = encode_form(values)
        except TransportError as e:
            logger.warning("Could not encode submission: %s", e)
            return SubmitErr(e)

        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout, transport=self.http_transport
            ) as client:
                response = await client.post(
                    self.config.contribute_url, data=data, files=files or None
                )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("Contribution endpoint returned status %d", status)
            return SubmitErr(
                TransportError(f"Request failed with status code {status}", status)
            )
        except httpx.HTTPError as e:
            logger.warning("Contribution request failed: %s", e)
            detail = str(e) or type(e).__name__
            return SubmitErr(TransportError(f"Network error: {detail}"))

        try:
            outcome = SubmitOutcome.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning("Malformed contribution response: %s", e)
            return SubmitErr(
                TransportError("Malformed response from server", response.status_code)
            )

        logger.debug(
            "Contribution response: success=%s message=%r",
            outcome.success,
            outcome.message,
        )
        return SubmitOk(outcome)


def create_transport(config: TransportConfig | None = None) -> HttpContributionTransport:
    """Create a new HTTP transport.

    Args:
        config: Optional configuration. If not provided, loads from environment.

    Returns:
        Configured HttpContributionTransport instance.
    """
    if config is None:
        config = TransportConfig.from_env()
    return HttpContributionTransport(config=config)
