"""Submission lifecycle: controller, transport and notifier collaborators."""

from podcast_form.submission.controller import (
    REJECTION_MESSAGE,
    SubmissionController,
    SubmissionRejectedError,
)
from podcast_form.submission.notifier import (
    ConsoleNotifier,
    Notifier,
    RecordingNotifier,
)
from podcast_form.submission.transport import (
    ContributionTransport,
    HttpContributionTransport,
    SubmitErr,
    SubmitOk,
    SubmitResult,
    TransportConfig,
    TransportError,
    create_transport,
    encode_form,
)

__all__ = [
    "REJECTION_MESSAGE",
    "ConsoleNotifier",
    "ContributionTransport",
    "HttpContributionTransport",
    "Notifier",
    "RecordingNotifier",
    "SubmissionController",
    "SubmissionRejectedError",
    "SubmitErr",
    "SubmitOk",
    "SubmitResult",
    "TransportConfig",
    "TransportError",
    "create_transport",
    "encode_form",
]
