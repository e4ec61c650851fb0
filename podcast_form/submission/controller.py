"""Submission controller: form state and the submit lifecycle.

The controller owns the form values, the visible field errors and the
in-flight flag. A submit attempt moves it from IDLE to SUBMITTING and back:

    IDLE --submit()--> SUBMITTING --success--> IDLE (values reset)
                                  --failure--> IDLE (values kept)

Exactly one notification is emitted per attempt that reaches the transport.
"""

import logging
from typing import Any, assert_never

from podcast_form.models.enums import SubmissionStatus, SubmitState
from podcast_form.models.form import FormValues
from podcast_form.submission.notifier import (
    Notifier,
    failure_message,
    success_message,
)
from podcast_form.submission.transport import (
    ContributionTransport,
    SubmitErr,
    SubmitOk,
    SubmitResult,
    TransportError,
)
from podcast_form.validation.rules import (
    FIELD_RULES,
    ValidationState,
    is_dirty,
    validate_field,
    validate_form,
)

logger = logging.getLogger(__name__)

REJECTION_MESSAGE = "Something went wrong"


class SubmissionRejectedError(Exception):
    """The server answered with ``success: false``."""

    pass


class SubmissionController:
    """Owns form state and runs the submit sequence.

    Attributes:
        transport: Collaborator that delivers the values.
        notifier: Collaborator that displays outcome messages.
    """

    def __init__(
        self,
        transport: ContributionTransport,
        notifier: Notifier,
        initial: FormValues | None = None,
    ) -> None:
        """Initialize the controller with empty (or given) initial values.

        Args:
            transport: Transport used to send submissions.
            notifier: Receives one message per submit outcome.
            initial: Record the form starts from and resets to.
        """
        self.transport = transport
        self.notifier = notifier
        self._initial = initial if initial is not None else FormValues()
        self._values = self._initial.model_copy(deep=True)
        self._errors: dict[str, str] = {}
        self._state = SubmitState.IDLE

    @property
    def values(self) -> FormValues:
        return self._values

    @property
    def errors(self) -> dict[str, str]:
        """Errors currently shown next to fields."""
        return dict(self._errors)

    @property
    def state(self) -> SubmitState:
        return self._state

    @property
    def is_submitting(self) -> bool:
        return self._state is SubmitState.SUBMITTING

    @property
    def is_dirty(self) -> bool:
        return is_dirty(self._values, self._initial)

    @property
    def is_valid(self) -> bool:
        """Whether every field passes, including ones not yet edited."""
        return not validate_form(self._values)

    @property
    def can_submit(self) -> bool:
        """Enabled state of the submit control."""
        return self.is_valid and self.is_dirty and not self.is_submitting

    def validation(self) -> ValidationState:
        """Snapshot of the visible errors and the aggregate flags."""
        return ValidationState(
            errors=self.errors, is_valid=self.is_valid, is_dirty=self.is_dirty
        )

    def set_field(self, name: str, value: Any) -> str | None:
        """Update one field and re-validate it.

        Args:
            name: Field name.
            value: New raw value. File fields accept a file handle, a remote
                reference string, or None/"" to clear.

        Returns:
            The field's error message, or None if it is now valid.

        Raises:
            KeyError: If the field does not exist.
        """
        if name not in FIELD_RULES:
            raise KeyError(name)

        updated = self._values.model_dump()
        updated[name] = value
        self._values = FormValues.model_validate(updated)

        message = validate_field(self._values, name)
        if message is None:
            self._errors.pop(name, None)
        else:
            self._errors[name] = message
        return message

    def set_values(self, **fields: Any) -> dict[str, str]:
        """Update several fields at once.

        Returns:
            The visible error mapping after the update.
        """
        for name, value in fields.items():
            self.set_field(name, value)
        return self.errors

    def reset(self) -> None:
        """Restore the initial values and clear visible errors."""
        self._values = self._initial.model_copy(deep=True)
        self._errors = {}

    async def submit(self) -> SubmissionStatus:
        """Run one submit cycle.

        Returns:
            BLOCKED when the gate is closed, otherwise the outcome of the
            transport call.
        """
        if self.is_submitting:
            logger.debug("Submit ignored: a submission is already in flight")
            return SubmissionStatus.BLOCKED

        self._errors = validate_form(self._values)
        if self._errors or not self.is_dirty:
            logger.info(
                "Submit blocked: %d invalid field(s), dirty=%s",
                len(self._errors),
                self.is_dirty,
            )
            return SubmissionStatus.BLOCKED

        snapshot = self._values.model_copy(deep=True)
        logger.debug("Form values: %s", snapshot.model_dump(mode="json"))

        self._state = SubmitState.SUBMITTING
        status = SubmissionStatus.FAILED
        try:
            result = await self._send(snapshot)
            status, message = self._interpret(result)
            self._notify(message)
        finally:
            if status is SubmissionStatus.SUCCEEDED:
                self.reset()
            self._state = SubmitState.IDLE

        return status

    def _notify(self, message: str) -> None:
        try:
            self.notifier.notify(message)
        except Exception:
            logger.exception("Notifier failed to display: %s", message)

    async def _send(self, snapshot: FormValues) -> SubmitResult:
        try:
            return await self.transport.submit(snapshot)
        except Exception as e:
            logger.exception("Transport raised instead of returning a result")
            return SubmitErr(TransportError(str(e) or type(e).__name__))

    def _interpret(self, result: SubmitResult) -> tuple[SubmissionStatus, str]:
        """Map a transport result onto a status and a notification."""
        if isinstance(result, SubmitOk):
            if result.outcome.success:
                logger.info("Contribution accepted: %s", result.outcome.message)
                return SubmissionStatus.SUCCEEDED, success_message(
                    result.outcome.message
                )
            error = SubmissionRejectedError(REJECTION_MESSAGE)
            logger.warning(
                "Contribution rejected by server: %s", result.outcome.message
            )
            return SubmissionStatus.REJECTED, failure_message(error)
        if isinstance(result, SubmitErr):
            logger.warning("Contribution failed: %s", result.error)
            return SubmissionStatus.FAILED, failure_message(result.error)
        assert_never(result)
