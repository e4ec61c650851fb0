"""Notification collaborators for submit outcomes."""

from dataclasses import dataclass, field
from typing import Protocol

from rich.console import Console

SUCCESS_PREFIX = "✅"
FAILURE_PREFIX = "❌"


class Notifier(Protocol):
    """Receives one display string per submit outcome."""

    def notify(self, message: str) -> None: ...


class ConsoleNotifier:
    """Prints notifications to a rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def notify(self, message: str) -> None:
        self.console.print(message, markup=False, emoji=False)


@dataclass
class RecordingNotifier:
    """Keeps every notification in memory."""

    messages: list[str] = field(default_factory=list)

    def notify(self, message: str) -> None:
        self.messages.append(message)

    @property
    def last(self) -> str | None:
        """The most recent notification, if any."""
        return self.messages[-1] if self.messages else None


def success_message(message: str | None) -> str:
    """Format a success notification."""
    return f"{SUCCESS_PREFIX} {message}" if message else SUCCESS_PREFIX


def failure_message(error: Exception) -> str:
    """Format a failure notification from an error."""
    return f"{FAILURE_PREFIX} {error}"
