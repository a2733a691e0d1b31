"""User-facing notifications."""

import logging
from dataclasses import dataclass
from typing import Protocol

_logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """Fire-and-forget sink for user notifications."""

    def success(self, message: str) -> None:
        """Report a successful action."""

    def error(self, message: str) -> None:
        """Report a failed action."""


@dataclass
class LoggingNotifier(Notifier):
    """Notifier that writes messages to the application log."""

    def success(self, message: str) -> None:
        _logger.info("Notification: %s", message)

    def error(self, message: str) -> None:
        _logger.warning("Notification error: %s", message)
