"""Port for user-facing error notifications."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Notifier(ABC):

    @abstractmethod
    def error(self, message: str) -> None:
        """Show ``message`` to the user. Must not raise."""
