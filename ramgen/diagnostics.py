"""
Diagnostic channel for generation warnings.

Reporters are passed explicitly to the components that need them, so
generation never touches process-wide state.
"""

import logging
from typing import List, Protocol

logger = logging.getLogger(__name__)


class Reporter(Protocol):
    """Receives human-readable diagnostics."""

    def add_warning(self, message: str) -> None: ...

    def add_error(self, message: str) -> None: ...


class CollectingReporter:
    """Reporter that keeps every message and mirrors it to the log."""

    def __init__(self, log: logging.Logger = logger):
        self.warnings: List[str] = []
        self.errors: List[str] = []
        self._log = log

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)
        self._log.warning(message)

    def add_error(self, message: str) -> None:
        self.errors.append(message)
        self._log.error(message)

    @property
    def messages(self) -> List[str]:
        return self.errors + self.warnings
