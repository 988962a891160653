"""Exception hierarchy for RAM generation."""

from pathlib import Path
from typing import List, Optional


class RamGenError(Exception):
    """Base class for all ramgen errors."""


class UnsupportedConfigurationError(RamGenError):
    """Raised when generation is requested for an instance that cannot be synthesized."""

    def __init__(self, message: str, reasons: Optional[List[str]] = None):
        self.reasons = list(reasons or [])
        if self.reasons:
            message = f"{message}: {'; '.join(self.reasons)}"
        super().__init__(message)


class UnsupportedTargetError(RamGenError):
    """Raised when a rendering target other than the supported dialect is requested."""


class ParseError(RamGenError):
    """Error while reading a RAM or netlist description file."""

    def __init__(
        self, message: str, file_path: Optional[Path] = None, line: Optional[int] = None
    ):
        self.file_path = file_path
        self.line = line
        location = ""
        if file_path:
            location = str(file_path) if line is None else f"{file_path}:{line}"
        super().__init__(f"{location}: {message}" if location else message)
