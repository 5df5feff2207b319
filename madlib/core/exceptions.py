"""Custom exception hierarchy for story generation."""

from __future__ import annotations

from typing import Optional

from .constants import ExitCode


class MadLibError(Exception):
    """Base exception for generator failures."""

    exit_code: int = ExitCode.OTHER


class UsageError(MadLibError):
    """Raised when the command line does not carry exactly three paths."""

    exit_code = ExitCode.PARAM_COUNT


class StoryFileNotFoundError(MadLibError):
    """Raised when an input or output path cannot be opened."""

    exit_code = ExitCode.FILE_NOT_FOUND

    def __init__(self, path: object, reason: str = "") -> None:
        self.path = str(path)
        message = f"File not found {self.path}!"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class DictionaryNotFoundError(StoryFileNotFoundError):
    """Raised when the dictionary JSON file is missing or unreadable."""


class DictionaryParseError(MadLibError):
    """Raised when the dictionary JSON is malformed or a word has no type."""

    exit_code = ExitCode.JSON_PARSE

    def __init__(self, path: object, reason: str, location: Optional[str] = None) -> None:
        self.path = str(path)
        self.reason = reason
        self.location = location
        message = f"Unable to parse JSON: {self.path}. Reason: {reason}"
        if location:
            message = f"{message} at {location}"
        super().__init__(message)
