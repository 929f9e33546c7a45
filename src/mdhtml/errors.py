"""Exception classes for mdhtml.

The parser and renderer never raise for document content. These exceptions
belong to the file and conversion layer around them.
"""

from __future__ import annotations

from pathlib import Path


class MdHtmlError(Exception):
    """Base exception for all mdhtml errors.

    Subclass this for specific error categories.
    """

    pass


class InputValidationError(MdHtmlError):
    """The input path cannot be converted.

    Raised when no path is given, the file does not exist, or the file
    does not have a ``.md`` extension.
    """

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        """Initialize validation error.

        Args:
            message: Description of the problem
            path: Offending input path (optional)
        """
        self.path = path
        super().__init__(message)


class FileAccessError(MdHtmlError):
    """Reading or writing a file failed.

    Wraps the underlying ``OSError``, which stays available as ``__cause__``.
    """

    def __init__(self, operation: str, path: str | Path, reason: str) -> None:
        """Initialize file access error.

        Args:
            operation: What was attempted ("read" or "write")
            path: File path involved
            reason: Message of the underlying error
        """
        self.operation = operation
        self.path = path
        super().__init__(f"Failed to {operation} file: {path} - {reason}")


class ConversionError(MdHtmlError):
    """A file conversion did not complete.

    Raised by the converter with the failing step's message as context.
    """

    def __init__(self, message: str) -> None:
        super().__init__(f"Conversion failed: {message}")
