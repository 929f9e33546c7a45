"""File helpers for the conversion layer.

Reading and writing are UTF-8. Failures surface as FileAccessError with the
path and the underlying ``OSError`` chained as ``__cause__``.
"""

from __future__ import annotations

from pathlib import Path

from mdhtml.errors import FileAccessError


def read_file(path: str | Path) -> str:
    """Read a UTF-8 text file.

    Raises:
        FileAccessError: If the file cannot be read or decoded.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError("read", path, str(e)) from e


def write_file(path: str | Path, content: str) -> None:
    """Write ``content`` as UTF-8, creating parent directories as needed.

    Raises:
        FileAccessError: If the directory or file cannot be written.
    """
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileAccessError("write", path, str(e)) from e


def file_exists(path: str | Path) -> bool:
    return Path(path).exists()


def file_extension(path: str | Path) -> str:
    """Return the lower-cased extension including the dot (``".md"``), or ""."""
    return Path(path).suffix.lower()


def output_path_for(path: str | Path, extension: str = ".html") -> Path:
    """Return ``path`` with its extension replaced by ``extension``.

    Example:
        >>> output_path_for("docs/guide.md")
        PosixPath('docs/guide.html')
    """
    return Path(path).with_suffix(extension)


__all__ = [
    "file_exists",
    "file_extension",
    "output_path_for",
    "read_file",
    "write_file",
]
