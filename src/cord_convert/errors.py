# src/cord_convert/errors.py

from pathlib import Path
from typing import Any


class ConversionError(Exception):
    """Base class for every failure raised while converting a paper."""


class MetadataOpenError(ConversionError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"error opening metadata file {path}: {reason}")


class DocumentNotFoundError(ConversionError):
    def __init__(self, file_name: str) -> None:
        self.file_name = file_name
        super().__init__(f"file not found: {file_name}")


class FileReadError(ConversionError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"error reading file {path}: {reason}")


class DocumentParseError(ConversionError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"error parsing file {path}: {reason}")


class ExtractionError(ConversionError):
    """
    Raised when a raw document is missing a required field or carries a
    field of the wrong type. All problems found in the document are
    reported together.
    """

    def __init__(self, errors: list[dict[str, Any]]) -> None:
        self.errors = errors
        super().__init__(_format_errors(errors))


class WriteError(ConversionError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"error writing file {path}: {reason}")


def _format_errors(errors: list[dict[str, Any]]) -> str:
    parts = []
    for error in errors:
        location = ".".join(str(p) for p in error.get("loc", ())) or "<document>"
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)
