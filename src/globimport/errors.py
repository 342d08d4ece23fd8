"""Error hierarchy for globimport."""
from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Why a transform run was aborted."""
    UNSUPPORTED_SPECIFIER = "unsupported-specifier-shape"
    FILESYSTEM = "filesystem-error"
    INTERNAL_CONSISTENCY = "internal-consistency-violation"
    MISSING_FILENAME = "missing-filename"


class GlobImportError(Exception):
    """Base error for every fatal transform condition."""

    kind: ErrorKind

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = details or {}

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.message}"

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "details": self.details,
        }


class UnsupportedSpecifierError(GlobImportError):
    """A wildcard import does not bind exactly one default specifier."""

    kind = ErrorKind.UNSUPPORTED_SPECIFIER

    def __init__(self, source: str, shape: str) -> None:
        super().__init__(
            f"Wildcard import {source!r} must have exactly one default specifier, got {shape}",
            details={"source": source, "shape": shape},
        )


class PatternResolutionError(GlobImportError):
    """The filesystem could not be enumerated for a pattern."""

    kind = ErrorKind.FILESYSTEM

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(
            f"Failed to read glob pattern {pattern!r}: {reason}",
            details={"pattern": pattern, "reason": reason},
        )


class CaptureMismatchError(GlobImportError):
    """A path produced by the matcher does not satisfy the capture regex."""

    kind = ErrorKind.INTERNAL_CONSISTENCY

    def __init__(self, pattern: str, path: str) -> None:
        super().__init__(
            f"Matched path {path!r} does not fit pattern {pattern!r}",
            details={"pattern": pattern, "path": path},
        )


class MissingFilenameError(GlobImportError):
    """The host did not say which file is being transformed."""

    kind = ErrorKind.MISSING_FILENAME

    def __init__(self) -> None:
        super().__init__("Transform requires filename metadata")
