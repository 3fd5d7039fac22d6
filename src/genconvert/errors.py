"""
genconvert error taxonomy.

Every failure the converter can report has its own class so a caller
(usually the CLI) can tell them apart and pick a specific diagnostic.
"""
from __future__ import annotations

from typing import Any, Dict, Optional


class GenConvertError(Exception):
    """Base class for all genconvert errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code or "ERROR"
        self.details = dict(details or {})

    def to_dict(self) -> Dict[str, Any]:
        """Converts the exception to a dictionary for structured logging."""
        return {
            "error_code": self.error_code,
            "message": str(self),
            "details": self.details,
        }


# ----------------------------
# Conversion errors
# ----------------------------

class MalformedInputError(GenConvertError, ValueError):
    """Raised when a buffer cannot go through a layout transform (odd length, too large)."""

    def __init__(self, message: str, size: Optional[int] = None,
                 details: Optional[Dict[str, Any]] = None):
        d = dict(details or {})
        if size is not None:
            d["size"] = size
        super().__init__(message, "MALFORMED_INPUT", d)


class UnsupportedFormatError(GenConvertError, ValueError):
    """Raised when a conversion names a known but unsupported format (SMD)."""

    def __init__(self, message: str, fmt: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        d = dict(details or {})
        if fmt is not None:
            d["format"] = fmt
        super().__init__(message, "UNSUPPORTED_FORMAT", d)


class UnsupportedConversionError(GenConvertError, ValueError):
    """Raised when no route exists for a (source, target) pair."""

    def __init__(self, message: str, source: Optional[str] = None,
                 target: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        d = dict(details or {})
        if source is not None:
            d["source"] = source
        if target is not None:
            d["target"] = target
        super().__init__(message, "UNSUPPORTED_CONVERSION", d)


# ----------------------------
# File errors
# ----------------------------

class RomIOError(GenConvertError):
    """Base class for ROM file load/save failures."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 path: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        d = dict(details or {})
        if path is not None:
            d["path"] = str(path)
        super().__init__(message, error_code or "ROM_IO_ERROR", d)

    @property
    def path(self) -> Optional[str]:
        return self.details.get("path")


class FileOpenError(RomIOError):
    """Raised when a ROM file cannot be opened for reading or writing."""

    def __init__(self, message: str, path: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "FILE_OPEN_FAILURE", path, details)


class SizeDiscrepancyError(RomIOError):
    """Raised when the bytes transferred differ from the bytes requested."""

    def __init__(self, message: str, path: Optional[str] = None,
                 expected: Optional[int] = None, actual: Optional[int] = None,
                 details: Optional[Dict[str, Any]] = None):
        d = dict(details or {})
        if expected is not None:
            d["expected"] = expected
        if actual is not None:
            d["actual"] = actual
        super().__init__(message, "SIZE_DISCREPANCY", path, d)
