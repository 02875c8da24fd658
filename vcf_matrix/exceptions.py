"""Exceptions raised while reading a VCF into a genotype matrix.

Every failure is terminal for the ``read_vcf`` call: no partial matrix is
returned. Content errors carry the 1-based ``line_number`` when known.
"""
from typing import Optional


class VCFMatrixError(Exception):
    """Base class for all vcf_matrix errors."""


class CannotOpenError(VCFMatrixError, OSError):
    """The input stream could not be established."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        msg = f"Cannot open VCF file: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class VCFFormatError(VCFMatrixError, ValueError):
    """The file content violates the expected layout."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class SchemaMismatchError(VCFFormatError):
    """A data line has a different number of fields than the header declares."""

    def __init__(self, expected: int, actual: int, line_number: Optional[int] = None):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"expected {expected} tab-separated fields (9 fixed + "
            f"{expected - 9} samples), found {actual}",
            line_number,
        )


class MalformedTokenError(VCFFormatError):
    """A genotype token (or a whole line) cannot be interpreted."""

    def __init__(self, reason: str, token: Optional[str] = None, line_number: Optional[int] = None):
        self.token = token
        if token is not None:
            shown = token if len(token) <= 40 else token[:37] + "..."
            reason = f"malformed token {shown!r}: {reason}"
        super().__init__(reason, line_number)


class LineTooLongError(MalformedTokenError):
    """A line is longer than the configured maximum; it is never truncated."""

    def __init__(self, limit: int, line_number: Optional[int] = None):
        self.limit = limit
        super().__init__(f"line exceeds maximum length of {limit:,} characters", line_number=line_number)


class CorruptStreamError(VCFFormatError):
    """The stream could not be decoded (truncated or corrupt gzip data, invalid UTF-8)."""


class HeaderMissingError(VCFFormatError):
    """Data was found before the ``#CHROM`` column header (or no header at all)."""


class DuplicateHeaderError(VCFFormatError):
    """A second ``#CHROM`` column header line was found."""


class BuilderStateError(VCFMatrixError, RuntimeError):
    """A matrix builder was used out of order (e.g. fed after ``finish``)."""


__all__ = [
    "VCFMatrixError",
    "CannotOpenError",
    "VCFFormatError",
    "SchemaMismatchError",
    "MalformedTokenError",
    "LineTooLongError",
    "CorruptStreamError",
    "HeaderMissingError",
    "DuplicateHeaderError",
    "BuilderStateError",
]
