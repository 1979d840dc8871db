"""Error types raised by the injector pipeline."""

from __future__ import annotations


class InjectorError(Exception):
    """Base class for every fatal pipeline failure."""

    kind = "injector"
    exit_code = 1


class PatternError(InjectorError):
    """The shard discovery pattern is not a valid non-recursive glob."""

    kind = "pattern"
    exit_code = 2


class IoError(InjectorError):
    """A shard could not be read or a permission could not be changed."""

    kind = "io"
    exit_code = 3


class ChecksumMismatch(InjectorError):
    """The payload digest differs from the expected one."""

    kind = "checksum"
    exit_code = 4

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(f"Checksum mismatch: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class ExtractionError(InjectorError):
    """The payload is not a readable gzip tarball or an entry could not be written."""

    kind = "extraction"
    exit_code = 5
