"""
Exception types for git-semver.

Parse failures and acquisition failures live on separate branches so a caller
can tell "git could not be run" apart from "git printed something we cannot
read".
"""

from typing import Optional


class SemVerError(Exception):
    """Base class for every error raised by git_semver."""


class MalformedVersion(SemVerError, ValueError):
    """A revision string does not match the describe grammar."""

    def __init__(self, message: str, field: Optional[str] = None, text: Optional[str] = None):
        super().__init__(message)
        self.field = field
        self.text = text


class MissingField(MalformedVersion):
    """The major.minor.patch triplet is incomplete."""


class MalformedInteger(MalformedVersion):
    """A numeric field is not a valid integer or does not fit its width."""


class MalformedCommitPrefix(MalformedVersion):
    """The commit part of ``<distance>-<commit>`` does not start with ``g``."""


class RecordSizeError(SemVerError, ValueError):
    """A binary record is not exactly 16 bytes long."""

    def __init__(self, size: int, expected: int = 16):
        super().__init__(f"version record must be {expected} bytes (got: {size})")
        self.size = size
        self.expected = expected


class AcquisitionError(SemVerError):
    """The describe string could not be obtained from git."""


class ToolInvocationError(AcquisitionError):
    """git could not be started, timed out, or exited with an error."""

    def __init__(self, message: str, returncode: Optional[int] = None, stderr: str = ''):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class EncodingError(AcquisitionError):
    """git output is not valid UTF-8."""
