"""
git-semver

Parse "git describe --tags" strings into version tags, order them, and store
them as fixed 16-byte records.
"""

from ._version import __version__
from .codec import RECORD_SIZE, decode, encode, encode_optional
from .errors import (
    AcquisitionError,
    EncodingError,
    MalformedCommitPrefix,
    MalformedInteger,
    MalformedVersion,
    MissingField,
    RecordSizeError,
    SemVerError,
    ToolInvocationError,
)
from .git import describe_tags, from_git
from .semver import VersionTag, compare, format_version, parse_version

__description__ = "Parse, compare and encode git describe versions"

__all__ = [
    'RECORD_SIZE',
    'AcquisitionError',
    'EncodingError',
    'MalformedCommitPrefix',
    'MalformedInteger',
    'MalformedVersion',
    'MissingField',
    'RecordSizeError',
    'SemVerError',
    'ToolInvocationError',
    'VersionTag',
    'compare',
    'decode',
    'describe_tags',
    'encode',
    'encode_optional',
    'format_version',
    'from_git',
    'parse_version',
]
