"""
Fixed 16-byte binary record for VersionTag.

Layout (little-endian):

    offset  size  field
    0       2     major
    2       2     minor
    4       2     patch
    6       2     distance
    8       4     commit (0 when absent)
    12      4     commit present flag (1 or 0)

The flag takes a whole word so the record stays word aligned when it is
embedded in a larger header.
"""

import struct
from typing import Optional, Union

from loguru import logger

from .errors import RecordSizeError
from .semver import VersionTag

RECORD_FORMAT = struct.Struct('<HHHHII')
RECORD_SIZE = RECORD_FORMAT.size

EMPTY_RECORD = bytes(RECORD_SIZE)

BytesLike = Union[bytes, bytearray, memoryview]


def encode(tag: VersionTag) -> bytes:
    """
    Serialize a tag into its 16-byte record.

    Args:
        tag: Version to serialize

    Returns:
        bytes: Exactly 16 bytes
    """
    has_commit = tag.commit is not None
    return RECORD_FORMAT.pack(
        tag.major,
        tag.minor,
        tag.patch,
        tag.distance,
        tag.commit if has_commit else 0,
        1 if has_commit else 0,
    )


def encode_optional(tag: Optional[VersionTag]) -> bytes:
    """Serialize a tag, or 16 zero bytes when there is none."""
    if tag is None:
        return EMPTY_RECORD
    return encode(tag)


def decode(record: BytesLike) -> VersionTag:
    """
    Deserialize a 16-byte record.

    Every 16-byte input decodes. Any nonzero flag word means the commit is
    present; with a zero flag the commit bytes are ignored.

    Args:
        record: bytes, bytearray or memoryview of length 16

    Returns:
        VersionTag: The decoded version

    Raises:
        RecordSizeError: If the input is not 16 bytes long
    """
    size = len(record)
    if size != RECORD_SIZE:
        raise RecordSizeError(size, RECORD_SIZE)

    major, minor, patch, distance, commit, has_commit = RECORD_FORMAT.unpack(bytes(record))
    if has_commit > 1:
        logger.debug(f"Version record flag word has extra bits set ({has_commit:#010x}), treating commit as present")

    return VersionTag(major, minor, patch, distance, commit if has_commit else None)
