"""
Helpers for showing and reading version records as hex text.
"""

import re

from .codec import RECORD_SIZE
from .errors import RecordSizeError

_SEPARATORS_RE = re.compile(r'[\s:\-]')


def format_record_hex(record: bytes) -> str:
    """Render a record as lowercase hex, two digits per byte."""
    return bytes(record).hex()


def parse_record_hex(text: str) -> bytes:
    """
    Read a record from hex text.

    Accepts an optional 0x prefix and whitespace, ':' or '-' between bytes,
    e.g. "0000 0900 0800 f802 3412cdab 01000000".

    Args:
        text: Hex text

    Returns:
        bytes: The 16-byte record

    Raises:
        ValueError: If the text is not valid hex
        RecordSizeError: If it does not hold exactly 16 bytes
    """
    cleaned = _SEPARATORS_RE.sub('', text.strip())
    if cleaned[:2].lower() == '0x':
        cleaned = cleaned[2:]

    try:
        record = bytes.fromhex(cleaned)
    except ValueError as e:
        raise ValueError(f"Invalid record hex: {text!r}") from e

    if len(record) != RECORD_SIZE:
        raise RecordSizeError(len(record), RECORD_SIZE)
    return record
