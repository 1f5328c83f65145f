"""
Version tags parsed from ``git describe --tags`` output.

A describe string looks like ``v0.9.8-760-gabcd1234``: the nearest tag
(major.minor.patch), the number of commits since that tag, and the abbreviated
commit id. Shorter forms are accepted too:

- ``v0.9.8``           exact tag, distance 0, no commit
- ``v0.9.8-760``       distance only
- ``v0.9.8-gabcd1234`` commit only, distance 0

Ordering only looks at (major, minor, patch, distance). Equality also looks at
the commit, so two tags built from different commits at the same distance are
neither smaller nor larger than each other, yet still unequal.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import MalformedCommitPrefix, MalformedInteger, MissingField

U16_MAX = 0xFFFF
U32_MAX = 0xFFFFFFFF

# Commit ids are kept to 32 bits
COMMIT_HEX_DIGITS = 8

_DECIMAL_RE = re.compile(r'[0-9]+')
_HEX_RE = re.compile(r'[0-9a-fA-F]+')

_U16_FIELDS = ('major', 'minor', 'patch', 'distance')


def _is_plain_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class VersionTag:
    """
    Immutable version parsed from a describe string or decoded from a record.

    Attributes:
        major: Major version, 0-65535
        minor: Minor version, 0-65535
        patch: Patch version, 0-65535
        distance: Commits since the tag, 0-65535
        commit: Abbreviated commit id as an integer, or None

    Note:
        ``<``/``>`` ignore ``commit`` while ``==`` does not. Sorting a list of
        tags is stable, but ``not (a < b) and not (b < a)`` does not imply
        ``a == b``. Use ``compare()`` when only the ordering matters.
    """

    major: int
    minor: int
    patch: int
    distance: int = 0
    commit: Optional[int] = None

    def __post_init__(self):
        for name in _U16_FIELDS:
            value = getattr(self, name)
            if not _is_plain_int(value) or not 0 <= value <= U16_MAX:
                raise ValueError(f"{name} must be an integer between 0 and {U16_MAX} (got: {value!r})")
        if self.commit is not None:
            if not _is_plain_int(self.commit) or not 0 <= self.commit <= U32_MAX:
                raise ValueError(f"commit must be an integer between 0 and {U32_MAX:#x} (got: {self.commit!r})")

    @property
    def sort_key(self) -> Tuple[int, int, int, int]:
        """Fields that take part in ordering, most significant first."""
        return (self.major, self.minor, self.patch, self.distance)

    @property
    def packed(self) -> int:
        """The ordering fields packed into one 64-bit integer, 16 bits each."""
        return (self.major << 48) | (self.minor << 32) | (self.patch << 16) | self.distance

    def __lt__(self, other):
        if not isinstance(other, VersionTag):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __le__(self, other):
        if not isinstance(other, VersionTag):
            return NotImplemented
        return self.sort_key <= other.sort_key

    def __gt__(self, other):
        if not isinstance(other, VersionTag):
            return NotImplemented
        return self.sort_key > other.sort_key

    def __ge__(self, other):
        if not isinstance(other, VersionTag):
            return NotImplemented
        return self.sort_key >= other.sort_key

    def __str__(self) -> str:
        return format_version(self)


def compare(left: VersionTag, right: VersionTag) -> int:
    """
    Compare two tags by (major, minor, patch, distance).

    Returns:
        int: -1, 0 or 1. 0 does not mean the tags are equal, only that they
        differ in nothing but the commit.
    """
    if left.sort_key < right.sort_key:
        return -1
    if left.sort_key > right.sort_key:
        return 1
    return 0


def format_version(tag: VersionTag) -> str:
    """
    Render the canonical form ``v<major>.<minor>.<patch>-<distance>[-g<commit>]``.

    The distance is always written, and the commit is lowercase hex without
    zero padding, so the output is not necessarily the string that was parsed.
    """
    text = f"v{tag.major}.{tag.minor}.{tag.patch}-{tag.distance}"
    if tag.commit is not None:
        text += f"-g{tag.commit:x}"
    return text


def _parse_u16(field: str, value: str, revision: str) -> int:
    if not _DECIMAL_RE.fullmatch(value):
        raise MalformedInteger(f"{field} is not a decimal number: {value!r}", field=field, text=revision)
    number = int(value)
    if number > U16_MAX:
        raise MalformedInteger(f"{field} does not fit in 16 bits: {value}", field=field, text=revision)
    return number


def _parse_commit(value: str, revision: str) -> int:
    # Anything after the 8th hex digit is dropped
    digits = value[:COMMIT_HEX_DIGITS]
    if not _HEX_RE.fullmatch(digits):
        raise MalformedInteger(f"commit is not a hexadecimal number: {value!r}", field='commit', text=revision)
    return int(digits, 16)


def parse_version(revision: str) -> VersionTag:
    """
    Parse a ``git describe --tags`` string.

    Args:
        revision: String like "v0.9.8-760-gabcd1234", "0.9.8-760" or "v0.9.8\\n"

    Returns:
        VersionTag: The parsed version

    Raises:
        MissingField: If minor or patch is missing
        MalformedInteger: If a number is invalid or out of range
        MalformedCommitPrefix: If the commit part does not start with 'g'
    """
    text = revision.rstrip()
    if text.startswith('v'):
        text = text[1:]

    major_text, sep, rest = text.partition('.')
    if not sep:
        raise MissingField(f"no minor version in {revision!r}", field='minor', text=revision)
    major = _parse_u16('major', major_text, revision)

    minor_text, sep, rest = rest.partition('.')
    if not sep:
        raise MissingField(f"no patch version in {revision!r}", field='patch', text=revision)
    minor = _parse_u16('minor', minor_text, revision)

    patch_text, _, remainder = rest.partition('-')
    patch = _parse_u16('patch', patch_text, revision)

    if not remainder:
        return VersionTag(major, minor, patch)

    distance_text, sep, commit_text = remainder.partition('-')
    if sep:
        if not commit_text.startswith('g'):
            raise MalformedCommitPrefix(
                f"commit {commit_text!r} has no 'g' prefix", field='commit', text=revision
            )
        if '-' in commit_text:
            raise MalformedInteger(
                f"unexpected segment after commit: {commit_text!r}", field='commit', text=revision
            )
        distance = _parse_u16('distance', distance_text, revision)
        commit = _parse_commit(commit_text[1:], revision)
    elif remainder.startswith('g'):
        distance = 0
        commit = _parse_commit(remainder[1:], revision)
    else:
        distance = _parse_u16('distance', remainder, revision)
        commit = None

    return VersionTag(major, minor, patch, distance, commit)
