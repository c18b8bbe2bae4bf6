"""
This library provides our core data model.
"""
import re
from typing import Optional

from mavenup.config import SNAPSHOT_SUFFIX

_version_pattern = re.compile(r'^(\d+)(\.(\d+)(\.(\d+))?)?([-_.][\w.-]+)?$')
_tag_pattern = re.compile(r'.(\D*)(\d*)')


def _compare_tags(tag1: Optional[str], tag2: Optional[str]) -> int:
    """
    A function that attempts proper ordering of the tag portion of a version.  A
    lettered tag, like ``-alpha-1``, sorts before no tag at all.

    :param tag1: the first tag to look at.
    :param tag2: the second tag to look at.
    :return: the usual result of comparing.
    """
    # Simple equivalence
    if (tag1 is None and tag2 is None) or tag1 == tag2:
        return 0

    # Normalize and drop the separator.
    t1_match = _tag_pattern.match(tag1 if tag1 else '-0')
    t1_group_1 = t1_match.group(1)
    t2_match = _tag_pattern.match(tag2 if tag2 else '-0')
    t2_group_1 = t2_match.group(1)

    if t1_group_1 and not t2_group_1:
        return -1
    if not t1_group_1 and t2_group_1:
        return 1
    # We have letter tags.
    if t1_group_1 and t1_group_1 != t2_group_1:
        return -1 if t1_group_1 < t2_group_1 else 1

    t1_number = int(t1_match.group(2)) if t1_match.group(2) else 0
    t2_number = int(t2_match.group(2)) if t2_match.group(2) else 0

    return t1_number - t2_number


class Version(object):
    """
    Instances of this class represent a Maven version number.  Versions order by major,
    then minor, then micro number, numerically, with missing parts counting as zero.
    The text a version was parsed from is preserved as its string form.
    """
    def __init__(self, text: str):
        match = _version_pattern.match(text)
        if not match:
            raise ValueError(f'The text, "{text}", cannot be parsed as a version identifier.')

        self._text = text
        self._major = int(match.group(1))
        self._minor = int(match.group(3)) if match.group(3) else 0
        self._micro = int(match.group(5)) if match.group(5) else 0
        self._tag = match.group(6) if match.group(6) else ''

    @property
    def major(self) -> int:
        return self._major

    @property
    def is_snapshot(self) -> bool:
        return self._text.endswith(SNAPSHOT_SUFFIX)

    def _compare(self, other: 'Version'):
        diff = self._major - other._major

        if diff == 0:
            diff = self._minor - other._minor

        if diff == 0:
            diff = self._micro - other._micro

        if diff == 0 and self._tag != other._tag:
            diff = _compare_tags(self._tag, other._tag)

        return diff

    def __eq__(self, other):
        if not isinstance(other, Version):
            return NotImplemented

        return self._compare(other) == 0

    def __ne__(self, other):
        return not self == other

    def __lt__(self, other):
        if not isinstance(other, Version):
            return NotImplemented

        return self._compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, Version):
            return NotImplemented

        return self._compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Version):
            return NotImplemented

        return self._compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, Version):
            return NotImplemented

        return self._compare(other) >= 0

    def __hash__(self):
        return hash((self._major, self._minor, self._micro, self._tag))

    def __str__(self) -> str:
        return self._text
