"""Dotted version comparison.

Ordering follows the host platform's comparison: a version with an extra
trailing number is newer (``1.0`` < ``1.0.0``), while an extra textual
segment marks a pre-release (``1.0.rc`` < ``1.0``).
"""

from __future__ import annotations

import re

from packaging.version import InvalidVersion, Version

_SEGMENT_SPLIT_RE = re.compile(r"[.\-+_]")

# Text < missing < number.
_MISSING_KEY = (1, 0, "")


def _segment_key(segment: str) -> tuple[int, int, str]:
    if segment.isdigit():
        return (2, int(segment), "")
    return (0, 0, segment.lower())


def _compare_segments(left: str, right: str) -> int:
    left_keys = [_segment_key(s) for s in _SEGMENT_SPLIT_RE.split(left)]
    right_keys = [_segment_key(s) for s in _SEGMENT_SPLIT_RE.split(right)]
    width = max(len(left_keys), len(right_keys))
    left_keys += [_MISSING_KEY] * (width - len(left_keys))
    right_keys += [_MISSING_KEY] * (width - len(right_keys))

    for ka, kb in zip(left_keys, right_keys, strict=True):
        if ka != kb:
            return -1 if ka < kb else 1
    return 0


def compare_versions(left: str, right: str) -> int:
    """Return -1, 0 or 1 as ``left`` is older than, equal to, or newer than ``right``.

    PEP 440 parsing is tried first; anything it rejects falls back to a
    segment-by-segment comparison. PEP 440 ignores trailing zeros, so equal
    versions are then ordered by the length of their release segment.
    """
    try:
        lv, rv = Version(left), Version(right)
    except InvalidVersion:
        return _compare_segments(left.strip(), right.strip())
    if lv != rv:
        return -1 if lv < rv else 1
    if len(lv.release) != len(rv.release):
        return -1 if len(lv.release) < len(rv.release) else 1
    return 0


def is_newer(local: str, remote: str) -> bool:
    """True only when ``remote`` is strictly greater than ``local``."""
    return compare_versions(local, remote) < 0
