"""Ordering and normalization helpers for version-like strings.

The ordering here is not semver: published lists mix four-part
OTP versions, branch names and tags, so each string is turned into a
fixed-width key instead. Segments longer than three characters or containing
letters still produce a key, just not a meaningful one.
"""

import re
from typing import Iterable, List, Optional

import semantic_version

_SEGMENTS = re.compile(r"([^.]+)?\.?([^.]+)?\.?([^.]+)?\.?([^.]+)?\.?([^.]+)?")
_SEGMENT_WIDTH = 3

# First numeric run of up to three dot-separated parts, anywhere in the string.
_COERCE = re.compile(r"(?:^|[^\d])(\d{1,16})(?:\.(\d{1,16}))?(?:\.(\d{1,16}))?(?:$|[^\d])")
_IS_VERSION = re.compile(r"^v?\d+")


def version_sort_key(version: str) -> str:
    """Return the comparison key: five segments, each zero-padded to width 3."""
    match = _SEGMENTS.match(version)
    groups = match.groups() if match else ()
    return "".join((segment or "0").rjust(_SEGMENT_WIDTH, "0") for segment in groups)


def compare_versions(left: str, right: str) -> int:
    """Return -1, 0 or 1 ordering ``left`` against ``right``."""
    key_left = version_sort_key(left)
    key_right = version_sort_key(right)
    if key_left < key_right:
        return -1
    if key_left > key_right:
        return 1
    return 0


def sort_versions(versions: Iterable[str]) -> List[str]:
    """Sort version-like strings ascending by ``version_sort_key``."""
    return sorted(versions, key=version_sort_key)


def coerce(version: str) -> Optional[semantic_version.Version]:
    """Best-effort numeric version out of an arbitrary string.

    ``"OTP-25.0.4"`` gives 25.0.4, ``"v1.14"`` gives 1.14.0 and ``"master"``
    gives None.
    """
    match = _COERCE.search(version)
    if not match:
        return None
    major, minor, patch = match.groups()
    return semantic_version.Version(
        major=int(major), minor=int(minor or 0), patch=int(patch or 0)
    )


def coerce_or_raw(version: str) -> str:
    """Coerced ``X.Y.Z`` string, or the input itself when nothing can be coerced."""
    coerced = coerce(version)
    return str(coerced) if coerced is not None else version


def is_version(version: Optional[str]) -> bool:
    """True for strings starting with an optional ``v`` then a digit."""
    return bool(version) and bool(_IS_VERSION.match(version))


def maybe_prepend_v(version: str) -> str:
    """Prefix version-looking strings with ``v``; safe to apply twice."""
    if is_version(version):
        return f"v{version.replace('v', '', 1)}"
    return version
