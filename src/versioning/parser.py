"""Spec classification and token parsing utilities."""

import re
from typing import Optional, Tuple

import semantic_version

from .compare import coerce
from .models import SpecKind

_OTP_SUFFIX = re.compile(r"-otp-.*$")
_PREFIXED = re.compile(r"^([^-]+-)?(.+)$")
_MAJOR = re.compile(r"^([^.]+)")
_LEADING_V = re.compile(r"^v?(.+)$")


def is_release_candidate(spec: str) -> bool:
    """Release candidates are opt-in: any spec or version mentioning ``rc``."""
    return "rc" in spec


def parse_range(spec: str) -> Optional[semantic_version.NpmSpec]:
    """Return the npm-style range for ``spec``, or None when it is not one."""
    if not spec.strip():
        return None
    try:
        return semantic_version.NpmSpec(spec)
    except ValueError:
        return None


def classify_spec(spec: Optional[str], strict: bool = False) -> SpecKind:
    """Decide once how ``spec`` is going to be resolved."""
    if spec is None or not spec.strip():
        return SpecKind.EMPTY
    if is_release_candidate(spec):
        return SpecKind.RELEASE_CANDIDATE
    if strict:
        return SpecKind.EXACT
    if parse_range(spec) is not None:
        return SpecKind.RANGE
    if coerce(spec) is not None:
        return SpecKind.COERCED
    return SpecKind.BRANCH


def strip_otp_suffix(spec: str) -> str:
    """Drop a trailing ``-otp-<major>`` constraint from an Elixir spec."""
    return _OTP_SUFFIX.sub("", spec)


def strip_leading_v(spec: str) -> str:
    match = _LEADING_V.match(spec)
    return match.group(1) if match else spec


def split_prefixed(token: str) -> Tuple[Optional[str], str]:
    """Split ``OTP-25.0`` into (``"OTP-"``, ``"25.0"``); unprefixed tokens give None."""
    match = _PREFIXED.match(token)
    if not match:
        return None, token
    return match.group(1), match.group(2)


def otp_major(otp_spec: str) -> str:
    """Major component of an OTP spec: ``OTP-25.0.4`` and ``25`` both give ``25``.

    Branch-like specs come back unchanged (``master`` gives ``master``).
    """
    _, version = split_prefixed(otp_spec)
    match = _MAJOR.match(version)
    return match.group(1) if match else version
