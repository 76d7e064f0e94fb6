"""Parsers turning raw upstream listings into candidate data.

Two shapes are handled: plain-text ``builds.txt`` manifests served by Hex.pm
(and its mirrors), and GitHub release feeds fetched page by page as JSON
arrays.
"""
from __future__ import annotations

import json
import re
from typing import Any, Dict, Iterable, List, Optional

from versioning.compare import maybe_prepend_v
from versioning.errors import MalformedListing
from versioning.models import ElixirListing, OtpListing
from versioning.parser import split_prefixed

_ELIXIR_WITH_OTP = re.compile(r"^v?(.+)-otp-([^ ]+)")
_ELIXIR_PLAIN = re.compile(r"^v?([^ ]+)")
_OTP_WIN64_ASSET = re.compile(r"^otp_win64_(.*)\.exe$")


def _lines(text: str) -> Iterable[str]:
    for line in text.strip().split("\n"):
        if line.strip():
            yield line


def json_parse_as_list(payload: str) -> List[Any]:
    """Parse a JSON array or raise MalformedListing."""
    try:
        parsed = json.loads(payload)
    except (TypeError, ValueError) as exc:
        raise MalformedListing(
            f"Got an exception when trying to parse non-JSON list {payload}: {exc}"
        ) from exc
    if not isinstance(parsed, list):
        raise MalformedListing(
            f"Got an exception when trying to parse non-JSON list {payload}: expected a list!"
        )
    return parsed


def _release_objects(payload: str) -> List[Dict[str, Any]]:
    releases = json_parse_as_list(payload)
    for release in releases:
        if not isinstance(release, dict):
            raise MalformedListing(f"Expected release objects, got {release!r}")
    return releases


def _assets(release: Dict[str, Any]) -> List[Dict[str, Any]]:
    assets = release.get("assets") or []
    if not isinstance(assets, list) or not all(isinstance(a, dict) for a in assets):
        raise MalformedListing(f"Expected a list of asset objects, got {assets!r}")
    for asset in assets:
        if not isinstance(asset.get("name") or "", str):
            raise MalformedListing(f"Expected a string asset name, got {asset['name']!r}")
    return assets


def _tag_name(release: Dict[str, Any]) -> Optional[str]:
    tag = release.get("tag_name")
    if tag is not None and not isinstance(tag, str):
        raise MalformedListing(f"Expected a string tag_name, got {tag!r}")
    return tag


def parse_otp_builds(text: str) -> OtpListing:
    """Map bare OTP version -> original token from a Hex.pm builds.txt.

    ``OTP-25.0.4 <sha> <date>`` contributes ``"25.0.4" -> "OTP-25.0.4"``;
    branch builds such as ``master`` map to themselves.
    """
    versions: OtpListing = {}
    for line in _lines(text):
        token = line.split()[0]
        _, version = split_prefixed(token)
        versions[version] = token
    return versions


def parse_otp_release_assets(pages: Iterable[str]) -> OtpListing:
    """Map OTP version -> itself from the Windows installers attached to releases."""
    versions: OtpListing = {}
    for payload in pages:
        for release in _release_objects(payload):
            for asset in _assets(release):
                match = _OTP_WIN64_ASSET.match(asset.get("name") or "")
                if match:
                    versions[match.group(1)] = match.group(1)
    return versions


def parse_elixir_builds(text: str) -> ElixirListing:
    """Map ``v``-prefixed Elixir version -> OTP majors it was built for.

    A version shows up once per OTP major (``v1.14.0-otp-25``) and once
    without a suffix; each suffixed line adds one major.
    """
    versions: ElixirListing = {}
    for line in _lines(text):
        match = _ELIXIR_WITH_OTP.match(line) or _ELIXIR_PLAIN.match(line)
        if not match:
            continue
        version = maybe_prepend_v(match.group(1))
        majors = versions.setdefault(version, [])
        if match.lastindex == 2:
            majors.append(match.group(2))
    return versions


def parse_release_tags(pages: Iterable[str]) -> List[str]:
    """Tag names of every release, each page sorted, pages kept in order."""
    tags: List[str] = []
    for payload in pages:
        page_tags = [
            tag for tag in (_tag_name(release) for release in _release_objects(payload)) if tag
        ]
        tags.extend(sorted(page_tags))
    return tags
