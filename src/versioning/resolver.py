"""Pick one published version for a spec.

Candidates come from an upstream listing. The spec is classified once; exact
and release-candidate specs are taken verbatim. Anything else goes through a
mapping of coerced semver keys to the published strings, either by highest
key satisfying a range or by direct lookup. Whatever is picked must still be
a literal member of the candidate list.
"""

import logging
from typing import Dict, Optional, Sequence

import semantic_version

from common.logging_utils import extra_context, is_debug_enabled
from .compare import coerce_or_raw, maybe_prepend_v, sort_versions
from .models import SpecKind
from .parser import classify_spec, is_release_candidate, parse_range

logger = logging.getLogger(__name__)


def build_candidate_mapping(versions: Sequence[str]) -> Dict[str, str]:
    """Map coerced key -> published version, release candidates left out.

    Candidates are visited in comparator order, so when two versions coerce
    to the same key the higher one wins.
    """
    mapping: Dict[str, str] = {}
    for version in sort_versions(versions):
        if is_release_candidate(version):
            continue
        mapping[coerce_or_raw(version)] = version
    return mapping


def max_satisfying(mapping: Dict[str, str], spec: str) -> Optional[str]:
    """Published version whose key is the highest one inside range ``spec``."""
    npm_spec = parse_range(spec)
    if npm_spec is None:
        return None
    best = None
    for key in mapping:
        try:
            ver = semantic_version.Version(key)
        except ValueError:
            continue  # raw keys such as "master"
        if npm_spec.match(ver) and (best is None or ver > best):
            best = ver
    return mapping[str(best)] if best is not None else None


def get_version_from_spec(
    spec: Optional[str],
    versions: Sequence[str],
    strict: bool = False,
    prepend_v: bool = False,
) -> Optional[str]:
    """Resolve ``spec`` against ``versions``.

    Args:
        spec: User supplied version requirement.
        versions: Every version published upstream.
        strict: Take the spec verbatim, no range or coercion.
        prepend_v: Normalize version-looking results to a leading ``v``.

    Returns:
        The published version, or None when nothing matches.
    """
    kind = classify_spec(spec, strict)
    version: Optional[str] = None

    if kind in (SpecKind.RELEASE_CANDIDATE, SpecKind.EXACT):
        version = spec
    elif kind is SpecKind.RANGE:
        version = max_satisfying(build_candidate_mapping(versions), spec)
    elif kind in (SpecKind.COERCED, SpecKind.BRANCH):
        version = build_candidate_mapping(versions).get(coerce_or_raw(spec))

    if version is not None and prepend_v:
        version = maybe_prepend_v(version)

    if version not in versions:
        version = None

    if is_debug_enabled(logger):
        logger.debug(
            "Spec resolved",
            extra=extra_context(
                event="decision",
                component="resolver",
                action="get_version_from_spec",
                spec=spec,
                spec_kind=kind.value,
                outcome="found" if version is not None else "not_found",
                resolved=version,
                candidate_count=len(versions),
            )
        )
    return version
