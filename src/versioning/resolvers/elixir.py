"""Elixir version resolver.

Elixir builds are published once per Erlang/OTP major they were compiled
against, so resolution is followed by a pairing check against the requested
OTP spec.
"""

import logging

from constants import Constants, Tools
from common.logging_utils import extra_context, is_debug_enabled
from registry.fetch import fetch_with_mirrors
from registry.listings import parse_elixir_builds
from ..compare import is_version, maybe_prepend_v, sort_versions
from ..compat import ensure_compatible
from ..models import ElixirListing, ResolvedVersion, ToolRequest
from ..parser import otp_major, strip_otp_suffix
from ..resolver import get_version_from_spec
from .base import VersionResolver

logger = logging.getLogger(__name__)


class ElixirVersionResolver(VersionResolver):
    """Resolver for Elixir builds paired with an Erlang/OTP major."""

    display_name = "Elixir"

    @property
    def tool(self) -> Tools:
        """Return Elixir tool."""
        return Tools.ELIXIR

    async def fetch_candidates(self, req: ToolRequest) -> ElixirListing:
        """Fetch Elixir builds from the first Hex.pm mirror that answers."""
        listing = await fetch_with_mirrors(
            Constants.ELIXIR_BUILDS_PATH, self.mirrors, self.token
        )
        versions = parse_elixir_builds(listing)
        if is_debug_enabled(logger):
            logger.debug(
                "Elixir versions listing:\n%s",
                listing,
                extra=extra_context(
                    event="listing",
                    component="resolver",
                    action="fetch_candidates",
                    tool=self.tool.value,
                    count=len(versions),
                )
            )
        return versions

    def pick(self, req: ToolRequest, candidates: ElixirListing) -> ResolvedVersion:
        """Resolve the Elixir spec and check it against the requested OTP major.

        The reference is ``<version>-otp-<major>`` when the OTP major is a
        version, the plain version otherwise (OTP ``master`` and the like).

        Raises:
            SpecNotFound: nothing published matches the spec.
            IncompatiblePairing: the build is not published for that OTP major.
        """
        otp_spec = req.primary_spec or ""
        major = otp_major(otp_spec)
        spec = strip_otp_suffix(req.spec)

        version = get_version_from_spec(
            spec, sort_versions(candidates), strict=self.strict, prepend_v=True
        )
        if version is None:
            raise self.not_found(req.spec)

        ensure_compatible(
            candidates.get(version, []),
            major,
            paired_spec=req.spec,
            primary_spec=otp_spec,
        )
        logger.info("Using Elixir %s (built for Erlang/OTP %s)", version, major)

        reference = f"{version}-otp-{major}" if is_version(major) else version
        return ResolvedVersion(self.tool, version, maybe_prepend_v(reference))
