"""Erlang/OTP version resolver.

Linux builds are listed per OS image on Hex.pm (and its mirrors); Windows
installers are attached to the GitHub releases of erlang/otp.
"""

import logging
from typing import Optional, Sequence

from constants import Constants, ListingSources, Tools
from common.logging_utils import extra_context, is_debug_enabled
from registry.fetch import fetch_pages, fetch_with_mirrors
from registry.listings import parse_otp_builds, parse_otp_release_assets
from ..compare import sort_versions
from ..errors import InputError
from ..models import OtpListing, ResolvedVersion, ToolRequest
from ..platform import otp_listing_source
from ..resolver import get_version_from_spec
from .base import VersionResolver

logger = logging.getLogger(__name__)


class OtpVersionResolver(VersionResolver):
    """Resolver for Erlang/OTP builds."""

    display_name = "Erlang/OTP"

    def __init__(
        self,
        strict: bool = False,
        mirrors: Optional[Sequence[str]] = None,
        token: Optional[str] = None,
        os_version: Optional[str] = None,
        platform: str = "linux",
    ):
        super().__init__(strict=strict, mirrors=mirrors, token=token)
        self.os_version = os_version
        self.platform = platform

    @property
    def tool(self) -> Tools:
        """Return OTP tool."""
        return Tools.OTP

    async def fetch_candidates(self, req: ToolRequest) -> OtpListing:
        """Fetch OTP builds for the configured platform.

        Returns:
            Mapping of bare version -> origin token kept for download.
        """
        source = otp_listing_source(self.platform)
        if source is ListingSources.HEXPM_BUILDS:
            if not self.os_version:
                raise InputError("An OS version is required to list Erlang/OTP builds")
            origin = Constants.OTP_BUILDS_PATH.format(os_version=self.os_version)
            listing = await fetch_with_mirrors(origin, self.mirrors, self.token)
            versions = parse_otp_builds(listing)
        else:
            origin = Constants.OTP_RELEASES_URL
            pages = await fetch_pages(origin, Constants.RELEASE_PAGES, self.token)
            listing = "\n".join(pages)
            versions = parse_otp_release_assets(pages)

        if is_debug_enabled(logger):
            logger.debug(
                "OTP versions listing from %s:\n%s",
                origin,
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

    def pick(self, req: ToolRequest, candidates: OtpListing) -> ResolvedVersion:
        """Resolve the OTP spec; the reference is the listing's original token."""
        version = get_version_from_spec(
            req.spec, sort_versions(candidates), strict=self.strict
        )
        if version is None:
            raise self.not_found(req.spec)
        return ResolvedVersion(self.tool, version, candidates[version])
