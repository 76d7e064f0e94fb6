"""Gleam version resolver using GitHub release tags."""

from typing import List

from constants import Constants, Tools
from registry.fetch import fetch_pages
from registry.listings import parse_release_tags
from ..compare import maybe_prepend_v
from ..models import ResolvedVersion, ToolRequest
from ..parser import strip_leading_v
from ..resolver import get_version_from_spec
from .base import VersionResolver


class GleamVersionResolver(VersionResolver):
    """Resolver for Gleam releases."""

    display_name = "Gleam"

    @property
    def tool(self) -> Tools:
        """Return Gleam tool."""
        return Tools.GLEAM

    async def fetch_candidates(self, req: ToolRequest) -> List[str]:
        """Fetch release tags (``v0.30.0``) from the first release pages."""
        pages = await fetch_pages(
            Constants.GLEAM_RELEASES_URL, Constants.RELEASE_PAGES, self.token
        )
        return parse_release_tags(pages)

    def pick(self, req: ToolRequest, candidates: List[str]) -> ResolvedVersion:
        """Specs are accepted with or without the leading ``v`` of the tags."""
        version = get_version_from_spec(
            strip_leading_v(req.spec), candidates, strict=self.strict, prepend_v=True
        )
        if version is None:
            raise self.not_found(req.spec)
        version = maybe_prepend_v(version)
        return ResolvedVersion(self.tool, version, version)
