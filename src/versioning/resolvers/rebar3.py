"""rebar3 version resolver using GitHub release tags."""

from typing import List

from constants import Constants, Tools
from registry.fetch import fetch_pages
from registry.listings import parse_release_tags
from ..models import ResolvedVersion, ToolRequest
from ..resolver import get_version_from_spec
from .base import VersionResolver


class Rebar3VersionResolver(VersionResolver):
    """Resolver for rebar3 releases; ``nightly`` needs no lookup."""

    display_name = "rebar3"

    @property
    def tool(self) -> Tools:
        """Return rebar3 tool."""
        return Tools.REBAR3

    async def resolve(self, req: ToolRequest) -> ResolvedVersion:
        if req.spec == Constants.REBAR3_NIGHTLY:
            return ResolvedVersion(self.tool, req.spec, req.spec)
        return await super().resolve(req)

    async def fetch_candidates(self, req: ToolRequest) -> List[str]:
        """Fetch release tags (``3.22.1``) from the first release pages."""
        pages = await fetch_pages(
            Constants.REBAR3_RELEASES_URL, Constants.RELEASE_PAGES, self.token
        )
        return parse_release_tags(pages)

    def pick(self, req: ToolRequest, candidates: List[str]) -> ResolvedVersion:
        version = get_version_from_spec(req.spec, candidates, strict=self.strict)
        if version is None:
            raise self.not_found(req.spec)
        return ResolvedVersion(self.tool, version, version)
