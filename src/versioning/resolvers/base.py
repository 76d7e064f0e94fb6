"""Base class for per-tool version resolvers."""

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from constants import Tools
from ..errors import SpecNotFound
from ..models import ResolvedVersion, ToolRequest


class VersionResolver(ABC):
    """Fetch a tool's published versions, then pick one for a request."""

    display_name = ""

    def __init__(
        self,
        strict: bool = False,
        mirrors: Optional[Sequence[str]] = None,
        token: Optional[str] = None,
    ):
        """Initialize resolver.

        Args:
            strict: Resolve specs verbatim (``version-type: strict``).
            mirrors: Ordered Hex.pm mirror prefixes for mirrored listings.
            token: Optional GitHub token for API listings.
        """
        self.strict = strict
        self.mirrors = tuple(mirrors or ())
        self.token = token

    @property
    @abstractmethod
    def tool(self) -> Tools:
        """Tool this resolver handles."""

    @abstractmethod
    async def fetch_candidates(self, req: ToolRequest) -> Any:
        """Fetch the upstream listing for ``req``."""

    @abstractmethod
    def pick(self, req: ToolRequest, candidates: Any) -> ResolvedVersion:
        """Select the version for ``req`` out of ``candidates``.

        Raises:
            SpecNotFound: nothing published matches the spec.
        """

    async def resolve(self, req: ToolRequest) -> ResolvedVersion:
        """Fetch then pick."""
        candidates = await self.fetch_candidates(req)
        return self.pick(req, candidates)

    def not_found(self, spec: str) -> SpecNotFound:
        return SpecNotFound(
            f"Requested {self.display_name} version ({spec}) not found in version list "
            "(should you be using option 'version-type': 'strict'?)"
        )
