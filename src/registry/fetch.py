"""Listing retrieval: mirror fallback and paginated fetches.

Two levels of resilience: every HTTP call carries the transport retry budget
of ``common.http_client.robust_get``; above it, mirror-backed resources are
tried mirror by mirror until one answers. Paginated API listings are fetched
concurrently and joined; a single failing page fails the whole listing.
"""
from __future__ import annotations

import asyncio
import logging
import urllib.parse
from typing import Dict, List, Optional, Sequence

from constants import Constants
from common.http_client import robust_get
from common.logging_utils import extra_context, is_debug_enabled, safe_url
from versioning.errors import ListingFetchError, MirrorExhausted

logger = logging.getLogger(__name__)


def _with_page(url: str, page: Optional[int]) -> str:
    if page is None:
        return url
    parts = urllib.parse.urlsplit(url)
    query = urllib.parse.parse_qsl(parts.query, keep_blank_values=True)
    query.append(("page", str(page)))
    return urllib.parse.urlunsplit(parts._replace(query=urllib.parse.urlencode(query)))


def auth_headers(url: str, token: Optional[str]) -> Dict[str, str]:
    """Bearer token header, only ever sent to the GitHub API host."""
    if token and urllib.parse.urlsplit(url).hostname == Constants.GITHUB_API_HOST:
        return {"Authorization": f"Bearer {token}"}
    return {}


def get_page(url: str, page: Optional[int] = None, token: Optional[str] = None) -> str:
    """Fetch one page (or the whole resource when ``page`` is None).

    Raises:
        ListingFetchError: transport failure after retries, or a 4xx/5xx status.
    """
    target = _with_page(url, page)
    status_code, _, text = robust_get(target, headers=auth_headers(target, token))
    if status_code == 0:
        raise ListingFetchError(f"Could not reach {safe_url(target)}: {text}")
    if 400 <= status_code <= 599:
        raise ListingFetchError(
            f"Got {status_code} from {safe_url(target)}. Exiting with error",
            status_code=status_code,
        )
    return text


async def fetch_page(url: str, token: Optional[str] = None) -> str:
    """Fetch an unpaginated resource without blocking the event loop."""
    return await asyncio.to_thread(get_page, url, None, token)


async def fetch_pages(
    url: str,
    pages: Sequence[int],
    token: Optional[str] = None,
) -> List[str]:
    """Fetch every page concurrently; any failing page fails the whole call."""
    bodies = await asyncio.gather(
        *(asyncio.to_thread(get_page, url, page, token) for page in pages)
    )
    return list(bodies)


async def fetch_with_mirrors(
    resource_path: str,
    mirrors: Sequence[str],
    token: Optional[str] = None,
) -> str:
    """Fetch ``resource_path`` from the first mirror that serves it.

    Mirrors are tried in order, one at a time.

    Raises:
        MirrorExhausted: every mirror failed, or none was given.
    """
    for mirror in mirrors:
        url = f"{mirror}{resource_path}"
        try:
            body = await fetch_page(url, token)
        except ListingFetchError as exc:
            logger.info("get failed for URL %s: %s", safe_url(url), exc)
            continue
        if is_debug_enabled(logger):
            logger.debug(
                "Mirror answered",
                extra=extra_context(
                    event="mirror_success",
                    component="fetch",
                    action="fetch_with_mirrors",
                    target=safe_url(url),
                )
            )
        return body
    raise MirrorExhausted(f"Could not fetch {resource_path} from any hex.pm mirror")
