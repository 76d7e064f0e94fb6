"""Shared HTTP helpers used by the listing fetchers.

Encapsulates request/timeout error handling and the per-call retry budget so
callers only deal with a status code and a body. This module is
dependency-light and can be imported by registry/* without cycles.
"""
from __future__ import annotations

import logging
import time
from typing import Any, Optional, Dict, Tuple

import requests

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer

logger = logging.getLogger(__name__)


def _backoff(attempt: int) -> None:
    """Sleep before the next attempt; no sleep after the last one."""
    if attempt + 1 < Constants.HTTP_RETRY_MAX:
        time.sleep(Constants.HTTP_RETRY_BASE_DELAY_SEC * (2 ** attempt))


def robust_get(
    url: str,
    *,
    headers: Optional[Dict[str, str]] = None,
    **kwargs: Any
) -> Tuple[int, Dict[str, str], str]:
    """Perform GET request with timeout and retries, with DEBUG traces.

    Transport errors and gateway-style statuses (502/503/504) are retried up
    to ``Constants.HTTP_RETRY_MAX`` attempts. Any other status is returned as
    is, leaving the decision to the caller.

    Returns:
        Tuple of (status_code, headers_dict, text). status_code is 0 when
        every attempt failed at the transport level.
    """
    safe_target = safe_url(url)
    request_headers = {"User-Agent": Constants.USER_AGENT}
    if headers:
        request_headers.update(headers)

    last_exception = None
    last_response: Optional[Tuple[int, Dict[str, str], str]] = None

    for attempt in range(Constants.HTTP_RETRY_MAX):
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP request",
                extra=extra_context(
                    event="http_request",
                    component="http_client",
                    action="GET",
                    target=safe_target,
                    attempt=attempt + 1
                )
            )

        try:
            with Timer() as t:
                response = requests.get(
                    url,
                    timeout=Constants.REQUEST_TIMEOUT,
                    headers=request_headers,
                    **kwargs
                )
        except requests.Timeout:
            last_exception = "timeout"
            if is_debug_enabled(logger):
                logger.debug(
                    "HTTP timeout",
                    extra=extra_context(
                        event="http_exception",
                        component="http_client",
                        action="GET",
                        outcome="timeout",
                        attempt=attempt + 1,
                        target=safe_target
                    )
                )
            _backoff(attempt)
            continue
        except requests.RequestException as exc:  # includes ConnectionError
            last_exception = str(exc)
            if is_debug_enabled(logger):
                logger.debug(
                    "HTTP request exception",
                    extra=extra_context(
                        event="http_exception",
                        component="http_client",
                        action="GET",
                        outcome="request_exception",
                        attempt=attempt + 1,
                        target=safe_target
                    )
                )
            _backoff(attempt)
            continue

        if is_debug_enabled(logger):
            logger.debug(
                "HTTP response",
                extra=extra_context(
                    event="http_response",
                    component="http_client",
                    action="GET",
                    status_code=response.status_code,
                    duration_ms=t.duration_ms(),
                    target=safe_target,
                    attempt=attempt + 1
                )
            )
        last_response = (response.status_code, dict(response.headers), response.text)
        if response.status_code in Constants.HTTP_RETRY_STATUSES:
            _backoff(attempt)
            continue
        return last_response

    if last_response is not None:
        return last_response

    # All retries failed
    return 0, {}, f"Request failed after {Constants.HTTP_RETRY_MAX} attempts: {last_exception}"
