"""Resolve every requested tool of a run.

Order follows installation order: Erlang/OTP first, then Elixir (which is
checked against the OTP spec), then Gleam and rebar3. Any error aborts the
whole run.
"""

import logging
from typing import Dict

from constants import Constants, Tools
from common.logging_utils import extra_context, is_debug_enabled, Timer
from .errors import InputError
from .models import ResolvedVersion, ToolchainRequest, ToolRequest
from .resolvers import (
    ElixirVersionResolver,
    GleamVersionResolver,
    OtpVersionResolver,
    Rebar3VersionResolver,
    VersionResolver,
)

logger = logging.getLogger(__name__)


class VersionResolutionService:
    """Resolve a ToolchainRequest into one ResolvedVersion per requested tool."""

    def __init__(self, request: ToolchainRequest):
        self.request = request
        common = {
            "strict": request.strict,
            "mirrors": request.mirrors,
            "token": request.token,
        }
        self.resolvers: Dict[Tools, VersionResolver] = {
            Tools.OTP: OtpVersionResolver(
                os_version=request.os_version, platform=request.platform, **common
            ),
            Tools.ELIXIR: ElixirVersionResolver(**common),
            Tools.GLEAM: GleamVersionResolver(**common),
            Tools.REBAR3: Rebar3VersionResolver(**common),
        }

    def tool_requests(self) -> Dict[Tools, ToolRequest]:
        """Per-tool requests in resolution order.

        Raises:
            InputError: OTP is disabled without a Gleam spec, or no OTP spec given.
        """
        req = self.request
        sources = req.sources
        requests: Dict[Tools, ToolRequest] = {}

        if not req.otp_spec:
            raise InputError("Input required and not supplied: otp-version")
        if req.otp_spec != Constants.OTP_DISABLED:
            requests[Tools.OTP] = ToolRequest(
                Tools.OTP, req.otp_spec, sources.get(Tools.OTP.value, "input")
            )
            if req.elixir_spec:
                requests[Tools.ELIXIR] = ToolRequest(
                    Tools.ELIXIR,
                    req.elixir_spec,
                    sources.get(Tools.ELIXIR.value, "input"),
                    primary_spec=req.otp_spec,
                )
        elif not req.gleam_spec:
            raise InputError("otp-version=false is only available when installing Gleam")
        elif req.elixir_spec:
            logger.warning("otp-version=false: ignoring elixir-version=%s", req.elixir_spec)

        if req.gleam_spec:
            requests[Tools.GLEAM] = ToolRequest(
                Tools.GLEAM, req.gleam_spec, sources.get(Tools.GLEAM.value, "input")
            )
        if req.rebar3_spec:
            requests[Tools.REBAR3] = ToolRequest(
                Tools.REBAR3, req.rebar3_spec, sources.get(Tools.REBAR3.value, "input")
            )
        return requests

    async def resolve_all(self) -> Dict[Tools, ResolvedVersion]:
        """Resolve each requested tool one after the other."""
        results: Dict[Tools, ResolvedVersion] = {}
        for tool, tool_req in self.tool_requests().items():
            with Timer() as t:
                resolved = await self.resolvers[tool].resolve(tool_req)
            results[tool] = resolved
            logger.info(
                "Resolved %s %s to %s",
                self.resolvers[tool].display_name,
                tool_req.spec,
                resolved.version,
            )
            if is_debug_enabled(logger):
                logger.debug(
                    "Tool resolved",
                    extra=extra_context(
                        event="resolved",
                        component="service",
                        action="resolve_all",
                        tool=tool.value,
                        source=tool_req.source,
                        reference=resolved.reference,
                        duration_ms=t.duration_ms(),
                    )
                )
        return results


async def resolve_toolchain(request: ToolchainRequest) -> Dict[Tools, ResolvedVersion]:
    """Convenience wrapper around VersionResolutionService."""
    return await VersionResolutionService(request).resolve_all()
