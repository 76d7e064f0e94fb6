"""Data models for version resolution."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence

from constants import Tools


class SpecKind(Enum):
    """How a spec is resolved; chosen once per resolution call."""
    EMPTY = "empty"
    RELEASE_CANDIDATE = "release-candidate"
    EXACT = "exact"
    RANGE = "range"
    COERCED = "coerced"
    BRANCH = "branch"


@dataclass
class ToolRequest:
    """Resolution input for a single tool."""
    tool: Tools
    spec: str
    source: str = "input"  # "input" | "version-file"
    primary_spec: Optional[str] = None  # OTP spec an Elixir build must match


@dataclass(frozen=True)
class ResolvedVersion:
    """Resolution outcome handed to the installer."""
    tool: Tools
    version: str  # display string, always a member of the candidate list
    reference: str  # token used to build download URLs

    def as_dict(self) -> Dict[str, str]:
        return {"version": self.version, "reference": self.reference}


@dataclass
class ToolchainRequest:
    """All inputs for one run."""
    otp_spec: Optional[str] = None
    elixir_spec: Optional[str] = None
    gleam_spec: Optional[str] = None
    rebar3_spec: Optional[str] = None
    strict: bool = False
    mirrors: Sequence[str] = field(default_factory=list)
    token: Optional[str] = None
    os_version: Optional[str] = None
    platform: str = "linux"
    sources: Dict[str, str] = field(default_factory=dict)


# Elixir display version -> OTP majors it was built for.
ElixirListing = Dict[str, List[str]]
# Bare OTP version -> origin token kept for download.
OtpListing = Dict[str, str]
