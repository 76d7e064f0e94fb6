"""Version resolvers for the supported tools."""

from .base import VersionResolver
from .otp import OtpVersionResolver
from .elixir import ElixirVersionResolver
from .gleam import GleamVersionResolver
from .rebar3 import Rebar3VersionResolver

__all__ = [
    "VersionResolver",
    "OtpVersionResolver",
    "ElixirVersionResolver",
    "GleamVersionResolver",
    "Rebar3VersionResolver",
]
