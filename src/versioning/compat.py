"""Elixir / Erlang/OTP pairing check."""

from typing import Sequence

from constants import Constants
from .compare import is_version
from .errors import IncompatiblePairing


def is_compatible(compatible_majors: Sequence[str], primary_major: str) -> bool:
    """Branch-like OTP majors (``master``, ``maint``) are assumed compatible."""
    return not is_version(primary_major) or primary_major in compatible_majors


def ensure_compatible(
    compatible_majors: Sequence[str],
    primary_major: str,
    *,
    paired_spec: str,
    primary_spec: str,
) -> None:
    """Raise IncompatiblePairing unless the Elixir build targets ``primary_major``.

    Args:
        compatible_majors: OTP majors the resolved Elixir build is published for.
        primary_major: Major extracted from the requested OTP spec.
        paired_spec: Elixir spec as requested, for the diagnostic.
        primary_spec: OTP spec as requested, for the diagnostic.
    """
    if is_compatible(compatible_majors, primary_major):
        return
    raise IncompatiblePairing(
        f"Requested Elixir / Erlang/OTP version ({paired_spec} / {primary_spec}) not "
        "found in version list (did you check Compatibility between Elixir and "
        "Erlang/OTP?). Elixir and Erlang/OTP compatibility can be found on: "
        f"{Constants.ELIXIR_COMPATIBILITY_URL}"
    )
