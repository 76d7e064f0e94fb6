"""Argument parsing functionality for beamver."""

import argparse
import os
import sys

from constants import Constants


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="beamver",
        description=(
            "beamver - resolve Erlang/OTP, Elixir, Gleam and rebar3 version specs "
            "to published versions"
        ),
        add_help=True,
    )

    parser.add_argument("--otp-version",
                        dest="OTP_VERSION",
                        help="Erlang/OTP version spec, or 'false' to skip Erlang/OTP (Gleam only)",
                        action="store", type=str)
    parser.add_argument("--elixir-version",
                        dest="ELIXIR_VERSION",
                        help="Elixir version spec, optionally suffixed with -otp-<major>",
                        action="store", type=str)
    parser.add_argument("--gleam-version",
                        dest="GLEAM_VERSION",
                        help="Gleam version spec",
                        action="store", type=str)
    parser.add_argument("--rebar3-version",
                        dest="REBAR3_VERSION",
                        help="rebar3 version spec, or 'nightly'",
                        action="store", type=str)
    parser.add_argument("--version-type",
                        dest="VERSION_TYPE",
                        help="'strict' takes specs verbatim; 'loose' allows ranges (default: loose)",
                        action="store", type=str,
                        choices=["loose", "strict"],
                        default="loose")
    parser.add_argument("--version-file",
                        dest="VERSION_FILE",
                        help="asdf .tool-versions file, relative to $GITHUB_WORKSPACE (requires strict)",
                        action="store", type=str)

    parser.add_argument("--hexpm-mirror",
                        dest="HEXPM_MIRRORS",
                        help="Hex.pm mirror to try, in order (repeatable)",
                        action="append", type=str,
                        default=[])
    parser.add_argument("--github-token",
                        dest="GITHUB_TOKEN",
                        help="Token sent to the GitHub API (default: $GITHUB_TOKEN)",
                        action="store", type=str,
                        default=os.environ.get(Constants.ENV_GITHUB_TOKEN))
    parser.add_argument("--image-os",
                        dest="IMAGE_OS",
                        help="Runner image name, e.g. ubuntu22 (default: $ImageOS)",
                        action="store", type=str,
                        default=os.environ.get(Constants.ENV_IMAGE_OS))
    parser.add_argument("--os-version",
                        dest="OS_VERSION",
                        help="Build target such as ubuntu-22.04; overrides --image-os",
                        action="store", type=str)
    parser.add_argument("--platform",
                        dest="PLATFORM",
                        help="Platform identifier (default: this interpreter's sys.platform)",
                        action="store", type=str,
                        default=sys.platform)

    parser.add_argument("-f", "--format",
                        dest="OUTPUT_FORMAT",
                        help="Output format (text or json)",
                        action="store",
                        type=str.lower,
                        choices=["text", "json"],
                        default="text")
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='INFO')
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML)",
                        action="store",
                        type=str)
    return parser


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    return build_parser().parse_args(argv)
