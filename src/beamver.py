"""beamver - resolve BEAM toolchain version specs to published versions.

    Returns:
        int: Exit code
"""
import asyncio
import json
import logging
import sys

from constants import ExitCodes, Constants, Tools
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from args import parse_args
from cli_config import apply_config, load_config
from versioning.errors import InputError, ListingFetchError, ResolutionError
from versioning.models import ToolchainRequest
from versioning.platform import otp_listing_source, runner_os_version
from versioning.service import resolve_toolchain
from versioning.tool_versions import parse_version_file, pick_input

logger = logging.getLogger(__name__)

# CLI input name -> (.tool-versions app, args attribute, tool)
_INPUTS = [
    ("otp-version", "erlang", "OTP_VERSION", Tools.OTP),
    ("elixir-version", "elixir", "ELIXIR_VERSION", Tools.ELIXIR),
    ("gleam-version", "gleam", "GLEAM_VERSION", Tools.GLEAM),
    ("rebar3-version", "rebar", "REBAR3_VERSION", Tools.REBAR3),
]


def setup_logging(args):
    """Configure logging from --loglevel and --logfile."""
    configure_logging(getattr(args, "LOG_LEVEL", None))
    log_file = getattr(args, "LOG_FILE", None)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
        )
        logging.getLogger().addHandler(file_handler)
        logger.info("Logging to file: %s", log_file)


def build_request(args):
    """Turn parsed CLI arguments into a ToolchainRequest.

    Raises:
        InputError: inconsistent inputs (version file without strict, conflicts).
        UnsupportedPlatform: no build target can be derived for the runner.
    """
    strict = args.VERSION_TYPE == "strict"
    versions = None
    if args.VERSION_FILE:
        if not strict:
            raise InputError(
                "you have to set version-type=strict if you're using version-file"
            )
        versions = parse_version_file(args.VERSION_FILE)

    specs = {}
    sources = {}
    for input_name, app, attr, tool in _INPUTS:
        value = getattr(args, attr)
        specs[tool] = pick_input(input_name, value, app, versions)
        sources[tool.value] = "input" if value else "version-file"

    os_version = args.OS_VERSION
    if specs[Tools.OTP] and specs[Tools.OTP] != Constants.OTP_DISABLED:
        otp_listing_source(args.PLATFORM)
        if not os_version:
            os_version = runner_os_version(args.IMAGE_OS)

    return ToolchainRequest(
        otp_spec=specs[Tools.OTP],
        elixir_spec=specs[Tools.ELIXIR],
        gleam_spec=specs[Tools.GLEAM],
        rebar3_spec=specs[Tools.REBAR3],
        strict=strict,
        mirrors=args.HEXPM_MIRRORS or list(Constants.HEXPM_MIRRORS),
        token=args.GITHUB_TOKEN,
        os_version=os_version,
        platform=args.PLATFORM,
        sources=sources,
    )


def render(results, output_format):
    """Render resolved versions as text lines or a JSON object."""
    if output_format == "json":
        return json.dumps(
            {tool.value: resolved.as_dict() for tool, resolved in results.items()},
            indent=2,
        )
    return "\n".join(
        f"{tool.value}-version={resolved.version} ({resolved.reference})"
        for tool, resolved in results.items()
    )


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    setup_logging(args)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action="main")
        )

    try:
        apply_config(load_config(args.CONFIG))
        request = build_request(args)
        results = asyncio.run(resolve_toolchain(request))
    except InputError as exc:
        logger.error("%s", exc)
        return ExitCodes.INPUT_ERROR.value
    except ResolutionError as exc:
        logger.error("%s", exc)
        return ExitCodes.RESOLUTION_ERROR.value
    except ListingFetchError as exc:
        logger.error("%s", exc)
        return ExitCodes.CONNECTION_ERROR.value

    print(render(results, args.OUTPUT_FORMAT))
    return ExitCodes.SUCCESS.value


if __name__ == "__main__":
    sys.exit(main())
