"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    INPUT_ERROR = 1
    CONNECTION_ERROR = 2
    RESOLUTION_ERROR = 3


class Tools(Enum):
    """Tools whose versions can be resolved.

    Args:
        Enum (string): Tool names as they appear in outputs.
    """

    OTP = "otp"
    ELIXIR = "elixir"
    GLEAM = "gleam"
    REBAR3 = "rebar3"


class ListingSources(Enum):
    """Where Erlang/OTP builds are listed for a given platform."""

    HEXPM_BUILDS = "hexpm-builds"
    GITHUB_RELEASES = "github-releases"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    HEXPM_MIRRORS = ["https://builds.hex.pm"]
    OTP_BUILDS_PATH = "/builds/otp/{os_version}/builds.txt"
    ELIXIR_BUILDS_PATH = "/builds/elixir/builds.txt"

    GITHUB_API_HOST = "api.github.com"
    OTP_RELEASES_URL = "https://api.github.com/repos/erlang/otp/releases?per_page=100"
    GLEAM_RELEASES_URL = "https://api.github.com/repos/gleam-lang/gleam/releases?per_page=100"
    REBAR3_RELEASES_URL = "https://api.github.com/repos/erlang/rebar3/releases?per_page=100"
    RELEASE_PAGES = [1, 2, 3]

    ELIXIR_COMPATIBILITY_URL = (
        "https://hexdocs.pm/elixir/compatibility-and-deprecations.html"
    )

    IMAGE_OS_TO_CONTAINER = {
        "ubuntu18": "ubuntu-18.04",
        "ubuntu20": "ubuntu-20.04",
        "ubuntu22": "ubuntu-22.04",
        "ubuntu24": "ubuntu-24.04",
        "win19": "windows-2019",
        "win22": "windows-2022",
    }
    PLATFORM_LISTING_SOURCES = {
        "linux": ListingSources.HEXPM_BUILDS,
        "win32": ListingSources.GITHUB_RELEASES,
    }

    VERSION_FILE_APPS = ["erlang", "elixir", "gleam", "rebar"]
    REBAR3_NIGHTLY = "nightly"
    OTP_DISABLED = "false"

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    USER_AGENT = "beamver/0.1"
    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests
    HTTP_RETRY_MAX = 3
    HTTP_RETRY_BASE_DELAY_SEC = 0.3
    HTTP_RETRY_STATUSES = (502, 503, 504)

    ENV_GITHUB_TOKEN = "GITHUB_TOKEN"
    ENV_IMAGE_OS = "ImageOS"
    ENV_WORKSPACE = "GITHUB_WORKSPACE"
    ENV_CONFIG = "BEAMVER_CONFIG"
    ENV_LOG_LEVEL = "BEAMVER_LOG_LEVEL"
