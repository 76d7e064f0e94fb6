"""Map runner/platform identifiers to listing sources."""

from typing import Optional

from constants import Constants, ListingSources
from .errors import UnsupportedPlatform


def runner_os_version(image_os: Optional[str]) -> str:
    """Map a runner image name (``ubuntu22``) to its build target (``ubuntu-22.04``)."""
    container = Constants.IMAGE_OS_TO_CONTAINER.get(image_os or "")
    if not container:
        known = "', '".join(Constants.IMAGE_OS_TO_CONTAINER)
        raise UnsupportedPlatform(
            f"Tried to map a target OS from env. variable 'ImageOS' (got {image_os}), "
            "but failed. If you're using a self-hosted runner, you should set "
            f"'env': 'ImageOS': ... to one of the following: ['{known}']"
        )
    return container


def otp_listing_source(platform: str) -> ListingSources:
    """Where Erlang/OTP builds for ``platform`` (a ``sys.platform`` value) are listed."""
    source = Constants.PLATFORM_LISTING_SOURCES.get(platform)
    if source is None:
        raise UnsupportedPlatform(
            f"Platform {platform} not supported; expected one of "
            f"{', '.join(Constants.PLATFORM_LISTING_SOURCES)}"
        )
    return source
