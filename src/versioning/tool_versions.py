"""asdf ``.tool-versions`` support.

A version file pins each tool exactly, so it is only accepted together with
strict resolution, and a tool may be pinned either there or individually,
never both.
"""
from __future__ import annotations

import logging
import os
import re
from typing import Dict, Mapping, Optional

from constants import Constants
from .errors import InputError

logger = logging.getLogger(__name__)

_APP_VERSION = re.compile(r"^([^ ]+)[ ]+([^ #]+)")


def parse_tool_versions(text: str) -> Dict[str, str]:
    """Return ``{app: version}`` for the apps this project knows about."""
    app_versions: Dict[str, str] = {}
    for line in text.split("\n"):
        match = _APP_VERSION.match(line)
        if not match:
            continue
        app, version = match.group(1), match.group(2)
        if app in Constants.VERSION_FILE_APPS:
            logger.info("Consuming %s at version %s", app, version)
            app_versions[app] = version
    return app_versions


def parse_version_file(path: str, workspace: Optional[str] = None) -> Dict[str, str]:
    """Read a version file, relative to ``workspace`` (default: $GITHUB_WORKSPACE or cwd).

    Raises:
        InputError: the file does not exist.
    """
    base = workspace or os.environ.get(Constants.ENV_WORKSPACE) or os.getcwd()
    full_path = os.path.join(base, path)
    if not os.path.isfile(full_path):
        raise InputError(f"The specified version file, {path}, does not exist")

    logger.info("Parsing version file at %s", path)
    with open(full_path, encoding="utf-8") as fh:
        app_versions = parse_tool_versions(fh.read())
    if not app_versions:
        logger.info("There was apparently nothing to consume")
    else:
        logger.info("... done!")
    return app_versions


def pick_input(
    input_name: str,
    value: Optional[str],
    alternative_name: str,
    alternatives: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """Individually supplied spec, or the version file's entry for the same tool.

    Raises:
        InputError: both are set.
    """
    alternative = (alternatives or {}).get(alternative_name)
    if value and alternative:
        raise InputError(
            f"Found input {input_name}={value} alongside {alternative_name}={alternative} "
            "(from the version file). You must choose one or the other."
        )
    return value or alternative
