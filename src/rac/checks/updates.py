"""Check the npm registry for a newer release of this tool."""

from __future__ import annotations

import logging
from typing import Optional

import requests
from packaging.version import InvalidVersion, Version

from ..config.settings import NPM_REGISTRY, PACKAGE_NAME, UPDATE_CHECK_TIMEOUT
from ..utils import Reporter

logger = logging.getLogger(__name__)


def dist_tags_url(package_name: str = PACKAGE_NAME, registry: str = NPM_REGISTRY) -> str:
    return f"{registry.rstrip('/')}/-/package/{package_name}/dist-tags"


def check_for_update(
    current_version: str,
    package_name: str = PACKAGE_NAME,
    registry: str = NPM_REGISTRY,
) -> Optional[str]:
    """Return the latest published version if it is newer than *current_version*.

    Never raises: network errors, non-200 responses and malformed bodies all
    count as "no update available".
    """
    url = dist_tags_url(package_name, registry)
    try:
        response = requests.get(url, timeout=UPDATE_CHECK_TIMEOUT)
    except requests.RequestException as e:
        logger.debug("Update check failed: %s", e)
        return None
    if response.status_code != 200:
        logger.debug("Update check got HTTP %s from %s", response.status_code, url)
        return None
    try:
        latest = response.json()["latest"]
        if Version(str(latest)) > Version(current_version):
            return str(latest)
    except (ValueError, KeyError, TypeError, InvalidVersion) as e:
        logger.debug("Ignoring malformed dist-tags response: %s", e)
    return None


def notify_update(
    reporter: Reporter,
    current_version: str,
    package_name: str = PACKAGE_NAME,
    registry: str = NPM_REGISTRY,
) -> Optional[str]:
    """Print an advisory line when a newer version is published."""
    latest = check_for_update(current_version, package_name, registry)
    if latest:
        reporter.warn(f"Update available: {latest}")
        reporter.info()
    return latest
