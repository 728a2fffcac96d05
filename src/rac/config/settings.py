"""Fixed settings for the rac CLI."""

from __future__ import annotations

# Name this tool is published under; used for the update check
PACKAGE_NAME = "rac-cli"

NPM_REGISTRY = "https://registry.npmjs.org"

# Seconds before the update check gives up
UPDATE_CHECK_TIMEOUT = 5.0

MIN_NODE_MAJOR = 14

DEFAULT_PROJECT_NAME = "react-awesome-project"

MANIFEST_FILE = "package.json"
ENV_FILE = ".env"
