"""Read and patch the generated project's package.json."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict

from ..config.settings import MANIFEST_FILE
from ..errors import ManifestError


def load_manifest(path: Path) -> Dict[str, Any]:
    """Parse a package.json file, raising ManifestError if it is unusable."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ManifestError(f"No {path.name} found at {path}") from e
    except json.JSONDecodeError as e:
        raise ManifestError(f"Malformed {path.name} at {path}: {e}") from e
    if not isinstance(data, dict):
        raise ManifestError(f"{path} must contain a JSON object")
    return data


def dump_manifest(manifest: Dict[str, Any]) -> str:
    """Serialize a manifest with 2-space indentation and a trailing line ending."""
    return json.dumps(manifest, indent=2, ensure_ascii=False) + os.linesep


def patch_manifest(project_dir: Path, project_name: str) -> Path:
    """Set the manifest `name` to *project_name* and write it back."""
    manifest_path = project_dir / MANIFEST_FILE
    manifest = load_manifest(manifest_path)
    manifest["name"] = project_name
    # newline="" keeps os.linesep from being translated a second time
    with open(manifest_path, "w", encoding="utf-8", newline="") as f:
        f.write(dump_manifest(manifest))
    return manifest_path
