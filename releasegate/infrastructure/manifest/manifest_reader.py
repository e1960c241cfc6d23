import json
import tomllib
from pathlib import Path
from typing import Any

from loguru import logger

from releasegate.domain.errors import ManifestError


def _load(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if path.suffix == ".toml":
        data = tomllib.loads(text)
        project = data.get("project")
        return project if isinstance(project, dict) else {}
    data = json.loads(text)
    return data if isinstance(data, dict) else {}


def read_project_version(path: Path) -> str:
    """Read the project version from a manifest file.

    JSON manifests (deno.json, jsr.json, package.json) use the top-level
    "version" key; pyproject.toml uses [project].version.
    """
    if not path.is_file():
        raise ManifestError(f"Manifest not found: {path}")

    try:
        fields = _load(path)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ManifestError(f"Cannot parse manifest {path}: {e}") from e

    version = fields.get("version")
    if not isinstance(version, str) or not version.strip():
        raise ManifestError(f"No version field in manifest: {path}")

    logger.debug("Read version {} from {}", version, path)
    return version.strip()
