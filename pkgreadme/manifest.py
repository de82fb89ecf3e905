"""Load package.json manifests and derive README metadata from them."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .errors import ManifestNotFoundError, ManifestParseError
from .logging import get_logger
from .models import ManifestInfo, RepositoryRef
from .stores import DocumentStore

_GITHUB_URL = re.compile(r"https?://github.com/(.+)/(.+).git")

_NOT_FOUND_MESSAGE = "no package.json found in the root of this directory"
_PARSE_MESSAGE = "there was an issue parsing the package.json file"

logger = get_logger("manifest")


def load_manifest(path: Path, store: DocumentStore) -> Dict[str, Any]:
    """Read and parse the manifest at ``path``.

    Raises ``ManifestNotFoundError`` when the path is not a regular file and
    ``ManifestParseError`` when its content is not a JSON object.
    """
    if not store.is_file(path):
        raise ManifestNotFoundError(_NOT_FOUND_MESSAGE)
    # UnicodeDecodeError and JSONDecodeError are both ValueErrors.
    try:
        data = json.loads(store.read_text(path))
    except ValueError as exc:
        logger.debug("Decoding of %s failed: %s", path, exc)
        raise ManifestParseError(_PARSE_MESSAGE) from exc
    if not isinstance(data, dict):
        logger.debug("Manifest %s root is %s, expected an object", path, type(data).__name__)
        raise ManifestParseError(_PARSE_MESSAGE)
    return data


def parse_repository(url: Optional[str]) -> RepositoryRef:
    """Extract the GitHub user and repository name from a repository URL."""
    match = _GITHUB_URL.search(url or "")
    if match is None:
        return RepositoryRef()
    return RepositoryRef(
        github_user=match.group(1),
        repo_name=match.group(2),
        url_match=match.group(0),
    )


def derive_info(record: Mapping[str, Any]) -> ManifestInfo:
    """Build the read-only README metadata for a manifest record."""
    name = _as_str(record.get("name"))
    repository = _as_dict(record.get("repository"))
    repo = parse_repository(_as_str(repository.get("url")))
    bin_field = _normalise_bin(record.get("bin"))
    scoped = is_scoped(name)
    return ManifestInfo(
        npm_name=name,
        description=_as_str(record.get("description")),
        github_user=repo.github_user,
        repo_name=repo.repo_name,
        is_scoped=scoped,
        npx_executable=npx_executable(name, bin_field, scoped=scoped),
        global_executable=global_executable(name, bin_field),
        usage_template=_as_str(record.get("usage")),
    )


def is_scoped(name: Optional[str]) -> bool:
    return bool(name) and len(name.split("/")) == 2


def npx_executable(
    name: Optional[str],
    bin_field: str | Mapping[str, Any] | None,
    *,
    scoped: bool,
) -> Optional[str]:
    """Return the argument string that follows ``npx`` for this package."""
    if bin_field is None:
        return None
    if isinstance(bin_field, str):
        if scoped:
            return f"-p {name}"
        return name
    primary = next(iter(bin_field))
    if scoped:
        return f"-p {name} {primary}"
    if name == primary:
        return name
    return f"{name} {primary}"


def global_executable(
    name: Optional[str],
    bin_field: str | Mapping[str, Any] | None,
) -> Optional[str]:
    """Return the command available on PATH after ``npm install -g``."""
    if bin_field is None:
        return None
    if isinstance(bin_field, str):
        if not name:
            return None
        parts = name.split("/")
        if len(parts) == 2:
            return parts[1]
        return parts[0]
    return next(iter(bin_field))


def _normalise_bin(value: Any) -> str | Mapping[str, Any] | None:
    if isinstance(value, str):
        return value
    if isinstance(value, dict) and value:
        return value
    return None


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


__all__ = [
    "derive_info",
    "global_executable",
    "is_scoped",
    "load_manifest",
    "npx_executable",
    "parse_repository",
]
