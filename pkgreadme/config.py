"""Configuration loading for pkgreadme (.pkgreadme.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError

CONFIG_FILENAME = ".pkgreadme.yml"
DEFAULT_README = "README.md"
DEFAULT_MANIFEST = "package.json"


@dataclass
class ReadmeConfig:
    """Represents the settings defined in .pkgreadme.yml."""

    root: Path
    readme_file: str = DEFAULT_README
    manifest_file: str = DEFAULT_MANIFEST
    templates_dir: Optional[Path] = None

    @property
    def readme_path(self) -> Path:
        return self.root / self.readme_file

    @property
    def manifest_path(self) -> Path:
        return self.root / self.manifest_file


def load_config(root: Path) -> ReadmeConfig:
    """Load ``<root>/.pkgreadme.yml``, falling back to defaults when absent.

    ``root`` is always the project root, even when it does not exist yet.
    """
    root = Path(root).expanduser().resolve()
    config_file = root / CONFIG_FILENAME

    if not config_file.is_file():
        return ReadmeConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    templates_dir_str = _as_str(data.get("templates_dir"))
    return ReadmeConfig(
        root=root,
        readme_file=_as_str(data.get("readme")) or DEFAULT_README,
        manifest_file=_as_str(data.get("manifest")) or DEFAULT_MANIFEST,
        templates_dir=root / templates_dir_str if templates_dir_str else None,
    )


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


__all__ = ["CONFIG_FILENAME", "ConfigError", "ReadmeConfig", "load_config"]
