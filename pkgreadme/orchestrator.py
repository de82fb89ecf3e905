"""Pipeline orchestration for README update runs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import ReadmeConfig, load_config
from .logging import get_logger
from .manifest import derive_info, load_manifest
from .merger import DocumentMerger
from .models import ManifestInfo
from .stores import DocumentStore, FileSystemStore


@dataclass
class UpdateOutcome:
    """Result of a README update operation."""

    path: Path
    content: str
    changed: bool


class Orchestrator:
    """Loads the manifest and README, merges them and writes the result."""

    def __init__(
        self,
        store: DocumentStore | None = None,
        merger: DocumentMerger | None = None,
    ) -> None:
        self.store = store or FileSystemStore()
        self._merger_override = merger
        self.logger = get_logger("orchestrator")

    def run_update(self, path: str | Path = ".") -> UpdateOutcome:
        """Regenerate the README header for the project rooted at ``path``.

        Nothing is written unless the manifest loads and the merge succeeds.
        """
        root = Path(path).expanduser().resolve()
        self.logger.debug("Starting update run for %s", root)

        config = load_config(root)
        info = self.load_info(config)
        self.logger.debug("Derived heading %r from %s", info.heading, config.manifest_file)

        previous = self.read_previous(config.readme_path)
        merger = self._resolve_merger(config)
        if previous and not merger.marker_manager.has_marker(previous):
            self.logger.debug("README has no keep marker; existing content will be replaced")
        content = merger.transform(info, previous)

        changed = content != previous
        if not changed:
            self.logger.info("%s already up to date", config.readme_file)
        self.store.write_text(config.readme_path, content)
        self.logger.debug("Wrote %d characters to %s", len(content), config.readme_path)
        return UpdateOutcome(path=config.readme_path, content=content, changed=changed)

    def load_info(self, config: ReadmeConfig) -> ManifestInfo:
        record = load_manifest(config.manifest_path, self.store)
        return derive_info(record)

    def read_previous(self, readme_path: Path) -> str:
        """Return the current README content, or an empty string when absent."""
        if not self.store.is_file(readme_path):
            self.logger.debug("No existing README at %s", readme_path)
            return ""
        return self.store.read_text(readme_path)

    def _resolve_merger(self, config: ReadmeConfig) -> DocumentMerger:
        if self._merger_override is not None:
            return self._merger_override
        return DocumentMerger(config.templates_dir)


__all__ = ["Orchestrator", "UpdateOutcome"]
