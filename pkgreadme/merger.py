"""Merge freshly derived manifest metadata into an existing README."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from jinja2 import Environment, FileSystemLoader

from .models import ManifestInfo
from .postproc.badges import BadgeManager
from .postproc.markers import MarkerManager

_DEFAULT_TEMPLATES = Path(__file__).with_name("templates")


class DocumentMerger:
    """Regenerates the templated README header and keeps the user-owned tail.

    The header is rebuilt from scratch on every run: title, badge line,
    description, install block, ``npx`` block and finally the keep marker.
    Empty sections are skipped and the rest are separated by a blank line.
    Whatever followed the first marker in the previous document is appended
    verbatim, so merging an already merged document is a no-op.
    """

    UNTITLED = "untitled"

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        marker_manager: MarkerManager | None = None,
        badge_manager: BadgeManager | None = None,
    ) -> None:
        self.templates_dir = templates_dir
        self.marker_manager = marker_manager or MarkerManager()
        self.badge_manager = badge_manager or BadgeManager()
        self._env = self._create_env(templates_dir)

    def transform(self, info: ManifestInfo, previous: Optional[str] = None) -> str:
        """Return the new README content for ``info`` given the previous text."""
        return self.marker_manager.attach(self.render_header(info), previous)

    def render_header(self, info: ManifestInfo) -> str:
        sections: List[str] = [
            f"# {info.heading or self.UNTITLED}",
            self.badge_manager.line_for(info),
            info.description or "",
            self.install_block(info),
            self.npx_block(info),
            self.marker_manager.marker,
        ]
        return "\n\n".join(section for section in sections if section)

    def install_block(self, info: ManifestInfo) -> str:
        if not info.npm_name:
            return ""
        global_command = info.usage(info.global_executable) if info.global_executable else None
        template = self._env.get_template("install.j2")
        return template.render(npm_name=info.npm_name, global_command=global_command)

    def npx_block(self, info: ManifestInfo) -> str:
        if not info.npx_executable:
            return ""
        template = self._env.get_template("npx.j2")
        return template.render(invocation=info.usage(info.npx_executable))

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories: List[str] = []
        if templates_dir and templates_dir != _DEFAULT_TEMPLATES:
            directories.append(str(templates_dir))
        directories.append(str(_DEFAULT_TEMPLATES))
        loader = FileSystemLoader(directories)
        return Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)


__all__ = ["DocumentMerger"]
