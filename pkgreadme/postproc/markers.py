"""Keep-marker handling for generated README headers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

KEEP_MARKER = "<!-- anything below this line will be safe from template removal -->"


def split_kept(markdown: Optional[str], marker: str = KEEP_MARKER) -> str:
    """Return everything after the first marker, or an empty string."""
    if not markdown:
        return ""
    _, found, tail = markdown.partition(marker)
    return tail if found else ""


@dataclass
class MarkerManager:
    """Separates the regenerated header from user-owned README content."""

    marker: str = KEEP_MARKER

    def kept_tail(self, markdown: Optional[str]) -> str:
        return split_kept(markdown, self.marker)

    def has_marker(self, markdown: Optional[str]) -> bool:
        return bool(markdown) and self.marker in markdown

    def attach(self, header: str, markdown: Optional[str]) -> str:
        """Append the kept tail of ``markdown`` to a header ending in the marker."""
        return header + self.kept_tail(markdown)


__all__ = ["KEEP_MARKER", "MarkerManager", "split_kept"]
