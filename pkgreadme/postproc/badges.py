"""Badge selection and rendering for generated README headers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ..models import Badge, ManifestInfo


def build_badges(info: ManifestInfo) -> List[Badge]:
    """Return badges for ``info`` in display order."""
    badges: List[Badge] = []
    user, repo = info.github_user, info.repo_name
    if user and repo:
        badges.append(
            Badge(
                label="semantic release",
                image=f"https://github.com/{user}/{repo}/workflows/semantic%20release/badge.svg",
                link=f"https://github.com/{user}/{repo}/actions?query=workflow%3A%22semantic+release%22",
            )
        )
        badges.append(
            Badge(
                label="coverage",
                image=f"https://github.com/{user}/{repo}/workflows/coverage/badge.svg",
                link=f"https://{user}.github.io/{repo}/",
            )
        )
    if info.npm_name:
        badges.append(
            Badge(
                label="npm",
                image=f"https://badge.fury.io/js/{info.npm_name}.svg",
                link=f"https://www.npmjs.com/package/{info.npm_name}",
            )
        )
    return badges


@dataclass
class BadgeManager:
    """Renders the single badge line placed under the README title."""

    separator: str = " "

    def render(self, badges: Sequence[Badge]) -> str:
        return self.separator.join(badge.to_markdown() for badge in badges)

    def line_for(self, info: ManifestInfo) -> str:
        """Return the badge line for ``info``, empty when no badge applies."""
        return self.render(build_badges(info))


__all__ = ["BadgeManager", "build_badges"]
