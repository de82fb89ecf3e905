"""Core data models shared across pkgreadme components."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RepositoryRef:
    """GitHub coordinates parsed from a manifest repository URL."""

    github_user: Optional[str] = None
    repo_name: Optional[str] = None
    url_match: Optional[str] = None


@dataclass(frozen=True)
class ManifestInfo:
    """Read-only README metadata derived from a package manifest."""

    npm_name: Optional[str] = None
    description: Optional[str] = None
    github_user: Optional[str] = None
    repo_name: Optional[str] = None
    is_scoped: bool = False
    npx_executable: Optional[str] = None
    global_executable: Optional[str] = None
    usage_template: Optional[str] = None

    @property
    def heading(self) -> Optional[str]:
        return self.repo_name or self.npm_name or None

    def usage(self, command: str) -> str:
        """Substitute ``command`` for the first ``CMD`` in the usage template.

        Without a template, or with an empty command, the command is returned
        unchanged.
        """
        if command and self.usage_template:
            return self.usage_template.replace("CMD", command, 1)
        return command


@dataclass(frozen=True)
class Badge:
    """Markdown image link rendered in the README badge line."""

    label: str
    image: str
    link: str

    def to_markdown(self) -> str:
        return f"[![{self.label}]({self.image})]({self.link})"
