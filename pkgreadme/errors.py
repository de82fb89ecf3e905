"""Exception hierarchy for pkgreadme."""

from __future__ import annotations


class PkgReadmeError(RuntimeError):
    """Base class for errors reported by the pkgreadme CLI."""


class ConfigError(PkgReadmeError):
    """Raised when .pkgreadme.yml cannot be parsed."""


class ManifestError(PkgReadmeError):
    """Raised when the package manifest cannot be loaded."""


class ManifestNotFoundError(ManifestError):
    """Raised when no manifest exists at the expected path."""


class ManifestParseError(ManifestError):
    """Raised when the manifest exists but is not a JSON object."""


__all__ = [
    "ConfigError",
    "ManifestError",
    "ManifestNotFoundError",
    "ManifestParseError",
    "PkgReadmeError",
]
