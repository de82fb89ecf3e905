"""Generate and refresh README files from package.json manifests."""

__version__ = "0.1.0"
