"""Storage backends for manifests and README documents."""

from .document_store import DocumentStore, FileSystemStore

__all__ = ["DocumentStore", "FileSystemStore"]
