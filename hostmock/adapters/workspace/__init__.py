"""Workspace adapters backed by the real file system."""

from .folder import WorkspaceFolder
from .service import WorkspaceService
from .watcher import FileSystemWatcher

__all__ = ["FileSystemWatcher", "WorkspaceFolder", "WorkspaceService"]
