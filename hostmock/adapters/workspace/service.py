"""Workspace capability adapter.

Implements WorkspacePort on top of the real file system: workspace folders
are directories on disk, file search is a wcmatch glob, and watchers are
fed by the folders' mutation methods rather than by OS notifications.
"""

import asyncio
import logging
import os
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from wcmatch import glob as wcglob

from hostmock.core.events import Disposable, EventEmitter, Listener
from hostmock.core.models import Uri, WorkspaceFoldersChangeEvent
from hostmock.core.ports import WorkspacePort

from .folder import WorkspaceFolder
from .watcher import FileSystemWatcher

logger = logging.getLogger(__name__)

# Dot-paths are skipped unless a pattern names them explicitly.
GLOB_FLAGS = wcglob.GLOBSTAR | wcglob.BRACE | wcglob.NODIR


class WorkspaceService(WorkspacePort):
    """Workspace folders and watchers for one session.

    Both lists are append-only: folders cannot be removed and watchers stay
    registered until the session is closed.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding
        self._folders: list[WorkspaceFolder] = []
        self._watchers: list[FileSystemWatcher] = []
        self._did_change_workspace_folders: EventEmitter[WorkspaceFoldersChangeEvent] = (
            EventEmitter("workspace.didChangeWorkspaceFolders")
        )
        self._did_change_text_document: EventEmitter[Any] = EventEmitter(
            "workspace.didChangeTextDocument"
        )

    @property
    def workspace_folders(self) -> Sequence[WorkspaceFolder]:
        return tuple(self._folders)

    @property
    def file_system_watchers(self) -> Sequence[FileSystemWatcher]:
        return tuple(self._watchers)

    async def add_workspace_folder(
        self, root_folder: str | Path, files: Mapping[str, str] | None = None
    ) -> WorkspaceFolder:
        """Register ``root_folder`` as a workspace folder and seed it.

        The directory is created if missing. Seed files are written as an
        initial snapshot (no watcher events); a single workspace-folders
        change event is fired once seeding is done.

        Args:
            root_folder: Absolute path of the folder root.
            files: Optional mapping of relative path to file content.

        Returns:
            The registered folder.

        Raises:
            OSError: If the root or a seed file cannot be written.
        """
        root = Path(root_folder)
        folder = WorkspaceFolder(
            self, root.name, Uri.file(str(root)), encoding=self.encoding
        )
        try:
            await asyncio.to_thread(root.mkdir, parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Failed to create workspace folder {root}: {e}", exc_info=True)
            raise
        self._folders.append(folder)

        for file, content in (files or {}).items():
            await folder.add_file(file, content, is_initial_snapshot=True)

        logger.info(
            f"Added workspace folder {folder.name!r} at {root} "
            f"with {len(files or {})} seed file(s)"
        )
        self._did_change_workspace_folders.fire(
            WorkspaceFoldersChangeEvent(added=(folder,))
        )
        return folder

    def create_file_system_watcher(
        self, glob_pattern: str | None = None
    ) -> FileSystemWatcher:
        watcher = FileSystemWatcher(glob_pattern)
        self._watchers.append(watcher)
        logger.debug(f"Registered file system watcher #{len(self._watchers)}")
        return watcher

    async def find_files(
        self,
        include: str,
        exclude: str | Sequence[str] | None = None,
        max_results: int | None = None,
    ) -> list[Uri]:
        uris: list[Uri] = []
        for folder in self._folders:
            matches = await asyncio.to_thread(
                _glob_files, folder.root, include, exclude
            )
            uris.extend(Uri.file(str(path)) for path in matches)
        if max_results is not None:
            return uris[:max_results]
        return uris

    def get_workspace_folder(self, uri: Uri) -> WorkspaceFolder | None:
        # Plain string prefix: /a/b also claims /a/bc/d.
        for folder in self._folders:
            if uri.fs_path.startswith(folder.uri.fs_path):
                return folder
        return None

    def as_relative_path(self, uri: Uri) -> str:
        """Path of ``uri`` relative to its workspace folder, or unchanged."""
        folder = self.get_workspace_folder(uri)
        if folder is None:
            return uri.fs_path
        return os.path.relpath(uri.fs_path, folder.uri.fs_path)

    def on_did_change_workspace_folders(
        self, listener: Listener[WorkspaceFoldersChangeEvent]
    ) -> Disposable:
        return self._did_change_workspace_folders.subscribe(listener)

    def on_did_change_text_document(self, listener: Listener[Any]) -> Disposable:
        return self._did_change_text_document.subscribe(listener)

    def fire_did_change_text_document(self, event: Any) -> None:
        """Simulate the host reporting an edit to an open document."""
        self._did_change_text_document.fire(event)

    def dispose(self) -> None:
        self._did_change_workspace_folders.dispose()
        self._did_change_text_document.dispose()
        for watcher in self._watchers:
            watcher.dispose()


def _glob_files(
    root: Path, include: str, exclude: str | Sequence[str] | None
) -> list[Path]:
    matches = wcglob.glob(
        include, flags=GLOB_FLAGS, root_dir=str(root), exclude=exclude
    )
    return sorted(path for path in (root / match for match in matches) if path.is_file())
