"""Virtual workspace folder.

Implements the file mutation surface test code uses to simulate external
file activity. Contents live on the real file system under the folder root;
each mutation writes to disk first and then reports the change to every
watcher registered with the owning workspace.
"""

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from hostmock.core.events import EventEmitter
from hostmock.core.models import Uri

if TYPE_CHECKING:
    from .service import WorkspaceService
    from .watcher import FileSystemWatcher

logger = logging.getLogger(__name__)


class WorkspaceFolder:
    """A capability object scoped to one root directory."""

    def __init__(
        self,
        workspace: "WorkspaceService",
        name: str,
        uri: Uri,
        encoding: str = "utf-8",
    ):
        """Initialize a workspace folder.

        Args:
            workspace: Workspace whose watchers receive this folder's events.
                The folder does not own it.
            name: Display name, usually the root directory's basename.
            uri: File URI of the root directory.
            encoding: Text encoding used when writing files.
        """
        self.workspace = workspace
        self.name = name
        self.uri = uri
        self.encoding = encoding

    @property
    def root(self) -> Path:
        return Path(self.uri.fs_path)

    def resolve(self, file: str) -> Path:
        """Absolute path of ``file`` relative to the folder root."""
        return self.root / file

    async def add_file(
        self, file: str, content: str, is_initial_snapshot: bool = False
    ) -> Uri:
        """Create ``file`` (and missing parent directories) with ``content``.

        Args:
            file: Path relative to the folder root.
            content: Text to write.
            is_initial_snapshot: When True no watcher event is fired. Used
                when seeding a workspace so watcher-driven discovery in the
                code under test is not triggered.

        Returns:
            URI of the written file.

        Raises:
            OSError: If the directory or file cannot be written.
        """
        path = self.resolve(file)
        try:
            await asyncio.to_thread(path.parent.mkdir, parents=True, exist_ok=True)
            await asyncio.to_thread(path.write_text, content, encoding=self.encoding)
        except OSError as e:
            logger.error(f"Failed to add file {path}: {e}", exc_info=True)
            raise

        uri = Uri.file(str(path))
        if not is_initial_snapshot:
            self._broadcast(lambda watcher: watcher.did_create, uri)
        return uri

    async def remove_file(self, file: str) -> Uri:
        """Delete ``file`` and report it as deleted.

        Raises:
            FileNotFoundError: If ``file`` does not exist.
            OSError: For any other deletion failure.
        """
        path = self.resolve(file)
        try:
            await asyncio.to_thread(path.unlink)
        except OSError as e:
            logger.error(f"Failed to remove file {path}: {e}", exc_info=True)
            raise

        uri = Uri.file(str(path))
        self._broadcast(lambda watcher: watcher.did_delete, uri)
        return uri

    async def change_file(self, file: str, content: str) -> Uri:
        """Overwrite ``file`` with ``content`` and report it as changed.

        Raises:
            OSError: If the file cannot be written.
        """
        path = self.resolve(file)
        try:
            await asyncio.to_thread(path.write_text, content, encoding=self.encoding)
        except OSError as e:
            logger.error(f"Failed to change file {path}: {e}", exc_info=True)
            raise

        uri = Uri.file(str(path))
        self._broadcast(lambda watcher: watcher.did_change, uri)
        return uri

    def _broadcast(
        self, channel: Callable[["FileSystemWatcher"], EventEmitter[Uri]], uri: Uri
    ) -> None:
        watchers = self.workspace.file_system_watchers
        logger.debug(f"Reporting {uri.fs_path} to {len(watchers)} watcher(s)")
        for watcher in watchers:
            channel(watcher).fire(uri)

    def __repr__(self) -> str:
        return f"WorkspaceFolder(name={self.name!r}, root={self.uri.fs_path!r})"
