"""Host API facade.

A ``HostSession`` is what extension code receives in place of the real
editor module. It bundles one instance of every capability group and owns
the per-session registries (controllers, watchers, workspace folders), so
several isolated sessions can coexist in one process.
"""

import asyncio
import logging
import shutil
from collections.abc import Mapping, Sequence
from pathlib import Path

from hostmock.adapters.editor import (
    CommandsService,
    DebugService,
    LanguagesService,
    WindowService,
)
from hostmock.adapters.workspace import (
    FileSystemWatcher,
    WorkspaceFolder,
    WorkspaceService,
)
from hostmock.core import (
    Disposable,
    EventEmitter,
    Location,
    Position,
    Range,
    TestRunProfileKind,
    Uri,
)
from hostmock.core.controller import TestController
from hostmock.core.tests_service import TestsService

logger = logging.getLogger(__name__)


class HostSession:
    """One simulated editor process.

    Lifecycle: created by ``hostmock.main.bootstrap`` (or
    ``session_scope``), used by a single test run, then closed. Closing
    disposes every event channel the session owns and, when the session
    created its own temporary workspace root, deletes it.
    """

    # Value constructors exposed the way the host API module exposes them.
    Disposable = Disposable
    EventEmitter = EventEmitter
    Location = Location
    Position = Position
    Range = Range
    TestRunProfileKind = TestRunProfileKind
    Uri = Uri

    def __init__(
        self,
        workspace_root: Path,
        tests: TestsService,
        workspace: WorkspaceService,
        window: WindowService,
        debug: DebugService,
        commands: CommandsService,
        languages: LanguagesService,
        owns_workspace_root: bool = False,
    ):
        self.workspace_root = workspace_root
        self.tests = tests
        self.workspace = workspace
        self.window = window
        self.debug = debug
        self.commands = commands
        self.languages = languages
        self._owns_workspace_root = owns_workspace_root
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def test_controllers(self) -> Sequence[TestController]:
        return self.tests.test_controllers

    @property
    def fs_watchers(self) -> Sequence[FileSystemWatcher]:
        return self.workspace.file_system_watchers

    async def add_workspace_folder(
        self, root_folder: str | Path, files: Mapping[str, str] | None = None
    ) -> WorkspaceFolder:
        """Create and register a workspace folder.

        Relative roots are placed under the session's workspace root.
        Seed ``files`` are written without watcher events; one
        workspace-folders change event follows.

        Raises:
            RuntimeError: If the session is closed.
            OSError: If the folder or a seed file cannot be written.
        """
        self._ensure_open()
        root = Path(root_folder)
        if not root.is_absolute():
            root = self.workspace_root / root
        return await self.workspace.add_workspace_folder(root, files)

    async def close(self) -> None:
        """Dispose all channels and release the temporary workspace root."""
        if self._closed:
            return
        self._closed = True
        self.tests.dispose()
        self.workspace.dispose()
        self.window.dispose()
        self.debug.dispose()

        if self._owns_workspace_root:
            try:
                await asyncio.to_thread(shutil.rmtree, self.workspace_root)
            except OSError as e:
                logger.error(
                    f"Failed to remove workspace root {self.workspace_root}: {e}",
                    exc_info=True,
                )
                raise
        logger.info("Host session closed")

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("Host session is closed")
