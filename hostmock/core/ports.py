"""Port interfaces for the simulated host API.

These abstract base classes define the capability groups that extension
code sees. Each group is a small explicit interface instead of a loose
namespace of optional functions. Implementations live in the core (pure
in-memory logic) or in the adapters/ package (anything touching the file
system).

Capability Groups:

- TestsPort: Test controller registration
- WorkspacePort: Workspace folders, file search, file-system watchers
- WindowPort: Editor window notifications and UI stubs
- DebugPort: Debug session notifications
- CommandsPort: Command registration
- LanguagesPort: Language feature provider registration
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from .controller import TestController
from .events import Disposable, Listener
from .models import TextEditorDecorationType, Uri, WorkspaceFoldersChangeEvent

if TYPE_CHECKING:
    from hostmock.adapters.workspace.folder import WorkspaceFolder
    from hostmock.adapters.workspace.watcher import FileSystemWatcher


class TestsPort(ABC):
    """Port for registering test controllers."""

    __test__ = False

    @abstractmethod
    def create_test_controller(self, id: str, label: str) -> TestController:
        """Create a controller and register it with the session.

        Args:
            id: Controller identity; also the root item's id.
            label: Human-readable label; also the root item's label.

        Returns:
            The new controller, with an empty root item.
        """

    @property
    @abstractmethod
    def test_controllers(self) -> Sequence[TestController]:
        """All controllers created so far, in creation order."""


class WorkspacePort(ABC):
    """Port for workspace folders and file activity.

    Implementations must broadcast every file mutation made through a
    workspace folder to every registered watcher, without filtering.
    """

    @property
    @abstractmethod
    def workspace_folders(self) -> Sequence["WorkspaceFolder"]:
        """Registered workspace folders, in registration order."""

    @abstractmethod
    def create_file_system_watcher(
        self, glob_pattern: str | None = None
    ) -> "FileSystemWatcher":
        """Create and register a watcher.

        Args:
            glob_pattern: Recorded on the watcher but not used for
                filtering.

        Returns:
            A watcher that stays registered for the session's lifetime.
        """

    @abstractmethod
    async def find_files(
        self,
        include: str,
        exclude: str | Sequence[str] | None = None,
        max_results: int | None = None,
    ) -> list[Uri]:
        """Glob ``include`` under every workspace folder.

        Patterns support ``**`` and ``{a,b}`` alternatives. Dot-files and
        dot-directories are only matched when the pattern names them.

        Args:
            include: Glob relative to each folder root.
            exclude: Glob(s) whose matches are dropped from the result.
            max_results: Cap on the number of URIs returned.

        Returns:
            File URIs grouped per folder in registration order; sorted
            within a folder. Empty list if there are no folders.

        Raises:
            OSError: If a folder root cannot be read.
        """

    @abstractmethod
    def get_workspace_folder(self, uri: Uri) -> "WorkspaceFolder | None":
        """Return the first folder whose root path is a string prefix of
        ``uri.fs_path``, or None.
        """

    @abstractmethod
    def on_did_change_workspace_folders(
        self, listener: Listener[WorkspaceFoldersChangeEvent]
    ) -> Disposable:
        """Subscribe to workspace folder additions."""

    @abstractmethod
    def on_did_change_text_document(self, listener: Listener[Any]) -> Disposable:
        """Subscribe to text document changes."""


class WindowPort(ABC):
    """Port for editor window notifications and UI entry points."""

    @abstractmethod
    def on_did_change_active_text_editor(self, listener: Listener[Any]) -> Disposable:
        """Subscribe to active editor changes."""

    @abstractmethod
    def on_did_change_text_editor_selection(self, listener: Listener[Any]) -> Disposable:
        """Subscribe to selection changes."""

    @abstractmethod
    def create_text_editor_decoration_type(
        self, options: dict[str, Any]
    ) -> TextEditorDecorationType:
        """Register a decoration type and return its handle."""

    @abstractmethod
    async def show_warning_message(self, message: str, *items: str) -> str | None:
        """Show a warning. Returns the chosen item, or None if dismissed."""


class DebugPort(ABC):
    """Port for debug session notifications."""

    @abstractmethod
    def on_did_start_debug_session(self, listener: Listener[Any]) -> Disposable:
        """Subscribe to debug session starts."""

    @abstractmethod
    def on_did_terminate_debug_session(self, listener: Listener[Any]) -> Disposable:
        """Subscribe to debug session terminations."""

    @abstractmethod
    def register_debug_adapter_tracker_factory(
        self, debug_type: str, factory: Any
    ) -> Disposable:
        """Register a tracker factory for ``debug_type``."""


class CommandsPort(ABC):
    """Port for command registration."""

    @abstractmethod
    def register_command(
        self, command: str, callback: Callable[..., Any]
    ) -> Disposable:
        """Register ``callback`` under ``command``.

        Raises:
            ValueError: If ``command`` is already registered.
        """

    @abstractmethod
    async def execute_command(self, command: str, *args: Any) -> Any:
        """Invoke a registered command and return its result.

        Raises:
            KeyError: If ``command`` is not registered.
        """


class LanguagesPort(ABC):
    """Port for language feature providers."""

    @abstractmethod
    def register_hover_provider(self, selector: Any, provider: Any) -> Disposable:
        """Register a hover provider for documents matching ``selector``."""
