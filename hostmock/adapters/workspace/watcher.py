"""File-system watcher event source."""

from hostmock.core.events import Disposable, EventEmitter, Listener
from hostmock.core.models import Uri


class FileSystemWatcher:
    """Three independent channels fed by workspace folder operations.

    A watcher does no path filtering: every mutation made through any
    workspace folder is reported to every registered watcher. The glob
    pattern it was created with is kept only for inspection.
    """

    def __init__(self, glob_pattern: str | None = None):
        self.glob_pattern = glob_pattern
        self.did_create: EventEmitter[Uri] = EventEmitter("watcher.didCreate")
        self.did_change: EventEmitter[Uri] = EventEmitter("watcher.didChange")
        self.did_delete: EventEmitter[Uri] = EventEmitter("watcher.didDelete")

    def on_did_create(self, listener: Listener[Uri]) -> Disposable:
        return self.did_create.subscribe(listener)

    def on_did_change(self, listener: Listener[Uri]) -> Disposable:
        return self.did_change.subscribe(listener)

    def on_did_delete(self, listener: Listener[Uri]) -> Disposable:
        return self.did_delete.subscribe(listener)

    def dispose(self) -> None:
        self.did_create.dispose()
        self.did_change.dispose()
        self.did_delete.dispose()
