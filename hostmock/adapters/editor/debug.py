"""Debug capability stub."""

import logging
from typing import Any

from hostmock.core.events import Disposable, EventEmitter, Listener
from hostmock.core.ports import DebugPort

logger = logging.getLogger(__name__)


class DebugService(DebugPort):
    """Records tracker factories and relays simulated session events.

    No debugger runs; test code calls ``fire_did_start_debug_session`` and
    ``fire_did_terminate_debug_session`` to play one.
    """

    def __init__(self):
        self.tracker_factories: dict[str, list[Any]] = {}
        self._did_start_debug_session: EventEmitter[Any] = EventEmitter(
            "debug.didStartDebugSession"
        )
        self._did_terminate_debug_session: EventEmitter[Any] = EventEmitter(
            "debug.didTerminateDebugSession"
        )

    def on_did_start_debug_session(self, listener: Listener[Any]) -> Disposable:
        return self._did_start_debug_session.subscribe(listener)

    def on_did_terminate_debug_session(self, listener: Listener[Any]) -> Disposable:
        return self._did_terminate_debug_session.subscribe(listener)

    def register_debug_adapter_tracker_factory(
        self, debug_type: str, factory: Any
    ) -> Disposable:
        factories = self.tracker_factories.setdefault(debug_type, [])
        factories.append(factory)
        logger.debug(f"Registered debug adapter tracker factory for {debug_type!r}")

        def unregister() -> None:
            if factory in factories:
                factories.remove(factory)

        return Disposable(unregister)

    def fire_did_start_debug_session(self, session: Any) -> None:
        self._did_start_debug_session.fire(session)

    def fire_did_terminate_debug_session(self, session: Any) -> None:
        self._did_terminate_debug_session.fire(session)

    def dispose(self) -> None:
        self._did_start_debug_session.dispose()
        self._did_terminate_debug_session.dispose()
