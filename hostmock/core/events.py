"""Typed publish/subscribe channels.

Every event source in the simulated host (test controllers, file-system
watchers, workspace and window notifications) is an ``EventEmitter``
parameterized by its payload type.

Delivery rules:
- ``fire`` calls listeners synchronously, in subscription order.
- The listener list is snapshotted when a fire starts. Listeners subscribed
  during a fire are not called by that fire; listeners disposed during a
  fire are skipped if their turn has not come yet.
- Events fired while nobody is subscribed are dropped.
- A listener exception propagates out of ``fire``; later listeners are not
  called for that payload.
"""

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[[T], object]


class Disposable:
    """Handle that releases a registration when disposed.

    Disposing more than once is harmless.
    """

    def __init__(self, on_dispose: Callable[[], None] | None = None):
        self._on_dispose = on_dispose
        self.disposed = False

    def dispose(self) -> None:
        if self.disposed:
            return
        self.disposed = True
        if self._on_dispose is not None:
            self._on_dispose()
            self._on_dispose = None

    def __enter__(self) -> "Disposable":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()


class _Subscription(Generic[T]):
    __slots__ = ("listener", "active")

    def __init__(self, listener: Listener[T]):
        self.listener = listener
        self.active = True


class EventEmitter(Generic[T]):
    """A single event channel carrying payloads of type ``T``."""

    def __init__(self, name: str | None = None):
        self.name = name
        self._subscriptions: list[_Subscription[T]] = []
        self._disposed = False

    def subscribe(self, listener: Listener[T]) -> Disposable:
        """Register ``listener`` and return the handle that removes it."""
        if self._disposed:
            return Disposable()

        subscription = _Subscription(listener)
        self._subscriptions.append(subscription)

        def remove() -> None:
            subscription.active = False
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)

        return Disposable(remove)

    @property
    def event(self) -> Callable[[Listener[T]], Disposable]:
        """The subscribe function handed to extension code (``onDidX``)."""
        return self.subscribe

    def fire(self, payload: T) -> None:
        """Deliver ``payload`` to every current listener."""
        snapshot = list(self._subscriptions)
        if not snapshot:
            logger.debug(f"Dropping event on {self.name or 'emitter'}: no listeners")
            return
        for subscription in snapshot:
            if subscription.active:
                subscription.listener(payload)

    @property
    def listener_count(self) -> int:
        return len(self._subscriptions)

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        """Drop every listener; later subscriptions are inert."""
        for subscription in self._subscriptions:
            subscription.active = False
        self._subscriptions.clear()
        self._disposed = True
