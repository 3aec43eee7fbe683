"""Test controller: root item, flattened index, run profiles and resolve hook."""

import logging
import re
from collections.abc import Awaitable, Callable, Mapping
from types import MappingProxyType
from typing import Any

from .events import Disposable, EventEmitter, Listener
from .models import TestRunProfile, TestRunProfileKind, Uri
from .test_tree import TestItem

logger = logging.getLogger(__name__)

ResolveHandler = Callable[[TestItem | None], Awaitable[None]]
RunHandler = Callable[..., Awaitable[Any]]

# Base indentation used by render_test_tree snapshots.
TREE_SNAPSHOT_INDENT = "      "
TREE_SNAPSHOT_TRAILER = "    "


class TestController:
    """Owns one test tree and everything the host tracks about it.

    There is exactly one change channel per controller; every mutation
    anywhere in the tree is reported through it with the mutated parent
    node as payload.
    """

    __test__ = False

    def __init__(self, id: str, label: str):
        self.id = id
        self.label = label
        self._index: dict[str, TestItem] = {}
        self.run_profiles: list[TestRunProfile] = []
        self.resolve_handler: ResolveHandler | None = None
        self._did_change_test_item: EventEmitter[TestItem] = EventEmitter(
            f"{id}.didChangeTestItem"
        )
        self.items = TestItem(self, id, label)

    @property
    def all_test_items(self) -> Mapping[str, TestItem]:
        """Read-only view of the flattened index, in registration order."""
        return MappingProxyType(self._index)

    def on_did_change_test_item(self, listener: Listener[TestItem]) -> Disposable:
        return self._did_change_test_item.subscribe(listener)

    def create_test_item(self, id: str, label: str, uri: Uri | None = None) -> TestItem:
        """Create a detached item bound to this controller."""
        return TestItem(self, id, label, uri)

    def create_run_profile(
        self,
        label: str,
        kind: TestRunProfileKind,
        run_handler: RunHandler,
        is_default: bool | None = None,
    ) -> TestRunProfile:
        """Record a run profile.

        ``run_handler`` is accepted for API compatibility but never invoked;
        only the profile metadata is kept.
        """
        profile = TestRunProfile(label=label, kind=kind, is_default=is_default)
        self.run_profiles.append(profile)
        logger.debug(f"Controller {self.id!r} registered run profile {label!r} ({kind.name})")
        return profile

    async def expand_test_item(self, label: str | re.Pattern[str]) -> None:
        """Expand the first indexed item whose label matches ``label``.

        Items are scanned in index registration order. Only the first match
        is expanded; no match is a no-op.
        """
        pattern = re.compile(label) if isinstance(label, str) else label
        for item in list(self._index.values()):
            if pattern.search(item.label):
                await item.expand()
                return
        logger.debug(f"No test item in {self.id!r} matches {pattern.pattern!r}")

    def render_test_tree(self) -> str:
        """Render the top-level items as an indented snapshot block.

        The block starts with an empty line and ends with a line holding the
        closing indentation, so it can be compared against an indented
        triple-quoted literal.
        """
        lines = [""]
        for item in sorted(self.items, key=lambda child: child.id):
            item._render_into(TREE_SNAPSHOT_INDENT, lines)
        lines.append(TREE_SNAPSHOT_TRAILER)
        return "\n".join(lines)

    def find(self, item_id: str) -> TestItem | None:
        return self._index.get(item_id)

    def dispose(self) -> None:
        self._did_change_test_item.dispose()

    def _register(self, item: TestItem) -> None:
        self._index[item.id] = item
        for child in item:
            self._register(child)

    def _unregister(self, item: TestItem) -> None:
        if self._index.get(item.id) is item:
            del self._index[item.id]
        for child in item:
            self._unregister(child)

    def _notify_changed(self, item: TestItem) -> None:
        logger.debug(f"Test item {item.id!r} changed in controller {self.id!r}")
        self._did_change_test_item.fire(item)

    def __repr__(self) -> str:
        return f"TestController(id={self.id!r}, items={len(self._index)})"


__all__ = ["ResolveHandler", "RunHandler", "TestController"]
