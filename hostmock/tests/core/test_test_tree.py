"""Unit tests for TestItem tree mutations and rendering."""

import asyncio

import pytest

from hostmock.core.controller import TestController
from hostmock.core.models import Uri
from hostmock.core.test_tree import TestItem
from hostmock.tests.fakes import RecordingListener


@pytest.fixture
def controller() -> TestController:
    """Create an empty controller."""
    return TestController("root", "Root")


@pytest.fixture
def changes(controller: TestController) -> RecordingListener[TestItem]:
    """Record every change event fired by the controller."""
    listener: RecordingListener[TestItem] = RecordingListener()
    controller.on_did_change_test_item(listener)
    return listener


def make(controller: TestController, *ids: str) -> list[TestItem]:
    return [controller.create_test_item(item_id, item_id) for item_id in ids]


def assert_consistent(node: TestItem) -> None:
    """Parent links and child maps agree for the whole subtree."""
    for child in node:
        assert child.parent is node
        assert node.get(child.id) is child
        assert_consistent(child)


class TestNavigation:
    def test_children_is_the_node_itself(self, controller: TestController) -> None:
        assert controller.items.children is controller.items

    def test_created_item_is_detached(self, controller: TestController) -> None:
        item = controller.create_test_item("a", "A", Uri.file("/a.ts"))

        assert item.parent is None
        assert not item.is_attached
        assert item.uri == Uri.file("/a.ts")
        assert "a" not in controller.all_test_items

    def test_iteration_follows_insertion_order(self, controller: TestController) -> None:
        for item in make(controller, "c", "a", "b"):
            controller.items.add(item)

        assert [item.id for item in controller.items] == ["c", "a", "b"]
        visited: list[str] = []
        controller.items.for_each(lambda item: visited.append(item.id))
        assert visited == ["c", "a", "b"]
        assert controller.items.size == 3
        assert len(controller.items) == 3


class TestAdd:
    def test_add_registers_and_fires_once(
        self, controller: TestController, changes: RecordingListener[TestItem]
    ) -> None:
        (item,) = make(controller, "a")

        controller.items.add(item)

        assert controller.items.get("a") is item
        assert item.parent is controller.items
        assert controller.all_test_items["a"] is item
        assert changes.events == [controller.items]

    def test_add_registers_prebuilt_subtree(
        self, controller: TestController, changes: RecordingListener[TestItem]
    ) -> None:
        suite, test1, test2 = make(controller, "suite", "suite/1", "suite/2")
        suite.add(test1)
        suite.add(test2)
        assert "suite/1" not in controller.all_test_items
        changes.reset()

        controller.items.add(suite)

        assert set(controller.all_test_items) == {"suite", "suite/1", "suite/2"}
        assert changes.events == [controller.items]

    def test_add_under_attached_node_registers_child(self, controller: TestController) -> None:
        suite, test1 = make(controller, "suite", "suite/1")
        controller.items.add(suite)

        suite.add(test1)

        assert controller.all_test_items["suite/1"] is test1
        assert test1.is_attached

    def test_add_same_id_replaces_previous_child(self, controller: TestController) -> None:
        first = controller.create_test_item("a", "first")
        nested = controller.create_test_item("a/x", "x")
        first.add(nested)
        second = controller.create_test_item("a", "second")
        controller.items.add(first)

        controller.items.add(second)

        assert controller.items.get("a") is second
        assert controller.all_test_items["a"] is second
        assert "a/x" not in controller.all_test_items
        assert first.parent is None

    def test_readding_moves_item_without_duplicating(self, controller: TestController) -> None:
        left, right, leaf = make(controller, "left", "right", "leaf")
        controller.items.replace([left, right])
        left.add(leaf)

        right.add(leaf)

        assert "leaf" not in left
        assert right.get("leaf") is leaf
        assert leaf.parent is right
        assert list(controller.all_test_items).count("leaf") == 1
        assert_consistent(controller.items)

    def test_add_rejects_foreign_controller_item(self, controller: TestController) -> None:
        other = TestController("other", "Other")
        foreign = other.create_test_item("x", "x")

        with pytest.raises(ValueError, match="belongs to controller"):
            controller.items.add(foreign)

    def test_add_rejects_cycles(self, controller: TestController) -> None:
        parent, child = make(controller, "p", "c")
        controller.items.add(parent)
        parent.add(child)

        with pytest.raises(ValueError, match="own subtree"):
            child.add(parent)
        with pytest.raises(ValueError, match="own subtree"):
            parent.add(parent)


class TestDelete:
    def test_delete_purges_subtree(
        self, controller: TestController, changes: RecordingListener[TestItem]
    ) -> None:
        suite, test1, test2 = make(controller, "suite", "suite/1", "suite/2")
        controller.items.add(suite)
        suite.add(test1)
        test1.add(test2)
        changes.reset()

        controller.items.delete("suite")

        assert "suite" not in controller.items
        assert controller.all_test_items == {}
        assert suite.parent is None
        assert changes.events == [controller.items]

    def test_add_then_delete_leaves_no_trace(self, controller: TestController) -> None:
        (item,) = make(controller, "a")

        controller.items.add(item)
        controller.items.delete(item.id)

        assert controller.items.get("a") is None
        assert "a" not in controller.all_test_items

    def test_delete_unknown_id_is_noop(
        self, controller: TestController, changes: RecordingListener[TestItem]
    ) -> None:
        controller.items.delete("missing")

        assert len(controller.items) == 0
        assert changes.call_count == 1


class TestReplace:
    def test_replace_swaps_children_with_one_event(
        self, controller: TestController, changes: RecordingListener[TestItem]
    ) -> None:
        controller.items.replace(make(controller, "a", "b"))
        changes.reset()

        controller.items.replace(make(controller, "c"))

        assert [item.id for item in controller.items] == ["c"]
        assert set(controller.all_test_items) == {"c"}
        assert changes.call_count == 1

    def test_replace_with_empty_clears(self, controller: TestController) -> None:
        controller.items.replace(make(controller, "a", "b"))

        controller.items.replace([])

        assert len(controller.items) == 0
        assert controller.all_test_items == {}

    def test_replace_duplicate_ids_last_wins(self, controller: TestController) -> None:
        first = controller.create_test_item("a", "first")
        second = controller.create_test_item("a", "second")

        controller.items.replace([first, second])

        assert controller.items.get("a") is second
        assert len(controller.items) == 1

    def test_replace_keeps_surviving_children(self, controller: TestController) -> None:
        a, b = make(controller, "a", "b")
        nested = controller.create_test_item("a/x", "x")
        a.add(nested)
        controller.items.replace([a, b])

        controller.items.replace([a])

        assert controller.items.get("a") is a
        assert controller.all_test_items["a/x"] is nested
        assert "b" not in controller.all_test_items
        assert b.parent is None

    def test_rejected_replace_leaves_tree_untouched(
        self, controller: TestController, changes: RecordingListener[TestItem]
    ) -> None:
        controller.items.replace(make(controller, "a"))
        changes.reset()
        foreign = TestController("other", "Other").create_test_item("x", "x")

        with pytest.raises(ValueError):
            controller.items.replace(make(controller, "b") + [foreign])

        assert [item.id for item in controller.items] == ["a"]
        assert set(controller.all_test_items) == {"a"}
        assert changes.call_count == 0

    def test_listener_sees_fully_new_state(self, controller: TestController) -> None:
        controller.items.replace(make(controller, "a", "b"))
        snapshots: list[list[str]] = []
        controller.on_did_change_test_item(
            lambda node: snapshots.append(sorted(controller.all_test_items))
        )

        controller.items.replace(make(controller, "c", "d"))

        assert snapshots == [["c", "d"]]


class TestExpand:
    @pytest.mark.asyncio
    async def test_expand_without_handler_is_noop(self, controller: TestController) -> None:
        await controller.items.expand()

        assert len(controller.items) == 0

    @pytest.mark.asyncio
    async def test_expand_passes_the_node(self, controller: TestController) -> None:
        seen: list[TestItem | None] = []

        async def handler(item: TestItem | None) -> None:
            seen.append(item)

        controller.resolve_handler = handler
        await controller.items.expand()

        assert seen == [controller.items]

    @pytest.mark.asyncio
    async def test_overlapping_expands_run_handler_twice(
        self, controller: TestController
    ) -> None:
        calls: list[str] = []

        async def handler(item: TestItem | None) -> None:
            calls.append("start")
            await asyncio.sleep(0)
            calls.append("end")

        controller.resolve_handler = handler
        await asyncio.gather(controller.items.expand(), controller.items.expand())

        assert calls.count("start") == 2


class TestRendering:
    def test_render_sorts_siblings_by_id(self, controller: TestController) -> None:
        suite = controller.create_test_item("s", "suite")
        suite.replace(
            [
                controller.create_test_item("s/2", "second"),
                controller.create_test_item("s/1", "first"),
            ]
        )
        controller.items.replace([controller.create_test_item("z", "zed"), suite])

        assert str(controller.items) == (
            "- Root\n"
            "  - suite\n"
            "    - first\n"
            "    - second\n"
            "  - zed"
        )

    def test_render_independent_of_insertion_order(self) -> None:
        def build(order: list[str]) -> str:
            controller = TestController("r", "R")
            for item_id in order:
                controller.items.add(controller.create_test_item(item_id, item_id.upper()))
            return str(controller.items)

        assert build(["a", "b", "c"]) == build(["c", "a", "b"])

    def test_render_with_base_indent(self, controller: TestController) -> None:
        controller.items.add(controller.create_test_item("a", "a"))

        assert controller.items.render("> ") == "> - Root\n>   - a"
