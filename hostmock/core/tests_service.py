"""Test controller registry.

Implements TestsPort: creates controllers and keeps them in creation
order so harness code can reach the controllers an extension registered.
"""

import logging
from collections.abc import Sequence

from .controller import TestController
from .ports import TestsPort

logger = logging.getLogger(__name__)


class TestsService(TestsPort):
    """In-memory registry of test controllers for one session."""

    __test__ = False

    def __init__(self):
        self._controllers: list[TestController] = []

    def create_test_controller(self, id: str, label: str) -> TestController:
        controller = TestController(id, label)
        self._controllers.append(controller)
        logger.info(f"Created test controller {id!r} ({label})")
        return controller

    @property
    def test_controllers(self) -> Sequence[TestController]:
        return tuple(self._controllers)

    def get_controller(self, id: str) -> TestController | None:
        """Return the first controller created with ``id``, if any."""
        for controller in self._controllers:
            if controller.id == id:
                return controller
        return None

    def dispose(self) -> None:
        for controller in self._controllers:
            controller.dispose()
