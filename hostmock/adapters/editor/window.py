"""Window capability stub.

Nothing is rendered. Decoration types and warning messages are recorded so
tests can assert on them, and the editor notifications can be fired from
test code to simulate user activity.
"""

import logging
from typing import Any

from hostmock.core.events import Disposable, EventEmitter, Listener
from hostmock.core.models import TextEditorDecorationType
from hostmock.core.ports import WindowPort

logger = logging.getLogger(__name__)


class WindowService(WindowPort):
    """Records window API usage for one session."""

    def __init__(self):
        self.decoration_types: list[TextEditorDecorationType] = []
        self.warning_messages: list[str] = []
        # Answers handed out by show_warning_message, first in first out.
        self.warning_responses: list[str | None] = []
        self._did_change_active_text_editor: EventEmitter[Any] = EventEmitter(
            "window.didChangeActiveTextEditor"
        )
        self._did_change_text_editor_selection: EventEmitter[Any] = EventEmitter(
            "window.didChangeTextEditorSelection"
        )

    def on_did_change_active_text_editor(self, listener: Listener[Any]) -> Disposable:
        return self._did_change_active_text_editor.subscribe(listener)

    def on_did_change_text_editor_selection(self, listener: Listener[Any]) -> Disposable:
        return self._did_change_text_editor_selection.subscribe(listener)

    def create_text_editor_decoration_type(
        self, options: dict[str, Any]
    ) -> TextEditorDecorationType:
        decoration = TextEditorDecorationType(
            key=f"decoration-{len(self.decoration_types) + 1}",
            options=dict(options),
        )
        self.decoration_types.append(decoration)
        return decoration

    async def show_warning_message(self, message: str, *items: str) -> str | None:
        self.warning_messages.append(message)
        logger.warning(f"Extension warning: {message}")
        if not self.warning_responses:
            return None
        response = self.warning_responses.pop(0)
        if response is not None and response not in items:
            raise ValueError(
                f"Scripted response {response!r} is not one of the offered items {items}"
            )
        return response

    def fire_did_change_active_text_editor(self, editor: Any) -> None:
        self._did_change_active_text_editor.fire(editor)

    def fire_did_change_text_editor_selection(self, event: Any) -> None:
        self._did_change_text_editor_selection.fire(event)

    def dispose(self) -> None:
        self._did_change_active_text_editor.dispose()
        self._did_change_text_editor_selection.dispose()
