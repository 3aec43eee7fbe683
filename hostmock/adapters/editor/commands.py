"""Command and language-feature registration stubs."""

import inspect
import logging
from collections.abc import Callable
from typing import Any

from hostmock.core.events import Disposable
from hostmock.core.ports import CommandsPort, LanguagesPort

logger = logging.getLogger(__name__)


class CommandsService(CommandsPort):
    """Command registry that test code can invoke directly."""

    def __init__(self):
        self.commands: dict[str, Callable[..., Any]] = {}

    def register_command(
        self, command: str, callback: Callable[..., Any]
    ) -> Disposable:
        if command in self.commands:
            raise ValueError(f"Command {command!r} already exists")
        self.commands[command] = callback
        logger.debug(f"Registered command {command!r}")

        def unregister() -> None:
            if self.commands.get(command) is callback:
                del self.commands[command]

        return Disposable(unregister)

    async def execute_command(self, command: str, *args: Any) -> Any:
        try:
            callback = self.commands[command]
        except KeyError:
            raise KeyError(f"Command {command!r} not found") from None
        result = callback(*args)
        if inspect.isawaitable(result):
            result = await result
        return result


class LanguagesService(LanguagesPort):
    """Keeps registered hover providers; never asks them for hovers."""

    def __init__(self):
        self.hover_providers: list[tuple[Any, Any]] = []

    def register_hover_provider(self, selector: Any, provider: Any) -> Disposable:
        entry = (selector, provider)
        self.hover_providers.append(entry)

        def unregister() -> None:
            if entry in self.hover_providers:
                self.hover_providers.remove(entry)

        return Disposable(unregister)
