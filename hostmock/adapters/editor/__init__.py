"""In-memory stubs for the window, debug, commands and languages APIs."""

from .commands import CommandsService, LanguagesService
from .debug import DebugService
from .window import WindowService

__all__ = ["CommandsService", "DebugService", "LanguagesService", "WindowService"]
