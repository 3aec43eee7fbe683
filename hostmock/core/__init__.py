"""Core domain logic for the simulated host API.

This package contains zero external dependencies: value types, event
channels, the test item tree and test controllers. Everything that touches
the file system lives in the adapters package.
"""

from .controller import TestController
from .events import Disposable, EventEmitter
from .models import (
    Location,
    Position,
    Range,
    TestRunProfile,
    TestRunProfileKind,
    TextEditorDecorationType,
    Uri,
    WorkspaceFoldersChangeEvent,
)
from .test_tree import TestItem

__all__ = [
    "Disposable",
    "EventEmitter",
    "Location",
    "Position",
    "Range",
    "TestController",
    "TestItem",
    "TestRunProfile",
    "TestRunProfileKind",
    "TextEditorDecorationType",
    "Uri",
    "WorkspaceFoldersChangeEvent",
]
