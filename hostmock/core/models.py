"""Value types for the simulated host API.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class Uri:
    """A resource identifier. Only the ``file`` scheme is modelled."""

    fs_path: str
    scheme: str = "file"

    @classmethod
    def file(cls, fs_path: str) -> "Uri":
        """Create a file URI for an absolute file-system path."""
        return cls(fs_path=str(fs_path))

    @property
    def path(self) -> str:
        return self.fs_path

    def __str__(self) -> str:
        return f"{self.scheme}://{self.fs_path}"


@dataclass(frozen=True)
class Position:
    """A zero-based line and character offset in a document."""

    line: int
    character: int

    def __post_init__(self) -> None:
        """Validate position invariants on creation."""
        if self.line < 0:
            raise ValueError(f"line must be non-negative, got {self.line}")
        if self.character < 0:
            raise ValueError(
                f"character must be non-negative, got {self.character}"
            )

    def is_before(self, other: "Position") -> bool:
        return (self.line, self.character) < (other.line, other.character)


@dataclass(frozen=True)
class Range:
    """An ordered pair of positions.

    If ``end`` is before ``start`` the two are swapped, so ``start`` is
    always the earlier position.
    """

    start: Position
    end: Position

    def __post_init__(self) -> None:
        if self.end.is_before(self.start):
            start, end = self.end, self.start
            object.__setattr__(self, "start", start)
            object.__setattr__(self, "end", end)

    @classmethod
    def of(
        cls,
        start_line: int,
        start_character: int,
        end_line: int,
        end_character: int,
    ) -> "Range":
        """Build a range from four coordinates."""
        return cls(
            Position(start_line, start_character),
            Position(end_line, end_character),
        )

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def contains(self, position: Position) -> bool:
        return not position.is_before(self.start) and not self.end.is_before(position)


@dataclass(frozen=True)
class Location:
    """A range inside a resource.

    ``range`` may be given as a ``Position``; it is converted to an empty
    range at that position in __post_init__.
    """

    uri: Uri
    range: Range | Position

    def __post_init__(self) -> None:
        """Collapse a position argument into an empty range."""
        if isinstance(self.range, Position):
            object.__setattr__(self, "range", Range(self.range, self.range))


class TestRunProfileKind(Enum):
    """Kinds of run profile a controller can offer."""

    __test__ = False

    RUN = 1
    DEBUG = 2
    COVERAGE = 3


@dataclass(frozen=True)
class TestRunProfile:
    """Metadata recorded for a registered run profile.

    The run handler itself is not kept; the simulation never executes runs.
    """

    __test__ = False

    label: str
    kind: TestRunProfileKind
    is_default: bool | None = None


@dataclass(frozen=True)
class TextEditorDecorationType:
    """Handle returned when extension code registers a decoration type."""

    key: str
    options: dict[str, Any] | MappingProxyType[str, Any]  # converted to proxy in __post_init__

    def __post_init__(self) -> None:
        """Convert options dict to read-only proxy."""
        if isinstance(self.options, dict):
            object.__setattr__(self, "options", MappingProxyType(self.options))


@dataclass(frozen=True)
class WorkspaceFoldersChangeEvent:
    """Payload of the workspace-folders-changed event."""

    added: tuple[Any, ...] = ()
    removed: tuple[Any, ...] = ()
