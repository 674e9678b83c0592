from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional, Tuple


class ChangeKind(Enum):
    ADDED = "add"
    DELETED = "del"
    CONTEXT = "normal"


@dataclass(frozen=True, slots=True)
class DiffLine:
    content: str
    kind: ChangeKind
    old_line_number: Optional[int] = None
    new_line_number: Optional[int] = None

    @property
    def line_number(self) -> Optional[int]:
        if self.new_line_number is not None:
            return self.new_line_number
        return self.old_line_number


@dataclass(frozen=True, slots=True)
class DiffHunk:
    header: str
    changes: Tuple[DiffLine, ...]
    old_start: int = 0
    old_count: int = 0
    new_start: int = 0
    new_count: int = 0

    @property
    def line_numbers(self) -> FrozenSet[int]:
        return frozenset(
            change.line_number
            for change in self.changes
            if change.line_number is not None
        )


@dataclass(frozen=True, slots=True)
class DiffFile:
    source_path: Optional[str]
    target_path: Optional[str]
    hunks: Tuple[DiffHunk, ...] = field(default_factory=tuple)
    deleted: bool = False

    @property
    def path(self) -> Optional[str]:
        return self.target_path or self.source_path
