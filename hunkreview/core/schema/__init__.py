from hunkreview.core.schema.diff import ChangeKind, DiffFile, DiffHunk, DiffLine
from hunkreview.core.schema.host import ComparedFile
from hunkreview.core.schema.review import ReviewComment, ReviewSuggestion
from hunkreview.core.schema.revision import (
    Opened,
    OtherEvent,
    RevisionContext,
    Synchronized,
    TriggerEvent,
)

__all__ = [
    "RevisionContext",
    "TriggerEvent",
    "Opened",
    "Synchronized",
    "OtherEvent",
    "ChangeKind",
    "DiffLine",
    "DiffHunk",
    "DiffFile",
    "ComparedFile",
    "ReviewSuggestion",
    "ReviewComment",
]
