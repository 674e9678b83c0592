import re
from dataclasses import dataclass, field
from typing import List, Optional

from hunkreview.core.schema.diff import ChangeKind, DiffFile, DiffHunk, DiffLine

DEV_NULL = "/dev/null"

_HUNK_HEADER_PATTERN = re.compile(
    r'^@@+ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@+'
)
_GIT_HEADER_PATTERN = re.compile(r'^diff --git "?a/(.+?)"? "?b/(.+?)"?$')


@dataclass
class _HunkBuilder:
    header: str
    old_start: int
    old_count: int
    new_start: int
    new_count: int
    old_remaining: int = 0
    new_remaining: int = 0
    next_old: int = 0
    next_new: int = 0
    changes: List[DiffLine] = field(default_factory=list)

    @property
    def open(self) -> bool:
        return self.old_remaining > 0 or self.new_remaining > 0

    def add(self, line: str) -> None:
        marker = line[:1]
        if marker == "+":
            self.changes.append(
                DiffLine(line, ChangeKind.ADDED, new_line_number=self.next_new)
            )
            self.next_new += 1
            self.new_remaining -= 1
        elif marker == "-":
            self.changes.append(
                DiffLine(line, ChangeKind.DELETED, old_line_number=self.next_old)
            )
            self.next_old += 1
            self.old_remaining -= 1
        else:
            content = line if line else " "
            self.changes.append(
                DiffLine(
                    content,
                    ChangeKind.CONTEXT,
                    old_line_number=self.next_old,
                    new_line_number=self.next_new,
                )
            )
            self.next_old += 1
            self.next_new += 1
            self.old_remaining -= 1
            self.new_remaining -= 1

    def build(self) -> DiffHunk:
        return DiffHunk(
            header=self.header,
            changes=tuple(self.changes),
            old_start=self.old_start,
            old_count=self.old_count,
            new_start=self.new_start,
            new_count=self.new_count,
        )


@dataclass
class _FileBuilder:
    source_path: Optional[str] = None
    target_path: Optional[str] = None
    deleted: bool = False
    hunks: List[_HunkBuilder] = field(default_factory=list)

    def build(self) -> DiffFile:
        return DiffFile(
            source_path=self.source_path,
            target_path=None if self.deleted else self.target_path,
            hunks=tuple(hunk.build() for hunk in self.hunks),
            deleted=self.deleted,
        )


def parse_diff(text: Optional[str]) -> List[DiffFile]:
    """Parse unified diff text into files, hunks and numbered changes.

    Tolerates both ``git diff`` output and bare per-file patches. Input that
    does not look like a diff produces an empty list; this never raises.
    """
    if not text or not text.strip():
        return []

    files: List[_FileBuilder] = []
    current: Optional[_FileBuilder] = None
    hunk: Optional[_HunkBuilder] = None

    for line in text.splitlines():
        if hunk is not None and hunk.open:
            if line.startswith(("+", "-", " ")) or line == "":
                hunk.add(line)
                continue
            if line.startswith("\\"):
                continue
            hunk = None

        git_header = _GIT_HEADER_PATTERN.match(line)
        if git_header:
            current = _FileBuilder(
                source_path=git_header.group(1),
                target_path=git_header.group(2),
            )
            files.append(current)
            hunk = None
            continue

        if line.startswith("deleted file mode"):
            if current is not None:
                current.deleted = True
            continue

        if line.startswith("--- "):
            if current is None or current.hunks:
                current = _FileBuilder()
                files.append(current)
            source = _clean_path(line[4:])
            current.source_path = source
            hunk = None
            continue

        if line.startswith("+++ "):
            if current is None or current.hunks:
                current = _FileBuilder()
                files.append(current)
            target = _clean_path(line[4:])
            current.target_path = target
            if target is None:
                current.deleted = True
            hunk = None
            continue

        header = _HUNK_HEADER_PATTERN.match(line)
        if header:
            if current is None:
                current = _FileBuilder()
                files.append(current)
            hunk = _start_hunk(line, header)
            current.hunks.append(hunk)
            continue

        if line.startswith("\\"):
            continue

        # Lenient: changes past the declared counts still belong to the hunk.
        if hunk is not None and line.startswith(("+", "-", " ")):
            hunk.add(line)

    return [builder.build() for builder in files if builder.hunks or _has_path(builder)]


def _start_hunk(line: str, header: re.Match) -> _HunkBuilder:
    old_start = int(header.group(1))
    old_count = int(header.group(2)) if header.group(2) is not None else 1
    new_start = int(header.group(3))
    new_count = int(header.group(4)) if header.group(4) is not None else 1
    return _HunkBuilder(
        header=line,
        old_start=old_start,
        old_count=old_count,
        new_start=new_start,
        new_count=new_count,
        old_remaining=old_count,
        new_remaining=new_count,
        next_old=old_start,
        next_new=new_start,
    )


def _clean_path(raw: str) -> Optional[str]:
    path = raw.split("\t", 1)[0].strip()
    if path.startswith('"') and path.endswith('"') and len(path) > 1:
        path = path[1:-1]
    if path == DEV_NULL:
        return None
    if path.startswith(("a/", "b/")):
        path = path[2:]
    return path or None


def _has_path(builder: _FileBuilder) -> bool:
    return builder.source_path is not None or builder.target_path is not None
