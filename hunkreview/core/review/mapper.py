from typing import List, Optional, Sequence

from hunkreview.core.ports.logger import Logger
from hunkreview.core.schema.diff import DiffFile, DiffHunk
from hunkreview.core.schema.review import ReviewComment, ReviewSuggestion


class CommentMapper:
    """Turns model suggestions into comments addressed to a file and line.

    Permissive by default: every suggestion is forwarded, even when its line
    is not numeric or lies outside the hunk. ``strict_lines`` drops those.
    """

    def __init__(self, logger: Logger, *, strict_lines: bool = False) -> None:
        self._logger = logger
        self._strict_lines = strict_lines

    def map(
        self,
        file: DiffFile,
        hunk: DiffHunk,
        suggestions: Sequence[ReviewSuggestion],
    ) -> List[ReviewComment]:
        path = file.path
        if path is None:
            return []

        comments: List[ReviewComment] = []
        for suggestion in suggestions:
            line = coerce_line_number(suggestion.line_number)
            if self._strict_lines and (line is None or line not in hunk.line_numbers):
                self._logger.warning(
                    "Dropping suggestion outside of hunk",
                    path=path,
                    hunk=hunk.header,
                    line_number=suggestion.line_number,
                )
                continue
            comments.append(
                ReviewComment(
                    body=suggestion.review_comment,
                    path=path,
                    line=line,
                )
            )
        return comments


def coerce_line_number(value: str) -> Optional[int]:
    text = value.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    if number.is_integer():
        return int(number)
    return None
