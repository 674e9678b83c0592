from typing import List, Optional

from hunkreview.core.acquisition.base import BaseDiffStrategy
from hunkreview.core.diff import DEV_NULL
from hunkreview.core.ports.host import PullRequestHost
from hunkreview.core.schema.host import ComparedFile
from hunkreview.core.schema.revision import RevisionContext

STATUS_ADDED = "added"
STATUS_REMOVED = "removed"


class IncrementalDiffStrategy(BaseDiffStrategy):
    """Rebuilds a diff from the per-file patches of a revision comparison.

    The comparison API returns bare hunks, so each fragment gets ``---``/``+++``
    lines naming its file. Files without a patch (binary, too large) are
    dropped.
    """

    def __init__(self, host: PullRequestHost, before: str, after: str) -> None:
        super().__init__(host)
        self._before = before
        self._after = after

    def fetch(self, context: RevisionContext) -> Optional[str]:
        files = self._host.compare_revisions(
            context.owner,
            context.repo,
            base=self._before,
            head=self._after,
        )
        fragments: List[str] = [
            _with_file_header(compared) for compared in files if compared.patch
        ]
        return "\n".join(fragments)


def _with_file_header(compared: ComparedFile) -> str:
    source = compared.previous_filename or compared.filename
    old = DEV_NULL if compared.status == STATUS_ADDED else f"a/{source}"
    new = DEV_NULL if compared.status == STATUS_REMOVED else f"b/{compared.filename}"
    return f"--- {old}\n+++ {new}\n{compared.patch}"
