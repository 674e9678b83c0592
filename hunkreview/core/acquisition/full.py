from typing import Optional

from hunkreview.core.acquisition.base import BaseDiffStrategy
from hunkreview.core.schema.revision import RevisionContext


class FullDiffStrategy(BaseDiffStrategy):
    def fetch(self, context: RevisionContext) -> Optional[str]:
        return self._host.get_pull_request_diff(
            context.owner,
            context.repo,
            context.pull_number,
        )
