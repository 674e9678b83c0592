from abc import ABC, abstractmethod
from typing import Optional

from hunkreview.core.ports.host import PullRequestHost
from hunkreview.core.schema.revision import RevisionContext


class BaseDiffStrategy(ABC):
    def __init__(self, host: PullRequestHost) -> None:
        self._host = host

    @abstractmethod
    def fetch(self, context: RevisionContext) -> Optional[str]:
        """Return diff text for the revision; host errors propagate."""
        ...
