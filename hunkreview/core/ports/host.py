from typing import Protocol, Sequence, runtime_checkable

from hunkreview.core.schema.host import ComparedFile
from hunkreview.core.schema.review import ReviewComment


@runtime_checkable
class PullRequestHost(Protocol):
    """Source-control hosting API consumed by the review pipeline.

    Implementations raise ``SourceError`` subclasses on failure.
    """

    def get_pull_request_diff(self, owner: str, repo: str, number: int) -> str:
        ...

    def compare_revisions(
        self, owner: str, repo: str, base: str, head: str
    ) -> Sequence[ComparedFile]:
        ...

    def create_review(
        self,
        owner: str,
        repo: str,
        number: int,
        body: str,
        comments: Sequence[ReviewComment],
    ) -> None:
        ...
