from typing import Any, Dict, List, Optional, Sequence, Tuple

from hunkreview.core.ports.host import PullRequestHost
from hunkreview.core.schema.host import ComparedFile
from hunkreview.core.schema.review import ReviewComment


class FakePullRequestHost(PullRequestHost):
    def __init__(
        self,
        diff: str = "",
        compared: Sequence[ComparedFile] = (),
        diff_error: Optional[Exception] = None,
        compare_error: Optional[Exception] = None,
        review_error: Optional[Exception] = None,
    ) -> None:
        self._diff = diff
        self._compared = tuple(compared)
        self._diff_error = diff_error
        self._compare_error = compare_error
        self._review_error = review_error
        self.calls: List[Tuple[str, Dict[str, Any]]] = []
        self.reviews: List[Dict[str, Any]] = []

    def get_pull_request_diff(self, owner: str, repo: str, number: int) -> str:
        self.calls.append(("diff", {"owner": owner, "repo": repo, "number": number}))
        if self._diff_error is not None:
            raise self._diff_error
        return self._diff

    def compare_revisions(
        self, owner: str, repo: str, base: str, head: str
    ) -> Tuple[ComparedFile, ...]:
        self.calls.append(
            ("compare", {"owner": owner, "repo": repo, "base": base, "head": head})
        )
        if self._compare_error is not None:
            raise self._compare_error
        return self._compared

    def create_review(
        self,
        owner: str,
        repo: str,
        number: int,
        body: str,
        comments: Sequence[ReviewComment],
    ) -> None:
        review = {
            "owner": owner,
            "repo": repo,
            "number": number,
            "body": body,
            "comments": list(comments),
        }
        self.calls.append(("review", review))
        if self._review_error is not None:
            raise self._review_error
        self.reviews.append(review)
