from hunkreview.core.jobs.review import (
    DEFAULT_REVIEW_BODY,
    ReviewJob,
    ReviewOutcome,
    ReviewState,
)

__all__ = [
    "ReviewJob",
    "ReviewOutcome",
    "ReviewState",
    "DEFAULT_REVIEW_BODY",
]
