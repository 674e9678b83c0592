from hunkreview.core.exceptions.errors import (
    ConfigurationError,
    EventError,
    HunkReviewError,
    MissingPullRequestError,
    MissingRevisionError,
    ModelError,
    ResponseDecodeError,
    ReviewPostError,
    SourceAuthenticationError,
    SourceError,
    SourceNotFoundError,
    SourceRateLimitError,
)

__all__ = [
    "HunkReviewError",
    "ConfigurationError",
    "EventError",
    "MissingPullRequestError",
    "MissingRevisionError",
    "SourceError",
    "SourceAuthenticationError",
    "SourceRateLimitError",
    "SourceNotFoundError",
    "ReviewPostError",
    "ModelError",
    "ResponseDecodeError",
]
