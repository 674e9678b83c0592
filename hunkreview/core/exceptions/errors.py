from datetime import datetime


class HunkReviewError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class EventError(HunkReviewError):
    pass


class MissingPullRequestError(EventError):
    pass


class MissingRevisionError(EventError):
    pass


class SourceError(HunkReviewError):
    pass


class SourceAuthenticationError(SourceError):
    pass


class SourceRateLimitError(SourceError):
    def __init__(self, message: str, retry_after: datetime) -> None:
        self.retry_after = retry_after
        super().__init__(message)


class SourceNotFoundError(SourceError):
    def __init__(self, message: str, resource: str) -> None:
        self.resource = resource
        super().__init__(message)


class ReviewPostError(HunkReviewError):
    def __init__(self, message: str, pr_number: int) -> None:
        self.pr_number = pr_number
        super().__init__(message)


class ModelError(HunkReviewError):
    pass


class ResponseDecodeError(HunkReviewError):
    def __init__(self, message: str, raw: str) -> None:
        self.raw = raw
        super().__init__(message)


class ConfigurationError(HunkReviewError):
    pass
