from datetime import datetime, timezone
from typing import Mapping, Optional, Sequence, Tuple

import requests
from github import GithubException

from hunkreview.core.exceptions import (
    SourceAuthenticationError,
    SourceError,
    SourceNotFoundError,
    SourceRateLimitError,
)
from hunkreview.core.ports.host import PullRequestHost
from hunkreview.core.schema.host import ComparedFile
from hunkreview.core.schema.review import ReviewComment
from hunkreview.infra.github.client import GitHubClient

REVIEW_EVENT_COMMENT = "COMMENT"


class GitHubPullRequestHost(PullRequestHost):
    def __init__(self, client: GitHubClient) -> None:
        self._client = client

    def get_pull_request_diff(self, owner: str, repo: str, number: int) -> str:
        resource = f"{owner}/{repo}#{number}"
        try:
            return self._client.get_pull_diff(owner, repo, number)
        except requests.HTTPError as error:
            response = error.response
            self._translate_exception(
                "Failed to fetch pull request diff",
                error,
                status=response.status_code if response is not None else None,
                headers=response.headers if response is not None else None,
                resource=resource,
            )
        except requests.RequestException as error:
            raise SourceError(f"Failed to fetch pull request diff: {error}") from error

    def compare_revisions(
        self, owner: str, repo: str, base: str, head: str
    ) -> Tuple[ComparedFile, ...]:
        try:
            comparison = self._client.get_repo(owner, repo).compare(base, head)
            return tuple(self._to_compared_file(file) for file in comparison.files)
        except GithubException as error:
            self._translate_github_exception(
                "Failed to compare revisions",
                error,
                resource=f"{owner}/{repo}@{base}...{head}",
            )
        except requests.RequestException as error:
            raise SourceError(f"Failed to compare revisions: {error}") from error

    def create_review(
        self,
        owner: str,
        repo: str,
        number: int,
        body: str,
        comments: Sequence[ReviewComment],
    ) -> None:
        review_comments = [
            {"path": comment.path, "position": comment.line, "body": comment.body}
            for comment in comments
        ]
        try:
            pull = self._client.get_repo(owner, repo).get_pull(number)
            pull.create_review(
                body=body,
                event=REVIEW_EVENT_COMMENT,
                comments=review_comments,
            )
        except GithubException as error:
            self._translate_github_exception(
                "Failed to create review",
                error,
                resource=f"{owner}/{repo}#{number}",
            )
        except requests.RequestException as error:
            raise SourceError(f"Failed to create review: {error}") from error

    def _to_compared_file(self, file) -> ComparedFile:  # noqa: ANN001
        return ComparedFile(
            filename=file.filename,
            status=file.status,
            patch=file.patch,
            previous_filename=getattr(file, "previous_filename", None),
        )

    def _translate_github_exception(
        self,
        message: str,
        error: GithubException,
        resource: str | None = None,
    ) -> None:
        self._translate_exception(
            message,
            error,
            status=getattr(error, "status", None),
            headers=getattr(error, "headers", None),
            resource=resource,
        )

    def _translate_exception(
        self,
        message: str,
        error: Exception,
        status: int | None,
        headers: Optional[Mapping[str, str]],
        resource: str | None = None,
    ) -> None:
        headers = headers or {}
        detail = f"{message}: {error}"
        if status == 401:
            raise SourceAuthenticationError(detail) from error
        if status == 404:
            raise SourceNotFoundError(detail, resource or "resource") from error
        if status in (403, 429):
            retry_after = self._retry_after_from_headers(headers)
            if retry_after:
                raise SourceRateLimitError(detail, retry_after) from error
        raise SourceError(detail) from error

    def _retry_after_from_headers(self, headers) -> datetime | None:  # noqa: ANN001
        reset = headers.get("Retry-After") or headers.get("X-RateLimit-Reset")
        if reset is None:
            return None
        try:
            reset_time = float(reset)
            return datetime.fromtimestamp(reset_time, tz=timezone.utc)
        except (TypeError, ValueError):
            return None
