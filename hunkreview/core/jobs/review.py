import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple, final

from hunkreview.core.acquisition import DiffAcquirer
from hunkreview.core.diff import parse_diff
from hunkreview.core.events import resolve_revision, resolve_trigger
from hunkreview.core.exceptions import ReviewPostError, SourceError
from hunkreview.core.ports.host import PullRequestHost
from hunkreview.core.ports.logger import Logger
from hunkreview.core.review import CommentMapper, PromptBuilder, ReviewClient
from hunkreview.core.schema.diff import DiffFile
from hunkreview.core.schema.review import ReviewComment
from hunkreview.core.schema.revision import RevisionContext

DEFAULT_REVIEW_BODY = "AI Review"


class ReviewState(Enum):
    INIT = "init"
    CONTEXT_RESOLVED = "context_resolved"
    DIFF_ACQUIRED = "diff_acquired"
    DIFF_PARSED = "diff_parsed"
    REVIEWING = "reviewing"
    AGGREGATED = "aggregated"
    POSTED = "posted"
    SKIPPED = "skipped"
    DONE = "done"
    ERRORED = "errored"


@dataclass(frozen=True, slots=True)
class ReviewOutcome:
    state: ReviewState
    comments: Tuple[ReviewComment, ...]
    posted: bool
    cancelled: bool = False


class ReviewJob:
    """Reviews one pull request revision and posts the result as one review."""

    def __init__(
        self,
        logger: Logger,
        host: PullRequestHost,
        acquirer: DiffAcquirer,
        prompt_builder: PromptBuilder,
        review_client: ReviewClient,
        comment_mapper: CommentMapper,
        *,
        repository: Optional[str] = None,
        review_body: str = DEFAULT_REVIEW_BODY,
    ) -> None:
        self._logger = logger
        self._host = host
        self._acquirer = acquirer
        self._prompt_builder = prompt_builder
        self._review_client = review_client
        self._comment_mapper = comment_mapper
        self._repository = repository
        self._review_body = review_body
        self._stopped = threading.Event()
        self.state = ReviewState.INIT

    @final
    def run(self, payload: Mapping[str, Any]) -> ReviewOutcome:
        job_name = self.__class__.__name__
        self.state = ReviewState.INIT
        self._logger.info("Job starting", job=job_name)
        try:
            outcome = self._execute(payload)
        except Exception:
            self.state = ReviewState.ERRORED
            raise
        finally:
            self._logger.info("Job stopping", job=job_name, state=self.state.value)
        self.state = ReviewState.DONE
        return outcome

    def stop(self) -> None:
        self._stopped.set()

    @property
    def stopped(self) -> bool:
        return self._stopped.is_set()

    def _execute(self, payload: Mapping[str, Any]) -> ReviewOutcome:
        context = resolve_revision(payload, self._repository)
        event = resolve_trigger(payload)
        self.state = ReviewState.CONTEXT_RESOLVED
        self._logger.debug(
            "PR details",
            owner=context.owner,
            repo=context.repo,
            pull_number=context.pull_number,
            title=context.title,
        )

        diff = self._acquirer.acquire(context, event)
        self.state = ReviewState.DIFF_ACQUIRED
        if not diff:
            self._logger.warning("Could not get diff", pull_number=context.pull_number)
        else:
            self._logger.debug("Diff", diff=diff)

        files = parse_diff(diff)
        self.state = ReviewState.DIFF_PARSED
        self._logger.debug("Parsed diff", file_count=len(files))

        comments = self._analyze(files, context)
        self.state = ReviewState.AGGREGATED
        self._logger.info("Comments", count=len(comments))

        if self.stopped:
            self._logger.warning("Review cancelled, nothing posted")
            self.state = ReviewState.SKIPPED
            return ReviewOutcome(self.state, tuple(comments), posted=False, cancelled=True)

        if not comments:
            self.state = ReviewState.SKIPPED
            return ReviewOutcome(self.state, (), posted=False)

        self._post(context, comments)
        self.state = ReviewState.POSTED
        return ReviewOutcome(self.state, tuple(comments), posted=True)

    def _analyze(
        self,
        files: List[DiffFile],
        context: RevisionContext,
    ) -> List[ReviewComment]:
        self.state = ReviewState.REVIEWING
        self._logger.info("Starting to analyze code")
        comments: List[ReviewComment] = []
        for file in files:
            if file.deleted:
                self._logger.debug("Skipping deleted file", path=file.source_path)
                continue
            if file.path is None:
                self._logger.debug("Skipping file without a path")
                continue
            for hunk in file.hunks:
                if self.stopped:
                    return comments
                prompt = self._prompt_builder.build(file, hunk, context)
                suggestions = self._review_client.review(prompt)
                if not suggestions:
                    continue
                comments.extend(self._comment_mapper.map(file, hunk, suggestions))
        self._logger.info("Finished analyzing code")
        return comments

    def _post(self, context: RevisionContext, comments: List[ReviewComment]) -> None:
        try:
            self._host.create_review(
                context.owner,
                context.repo,
                context.pull_number,
                self._review_body,
                comments,
            )
        except SourceError as error:
            raise ReviewPostError(
                f"Failed to post review: {error.message}",
                context.pull_number,
            ) from error
        self._logger.info(
            "Posted review",
            pull_number=context.pull_number,
            comment_count=len(comments),
        )
