import signal
import sys
from typing import Any, Mapping

from hunkreview.config import Settings, load_settings
from hunkreview.core.acquisition import DiffAcquirer
from hunkreview.core.exceptions import ConfigurationError, HunkReviewError
from hunkreview.core.jobs import ReviewJob, ReviewOutcome
from hunkreview.core.ports.logger import Logger
from hunkreview.core.review import CommentMapper, PromptBuilder, ReviewClient
from hunkreview.infra import (
    ActionsLogger,
    ConsoleLogger,
    GitHubClient,
    GitHubPullRequestHost,
    LogfireLogger,
    OpenAIChatClient,
    configure_logfire,
    load_event_payload,
)


def main() -> None:
    # Replaced once settings name a backend; until then failures go to the runner.
    logger: Logger = ActionsLogger()
    try:
        settings = load_settings()
        logger = _build_logger(settings)
        _validate(settings)
        payload = load_event_payload(settings.github.event_path)
        review(settings, logger, payload)
    except HunkReviewError as error:
        # Fatal: surface the message as the run's failure reason.
        logger.error(error.message)
        sys.exit(1)


def review(
    settings: Settings,
    logger: Logger,
    payload: Mapping[str, Any],
) -> ReviewOutcome:
    chat_client = OpenAIChatClient(
        settings.openai.api_key,
        organization=settings.openai.organization,
        base_url=settings.openai.base_url,
        timeout=settings.review.http_timeout,
        max_retries=settings.openai.max_retries,
    )
    with GitHubClient(
        settings.github.token,
        base_url=settings.github.api_url,
        timeout=settings.review.http_timeout,
    ) as github_client:
        host = GitHubPullRequestHost(github_client)
        job = ReviewJob(
            logger=logger,
            host=host,
            acquirer=DiffAcquirer(host, logger),
            prompt_builder=PromptBuilder(),
            review_client=ReviewClient(
                chat_client,
                logger,
                model=settings.openai.model,
            ),
            comment_mapper=CommentMapper(
                logger,
                strict_lines=settings.review.strict_lines,
            ),
            repository=settings.github.repository,
            review_body=settings.review.body,
        )
        previous_handlers = _install_stop_handlers(job, logger)
        try:
            return job.run(payload)
        finally:
            for signum, handler in previous_handlers.items():
                signal.signal(signum, handler)
            chat_client.close()


def _build_logger(settings: Settings) -> Logger:
    backend = settings.logging.backend
    if backend == "actions":
        return ActionsLogger()
    if backend == "console":
        return ConsoleLogger(settings.logging.name, settings.logging.level)
    if backend == "logfire":
        if not settings.logging.logfire_token:
            raise ConfigurationError(
                "Logfire backend selected but HUNKREVIEW_LOGFIRE_TOKEN is not set"
            )
        configure_logfire(settings.logging.logfire_token, settings.logging.name)
        return LogfireLogger(settings.logging.name)
    raise ConfigurationError(f"Unknown logging backend {backend}")


def _validate(settings: Settings) -> None:
    if not settings.github.token:
        raise ConfigurationError("GITHUB_TOKEN is not set")
    if not settings.openai.api_key:
        raise ConfigurationError("OPEN_API_TOKEN is not set")


def _install_stop_handlers(job: ReviewJob, logger: Logger) -> dict:
    def _request_stop(signum, frame) -> None:  # noqa: ANN001
        logger.info("Shutdown requested", signal=signal.Signals(signum).name)
        job.stop()

    return {
        signum: signal.signal(signum, _request_stop)
        for signum in (signal.SIGINT, signal.SIGTERM)
    }
