from hunkreview.infra.event import load_event_payload
from hunkreview.infra.github import GitHubClient, GitHubPullRequestHost
from hunkreview.infra.logging import (
    ActionsLogger,
    ConsoleLogger,
    LogfireLogger,
    configure_logfire,
)
from hunkreview.infra.openai import OpenAIChatClient

__all__ = [
    "GitHubClient",
    "GitHubPullRequestHost",
    "OpenAIChatClient",
    "ActionsLogger",
    "ConsoleLogger",
    "LogfireLogger",
    "configure_logfire",
    "load_event_payload",
]
