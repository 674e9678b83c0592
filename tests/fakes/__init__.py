from tests.fakes.chat import FakeChatClient
from tests.fakes.github import (
    FakeComparison,
    FakeFile,
    FakeGitHubClient,
    FakePullRequest,
    FakeRepository,
)
from tests.fakes.host import FakePullRequestHost
from tests.fakes.logger import FakeLogger

__all__ = [
    "FakeChatClient",
    "FakeComparison",
    "FakeFile",
    "FakeGitHubClient",
    "FakeLogger",
    "FakePullRequest",
    "FakePullRequestHost",
    "FakeRepository",
]
