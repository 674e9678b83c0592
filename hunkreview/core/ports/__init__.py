from hunkreview.core.ports.chat import ChatCompletionClient, CompletionParameters
from hunkreview.core.ports.host import PullRequestHost
from hunkreview.core.ports.logger import Logger

__all__ = [
    "Logger",
    "PullRequestHost",
    "ChatCompletionClient",
    "CompletionParameters",
]
