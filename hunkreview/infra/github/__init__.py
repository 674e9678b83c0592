from hunkreview.infra.github.client import GitHubClient
from hunkreview.infra.github.host import GitHubPullRequestHost

__all__ = ["GitHubClient", "GitHubPullRequestHost"]
