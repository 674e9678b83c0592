import requests
from github import Auth, Github

DEFAULT_BASE_URL = "https://api.github.com"
DIFF_MEDIA_TYPE = "application/vnd.github.diff"


class GitHubClient:
    """PyGithub handle plus a plain session for the diff media type."""

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = Github(
            auth=Auth.Token(token),
            base_url=self._base_url,
            timeout=int(timeout),
            retry=None,
        )
        self._session = requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "X-GitHub-Api-Version": "2022-11-28",
                "User-Agent": "hunkreview",
            }
        )

    def get_repo(self, owner: str, name: str):
        return self._client.get_repo(f"{owner}/{name}")

    def get_pull_diff(self, owner: str, name: str, number: int) -> str:
        response = self._session.get(
            f"{self._base_url}/repos/{owner}/{name}/pulls/{number}",
            headers={"Accept": DIFF_MEDIA_TYPE},
            timeout=self._timeout,
        )
        response.raise_for_status()
        return response.text

    def close(self) -> None:
        self._session.close()
        try:
            self._client.close()
        except AttributeError:
            return

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        self.close()
