from typing import Any, Mapping, Optional

from hunkreview.core.exceptions import MissingPullRequestError, MissingRevisionError
from hunkreview.core.schema.revision import (
    Opened,
    OtherEvent,
    RevisionContext,
    Synchronized,
    TriggerEvent,
)

ACTION_OPENED = "opened"
ACTION_SYNCHRONIZE = "synchronize"


def resolve_revision(
    payload: Mapping[str, Any],
    repository: Optional[str] = None,
) -> RevisionContext:
    pull_request = payload.get("pull_request")
    if not pull_request:
        raise MissingPullRequestError(
            "Could not get pull request details from context, exiting"
        )

    owner, repo = _repository_coordinates(payload, repository)
    body = pull_request.get("body") or ""
    return RevisionContext(
        owner=owner,
        repo=repo,
        pull_number=int(pull_request["number"]),
        title=pull_request.get("title") or "",
        description=body.strip(),
    )


def resolve_trigger(payload: Mapping[str, Any]) -> TriggerEvent:
    action = payload.get("action")
    if action == ACTION_OPENED:
        return Opened()
    if action == ACTION_SYNCHRONIZE:
        before = payload.get("before")
        after = payload.get("after")
        if not before or not after:
            raise MissingRevisionError(
                "Could not get base SHAs from context, exiting"
            )
        return Synchronized(before=before, after=after)
    return OtherEvent(action=action)


def _repository_coordinates(
    payload: Mapping[str, Any],
    repository: Optional[str],
) -> tuple[str, str]:
    repo_payload = payload.get("repository") or {}
    owner = (repo_payload.get("owner") or {}).get("login")
    name = repo_payload.get("name")
    if owner and name:
        return owner, name
    if repository and "/" in repository:
        owner, _, name = repository.partition("/")
        return owner, name
    raise MissingPullRequestError(
        "Could not determine the repository of the pull request"
    )
