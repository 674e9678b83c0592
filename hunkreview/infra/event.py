import json
from pathlib import Path
from typing import Any, Dict, Optional

from hunkreview.core.exceptions import EventError


def load_event_payload(path: Optional[str]) -> Dict[str, Any]:
    """Read the webhook payload that triggered the workflow run.

    An unset path yields an empty payload, which later fails the pull
    request lookup.
    """
    if not path:
        return {}
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as error:
        raise EventError(f"Could not read event payload from {path}: {error}") from error
    if not isinstance(payload, dict):
        raise EventError(f"Event payload in {path} is not an object")
    return payload
