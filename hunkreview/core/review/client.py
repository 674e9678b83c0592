import json
import re
from typing import List, Optional, Tuple

from pydantic import TypeAdapter, ValidationError

from hunkreview.core.exceptions import ModelError, ResponseDecodeError
from hunkreview.core.ports.chat import ChatCompletionClient, CompletionParameters
from hunkreview.core.ports.logger import Logger
from hunkreview.core.schema.review import ReviewSuggestion

EMPTY_RESPONSE = "[]"
SYSTEM_ROLE = "system"

_SUGGESTIONS_ADAPTER = TypeAdapter(List[ReviewSuggestion])
_CODE_FENCE_PATTERN = re.compile(r"^```[\w-]*\s*\n(.*?)\n?```$", re.DOTALL)


class ReviewClient:
    def __init__(
        self,
        chat_client: ChatCompletionClient,
        logger: Logger,
        *,
        model: str,
        parameters: CompletionParameters = CompletionParameters(),
    ) -> None:
        self._chat_client = chat_client
        self._logger = logger
        self._model = model
        self._parameters = parameters

    def review(self, prompt: str) -> Optional[Tuple[ReviewSuggestion, ...]]:
        """Ask the model to review one prompt.

        Returns None when the call fails or the answer cannot be decoded;
        a single hunk never aborts the run.
        """
        messages = [{"role": SYSTEM_ROLE, "content": prompt}]
        try:
            content = self._chat_client.complete(
                self._model,
                messages,
                self._parameters,
            )
        except ModelError as error:
            self._logger.error("Model call failed", error=str(error))
            return None

        raw = (content or "").strip() or EMPTY_RESPONSE
        try:
            return decode_suggestions(raw)
        except ResponseDecodeError as error:
            self._logger.warning(
                "Could not decode model response",
                error=error.message,
                response=error.raw,
            )
            return None


def decode_suggestions(raw: str) -> Tuple[ReviewSuggestion, ...]:
    text = _strip_code_fence(raw.strip())
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as error:
        raise ResponseDecodeError(f"Response is not valid JSON: {error}", raw) from error
    try:
        suggestions = _SUGGESTIONS_ADAPTER.validate_python(payload)
    except ValidationError as error:
        raise ResponseDecodeError(
            f"Response does not match the suggestion schema: {error.error_count()} errors",
            raw,
        ) from error
    return tuple(suggestions)


def _strip_code_fence(text: str) -> str:
    match = _CODE_FENCE_PATTERN.match(text)
    if match:
        return match.group(1).strip()
    return text
