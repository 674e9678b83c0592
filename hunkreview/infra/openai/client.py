from typing import Mapping, Optional, Sequence

from openai import OpenAI, OpenAIError

from hunkreview.core.exceptions import ModelError
from hunkreview.core.ports.chat import ChatCompletionClient, CompletionParameters


class OpenAIChatClient(ChatCompletionClient):
    def __init__(
        self,
        api_key: str,
        *,
        organization: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = 60.0,
        max_retries: int = 0,
    ) -> None:
        self._client = OpenAI(
            api_key=api_key,
            organization=organization,
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
        )

    def complete(
        self,
        model: str,
        messages: Sequence[Mapping[str, str]],
        parameters: CompletionParameters,
    ) -> Optional[str]:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=parameters.temperature,
                max_tokens=parameters.max_tokens,
                top_p=parameters.top_p,
                frequency_penalty=parameters.frequency_penalty,
                presence_penalty=parameters.presence_penalty,
                messages=[dict(message) for message in messages],
            )
        except OpenAIError as error:
            raise ModelError(f"Chat completion failed: {error}") from error

        if not response.choices:
            return None
        return response.choices[0].message.content

    def close(self) -> None:
        self._client.close()
