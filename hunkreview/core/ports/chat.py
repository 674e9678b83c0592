from dataclasses import dataclass
from typing import Mapping, Optional, Protocol, Sequence, runtime_checkable


@dataclass(frozen=True, slots=True)
class CompletionParameters:
    temperature: float = 0.2
    max_tokens: int = 700
    top_p: float = 1.0
    frequency_penalty: float = 0.0
    presence_penalty: float = 0.0


@runtime_checkable
class ChatCompletionClient(Protocol):
    def complete(
        self,
        model: str,
        messages: Sequence[Mapping[str, str]],
        parameters: CompletionParameters,
    ) -> Optional[str]:
        """Return the first choice's message text, or None when absent.

        Raises ``ModelError`` when the inference API call fails.
        """
        ...
