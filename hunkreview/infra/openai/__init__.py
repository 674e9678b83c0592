from hunkreview.infra.openai.client import OpenAIChatClient

__all__ = ["OpenAIChatClient"]
