from .base import CompletionProvider
from .openai_adapter import ChatCompletionsProvider

__all__ = ["CompletionProvider", "ChatCompletionsProvider"]
