# archforge/semantic/openai_adapter.py

import logging

from .base import CompletionProvider
from .http_utils import post_json

logger = logging.getLogger(__name__)


class ChatCompletionsProvider(CompletionProvider):
    """
    Completion provider for any OpenAI-compatible chat completions endpoint
    (NVIDIA NIM by default).
    """

    def __init__(self, api_key, api_base, timeout=90, temperature=0.2, max_tokens=2000):
        self.api_key = api_key
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self.temperature = temperature
        self.max_tokens = max_tokens

    @classmethod
    def from_config(cls, config):
        return cls(
            api_key=config.require_api_key(),
            api_base=config.api_base,
            timeout=config.timeout,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )

    def complete(self, messages, model):
        payload = {
            "model": model,
            "messages": messages,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        logger.info("[CALL] Sending request to %s", model)
        return post_json(
            f"{self.api_base}/chat/completions",
            payload,
            headers=headers,
            timeout=self.timeout,
        )
