import os

from dotenv import load_dotenv

from .errors import ConfigurationError

# Load .env from the working directory, if any
load_dotenv()

DEFAULT_API_BASE = "https://integrate.api.nvidia.com/v1"
DEFAULT_MODEL = "meta/llama-3.1-70b-instruct"
DEFAULT_TIMEOUT = 90


class ArchforgeConfig:
    """
    Central configuration object.

    Only the completion provider is configurable for now. Values passed in
    win over the environment (NVIDIA_NIM_API_KEY, ARCHFORGE_API_BASE,
    ARCHFORGE_MODEL, ARCHFORGE_TIMEOUT).
    """

    def __init__(
        self,
        model=None,
        api_base=None,
        api_key=None,
        timeout=None,
        temperature=0.2,
        max_tokens=2000,
    ):
        self.model = model or os.getenv("ARCHFORGE_MODEL") or DEFAULT_MODEL
        self.api_base = (api_base or os.getenv("ARCHFORGE_API_BASE") or DEFAULT_API_BASE).rstrip("/")
        # Fallback to env if not provided
        self.api_key = api_key or os.getenv("NVIDIA_NIM_API_KEY")
        self.timeout = float(timeout or os.getenv("ARCHFORGE_TIMEOUT") or DEFAULT_TIMEOUT)
        self.temperature = temperature
        self.max_tokens = max_tokens

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigurationError("NVIDIA_NIM_API_KEY is missing.")
        return self.api_key
