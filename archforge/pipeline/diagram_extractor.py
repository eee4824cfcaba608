import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from pydantic import ValidationError

from ..config import ArchforgeConfig
from ..errors import InvalidRequestError, ProviderResponseError
from ..graph.schema import Diagram
from ..semantic.openai_adapter import ChatCompletionsProvider
from ..semantic.prompts import build_messages
from ..semantic.schemas import CompletionEnvelope, GenerateRequest, format_issues
from ..utils.json_sanitize import unwrap_stringified_json
from .diagnostics import Diagnostics
from .stages import check_content, locate_json, parse_json, validate_diagram

logger = logging.getLogger(__name__)


@dataclass
class ExtractionResult:
    diagram: Diagram
    model_used: str
    diagnostics: Diagnostics

    def to_dict(self) -> Dict[str, Any]:
        return {
            "diagram": self.diagram.to_dict(),
            "model_used": self.model_used,
            "diagnostics": self.diagnostics.to_dict(),
        }


def normalize_completion(content: str) -> Tuple[Diagram, Diagnostics]:
    """
    Turn flattened completion text into a Diagram.

    Never raises for malformed content: any failed stage yields the empty
    diagram with `diagnostics.used_fallback` set.
    """
    diagnostics = Diagnostics()

    result = check_content(content, diagnostics)
    if result.ok:
        result = locate_json(result.value, diagnostics)
    if result.ok:
        result = parse_json(result.value, diagnostics)
    if result.ok:
        result = validate_diagram(unwrap_stringified_json(result.value), diagnostics)

    if not result.ok:
        diagnostics.used_fallback = True
        return Diagram.empty(), diagnostics
    return result.value, diagnostics


def normalize_envelope(envelope: Any) -> Tuple[Diagram, Diagnostics]:
    """
    Validate a provider response envelope, then normalize its first choice.

    A malformed envelope means the provider contract is broken and raises
    ProviderResponseError instead of falling back.
    """
    try:
        parsed = CompletionEnvelope.model_validate(envelope)
    except ValidationError as exc:
        logger.error("[RESPONSE] Unexpected response shape: %s", format_issues(exc))
        raise ProviderResponseError("Unexpected response shape from completion provider.") from exc
    return normalize_completion(parsed.first_message_text())


class DiagramExtractor:
    def __init__(self, config=None, provider=None):
        self.config = config or ArchforgeConfig()
        self._provider = provider

    @property
    def provider(self):
        if self._provider is None:
            self._provider = ChatCompletionsProvider.from_config(self.config)
        return self._provider

    def generate(self, prompt: str, model: Optional[str] = None) -> ExtractionResult:
        """
        Ask the completion provider for a diagram of `prompt`.

        Raises only for bad requests, missing configuration, transport
        failures, timeouts and malformed envelopes.
        """
        try:
            request = GenerateRequest(prompt=prompt, model=model)
        except ValidationError as exc:
            raise InvalidRequestError(format_issues(exc)) from exc

        model_used = request.model or self.config.model
        provider = self.provider
        logger.info("[CALL] prompt=%r", request.prompt[:200])
        envelope = provider.complete(build_messages(request.prompt), model_used)

        diagram, diagnostics = normalize_envelope(envelope)
        return ExtractionResult(diagram=diagram, model_used=model_used, diagnostics=diagnostics)
