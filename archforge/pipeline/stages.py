"""
Recovery stages between raw completion text and a Diagram.

Each stage takes the previous stage's value plus the shared Diagnostics and
returns a StageResult; a failed result ends the chain in the empty-diagram
fallback. Malformed model output never raises out of this module.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import ValidationError

from ..graph.builder import diagram_from_dict
from ..semantic.schemas import LenientDiagram, StrictDiagram, format_issues
from ..utils.json_sanitize import JSON_ERRORS, JsonExtractionError, extract_json_block, loads_json, repair_json
from .diagnostics import Diagnostics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StageResult:
    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any) -> "StageResult":
        return cls(value=value)

    @classmethod
    def failure(cls, reason: str) -> "StageResult":
        return cls(error=reason)


def check_content(content: str, diagnostics: Diagnostics) -> StageResult:
    diagnostics.raw_content = content
    logger.info("[CONTENT] Extracted message content (%d chars)", len(content))
    logger.debug("[CONTENT] %s", content[:500])
    if not content.strip():
        logger.warning("[CONTENT] Model returned empty content string.")
        return StageResult.failure("empty content")
    return StageResult.success(content)


def locate_json(content: str, diagnostics: Diagnostics) -> StageResult:
    try:
        block = extract_json_block(content)
    except JsonExtractionError as exc:
        logger.warning("[EXTRACT] %s", exc)
        diagnostics.parse_error = str(exc)
        return StageResult.failure(str(exc))
    diagnostics.extracted_json = block
    logger.info("[EXTRACT] Extracted JSON block (%d chars)", len(block))
    return StageResult.success(block)


def parse_json(block: str, diagnostics: Diagnostics) -> StageResult:
    try:
        return StageResult.success(loads_json(block))
    except JSON_ERRORS:
        logger.info("[PARSE] Initial parse failed, attempting repair...")

    repaired, repair = repair_json(block)
    diagnostics.repair_applied = repair
    try:
        value = loads_json(repaired)
    except JSON_ERRORS as exc:
        logger.warning("[PARSE] JSON parse failed even after repair: %s", exc)
        logger.debug("[PARSE] %s", block[:500])
        diagnostics.parse_error = f"JSON parse failed: {exc}"
        return StageResult.failure(diagnostics.parse_error)
    logger.info("[PARSE] Repair succeeded: %s", repair)
    return StageResult.success(value)


def validate_diagram(parsed: Any, diagnostics: Diagnostics) -> StageResult:
    """
    Lenient coercion, then strict validation.

    A lenient result that fails the strict checks is still returned; the
    strict issues only land in diagnostics.
    """
    try:
        lenient = LenientDiagram.model_validate(parsed)
    except ValidationError as exc:
        lenient_issues = format_issues(exc)
    else:
        candidate = lenient.canonical()
        try:
            strict = StrictDiagram.model_validate(candidate)
        except ValidationError as exc:
            logger.warning("[VALIDATE] Strict schema failed after lenient coercion, using lenient result: %s", format_issues(exc))
            diagnostics.validation_error = f"Strict validation issues: {format_issues(exc)}"
            return StageResult.success(diagram_from_dict(candidate))
        logger.info("[VALIDATE] Schema valid: %d nodes, %d edges", len(strict.nodes), len(strict.edges))
        return StageResult.success(strict.to_diagram())

    logger.warning("[VALIDATE] Lenient schema validation failed: %s", lenient_issues)
    try:
        strict = StrictDiagram.model_validate(parsed)
    except ValidationError:
        logger.warning("[FALLBACK] All validation failed. Issues: %s", lenient_issues)
        diagnostics.validation_error = lenient_issues
        return StageResult.failure(lenient_issues)
    logger.info("[VALIDATE] Strict schema passed directly")
    return StageResult.success(strict.to_diagram())
