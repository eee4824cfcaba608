import json
import re
from typing import Any, Optional, Tuple

_FENCE_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)```", re.IGNORECASE)
_TRAILING_COMMA_RE = re.compile(r",\s*([}\]])")

TRAILING_COMMA_REPAIR = "removed trailing commas"

# json.loads failures on untrusted text; deep nesting exhausts the decoder stack
JSON_ERRORS = (ValueError, RecursionError)


class JsonExtractionError(ValueError):
    """No usable JSON object could be located in the text."""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def loads_json(text: str) -> Any:
    """json.loads that refuses NaN, Infinity and -Infinity."""
    return json.loads(text, parse_constant=_reject_constant)


def strip_code_fences(text: str) -> str:
    """Replace every ```/```json fenced block with its body."""
    return _FENCE_RE.sub(r"\1", text).strip()


def extract_json_block(text: str) -> str:
    """
    Return the first balanced `{...}` block of `text`.

    - Strips code fences first
    - Counts brace depth from the first '{'; braces inside string
      literals are counted too
    """
    s = strip_code_fences(text)
    start = s.find("{")
    if start == -1:
        raise JsonExtractionError("No JSON object found in model response.")

    depth = 0
    for i in range(start, len(s)):
        ch = s[i]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        if depth == 0:
            return s[start : i + 1]
    raise JsonExtractionError("Unbalanced braces in model response.")


def repair_json(raw: str) -> Tuple[str, Optional[str]]:
    """
    Apply mechanical fixes for common model JSON mistakes.

    Returns the (possibly) repaired text and a description of the repair,
    or None when nothing was changed.
    """
    if _TRAILING_COMMA_RE.search(raw):
        return _TRAILING_COMMA_RE.sub(r"\1", raw), TRAILING_COMMA_REPAIR
    return raw, None


def unwrap_stringified_json(value: Any) -> Any:
    """Parse a JSON document that was itself encoded as a JSON string."""
    if isinstance(value, str):
        try:
            return loads_json(value)
        except JSON_ERRORS:
            return value
    return value
