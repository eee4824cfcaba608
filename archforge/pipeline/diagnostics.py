from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass
class Diagnostics:
    """
    What happened while turning a completion into a diagram.

    Observability only; nothing downstream branches on these fields except
    `used_fallback`, which callers may surface as a warning.
    """

    raw_content: str = ""
    extracted_json: Optional[str] = None
    parse_error: Optional[str] = None
    validation_error: Optional[str] = None
    repair_applied: Optional[str] = None
    used_fallback: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
