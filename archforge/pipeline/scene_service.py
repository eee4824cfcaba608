import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..geometry.grid_layout import build_scene_elements
from ..graph.schema import Diagram
from .diagnostics import Diagnostics
from .diagram_extractor import DiagramExtractor

logger = logging.getLogger(__name__)

FALLBACK_WARNING = (
    "The AI model returned output that could not be parsed into a valid diagram. "
    "An empty canvas was returned. Please try rephrasing your prompt."
)


@dataclass
class SceneResult:
    """Everything a whiteboard client needs to insert one generated diagram."""

    elements: List[Dict[str, Any]]
    diagram: Diagram
    model_used: str
    diagnostics: Diagnostics
    warning: Optional[str] = None

    def to_dict(self, include_diagnostics: bool = False) -> Dict[str, Any]:
        body: Dict[str, Any] = {"elements": self.elements, "diagram": self.diagram.to_dict()}
        if include_diagnostics:
            body["diagnostics"] = self.diagnostics.to_dict()
        if self.warning:
            body["warning"] = self.warning
        return body


def generate_scene(extractor: DiagramExtractor, prompt: str, model: Optional[str] = None) -> SceneResult:
    result = extractor.generate(prompt, model=model)
    elements = build_scene_elements(result.diagram)

    warning = None
    if result.diagnostics.used_fallback:
        logger.warning("Diagram generation used fallback, empty diagram returned: %s", result.diagnostics.to_dict())
        if not result.diagram.nodes:
            warning = FALLBACK_WARNING

    return SceneResult(
        elements=elements,
        diagram=result.diagram,
        model_used=result.model_used,
        diagnostics=result.diagnostics,
        warning=warning,
    )


def scene_file(elements: List[Dict[str, Any]], source: str = "archforge") -> Dict[str, Any]:
    """Wrap elements in an Excalidraw scene document."""
    return {
        "type": "excalidraw",
        "version": 2,
        "source": source,
        "elements": elements,
        "appState": {"viewBackgroundColor": "#ffffff", "gridSize": None},
        "files": {},
    }
