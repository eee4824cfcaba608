from .config import ArchforgeConfig
from .errors import (
    ArchforgeError,
    ConfigurationError,
    InvalidRequestError,
    ProviderError,
    ProviderResponseError,
    ProviderTimeoutError,
)
from .geometry.grid_layout import build_scene_elements
from .graph.schema import Diagram, DiagramEdge, DiagramNode
from .pipeline.diagram_extractor import DiagramExtractor, ExtractionResult, normalize_completion
from .pipeline.scene_service import generate_scene

__all__ = [
    "ArchforgeConfig",
    "ArchforgeError",
    "ConfigurationError",
    "InvalidRequestError",
    "ProviderError",
    "ProviderResponseError",
    "ProviderTimeoutError",
    "build_scene_elements",
    "Diagram",
    "DiagramEdge",
    "DiagramNode",
    "DiagramExtractor",
    "ExtractionResult",
    "normalize_completion",
    "generate_scene",
]
