from .diagnostics import Diagnostics
from .diagram_extractor import DiagramExtractor, ExtractionResult, normalize_completion, normalize_envelope
from .scene_service import SceneResult, generate_scene, scene_file

__all__ = [
    "Diagnostics",
    "DiagramExtractor",
    "ExtractionResult",
    "normalize_completion",
    "normalize_envelope",
    "SceneResult",
    "generate_scene",
    "scene_file",
]
