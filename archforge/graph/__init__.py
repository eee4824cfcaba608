from .schema import Diagram, DiagramEdge, DiagramNode, MAX_EDGES, MAX_LABEL_LENGTH, MAX_NODES
from .builder import diagram_from_dict, diagram_to_json

__all__ = [
    "Diagram",
    "DiagramEdge",
    "DiagramNode",
    "MAX_NODES",
    "MAX_EDGES",
    "MAX_LABEL_LENGTH",
    "diagram_from_dict",
    "diagram_to_json",
]
