from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

MAX_NODES = 200
MAX_EDGES = 400
MAX_LABEL_LENGTH = 200


@dataclass(frozen=True)
class DiagramNode:
    id: str
    label: str


@dataclass(frozen=True)
class DiagramEdge:
    from_id: str
    to_id: str


@dataclass(frozen=True)
class Diagram:
    """
    Validated graph handed from the extractor to the layout synthesizer.

    Node order matters for layout; edges may reference unknown node ids.
    """

    nodes: Tuple[DiagramNode, ...] = field(default_factory=tuple)
    edges: Tuple[DiagramEdge, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> "Diagram":
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.nodes and not self.edges

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [{"id": n.id, "label": n.label} for n in self.nodes],
            "edges": [{"from": e.from_id, "to": e.to_id} for e in self.edges],
        }
