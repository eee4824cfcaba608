import json
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from .schema import Diagram, DiagramEdge, DiagramNode

# Alternate key names seen in loosely prompted outputs, in priority order
NODE_LABEL_KEYS = ("label", "name", "text", "title")
EDGE_FROM_KEYS = ("from", "source")
EDGE_TO_KEYS = ("to", "target")


def coerce_text(value: Any) -> Optional[str]:
    """
    Return `value` as a string if it is a string or a number, else None.

    Booleans are not numbers here. Integral floats drop the fractional part
    so that 3.0 and 3 name the same node.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return None


def first_present(record: Mapping[str, Any], keys: Iterable[str]) -> str:
    """Value of the first key that holds a non-empty string or number."""
    for key in keys:
        text = coerce_text(record.get(key))
        if text:
            return text
    return ""


def coerce_node_record(record: Mapping[str, Any]) -> Dict[str, str]:
    node_id = first_present(record, ("id",))
    label = first_present(record, NODE_LABEL_KEYS) or node_id
    return {"id": node_id, "label": label}


def coerce_edge_record(record: Mapping[str, Any]) -> Dict[str, str]:
    return {
        "from": first_present(record, EDGE_FROM_KEYS),
        "to": first_present(record, EDGE_TO_KEYS),
    }


def diagram_from_dict(data: Union[str, Mapping[str, Any]]) -> Diagram:
    """
    Build a Diagram from canonical `{"nodes": [...], "edges": [...]}` data.

    No validation happens here; callers pass data that already went through
    the schemas in `archforge.semantic.schemas`.
    """
    if isinstance(data, str):
        data = json.loads(data)
    nodes = tuple(DiagramNode(id=n["id"], label=n["label"]) for n in data.get("nodes") or [])
    edges = tuple(DiagramEdge(from_id=e["from"], to_id=e["to"]) for e in data.get("edges") or [])
    return Diagram(nodes=nodes, edges=edges)


def diagram_to_json(diagram: Diagram) -> str:
    """
    Serialize a Diagram to canonical JSON text.
    """
    return json.dumps(diagram.to_dict(), indent=2, ensure_ascii=False)
