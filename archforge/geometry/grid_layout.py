import math
from typing import Dict, List, Optional, Sequence, Tuple

from ..graph.schema import Diagram, DiagramNode
from .layout_types import LayoutConfig, NodeLayout
from .primitives import VisualPrimitive, arrow_element, label_element, rectangle_element

DEFAULT_LAYOUT = LayoutConfig()


def grid_columns(node_count: int) -> int:
    """Columns of a roughly square grid holding `node_count` cells."""
    return max(1, math.ceil(math.sqrt(node_count)))


def grid_cell(index: int, columns: int) -> Tuple[int, int]:
    """(row, col) of the node at `index` in insertion order."""
    return index // columns, index % columns


def build_node_layout(
    nodes: Sequence[DiagramNode],
    config: LayoutConfig = DEFAULT_LAYOUT,
) -> Dict[str, NodeLayout]:
    """
    Place nodes row by row on the grid.

    Keyed by node id; if ids repeat, the later node's cell wins.
    """
    columns = grid_columns(len(nodes))
    layouts: Dict[str, NodeLayout] = {}
    for index, node in enumerate(nodes):
        row, col = grid_cell(index, columns)
        layouts[node.id] = NodeLayout(
            x=config.start_x + col * config.pitch_x,
            y=config.start_y + row * config.pitch_y,
            width=config.node_width,
            height=config.node_height,
        )
    return layouts


def build_scene_elements(diagram: Diagram, config: Optional[LayoutConfig] = None) -> List[VisualPrimitive]:
    """
    Deterministic whiteboard elements for `diagram`:
    - per node: a rectangle, then its text label
    - per edge: one arrow between cell centers; edges naming unknown
      node ids are skipped
    """
    config = config or DEFAULT_LAYOUT
    layouts = build_node_layout(diagram.nodes, config)
    elements: List[VisualPrimitive] = []

    for node in diagram.nodes:
        layout = layouts[node.id]
        elements.append(rectangle_element(node, layout))
        elements.append(label_element(node, layout, config))

    for edge in diagram.edges:
        start = layouts.get(edge.from_id)
        end = layouts.get(edge.to_id)
        if start is None or end is None:
            continue
        elements.append(arrow_element(edge, start, end))

    return elements
