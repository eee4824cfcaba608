# archforge/geometry/primitives.py

import random
import time
import uuid
from typing import Any, Dict

from ..graph.schema import DiagramEdge, DiagramNode
from .layout_types import LayoutConfig, NodeLayout

# Excalidraw element record; the whiteboard consumes these as-is.
VisualPrimitive = Dict[str, Any]

STROKE_COLOR = "#1f2937"
NODE_FILL = "#dbeafe"
LABEL_COLOR = "#111827"


def _random_int() -> int:
    return random.randint(0, 2_147_483_646)


def base_element() -> VisualPrimitive:
    """
    Identity and versioning block required by the whiteboard.

    Fresh on every call; never feeds into geometry.
    """
    return {
        "id": str(uuid.uuid4()),
        "seed": _random_int(),
        "version": 1,
        "versionNonce": _random_int(),
        "isDeleted": False,
        "groupIds": [],
        "frameId": None,
        "updated": int(time.time() * 1000),
        "link": None,
        "locked": False,
    }


def rectangle_element(node: DiagramNode, layout: NodeLayout) -> VisualPrimitive:
    return {
        **base_element(),
        "type": "rectangle",
        "x": layout.x,
        "y": layout.y,
        "width": layout.width,
        "height": layout.height,
        "angle": 0,
        "strokeColor": STROKE_COLOR,
        "backgroundColor": NODE_FILL,
        "fillStyle": "solid",
        "strokeWidth": 2,
        "strokeStyle": "solid",
        "roughness": 1,
        "opacity": 100,
        "roundness": {"type": 3},
        "boundElements": None,
        "customData": {"sourceNodeId": node.id},
    }


def label_size(label: str, layout: NodeLayout, config: LayoutConfig):
    """Estimated (width, height) of a one-line label inside its node box."""
    max_width = layout.width - 2 * config.label_padding
    width = max(config.min_label_width, min(max_width, len(label) * config.char_width))
    height = config.font_size * config.line_height
    return width, height


def label_element(node: DiagramNode, layout: NodeLayout, config: LayoutConfig) -> VisualPrimitive:
    width, height = label_size(node.label, layout, config)
    return {
        **base_element(),
        "type": "text",
        "x": layout.x + config.label_padding,
        "y": layout.y + layout.height / 2 - height / 2,
        "width": width,
        "height": height,
        "angle": 0,
        "strokeColor": LABEL_COLOR,
        "backgroundColor": "transparent",
        "fillStyle": "solid",
        "strokeWidth": 1,
        "strokeStyle": "solid",
        "roughness": 0,
        "opacity": 100,
        "roundness": None,
        "boundElements": None,
        "fontSize": config.font_size,
        "fontFamily": 1,
        "text": node.label,
        "textAlign": "left",
        "verticalAlign": "middle",
        "baseline": config.font_size,
        "containerId": None,
        "originalText": node.label,
        "lineHeight": config.line_height,
        "autoResize": True,
    }


def arrow_element(edge: DiagramEdge, start: NodeLayout, end: NodeLayout) -> VisualPrimitive:
    """
    Arrow from the center of `start` to the center of `end`.

    Points are relative to the anchor (x, y), as the whiteboard expects.
    """
    start_x, start_y = start.center
    end_x, end_y = end.center
    dx = end_x - start_x
    dy = end_y - start_y
    return {
        **base_element(),
        "type": "arrow",
        "x": start_x,
        "y": start_y,
        "width": abs(dx),
        "height": abs(dy),
        "angle": 0,
        "strokeColor": STROKE_COLOR,
        "backgroundColor": "transparent",
        "fillStyle": "hachure",
        "strokeWidth": 2,
        "strokeStyle": "solid",
        "roughness": 0,
        "opacity": 100,
        "roundness": None,
        "boundElements": None,
        "points": [[0, 0], [dx, dy]],
        "lastCommittedPoint": None,
        "startBinding": None,
        "endBinding": None,
        "startArrowhead": None,
        "endArrowhead": "arrow",
        "elbowed": False,
        "customData": {"from": edge.from_id, "to": edge.to_id},
    }
