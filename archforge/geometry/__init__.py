from .grid_layout import build_node_layout, build_scene_elements, grid_cell, grid_columns
from .layout_types import LayoutConfig, NodeLayout
from .visualize import draw_elements

__all__ = [
    "build_node_layout",
    "build_scene_elements",
    "grid_cell",
    "grid_columns",
    "LayoutConfig",
    "NodeLayout",
    "draw_elements",
]
