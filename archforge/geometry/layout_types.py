from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class LayoutConfig:
    """Fixed grid and label metrics, in canvas pixels."""

    node_width: float = 220
    node_height: float = 120
    # Distance between the origins of neighbouring cells (cell size + gap)
    pitch_x: float = 280
    pitch_y: float = 220
    start_x: float = 80
    start_y: float = 80
    label_padding: float = 12
    min_label_width: float = 80
    char_width: float = 10
    font_size: int = 24
    line_height: float = 1.25


@dataclass(frozen=True)
class NodeLayout:
    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)
