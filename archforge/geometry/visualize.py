import os
from typing import Iterable, List, Tuple

import cv2  # type: ignore
import numpy as np

from .primitives import VisualPrimitive


def _hex_to_bgr(color: str, default: Tuple[int, int, int] = (40, 40, 40)) -> Tuple[int, int, int]:
    """
    '#rrggbb' -> BGR tuple for OpenCV. Anything else (e.g. 'transparent')
    maps to `default`.
    """
    if not isinstance(color, str) or not color.startswith("#") or len(color) != 7:
        return default
    r, g, b = (int(color[i : i + 2], 16) for i in (1, 3, 5))
    return (b, g, r)


def _extent(elements: Iterable[VisualPrimitive]) -> Tuple[int, int]:
    max_x, max_y = 0.0, 0.0
    for el in elements:
        if el.get("type") == "arrow":
            for px, py in el.get("points", []):
                max_x = max(max_x, el["x"] + px)
                max_y = max(max_y, el["y"] + py)
        else:
            max_x = max(max_x, el["x"] + el["width"])
            max_y = max(max_y, el["y"] + el["height"])
    return int(max_x), int(max_y)


def draw_elements(elements: List[VisualPrimitive], output_path: str, margin: int = 40) -> str:
    """
    Render whiteboard elements to a flat preview image for debugging.

    Rough approximation of the whiteboard: no hand-drawn strokes, labels use
    the Hershey font.
    """
    width, height = _extent(elements)
    img = np.full((height + margin, width + margin, 3), 255, dtype=np.uint8)

    # Boxes first so labels and arrows stay on top
    for el in elements:
        if el.get("type") != "rectangle":
            continue
        x1, y1 = int(el["x"]), int(el["y"])
        x2, y2 = int(el["x"] + el["width"]), int(el["y"] + el["height"])
        fill = el.get("backgroundColor")
        if fill and fill != "transparent":
            cv2.rectangle(img, (x1, y1), (x2, y2), _hex_to_bgr(fill), -1)
        cv2.rectangle(img, (x1, y1), (x2, y2), _hex_to_bgr(el.get("strokeColor")), 2, lineType=cv2.LINE_AA)

    for el in elements:
        kind = el.get("type")
        if kind == "text":
            text = el.get("text") or ""
            text = (text[:24] + "...") if len(text) > 24 else text
            baseline_y = int(el["y"] + el["height"] * 0.75)
            cv2.putText(
                img,
                text,
                (int(el["x"]), baseline_y),
                cv2.FONT_HERSHEY_SIMPLEX,
                0.6,
                _hex_to_bgr(el.get("strokeColor")),
                1,
                lineType=cv2.LINE_AA,
            )
        elif kind == "arrow":
            (sx, sy), (ex, ey) = el["points"][0], el["points"][-1]
            start = (int(el["x"] + sx), int(el["y"] + sy))
            end = (int(el["x"] + ex), int(el["y"] + ey))
            if start == end:
                continue
            cv2.arrowedLine(
                img,
                start,
                end,
                _hex_to_bgr(el.get("strokeColor")),
                2,
                tipLength=0.05,
                line_type=cv2.LINE_AA,
            )

    os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
    cv2.imwrite(output_path, img)
    return output_path
