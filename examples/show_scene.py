import argparse
import json
import os
import sys

# Ensure project root is on sys.path when running this file directly
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from archforge.geometry.grid_layout import build_scene_elements
from archforge.geometry.visualize import draw_elements
from archforge.semantic.schemas import StrictDiagram


def main():
    parser = argparse.ArgumentParser(description="Lay out a diagram JSON file and render a preview image.")
    parser.add_argument("--diagram", required=True, help='Path to {"nodes": [...], "edges": [...]} JSON')
    parser.add_argument("--out", default="diagram_preview.png", help="Path to save the preview image")
    args = parser.parse_args()

    with open(args.diagram, "r", encoding="utf-8") as src:
        diagram = StrictDiagram.model_validate(json.load(src)).to_diagram()

    elements = build_scene_elements(diagram)
    print("Saved:", draw_elements(elements, args.out))


if __name__ == "__main__":
    main()
