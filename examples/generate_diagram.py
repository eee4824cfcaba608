# examples/generate_diagram.py

import argparse
import json
import logging
import os
import sys

# Ensure project root is on sys.path when running this file directly
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from archforge.config import ArchforgeConfig
from archforge.errors import ArchforgeError
from archforge.geometry.visualize import draw_elements
from archforge.logging_config import configure_logging
from archforge.pipeline.diagram_extractor import DiagramExtractor
from archforge.pipeline.scene_service import generate_scene, scene_file


def main():
    parser = argparse.ArgumentParser(description="Generate a whiteboard diagram from an architecture description.")
    parser.add_argument("--prompt", required=True, help="Natural-language description of the system")
    parser.add_argument("--model", default=None, help="Model id (default: ARCHFORGE_MODEL or meta/llama-3.1-70b-instruct)")
    parser.add_argument("--api-key", default=os.getenv("NVIDIA_NIM_API_KEY"), help="API key (or set NVIDIA_NIM_API_KEY)")
    parser.add_argument("--api-base", default=None, help="OpenAI-compatible API base (optional)")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    parser.add_argument("--out-scene", default="diagram.excalidraw", help="Path to save the Excalidraw scene")
    parser.add_argument("--preview", default=None, help="Optional path to save a PNG preview")
    parser.add_argument("--diagnostics", action="store_true", help="Print pipeline diagnostics")
    parser.add_argument("--verbose", action="store_true", help="Log every pipeline stage")
    args = parser.parse_args()

    configure_logging()
    if not args.verbose:
        logging.getLogger("archforge").setLevel(logging.WARNING)

    config = ArchforgeConfig(model=args.model, api_base=args.api_base, api_key=args.api_key, timeout=args.timeout)
    extractor = DiagramExtractor(config)

    try:
        result = generate_scene(extractor, args.prompt, model=args.model)
    except ArchforgeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    with open(args.out_scene, "w", encoding="utf-8") as dest:
        json.dump(scene_file(result.elements), dest, indent=2)
    print(f"Model: {result.model_used}")
    print(f"Nodes: {len(result.diagram.nodes)}  Edges: {len(result.diagram.edges)}")
    print(f"Wrote scene: {args.out_scene}")

    if args.preview:
        print("Saved preview:", draw_elements(result.elements, args.preview))
    if result.warning:
        print(f"Warning: {result.warning}", file=sys.stderr)
    if args.diagnostics:
        print(json.dumps(result.diagnostics.to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
