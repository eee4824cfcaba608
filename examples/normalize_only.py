import argparse
import json
import os
import sys

# Ensure project root is on sys.path when running this file directly
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from archforge.graph.builder import diagram_to_json
from archforge.pipeline.diagram_extractor import normalize_completion


def main():
    parser = argparse.ArgumentParser(description="Normalize a saved model completion into diagram JSON (no network).")
    parser.add_argument("--input", required=True, help="Text file holding the raw model output ('-' for stdin)")
    args = parser.parse_args()

    if args.input == "-":
        raw = sys.stdin.read()
    else:
        with open(args.input, "r", encoding="utf-8") as src:
            raw = src.read()

    diagram, diagnostics = normalize_completion(raw)
    print(diagram_to_json(diagram))
    print(json.dumps(diagnostics.to_dict(), indent=2, ensure_ascii=False), file=sys.stderr)


if __name__ == "__main__":
    main()
