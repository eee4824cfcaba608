"""Prompts for architecture diagram generation."""

from typing import Dict, List

SYSTEM_PROMPT = """
You are a diagram generator. Your ONLY job is to return valid JSON.

RULES:
1. Return ONLY a single JSON object. Nothing else.
2. Do NOT include markdown fences, backticks, or explanation text.
3. Do NOT include comments inside the JSON.
4. The JSON MUST conform to this exact schema:

{
  "nodes": [
    { "id": "unique_string_id", "label": "Human Readable Label" }
  ],
  "edges": [
    { "from": "source_node_id", "to": "target_node_id" }
  ]
}

5. Every node must have a unique string "id" and a string "label".
6. Every edge must reference valid node ids in "from" and "to".
7. If you cannot generate a diagram, return: {"nodes":[],"edges":[]}
8. Do NOT wrap the output in any other structure.
""".strip()


def build_messages(prompt: str) -> List[Dict[str, str]]:
    """Return the chat messages for one diagram request."""

    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": prompt},
    ]
