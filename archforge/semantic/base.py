from typing import Any, Dict, List


class CompletionProvider:
    """
    Minimal interface for a chat completion backend.
    """

    def complete(self, messages: List[Dict[str, Any]], model: str) -> Any:
        """
        Send chat `messages` to `model` and return the decoded response envelope:
        {
          "choices": [
            {"message": {"content": "<text>" | [{"type": "text", "text": "..."}, ...]}}
          ],
          ...
        }
        The envelope is returned unvalidated; shape checks happen in the pipeline.
        """
        raise NotImplementedError("Subclasses must implement complete().")
