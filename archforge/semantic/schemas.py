"""Pydantic schemas for the completion envelope and the diagram payload."""

from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ..graph.builder import coerce_edge_record, coerce_node_record, diagram_from_dict
from ..graph.schema import MAX_EDGES, MAX_LABEL_LENGTH, MAX_NODES, Diagram

MAX_PROMPT_LENGTH = 4000
MAX_MODEL_LENGTH = 200


# ---------------------------------------------------------------------------
# Inbound request
# ---------------------------------------------------------------------------


class GenerateRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    prompt: str = Field(min_length=1, max_length=MAX_PROMPT_LENGTH)
    model: Optional[str] = Field(default=None, max_length=MAX_MODEL_LENGTH)

    @field_validator("model")
    @classmethod
    def blank_model_is_default(cls, value: Optional[str]) -> Optional[str]:
        return value or None


# ---------------------------------------------------------------------------
# Provider envelope
# ---------------------------------------------------------------------------


class ContentPart(BaseModel):
    type: str
    text: Optional[str] = None


class CompletionMessage(BaseModel):
    content: Union[str, List[ContentPart]]


class CompletionChoice(BaseModel):
    message: CompletionMessage


class CompletionEnvelope(BaseModel):
    choices: List[CompletionChoice] = Field(min_length=1)

    def first_message_text(self) -> str:
        return message_text(self.choices[0].message.content)


def message_text(content: Union[str, List[ContentPart]]) -> str:
    """Flatten message content; only `text` parts count, one per line."""
    if isinstance(content, str):
        return content.strip()
    return "\n".join(part.text or "" for part in content if part.type == "text").strip()


# ---------------------------------------------------------------------------
# Lenient diagram schema: coerces types and remaps alternate keys
# ---------------------------------------------------------------------------


class LenientNode(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str = ""
    label: str = ""

    @model_validator(mode="before")
    @classmethod
    def remap_keys(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return coerce_node_record(data)
        return data


class LenientEdge(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    from_: str = Field(default="", alias="from")
    to: str = ""

    @model_validator(mode="before")
    @classmethod
    def remap_keys(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return coerce_edge_record(data)
        return data


class LenientDiagram(BaseModel):
    model_config = ConfigDict(extra="ignore")

    nodes: List[LenientNode] = Field(default_factory=list)
    edges: List[LenientEdge] = Field(default_factory=list)

    @field_validator("nodes", "edges", mode="before")
    @classmethod
    def null_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @model_validator(mode="after")
    def drop_incomplete(self) -> "LenientDiagram":
        self.nodes = [n for n in self.nodes if n.id and n.label]
        self.edges = [e for e in self.edges if e.from_ and e.to]
        return self

    def canonical(self) -> Dict[str, Any]:
        return {
            "nodes": [n.model_dump() for n in self.nodes],
            "edges": [e.model_dump(by_alias=True) for e in self.edges],
        }


# ---------------------------------------------------------------------------
# Strict diagram schema: the invariants downstream code relies on
# ---------------------------------------------------------------------------


class StrictNode(BaseModel):
    id: str = Field(min_length=1)
    label: str = Field(min_length=1, max_length=MAX_LABEL_LENGTH)


class StrictEdge(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(min_length=1, alias="from")
    to: str = Field(min_length=1)


class StrictDiagram(BaseModel):
    nodes: List[StrictNode] = Field(max_length=MAX_NODES)
    edges: List[StrictEdge] = Field(max_length=MAX_EDGES)

    def to_diagram(self) -> Diagram:
        return diagram_from_dict(
            {
                "nodes": [n.model_dump() for n in self.nodes],
                "edges": [e.model_dump(by_alias=True) for e in self.edges],
            }
        )


def format_issues(exc: ValidationError) -> str:
    """Render pydantic errors as `path: message; ...`."""
    issues = []
    for err in exc.errors():
        path = ".".join(str(p) for p in err["loc"])
        issues.append(f"{path}: {err['msg']}" if path else err["msg"])
    return "; ".join(issues)
