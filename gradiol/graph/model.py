"""Graph/document model shared with rendering and persistence collaborators.

``Document.to_content()`` is the persisted ``{nodes, edges}`` shape. ``layer``
and ``order`` are layout working fields and are not part of that shape.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class NodeType(str, Enum):
    PROCESS = "process"
    DECISION = "decision"
    START_END = "start-end"
    ENTITY = "entity"
    ACTOR = "actor"
    ATTRIBUTE = "attribute"
    RELATIONSHIP = "relationship"
    USECASE = "usecase"
    LIFELINE = "lifeline"
    TEXT = "text"
    INPUT_OUTPUT = "input-output"
    DATABASE = "database"


class RoutingType(str, Enum):
    DEFAULT = "default"
    STEP = "step"
    STRAIGHT = "straight"
    BEZIER = "bezier"


class Position(BaseModel):
    x: float = 0
    y: float = 0


class DiagramNode(BaseModel):
    id: str
    type: str = NodeType.PROCESS.value
    label: str
    position: Position = Field(default_factory=Position)
    width: Optional[float] = None
    height: Optional[float] = None
    attributes: List[str] = Field(default_factory=list)
    layer: int = Field(default=0, ge=0, exclude=True)
    order: int = Field(default=0, ge=0, exclude=True)


class DiagramEdge(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    source: str
    target: str
    label: Optional[str] = None
    routing_type: Optional[str] = Field(default=None, alias="routingType")

    def connects(self, a: str, b: str) -> bool:
        """True when the edge joins ``a`` and ``b`` in either direction."""
        return (self.source == a and self.target == b) or (self.source == b and self.target == a)


class Document(BaseModel):
    nodes: List[DiagramNode] = Field(default_factory=list)
    edges: List[DiagramEdge] = Field(default_factory=list)

    def to_content(self) -> Dict[str, Any]:
        payload = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        for node in payload["nodes"]:
            if not node.get("attributes"):
                node.pop("attributes", None)
        return payload
