"""Node type catalog: notation keywords <-> semantic node types."""
from __future__ import annotations

from typing import Dict, Optional

from gradiol.graph.model import NodeType

TYPE_BY_KEYWORD: Dict[str, NodeType] = {
    "start": NodeType.START_END,
    "end": NodeType.START_END,
    "process": NodeType.PROCESS,
    "decision": NodeType.DECISION,
    "entity": NodeType.ENTITY,
    "actor": NodeType.ACTOR,
    "io": NodeType.INPUT_OUTPUT,
    "db": NodeType.DATABASE,
    "database": NodeType.DATABASE,
    "text": NodeType.TEXT,
    "lifeline": NodeType.LIFELINE,
    "usecase": NodeType.USECASE,
    "rel": NodeType.RELATIONSHIP,
    "attr": NodeType.ATTRIBUTE,
}

# Used when writing text back out; anything missing is written as "process".
KEYWORD_BY_TYPE: Dict[NodeType, str] = {
    NodeType.START_END: "start",
    NodeType.PROCESS: "process",
    NodeType.DECISION: "decision",
    NodeType.ENTITY: "entity",
    NodeType.ACTOR: "actor",
    NodeType.INPUT_OUTPUT: "io",
    NodeType.DATABASE: "database",
    NodeType.TEXT: "text",
    NodeType.LIFELINE: "lifeline",
    NodeType.USECASE: "usecase",
    NodeType.RELATIONSHIP: "rel",
    NodeType.ATTRIBUTE: "attr",
}

DEFAULT_KEYWORD = "process"

# keywords that also become label aliases for the node declaring them
ALIAS_KEYWORDS = ("start", "end")


def resolve_node_type(keyword: Optional[str]) -> NodeType:
    key = (keyword or "").lower()
    if key in TYPE_BY_KEYWORD:
        return TYPE_BY_KEYWORD[key]
    try:
        return NodeType(key)
    except ValueError:
        return NodeType.PROCESS


def keyword_for(node_type: str, label: str = "") -> str:
    """Keyword to write for a node; start/end nodes labeled "...end..." get ``end``."""
    try:
        kind = NodeType(node_type)
    except ValueError:
        return DEFAULT_KEYWORD
    if kind is NodeType.START_END and "end" in label.lower():
        return "end"
    return KEYWORD_BY_TYPE.get(kind, DEFAULT_KEYWORD)
