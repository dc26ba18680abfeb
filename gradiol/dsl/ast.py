"""Declarations produced by the parser, before id resolution."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

DEFAULT_DIAGRAM_TYPE = "flowchart"
DEFAULT_TITLE = "Untitled"


@dataclass
class MetaDecl:
    diagram_type: str = DEFAULT_DIAGRAM_TYPE
    title: str = DEFAULT_TITLE


@dataclass
class NodeDecl:
    node_type: str
    label: str
    attributes: Optional[List[str]] = None  # block form only


@dataclass
class EdgeDecl:
    source: str
    target: str
    label: Optional[str] = None


Declaration = Union[MetaDecl, NodeDecl, EdgeDecl]


@dataclass
class SkippedLine:
    line_number: int
    text: str
    reason: str = "unrecognized"


@dataclass
class ParsedDocument:
    diagram_type: str = DEFAULT_DIAGRAM_TYPE
    title: str = DEFAULT_TITLE
    declarations: List[Declaration] = field(default_factory=list)
    skipped: List[SkippedLine] = field(default_factory=list)

    @property
    def nodes(self) -> List[NodeDecl]:
        return [d for d in self.declarations if isinstance(d, NodeDecl)]

    @property
    def edges(self) -> List[EdgeDecl]:
        return [d for d in self.declarations if isinstance(d, EdgeDecl)]
