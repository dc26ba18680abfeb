"""Text → laid-out document, end to end."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from gradiol.dsl.ast import SkippedLine
from gradiol.dsl.parser import parse_dsl
from gradiol.dsl.serializer import serialize_to_text
from gradiol.graph.builder import build_graph
from gradiol.graph.model import DiagramEdge, Document
from gradiol.graph.relationships import synthesize_relationship_edges
from gradiol.layout.engine import layout_graph
from gradiol.utils.config import LayoutSettings


@dataclass
class CompiledDiagram:
    diagram_type: str
    title: str
    document: Document
    skipped: List[SkippedLine] = field(default_factory=list)
    synthesized: List[DiagramEdge] = field(default_factory=list)

    def to_text(self) -> str:
        return serialize_to_text(self.document, self.diagram_type, self.title)


def compile_dsl(text: str, config: Optional[LayoutSettings] = None) -> CompiledDiagram:
    """Parse, build, lay out, then add relationship edges.

    Relationship edges are added after layout and do not affect placement.
    """
    parsed = parse_dsl(text)
    graph = build_graph(parsed)
    layout_graph(graph, config)
    synthesized = synthesize_relationship_edges(graph.document, graph.labels)
    return CompiledDiagram(
        diagram_type=parsed.diagram_type,
        title=parsed.title,
        document=graph.document,
        skipped=list(parsed.skipped),
        synthesized=synthesized,
    )
