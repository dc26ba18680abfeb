"""Diagram notation compiler: text to laid-out graph documents and back."""
from gradiol.compiler import CompiledDiagram, compile_dsl
from gradiol.dsl.parser import parse_dsl
from gradiol.dsl.serializer import serialize_to_text
from gradiol.graph.builder import build_graph
from gradiol.graph.model import Document
from gradiol.graph.relationships import synthesize_relationship_edges
from gradiol.layout.engine import layout_graph

__all__ = [
    "CompiledDiagram",
    "Document",
    "build_graph",
    "compile_dsl",
    "layout_graph",
    "parse_dsl",
    "serialize_to_text",
    "synthesize_relationship_edges",
]
