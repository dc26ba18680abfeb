"""Graph model, construction and post-processing."""
from gradiol.graph.builder import Adjacency, BuiltGraph, LabelIndex, build_graph
from gradiol.graph.model import DiagramEdge, DiagramNode, Document, NodeType, Position, RoutingType
from gradiol.graph.relationships import synthesize_relationship_edges

__all__ = [
    "Adjacency",
    "BuiltGraph",
    "DiagramEdge",
    "DiagramNode",
    "Document",
    "LabelIndex",
    "NodeType",
    "Position",
    "RoutingType",
    "build_graph",
    "synthesize_relationship_edges",
]
