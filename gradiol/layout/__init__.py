"""Layered graph layout."""
from gradiol.layout.engine import layout_graph

__all__ = ["layout_graph"]
