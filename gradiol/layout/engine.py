"""Layered layout: layers, in-layer order, coordinates and sizes."""
from __future__ import annotations

import logging
from typing import Optional

from gradiol.graph.builder import BuiltGraph
from gradiol.graph.model import Document, Position
from gradiol.layout.coordinates import assign_coordinates, node_size
from gradiol.layout.layering import assign_layers
from gradiol.layout.ordering import group_layers, order_layers
from gradiol.utils.config import LayoutSettings, settings

logger = logging.getLogger(__name__)


def layout_graph(graph: BuiltGraph, config: Optional[LayoutSettings] = None) -> Document:
    """Place every node of ``graph.document`` in place and return the document.

    Only edges present in ``graph.adjacency`` influence placement; edges added
    to the document afterwards do not move anything.
    """
    config = config or settings
    adjacency = graph.adjacency

    layers = assign_layers(adjacency)
    buckets = group_layers(layers)
    positions = order_layers(buckets, adjacency, layers)
    coords = assign_coordinates(buckets, config)

    for node in graph.document.nodes:
        x, y = coords.get(node.id, (0, 0))
        node.layer = layers.get(node.id, 0)
        node.order = positions.get(node.id, 0)
        node.position = Position(x=x, y=y)
        node.width, node.height = node_size(len(node.attributes), config)

    logger.debug("Laid out %d node(s) on %d layer(s)", len(graph.document.nodes), len(buckets))
    return graph.document
