"""Entity-relationship edge synthesis.

A relationship node written in block form lists the entities it joins, one
per line, with a cardinality token last::

    rel "Places" {
      "Customer" 1
      "Order" N
    }

Each line whose entity label resolves becomes an edge from the relationship
node to the entity, labeled with the cardinality. Runs after layout, so the
new edges never move a node.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from gradiol.graph.builder import LabelIndex
from gradiol.graph.model import DiagramEdge, Document, NodeType, RoutingType

logger = logging.getLogger(__name__)


def parse_cardinality_line(line: str) -> Optional[Tuple[str, str]]:
    """Split ``<EntityLabel> <Cardinality>``; None when there is no label part."""
    parts = line.strip().rsplit(None, 1)
    if len(parts) != 2:
        return None
    label = parts[0].strip().strip('"').strip()
    if not label:
        return None
    return label, parts[1]


def synthesize_relationship_edges(document: Document, labels: LabelIndex) -> List[DiagramEdge]:
    """Append cardinality edges to ``document`` and return the ones added."""
    added: List[DiagramEdge] = []
    for node in document.nodes:
        if node.type != NodeType.RELATIONSHIP.value or not node.attributes:
            continue
        for line in node.attributes:
            parsed = parse_cardinality_line(line)
            if parsed is None:
                continue
            entity_label, cardinality = parsed
            target_id = labels.resolve(entity_label)
            if target_id is None:
                logger.debug("Relationship %s: no node labeled %r", node.id, entity_label)
                continue
            if any(edge.connects(node.id, target_id) for edge in document.edges):
                continue
            edge = DiagramEdge(
                id=f"e_gen_{node.id}_{target_id}",
                source=node.id,
                target=target_id,
                label=cardinality,
                routing_type=RoutingType.STRAIGHT.value,
            )
            document.edges.append(edge)
            added.append(edge)
    return added
