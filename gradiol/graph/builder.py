"""Declarations → graph with unique ids and no dangling edges."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Set, Tuple

from gradiol.dsl.ast import EdgeDecl, NodeDecl, ParsedDocument
from gradiol.graph.catalog import ALIAS_KEYWORDS, resolve_node_type
from gradiol.graph.model import DiagramEdge, DiagramNode, Document, RoutingType

logger = logging.getLogger(__name__)

DEFAULT_NODE_LABEL = "Node"


@dataclass
class LabelIndex:
    """Label → node id lookup. Later registrations win over earlier ones."""

    ids_by_label: Dict[str, str] = field(default_factory=dict)
    node_ids: List[str] = field(default_factory=list)
    _known: Set[str] = field(default_factory=set, repr=False)

    def add_node(self, node_id: str, label: str) -> None:
        self.node_ids.append(node_id)
        self._known.add(node_id)
        self.ids_by_label[label] = node_id

    def alias(self, name: str, node_id: str) -> None:
        self.ids_by_label[name] = node_id

    def resolve(self, token: Optional[str]) -> Optional[str]:
        """Map a label (or a raw node id) to a known node id."""
        if not token:
            return None
        node_id = self.ids_by_label.get(token, token)
        return node_id if node_id in self._known else None


@dataclass(frozen=True)
class Adjacency:
    """Read-only parent/child view. Parallel edges collapse to one entry."""

    node_ids: Tuple[str, ...]
    children: Mapping[str, Tuple[str, ...]]
    parents: Mapping[str, Tuple[str, ...]]

    @classmethod
    def from_edges(cls, node_ids: Iterable[str], edges: Iterable[DiagramEdge]) -> "Adjacency":
        ids = tuple(node_ids)
        children: Dict[str, List[str]] = {node_id: [] for node_id in ids}
        parents: Dict[str, List[str]] = {node_id: [] for node_id in ids}
        for edge in edges:
            if edge.source not in children or edge.target not in children:
                continue
            if edge.target not in children[edge.source]:
                children[edge.source].append(edge.target)
            if edge.source not in parents[edge.target]:
                parents[edge.target].append(edge.source)
        return cls(
            node_ids=ids,
            children=MappingProxyType({k: tuple(v) for k, v in children.items()}),
            parents=MappingProxyType({k: tuple(v) for k, v in parents.items()}),
        )

    def roots(self) -> List[str]:
        """Nodes without parents; the first node when every node has one."""
        found = [node_id for node_id in self.node_ids if not self.parents[node_id]]
        if not found and self.node_ids:
            found = [self.node_ids[0]]
        return found


@dataclass
class BuiltGraph:
    document: Document
    labels: LabelIndex
    adjacency: Adjacency


def _build_node(decl: NodeDecl, node_id: str) -> DiagramNode:
    return DiagramNode(
        id=node_id,
        type=resolve_node_type(decl.node_type).value,
        label=decl.label or DEFAULT_NODE_LABEL,
        attributes=list(decl.attributes or []),
    )


def build_graph(parsed: ParsedDocument) -> BuiltGraph:
    labels = LabelIndex()
    nodes: List[DiagramNode] = []
    for decl in parsed.nodes:
        node = _build_node(decl, f"n{len(nodes) + 1}")
        nodes.append(node)
        labels.add_node(node.id, node.label)
        if decl.node_type in ALIAS_KEYWORDS:
            labels.alias(decl.node_type, node.id)

    edges: List[DiagramEdge] = []
    for index, decl in enumerate(parsed.edges, start=1):
        edge = _resolve_edge(decl, index, labels)
        if edge is not None:
            edges.append(edge)

    document = Document(nodes=nodes, edges=edges)
    adjacency = Adjacency.from_edges(labels.node_ids, edges)
    logger.debug("Built graph with %d node(s) and %d edge(s)", len(nodes), len(edges))
    return BuiltGraph(document=document, labels=labels, adjacency=adjacency)


def _resolve_edge(decl: EdgeDecl, index: int, labels: LabelIndex) -> Optional[DiagramEdge]:
    source = labels.resolve(decl.source)
    target = labels.resolve(decl.target)
    if source is None or target is None:
        logger.debug("Dropping edge %r -> %r: unresolved endpoint", decl.source, decl.target)
        return None
    return DiagramEdge(
        id=f"e{index}",
        source=source,
        target=target,
        label=decl.label,
        routing_type=RoutingType.STEP.value,
    )
