"""Layer (rank) assignment.

A node's layer is the deepest level at which the worklist reaches it from any
root, so a node where branches merge sits below every branch feeding it.
Edges that close a cycle are left out of the walk; otherwise the depth of a
cycle member would grow without bound.
"""
from __future__ import annotations

from collections import deque
from typing import Deque, Dict, FrozenSet, Iterable, Set, Tuple

import networkx as nx

from gradiol.graph.builder import Adjacency

Edge = Tuple[str, str]


def _to_digraph(adjacency: Adjacency, roots: Iterable[str]) -> nx.DiGraph:
    # roots first so the depth-first walk starts from them
    graph = nx.DiGraph()
    graph.add_nodes_from(roots)
    graph.add_nodes_from(adjacency.node_ids)
    for node_id in adjacency.node_ids:
        graph.add_edges_from((node_id, child) for child in adjacency.children[node_id])
    return graph


def find_back_edges(adjacency: Adjacency, roots: Iterable[str]) -> FrozenSet[Edge]:
    """Edges pointing at a node still on the depth-first stack."""
    on_stack: Set[str] = set()
    back: Set[Edge] = set()
    for source, target, kind in nx.dfs_labeled_edges(_to_digraph(adjacency, roots)):
        if kind == "forward":
            on_stack.add(target)
        elif kind == "reverse":
            on_stack.discard(target)
        elif kind == "nontree" and target in on_stack:
            back.add((source, target))
    return frozenset(back)


def assign_layers(adjacency: Adjacency) -> Dict[str, int]:
    """Map every node id to its layer; unreached nodes land on layer 0."""
    roots = adjacency.roots()
    skip = find_back_edges(adjacency, roots)

    layers: Dict[str, int] = {}
    frontier: Deque[Tuple[str, int]] = deque((root, 0) for root in roots)
    while frontier:
        node, depth = frontier.popleft()
        if depth <= layers.get(node, -1):
            continue
        layers[node] = depth
        for child in adjacency.children[node]:
            if (node, child) not in skip:
                frontier.append((child, depth + 1))

    for node_id in adjacency.node_ids:
        layers.setdefault(node_id, 0)
    return layers
