"""Grouping nodes into layers and ordering each layer.

Ordering is one forward sweep of the barycenter heuristic: each layer is
sorted by the mean position of its parents in earlier layers. Earlier layers
are never revisited, so some avoidable crossings remain.
"""
from __future__ import annotations

from typing import Dict, List, Mapping

from gradiol.graph.builder import Adjacency


def group_layers(layers: Mapping[str, int]) -> List[List[str]]:
    """Bucket node ids by layer, each bucket in lexical id order."""
    if not layers:
        return []
    buckets: List[List[str]] = [[] for _ in range(max(layers.values()) + 1)]
    for node_id in sorted(layers):
        buckets[layers[node_id]].append(node_id)
    return buckets


def _barycenter(node_id: str, layer: int, adjacency: Adjacency, layers: Mapping[str, int], positions: Mapping[str, int]) -> float:
    placed = [p for p in adjacency.parents[node_id] if layers[p] < layer]
    if not placed:
        return 0
    return sum(positions.get(p, 0) for p in placed) / len(placed)


def order_layers(buckets: List[List[str]], adjacency: Adjacency, layers: Mapping[str, int]) -> Dict[str, int]:
    """Sort ``buckets`` in place and return each node's index within its layer."""
    positions: Dict[str, int] = {}
    if not buckets:
        return positions

    for index, node_id in enumerate(buckets[0]):
        positions[node_id] = index

    for layer in range(1, len(buckets)):
        keys = {
            node_id: _barycenter(node_id, layer, adjacency, layers, positions)
            for node_id in buckets[layer]
        }
        buckets[layer].sort(key=keys.__getitem__)
        for index, node_id in enumerate(buckets[layer]):
            positions[node_id] = index
    return positions
