"""Coordinates and sizes from ordered layers."""
from __future__ import annotations

from typing import Dict, Sequence, Tuple

from gradiol.utils.config import LayoutSettings


def node_size(attribute_count: int, config: LayoutSettings) -> Tuple[float, float]:
    """(width, height); the height grows to fit one line per attribute."""
    if attribute_count > 0:
        height = (
            config.attribute_header
            + attribute_count * config.attribute_line_height
            + config.attribute_padding
        )
        return config.node_width, height
    return config.node_width, config.node_height


def assign_coordinates(buckets: Sequence[Sequence[str]], config: LayoutSettings) -> Dict[str, Tuple[float, float]]:
    """Rows at fixed vertical steps, each centred under the widest row."""
    coords: Dict[str, Tuple[float, float]] = {}
    if not buckets:
        return coords

    widest = max(len(bucket) for bucket in buckets)
    center = (widest - 1) * config.gap_x / 2
    for layer, bucket in enumerate(buckets):
        row_width = (len(bucket) - 1) * config.gap_x
        start_x = center - row_width / 2
        y = config.top_margin + layer * config.gap_y
        for index, node_id in enumerate(bucket):
            coords[node_id] = (start_x + index * config.gap_x, y)
    return coords
