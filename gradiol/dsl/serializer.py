"""Document → notation text.

Re-parsing the output rebuilds a graph with the same nodes, edges and edge
labels; layout is recomputed rather than preserved. Text the notation cannot
carry is rewritten on the way out: double quotes in labels become single
quotes, line breaks become spaces, and empty labels become ``Node``.
"""
from __future__ import annotations

import logging
from typing import Dict, List

from gradiol.dsl.ast import DEFAULT_DIAGRAM_TYPE, DEFAULT_TITLE
from gradiol.dsl.grammar import BLOCK_CLOSE, COMMENT_PREFIX
from gradiol.graph.builder import DEFAULT_NODE_LABEL
from gradiol.graph.catalog import keyword_for
from gradiol.graph.model import Document

logger = logging.getLogger(__name__)

ATTRIBUTE_INDENT = "  "


def _one_line(text: str) -> str:
    return " ".join(text.splitlines()).strip()


def _quotable(text: str, fallback: str = DEFAULT_NODE_LABEL) -> str:
    return _one_line(text).replace('"', "'") or fallback


def _attribute_lines(node_id: str, attributes: List[str]) -> List[str]:
    # inside a block "}" closes it and "//" lines are comments
    kept: List[str] = []
    for attr in attributes:
        line = _one_line(attr)
        if not line or line == BLOCK_CLOSE or line.startswith(COMMENT_PREFIX):
            logger.debug("Node %s: leaving out attribute %r", node_id, attr)
            continue
        kept.append(line)
    return kept


def serialize_to_text(document: Document, diagram_type: str = DEFAULT_DIAGRAM_TYPE, title: str = DEFAULT_TITLE) -> str:
    lines: List[str] = [f'@{diagram_type} "{_quotable(title, DEFAULT_TITLE)}"', ""]

    label_by_id: Dict[str, str] = {node.id: _quotable(node.label) for node in document.nodes}

    for node in document.nodes:
        label = label_by_id[node.id]
        keyword = keyword_for(node.type, label)
        attributes = _attribute_lines(node.id, node.attributes)
        if attributes:
            lines.append(f'{keyword} "{label}" {{')
            lines.extend(f"{ATTRIBUTE_INDENT}{attr}" for attr in attributes)
            lines.append("}")
        else:
            lines.append(f'{keyword} "{label}"')

    if document.edges:
        lines.append("")

    for edge in document.edges:
        source = label_by_id.get(edge.source, edge.source)
        target = label_by_id.get(edge.target, edge.target)
        edge_label = _one_line(edge.label or "")
        if edge_label:
            lines.append(f'"{source}" -> "{target}" : {edge_label}')
        else:
            lines.append(f'"{source}" -> "{target}"')

    return "\n".join(lines)
