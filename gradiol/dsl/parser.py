"""Text → declarations.

Example::

    @flowchart "Login Process"
    start "Begin"
    process "Input Credentials"
    decision "Valid?"
    start -> "Input Credentials"
    "Input Credentials" -> "Valid?"
    "Valid?" --no--> "Input Credentials"

Parsing never fails: lines that match no rule are skipped and reported in
``ParsedDocument.skipped``.
"""
from __future__ import annotations

import logging
from typing import Optional

from gradiol.dsl.ast import MetaDecl, NodeDecl, ParsedDocument, SkippedLine
from gradiol.dsl.grammar import BLOCK_CLOSE, is_ignorable, match_line

logger = logging.getLogger(__name__)


def parse_dsl(text: str) -> ParsedDocument:
    doc = ParsedDocument()
    open_block: Optional[NodeDecl] = None
    block_line = 0

    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if is_ignorable(line):
            continue

        if open_block is not None:
            if line == BLOCK_CLOSE:
                doc.declarations.append(open_block)
                open_block = None
            else:
                open_block.attributes.append(line)
            continue

        result = match_line(line)
        if result is None:
            logger.debug("Skipping unrecognized line %d: %r", line_number, line)
            doc.skipped.append(SkippedLine(line_number=line_number, text=line))
            continue

        decl = result.declaration
        if result.opens_block:
            open_block = decl
            block_line = line_number
        elif isinstance(decl, MetaDecl):
            doc.diagram_type = decl.diagram_type
            doc.title = decl.title
            doc.declarations.append(decl)
        else:
            doc.declarations.append(decl)

    if open_block is not None:
        logger.debug("Dropping block opened on line %d without closing brace", block_line)
        doc.skipped.append(
            SkippedLine(
                line_number=block_line,
                text=f"{open_block.node_type} {open_block.label} {{",
                reason="unclosed block",
            )
        )

    logger.debug(
        "Parsed %d node(s), %d edge(s), %d skipped line(s)",
        len(doc.nodes),
        len(doc.edges),
        len(doc.skipped),
    )
    return doc

