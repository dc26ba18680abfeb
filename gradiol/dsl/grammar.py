"""Ordered line grammar for the diagram notation.

Each rule is tried in ``GRAMMAR`` order and the first match wins. Several
patterns are textual subsets of later ones (every labeled edge also looks like
a bare edge), so the order of the tuple is part of the language.

Block handling (``}`` and lines inside ``{ ... }``) depends on parser state and
lives in :mod:`gradiol.dsl.parser`; the rules here are stateless.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from gradiol.dsl.ast import Declaration, EdgeDecl, MetaDecl, NodeDecl

COMMENT_PREFIX = "//"
BLOCK_CLOSE = "}"


def _endpoint(name: str) -> str:
    # "quoted label" or a bare run of non-quote characters
    return rf'(?:"(?P<{name}_q>[^"]+)"|(?P<{name}>[^"]+?))'


_META_RE = re.compile(rf"^@(?P<kind>\w+)\s+{_endpoint('title')}$")
_EDGE_INLINE_RE = re.compile(
    rf"^{_endpoint('src')}\s+--(?P<label>[^-]+)-->\s+{_endpoint('dst')}$"
)
_EDGE_COLON_RE = re.compile(
    rf"^{_endpoint('src')}\s+->\s+{_endpoint('dst')}\s*:\s*(?P<label>.+)$"
)
_EDGE_RE = re.compile(rf"^{_endpoint('src')}\s+->\s+{_endpoint('dst')}$")
_BLOCK_START_RE = re.compile(
    r'^(?P<type>\w+)\s+(?:"(?P<label_q>[^"]+)"|(?P<label>[^"{]+?))\s*\{$'
)
_NODE_QUOTED_RE = re.compile(r'^(?P<type>\w+)\s+"(?P<label_q>[^"]+)"$')
_NODE_BARE_RE = re.compile(r'^(?P<type>\w+)\s+(?P<label>[^\s{}"\->]+)$')


def _pick(match: re.Match, name: str) -> str:
    quoted = match.groupdict().get(f"{name}_q")
    if quoted is not None:
        return quoted
    return (match.group(name) or "").strip()


def _meta(match: re.Match) -> MetaDecl:
    return MetaDecl(diagram_type=match.group("kind"), title=_pick(match, "title"))


def _labeled_edge(match: re.Match) -> EdgeDecl:
    return EdgeDecl(
        source=_pick(match, "src"),
        target=_pick(match, "dst"),
        label=match.group("label").strip(),
    )


def _edge(match: re.Match) -> EdgeDecl:
    return EdgeDecl(source=_pick(match, "src"), target=_pick(match, "dst"))


def _block_start(match: re.Match) -> NodeDecl:
    return NodeDecl(node_type=match.group("type"), label=_pick(match, "label"), attributes=[])


def _node(match: re.Match) -> NodeDecl:
    return NodeDecl(node_type=match.group("type"), label=_pick(match, "label"))


@dataclass(frozen=True)
class GrammarRule:
    name: str
    pattern: re.Pattern
    build: Callable[[re.Match], Declaration]
    opens_block: bool = False


@dataclass(frozen=True)
class RuleMatch:
    """Tagged result of matching one line: which rule fired and what it built."""

    rule: str
    declaration: Declaration
    opens_block: bool = False


GRAMMAR: Tuple[GrammarRule, ...] = (
    GrammarRule("meta", _META_RE, _meta),
    GrammarRule("edge_inline_label", _EDGE_INLINE_RE, _labeled_edge),
    GrammarRule("edge_colon_label", _EDGE_COLON_RE, _labeled_edge),
    GrammarRule("edge", _EDGE_RE, _edge),
    GrammarRule("block_start", _BLOCK_START_RE, _block_start, opens_block=True),
    GrammarRule("node_quoted", _NODE_QUOTED_RE, _node),
    GrammarRule("node_bare", _NODE_BARE_RE, _node),
)


def match_line(line: str, rules: Tuple[GrammarRule, ...] = GRAMMAR) -> Optional[RuleMatch]:
    """Return the first rule matching ``line`` (already stripped), or None."""
    for rule in rules:
        m = rule.pattern.match(line)
        if m:
            return RuleMatch(rule=rule.name, declaration=rule.build(m), opens_block=rule.opens_block)
    return None


def is_ignorable(line: str) -> bool:
    return not line or line.startswith(COMMENT_PREFIX)
