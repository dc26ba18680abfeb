from __future__ import annotations

from gradiol.compiler import compile_dsl
from gradiol.dsl.parser import parse_dsl
from gradiol.graph.builder import build_graph
from gradiol.graph.relationships import parse_cardinality_line, synthesize_relationship_edges

SHOP = """
entity Customer
entity Order
rel Places {
  "Customer" 1
  "Order" N
}
"""


def test_cardinality_lines():
    assert parse_cardinality_line('"Customer" 1') == ("Customer", "1")
    assert parse_cardinality_line("Line Item  0..N") == ("Line Item", "0..N")
    assert parse_cardinality_line("Customer") is None
    assert parse_cardinality_line('"" 1') is None


def test_relationship_block_creates_labeled_edges():
    compiled = compile_dsl(SHOP)
    edges = compiled.document.edges
    assert [(e.id, e.source, e.target, e.label) for e in edges] == [
        ("e_gen_n3_n1", "n3", "n1", "1"),
        ("e_gen_n3_n2", "n3", "n2", "N"),
    ]
    assert all(e.routing_type == "straight" for e in edges)
    assert compiled.synthesized == edges


def test_synthesis_is_idempotent():
    graph = build_graph(parse_dsl(SHOP))
    first = synthesize_relationship_edges(graph.document, graph.labels)
    second = synthesize_relationship_edges(graph.document, graph.labels)
    assert len(first) == 2
    assert second == []
    assert len(graph.document.edges) == 2


def test_existing_edge_in_either_direction_suppresses_synthesis():
    compiled = compile_dsl(SHOP + '\n"Order" -> "Places"')
    assert [e.target for e in compiled.synthesized] == ["n1"]
    assert len(compiled.document.edges) == 2


def test_unknown_entities_and_non_relationship_blocks_are_ignored():
    text = SHOP.replace('"Order" N', '"Invoice" N') + 'entity Product {\n  "Customer" 1\n}'
    compiled = compile_dsl(text)
    assert [(e.source, e.target) for e in compiled.synthesized] == [("n3", "n1")]


def test_relationship_node_written_without_block_adds_nothing():
    compiled = compile_dsl("entity Customer\nrel Places")
    assert compiled.synthesized == []


def test_synthesized_edges_do_not_move_nodes():
    compiled = compile_dsl(SHOP)
    layers = {n.label: n.layer for n in compiled.document.nodes}
    assert layers == {"Customer": 0, "Order": 0, "Places": 0}
