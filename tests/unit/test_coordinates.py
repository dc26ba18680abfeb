"""Unit tests for node sizing and coordinate assignment."""
from __future__ import annotations

import pytest

from gradiol.compiler import compile_dsl
from gradiol.layout.coordinates import assign_coordinates, node_size
from gradiol.utils.config import LayoutSettings

DEFAULTS = LayoutSettings()


def _positions(text: str, config: LayoutSettings | None = None) -> dict:
    document = compile_dsl(text, config).document
    return {n.label: (n.position.x, n.position.y) for n in document.nodes}


def test_two_node_chain_coordinates():
    assert _positions("process A\nprocess B\nA -> B") == {"A": (0, 60), "B": (0, 160)}


def test_rows_are_centred_under_the_widest_layer():
    text = """
    process Top
    process Left
    process Right
    process Mid
    process Bottom
    Top -> Left
    Top -> Right
    Right -> Mid
    Left -> Bottom
    Mid -> Bottom
    """
    positions = _positions(text)
    assert positions["Top"] == (90, 60)
    assert positions["Left"] == (0, 160)
    assert positions["Right"] == (180, 160)
    assert positions["Mid"] == (90, 260)
    assert positions["Bottom"] == (90, 360)


def test_plain_node_size():
    assert node_size(0, DEFAULTS) == (140, 60)


@pytest.mark.parametrize("count,height", [(1, 56), (2, 72), (3, 88)])
def test_attribute_nodes_grow_with_attribute_count(count, height):
    assert node_size(count, DEFAULTS) == (140, height)


def test_compiled_nodes_carry_sizes():
    text = 'entity "One" {\n  a\n}\nentity "Three" {\n  a\n  b\n  c\n}\nprocess "Plain"'
    nodes = {n.label: n for n in compile_dsl(text).document.nodes}
    assert nodes["One"].height < nodes["Three"].height
    assert nodes["Three"].height == 88
    assert nodes["Plain"].height == 60
    assert all(n.width == 140 for n in nodes.values())


def test_custom_settings_change_geometry():
    config = LayoutSettings(gap_x=50, gap_y=10, top_margin=0)
    positions = _positions("process A\nprocess B\nprocess C\nA -> B\nA -> C", config)
    assert positions == {"A": (25, 0), "B": (0, 10), "C": (50, 10)}


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("GRADIOL_LAYOUT_GAP_X", "200")
    assert LayoutSettings().gap_x == 200


def test_no_buckets_no_coordinates():
    assert assign_coordinates([], DEFAULTS) == {}


def test_layout_is_deterministic():
    text = 'process "A"\nprocess "B"\nprocess "C"\n"A" -> "B"\n"A" -> "C"\n"C" -> "B"'
    first = compile_dsl(text)
    second = compile_dsl(text)
    assert first.document.to_content() == second.document.to_content()
    assert first.to_text() == second.to_text()
