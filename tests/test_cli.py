from __future__ import annotations

import json

from typer.testing import CliRunner

from gradiol.cli import app
from gradiol.compiler import compile_dsl
from gradiol.graph.contract import document_to_json

runner = CliRunner()


def test_compile_inline_text():
    result = runner.invoke(app, ["compile", "--text", "process A\nprocess B\nA -> B"])
    assert result.exit_code == 0, result.output
    content = json.loads(result.output)
    assert [n["id"] for n in content["nodes"]] == ["n1", "n2"]
    assert content["edges"][0]["routingType"] == "step"


def test_compile_file_to_output(tmp_path):
    source = tmp_path / "shop.gd"
    source.write_text('@erd "Shop"\nentity Customer\nentity Order\n', encoding="utf-8")
    output = tmp_path / "shop.json"

    result = runner.invoke(app, ["compile", str(source), "--output", str(output)])
    assert result.exit_code == 0, result.output
    assert "Wrote 2 nodes and 0 edges" in result.output
    assert len(json.loads(output.read_text(encoding="utf-8"))["nodes"]) == 2


def test_compile_requires_input():
    result = runner.invoke(app, ["compile"])
    assert result.exit_code == 2


def test_compile_rejects_file_and_text_together(tmp_path):
    source = tmp_path / "a.gd"
    source.write_text("process A", encoding="utf-8")
    result = runner.invoke(app, ["compile", str(source), "--text", "process B"])
    assert result.exit_code == 2


def test_check_reports_skipped_lines():
    result = runner.invoke(app, ["check", "--text", "process A\n???"])
    assert result.exit_code == 1
    assert "line 2: unrecognized: ???" in result.output


def test_check_ok():
    result = runner.invoke(app, ["check", "--text", "process A\nprocess B\nA -> B"])
    assert result.exit_code == 0
    assert "OK: 2 nodes, 1 edges" in result.output


def test_serialize_document_file(tmp_path):
    path = tmp_path / "doc.json"
    path.write_text(document_to_json(compile_dsl("process A\nprocess B\nA -> B : go").document), encoding="utf-8")

    result = runner.invoke(app, ["serialize", str(path), "--diagram-type", "flowchart", "--title", "Demo"])
    assert result.exit_code == 0, result.output
    assert result.output.startswith('@flowchart "Demo"')
    assert '"A" -> "B" : go' in result.output


def test_serialize_rejects_bad_document(tmp_path):
    path = tmp_path / "doc.json"
    path.write_text('{"nodes": []}', encoding="utf-8")
    result = runner.invoke(app, ["serialize", str(path)])
    assert result.exit_code == 2


def test_template_dsl_and_json():
    dsl = runner.invoke(app, ["template", "erd", "--dsl"])
    assert dsl.exit_code == 0
    assert 'rel "Places" {' in dsl.output

    compiled = runner.invoke(app, ["template", "mindmap"])
    assert compiled.exit_code == 0
    content = json.loads(compiled.output)
    assert set(content) == {"nodes", "edges"}
    assert len(content["nodes"]) == 7


def test_template_output_feeds_serialize(tmp_path):
    path = tmp_path / "flowchart.json"
    template = runner.invoke(app, ["template", "flowchart"])
    assert template.exit_code == 0, template.output
    path.write_text(template.output, encoding="utf-8")

    result = runner.invoke(app, ["serialize", str(path), "--title", "Request Handling"])
    assert result.exit_code == 0, result.output
    assert result.output.startswith('@flowchart "Request Handling"')
    assert '"Is Valid?" -> "Log Error" : No' in result.output


def test_template_unknown_kind():
    result = runner.invoke(app, ["template", "gantt"])
    assert result.exit_code == 2
