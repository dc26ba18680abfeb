"""CLI interface."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from gradiol.compiler import compile_dsl
from gradiol.dsl.ast import DEFAULT_DIAGRAM_TYPE, DEFAULT_TITLE, SkippedLine
from gradiol.dsl.parser import parse_dsl
from gradiol.dsl.serializer import serialize_to_text
from gradiol.graph.contract import DocumentContentError, document_from_json, document_to_json
from gradiol.templates import UnknownTemplateError, template_diagram, template_source

app = typer.Typer(add_completion=False, help="Compile diagram notation to laid-out documents and back.")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging.")):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _read_source(file: Optional[Path], text: Optional[str]) -> str:
    if file and text is not None:
        raise typer.BadParameter("--text cannot be combined with a file argument")
    if text is not None:
        return text
    if not file:
        raise typer.BadParameter("Provide FILE or --text")
    try:
        return file.read_text(encoding="utf-8")
    except OSError as exc:
        raise typer.BadParameter(f"Cannot read {file}: {exc}") from exc


def _report_skipped(skipped: List[SkippedLine]) -> None:
    for line in skipped:
        typer.echo(f"line {line.line_number}: {line.reason}: {line.text}", err=True)


@app.command("compile")
def compile_command(
    file: Optional[Path] = typer.Argument(None, help="Path to a diagram source file.", show_default=False),
    text: Optional[str] = typer.Option(None, "--text", "-t", help="Raw diagram source."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the document JSON here."),
):
    """Compile diagram notation to document JSON."""
    compiled = compile_dsl(_read_source(file, text))
    _report_skipped(compiled.skipped)
    payload = document_to_json(compiled.document)
    if output:
        output.write_text(payload + "\n", encoding="utf-8")
        typer.echo(f"Wrote {len(compiled.document.nodes)} nodes and {len(compiled.document.edges)} edges to {output}")
    else:
        typer.echo(payload)


@app.command()
def serialize(
    file: Path = typer.Argument(..., help="Path to a document JSON file."),
    diagram_type: str = typer.Option(DEFAULT_DIAGRAM_TYPE, "--diagram-type", "-d"),
    title: str = typer.Option(DEFAULT_TITLE, "--title"),
):
    """Write a document JSON file back out as diagram notation."""
    try:
        document = document_from_json(file.read_text(encoding="utf-8"))
    except OSError as exc:
        raise typer.BadParameter(f"Cannot read {file}: {exc}") from exc
    except DocumentContentError as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(serialize_to_text(document, diagram_type, title))


@app.command()
def check(
    file: Optional[Path] = typer.Argument(None, help="Path to a diagram source file.", show_default=False),
    text: Optional[str] = typer.Option(None, "--text", "-t", help="Raw diagram source."),
):
    """List lines the parser skipped; exit code 1 when there are any."""
    parsed = parse_dsl(_read_source(file, text))
    if parsed.skipped:
        _report_skipped(parsed.skipped)
        raise typer.Exit(code=1)
    typer.echo(f"OK: {len(parsed.nodes)} nodes, {len(parsed.edges)} edges")


@app.command()
def template(
    kind: str = typer.Argument(..., help="Diagram kind, e.g. flowchart or erd."),
    dsl: bool = typer.Option(False, "--dsl", help="Print the notation instead of document JSON."),
):
    """Print the starter diagram for a diagram kind."""
    try:
        if dsl:
            typer.echo(template_source(kind), nl=False)
            return
        compiled = template_diagram(kind)
    except UnknownTemplateError as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(document_to_json(compiled.document))


if __name__ == "__main__":
    app()
