from __future__ import annotations

import json
import logging
from dataclasses import replace as dc_replace
from pathlib import Path
from typing import Any, List, TypedDict

import click
import typer
import yaml

from .batch import batch_group
from .config import AnalysisOptions, load_options, validate_options
from .errors import IngestError, InvalidOptionsError
from .ingest import fetch_url_text, load_documents
from .models import SourceText
from .pipeline import analyze as analyze_text
from .pipeline import compare_texts
from .report import comparison_to_dict, format_summary, report_to_dict

app = typer.Typer(help="Readability Analyzer CLI.", no_args_is_help=True)


class DocumentPayload(TypedDict):
    doc_id: str
    report: dict[str, Any]


@app.command()
def analyze(
    input_path: Path | None = typer.Option(
        None, exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    url: str | None = typer.Option(None, "--url", help="Analyze text fetched from a URL."),
    config: Path | None = typer.Option(None, "--config", "-c"),
    min_word_length: int | None = typer.Option(
        None, "--min-word-length", help="Override min_word_length."
    ),
    max_results: int | None = typer.Option(
        None, "--max-results", help="Override max_frequency_results."
    ),
    readability: bool | None = typer.Option(
        None, "--readability/--no-readability", help="Toggle readability scores."
    ),
    frequency: bool | None = typer.Option(
        None, "--frequency/--no-frequency", help="Toggle word frequency analysis."
    ),
    reading_time: bool | None = typer.Option(
        None, "--reading-time/--no-reading-time", help="Toggle reading time estimates."
    ),
    ignore_code_blocks: bool | None = typer.Option(
        None,
        "--ignore-code-blocks/--keep-code-blocks",
        help="Strip fenced code blocks before analysis.",
    ),
    summary: bool = typer.Option(
        False, "--summary", help="Print plain-text summaries instead of JSON."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Analyze files, a directory, or a URL and emit readability reports."""
    _configure_logging(verbose)
    if input_path is not None and url is not None:
        raise typer.BadParameter("Provide only one of --input-path or --url.")

    options = _resolve_cli_options(
        config,
        min_word_length=min_word_length,
        max_frequency_results=max_results,
        include_readability=readability,
        include_frequency=frequency,
        include_reading_time=reading_time,
        ignore_code_blocks=ignore_code_blocks,
    )

    try:
        if input_path is not None:
            sources = load_documents(input_path)
        elif url is not None:
            sources = [SourceText(doc_id=url, text=fetch_url_text(url))]
        else:
            raise typer.BadParameter("Provide --input-path or --url.")
    except IngestError as exc:
        raise typer.BadParameter(str(exc)) from exc

    if summary:
        for source in sources:
            typer.echo(f"# {source.doc_id}")
            typer.echo(format_summary(analyze_text(source.text, options)))
            typer.echo("")
        return

    documents: List[DocumentPayload] = [
        {"doc_id": source.doc_id, "report": report_to_dict(analyze_text(source.text, options))}
        for source in sources
    ]
    typer.echo(json.dumps({"documents": documents}, indent=2))


@app.command()
def compare(
    first: Path = typer.Option(..., exists=True, readable=True, dir_okay=False),
    second: Path = typer.Option(..., exists=True, readable=True, dir_okay=False),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Compare the readability and vocabulary of two files."""
    options = _resolve_cli_options(config)
    try:
        first_source = load_documents(first)[0]
        second_source = load_documents(second)[0]
    except IngestError as exc:
        raise typer.BadParameter(str(exc)) from exc
    comparison = compare_texts(first_source.text, second_source.text, options)
    typer.echo(json.dumps(comparison_to_dict(comparison), indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default analysis options as YAML."""
    options = AnalysisOptions()
    typer.echo(yaml.safe_dump(options.to_dict(), sort_keys=False))


def main() -> None:
    command = typer.main.get_command(app)
    if isinstance(command, click.Group):
        command.add_command(batch_group)
    command()


def _resolve_cli_options(config: Path | None, **overrides: Any) -> AnalysisOptions:
    """Load options from YAML and apply any CLI overrides that were given."""
    try:
        options = load_options(config)
        changes = {key: value for key, value in overrides.items() if value is not None}
        if changes:
            options = dc_replace(options, **changes)
        return validate_options(options)
    except InvalidOptionsError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )
