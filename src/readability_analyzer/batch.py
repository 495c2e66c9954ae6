from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import click
import pandas as pd

from .config import load_options, validate_options
from .errors import IngestError, InvalidOptionsError
from .ingest import load_documents
from .pipeline import analyze_batch
from .report import flatten_report

LOGGER = logging.getLogger(__name__)


@click.group(name="batch")
def batch_group() -> None:
    """Commands for analyzing many documents at once."""


@batch_group.command("table")
@click.option("--input-path", type=click.Path(exists=True), required=True)
@click.option("--output", type=click.Path(), required=True)
@click.option("--config", "config_path", type=click.Path(exists=True), default=None)
def table(input_path: str, output: str, config_path: str | None) -> None:
    """Write one row of metrics and scores per document to CSV or JSON."""
    try:
        options = validate_options(load_options(config_path))
        sources = load_documents(Path(input_path))
    except (IngestError, InvalidOptionsError) as exc:
        raise click.ClickException(str(exc)) from exc
    if not sources:
        raise click.ClickException(f"No supported documents found in {input_path}.")

    reports = analyze_batch([source.text for source in sources], options)
    rows: List[Dict[str, Any]] = [
        {"doc_id": source.doc_id, **flatten_report(report)}
        for source, report in zip(sources, reports)
    ]
    df = pd.DataFrame(rows)

    out_path = Path(output)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    if out_path.suffix.lower() == ".csv":
        df.to_csv(out_path, index=False)
    else:
        df.to_json(out_path, orient="records", indent=2)
    LOGGER.info("Wrote %d rows to %s", len(df), out_path)
    click.echo(f"Wrote {len(df)} rows to {out_path}")
