from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path
from typing import Any

import typer
import yaml

from respect.config import resolve_config
from respect.core.comparator import respect_diffs
from respect.core.config import RespectConfig
from respect.core.constants import EXIT_INTERNAL_ERROR, EXIT_MISMATCH, EXIT_SUCCESS
from respect.core.options import Options, option_names
from respect.report import diffs_to_payload, render_text, write_reports


def _version_callback(value: bool) -> None:
    if value:
        from respect import __version__

        typer.echo(f"respect {__version__}")
        raise typer.Exit()


app = typer.Typer(add_completion=False, help="Partial-match comparison of structured documents")


@app.callback(invoke_without_command=True)
def _main(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Print version and exit."
    ),
) -> None:
    pass


def _load_document(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ValueError(f"Cannot read {path}: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"Cannot parse {path}: {exc}") from exc


def _build_config(
    *,
    config_path: Path | None,
    max_diff: int | None,
    float_precision: int | None,
    flags: Options,
) -> RespectConfig:
    config = resolve_config(config_path)
    if max_diff is not None:
        config = replace(config, max_diff=max_diff)
    if float_precision is not None:
        config = replace(config, float_precision=float_precision)
    return config.with_options(flags)


@app.command()
def check(
    actual: Path = typer.Argument(..., help="Actual document (YAML or JSON)"),
    expected: Path = typer.Argument(..., help="Expected pattern document (YAML or JSON)"),
    order_matters: bool = typer.Option(False, "--order-matters", help="Compare list items by position."),
    length_matters: bool = typer.Option(False, "--length-matters", help="Flag lists longer than the pattern."),
    zero_value_matters: bool = typer.Option(
        False, "--zero-value-matters", help="Assert zero values in the pattern instead of ignoring them."
    ),
    max_diff: int | None = typer.Option(None, "--max-diff", help="Maximum number of diagnostics"),
    float_precision: int | None = typer.Option(None, "--float-precision", help="Decimal places for floats"),
    config_path: Path | None = typer.Option(None, "--config", help="YAML config file"),
    json_output: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    report_dir: Path | None = typer.Option(None, "--report-dir", help="Write respect.json and respect.md here"),
) -> None:
    """Check that ACTUAL respects the pattern in EXPECTED."""
    flags = Options.NONE
    if order_matters:
        flags |= Options.ORDER_MATTERS
    if length_matters:
        flags |= Options.LENGTH_MATTERS
    if zero_value_matters:
        flags |= Options.ZERO_VALUE_MATTERS

    try:
        config = _build_config(
            config_path=config_path,
            max_diff=max_diff,
            float_precision=float_precision,
            flags=flags,
        )
        actual_doc = _load_document(actual)
        expected_doc = _load_document(expected)
    except ValueError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(EXIT_INTERNAL_ERROR) from exc

    diffs = respect_diffs(actual_doc, expected_doc, config=config)

    if report_dir is not None:
        write_reports(
            title=f"{actual.name} vs {expected.name}",
            diffs=diffs,
            json_path=report_dir / "respect.json",
            md_path=report_dir / "respect.md",
        )

    if json_output:
        payload = diffs_to_payload(diffs)
        payload["options"] = option_names(config.options)
        typer.echo(json.dumps(payload, indent=2, sort_keys=True, default=str))
    elif diffs:
        typer.echo(render_text(diffs))
    else:
        typer.echo(f"{actual} respects {expected}")

    raise typer.Exit(EXIT_MISMATCH if diffs else EXIT_SUCCESS)
