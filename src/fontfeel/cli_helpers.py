"""CLI helper functions, decorators, and option definitions for fontfeel."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from fontfeel.config import FONT_EXTENSIONS

if TYPE_CHECKING:
    from fontfeel.schema import FontAnalysisResult, FontComparisonResult


def shared_output_options(func):
    """Decorator that adds the common output options to a command."""
    options = [
        click.option("-o", "--output", type=click.Path(), default=None, help="Write JSON here"),
        click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a report"),
        click.option("-v", "--verbose", is_flag=True, help="Verbose output"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


def _find_font_files(input_dir: str) -> list[Path]:
    """Font files directly inside input_dir, sorted by name."""
    return sorted(
        p for p in Path(input_dir).iterdir() if p.is_file() and p.suffix.lower() in FONT_EXTENSIONS
    )


def _to_json(result: FontAnalysisResult | FontComparisonResult) -> str:
    return json.dumps(result.to_json_dict(), indent=2, ensure_ascii=False)


def _write_result(result: FontAnalysisResult | FontComparisonResult, output_path: str) -> dict:
    """Write a result to JSON, return the serialized data dict."""
    data = result.to_json_dict()
    Path(output_path).write_text(
        json.dumps(data, indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    return data


def _print_result_summary(result: FontAnalysisResult, output_path: str) -> None:
    """Print the one-line summary after a successful analysis was written."""
    click.secho(f"Wrote {output_path}", fg="green")
    click.echo(f"  Font: {result.name} ({result.format}, {result.style})")
    click.echo(f"  Weight: {result.weight}, Width: {result.width}")


def _show_output(
    result: FontAnalysisResult | FontComparisonResult,
    output: str | None,
    as_json: bool,
    render,
) -> None:
    """Write to `output` if given, then print JSON or the text report."""
    if output:
        _write_result(result, output)
        click.secho(f"Wrote {output}", fg="green")
    if as_json:
        click.echo(_to_json(result))
    elif not output:
        click.echo(render(result))
