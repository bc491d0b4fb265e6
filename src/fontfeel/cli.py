"""CLI entry point for fontfeel - characterize and compare TTF/OTF/WOFF fonts."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from fontfeel.cli_helpers import (
    _configure_logging,
    _find_font_files,
    _print_result_summary,
    _show_output,
    _write_result,
    shared_output_options,
)
from fontfeel.utils import generate_slug

# -- CLI group --------------------------------------------------------------------------


@click.group()
@click.version_option(version="0.1.0", prog_name="fontfeel")
@click.option("-v", "--verbose", is_flag=True, hidden=True, help="Verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """Analyze TTF/OTF/WOFF fonts: style, metrics, personality and pairings."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


# -- analyze ---------------------------------------------------------------------------


@cli.command()
@click.argument("font_path", type=click.Path(exists=True, dir_okay=False))
@shared_output_options
def analyze(font_path, output, as_json, verbose):
    """Analyze a single font file."""
    _configure_logging(verbose)

    from fontfeel.analyzer import analyze_font
    from fontfeel.report import render_analysis

    try:
        result = analyze_font(font_path)
    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    _show_output(result, output, as_json, render_analysis)


# -- batch -----------------------------------------------------------------------------


@cli.command()
@click.argument("input_dir", type=click.Path(exists=True, file_okay=False))
@click.option("-o", "--output-dir", type=click.Path(), default=None, help="Output directory")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
def batch(input_dir, output_dir, verbose):
    """Analyze every TTF/OTF/WOFF/WOFF2 file in a directory, one JSON per font."""
    _configure_logging(verbose)

    from fontfeel.analyzer import analyze_font

    font_files = _find_font_files(input_dir)
    if not font_files:
        click.secho(f"No font files found in {input_dir}", fg="yellow")
        return

    out_dir = Path(output_dir) if output_dir else Path(input_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    click.echo(f"Analyzing {len(font_files)} font(s) from {input_dir}...\n")

    success, failed = 0, 0
    for font_file in font_files:
        click.echo(f"--- {font_file.name} ---")
        try:
            result = analyze_font(font_file)
        except Exception as e:
            click.secho(f"  Error: {e}", fg="red", err=True)
            failed += 1
            continue

        slug = generate_slug(result.name) or generate_slug(font_file.stem) or "font"
        out_file = str(out_dir / f"{slug}.json")
        _write_result(result, out_file)
        _print_result_summary(result, out_file)
        success += 1
        click.echo()

    click.echo(f"Done: {success} succeeded, {failed} failed out of {len(font_files)}.")


# -- compare ---------------------------------------------------------------------------


@cli.command()
@click.argument("primary_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("secondary_path", type=click.Path(exists=True, dir_okay=False))
@shared_output_options
def compare(primary_path, secondary_path, output, as_json, verbose):
    """Compare two fonts and score how well they pair."""
    _configure_logging(verbose)

    from fontfeel.comparator import compare_fonts
    from fontfeel.report import render_comparison

    try:
        comparison = compare_fonts(primary_path, secondary_path)
    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    _show_output(comparison, output, as_json, render_comparison)


# -- validate --------------------------------------------------------------------------


@cli.command("validate")
@click.argument("json_path", type=click.Path(exists=True))
def validate_cmd(json_path):
    """Validate a saved font analysis JSON file."""
    from fontfeel.validator import validate_file

    issues = validate_file(json_path)
    if not issues:
        click.secho(f"Validation passed: {json_path}", fg="green")
        return

    click.secho(f"Validation issues in {json_path} ({len(issues)}):", fg="yellow")
    for issue in issues:
        click.echo(f"  - {issue}")
    sys.exit(1)
