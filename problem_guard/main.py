from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from problem_guard.batch import check_records, load_records, persist_result
from problem_guard.config import get_settings
from problem_guard.reporter import build_schema_table, print_report
from problem_guard.utils.logging import configure_logging

app = typer.Typer(help="Shape guard for AtCoder merged problem records.")

EXIT_REJECTED = 1
EXIT_BAD_INPUT = 2


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} json_logs={settings.log_json} | "
        f"report_max_rejections={settings.report_max_rejections} | "
        f"sample_records={settings.sample_records} corruption_rate={settings.sample_corruption_rate}"
    )


@app.command()
def fields() -> None:
    """
    List the fields of a merged problem record and their rules.
    """
    Console().print(build_schema_table())


@app.command()
def check(
    path: Path = typer.Argument(..., help="JSON file holding a list of merged problems."),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit with status 1 if any record is rejected.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Optional path to write the check summary as JSON.",
    ),
    max_rejections: Optional[int] = typer.Option(
        None,
        "--max-rejections",
        "-n",
        help="Override how many rejected records are listed (default from settings).",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Emit logs as JSON.",
    ),
) -> None:
    """
    Check every record of a decoded JSON listing against the merged problem shape.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=json_logs or settings.log_json)

    try:
        records = load_records(path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        typer.echo(f"Cannot read {path}: {exc}", err=True)
        raise typer.Exit(code=EXIT_BAD_INPUT) from exc

    result = check_records(records)
    limit = max_rejections if max_rejections is not None else settings.report_max_rejections
    print_report(result, max_rejections=limit)

    if output:
        persist_result(result, output, source=str(path))
        typer.echo(f"Summary written to {output}")

    if strict and result.rejected:
        raise typer.Exit(code=EXIT_REJECTED)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
