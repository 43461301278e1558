from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from problem_guard.batch import BatchResult
from problem_guard.domain.schema import MERGED_PROBLEM_SCHEMA, Schema


def build_rejection_table(result: BatchResult, max_rejections: int = 20) -> Table:
    """
    Build a table listing the first ``max_rejections`` rejected records.
    """
    rejections = result.rejections
    shown = rejections[:max_rejections] if max_rejections >= 0 else rejections

    caption = None
    if len(shown) < len(rejections):
        caption = f"{len(rejections) - len(shown):,} more rejected records not shown"

    table = Table(
        title=f"Rejected Records ({result.rejected:,} of {result.total:,})",
        box=box.ROUNDED,
        caption=caption,
    )
    table.add_column("#", justify="right", style="magenta")
    table.add_column("Problem", style="cyan", no_wrap=True)
    table.add_column("Field", style="yellow")
    table.add_column("Reason", style="red")

    for verdict in shown:
        violation = verdict.violation
        table.add_row(
            str(verdict.index),
            escape(verdict.problem_id) if verdict.problem_id else "[dim]unknown[/dim]",
            escape(violation.field) if violation else "",
            escape(violation.reason) if violation else "",
        )
    return table


def build_schema_table(schema: Schema = MERGED_PROBLEM_SCHEMA) -> Table:
    table = Table(title="Merged Problem Fields", box=box.ROUNDED)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Group", style="blue")
    table.add_column("Kind", style="green")
    table.add_column("Presence", style="yellow")
    for rule in schema:
        table.add_row(rule.name, rule.group, rule.kind.value, rule.presence.value)
    return table


def print_report(
    result: BatchResult,
    max_rejections: int = 20,
    console: Optional[Console] = None,
) -> None:
    """Print a summary line and, if anything was rejected, the rejection table."""
    console = console or Console()
    style = "green" if result.rejected == 0 else "yellow"
    console.print(
        f"[{style}]Accepted {result.accepted:,} / {result.total:,} records "
        f"({result.rejected:,} rejected)[/{style}]"
    )
    if result.rejected:
        console.print(build_rejection_table(result, max_rejections=max_rejections))
