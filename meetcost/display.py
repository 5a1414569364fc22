"""Rich rendering of meeting cost results.

build_cost_panel() returns a renderable usable both for one-shot printing and
as the body of a rich.live.Live display; render_cost() prints it.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from meetcost.formatting import format_currency, format_duration, format_rate, summarize
from meetcost.models import CostResult


def build_cost_panel(
    result: CostResult,
    participants: int,
    hourly_rate: Optional[float] = None,
    running: bool = False,
) -> Panel:
    """Build the cost panel for a result."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Metric", style="dim", min_width=16)
    table.add_column("Value", justify="right", min_width=14)

    table.add_row("Total cost", f"[bold green]{format_currency(result.total_cost)}[/bold green]")
    table.add_row("Duration", format_duration(result.duration_hours))
    table.add_row("Cost per minute", format_rate(result.cost_per_minute))
    table.add_row("Cost per person", format_currency(result.cost_per_person))
    table.add_row("Participants", str(participants))
    if hourly_rate is not None:
        table.add_row("Hourly rate", format_currency(hourly_rate))

    parts = [table]
    summary = summarize(result, participants)
    if summary and not result.is_zero:
        parts.append(Text(""))
        parts.append(Text(summary, style="italic"))

    if running:
        title = "[bold yellow]Meeting Cost (live)[/bold yellow]"
        subtitle = "[dim]Ctrl+C to stop[/dim]"
    else:
        title = "[bold]Meeting Cost[/bold]"
        subtitle = None

    return Panel(Group(*parts), title=title, subtitle=subtitle, expand=False)


def render_cost(
    result: CostResult,
    participants: int,
    console: Console,
    hourly_rate: Optional[float] = None,
) -> None:
    """Print a cost panel, or a notice when there is nothing to show."""
    if result.is_zero:
        console.print("[yellow]No cost: check that the end is after the start "
                      "and participants and rate are positive.[/yellow]")
        return
    console.print()
    console.print(build_cost_panel(result, participants, hourly_rate=hourly_rate))
    console.print()
