"""CLI for meetcost.

Usage:
    python -m meetcost calc --start 09:00 --end 10:30 -p 8 --rate 50   # Past meeting
    python -m meetcost calc --start 09:00 --end 10:30 --salary 85000   # From salary
    python -m meetcost rate 85000                                      # Hourly rate
    python -m meetcost live -p 6 --salary 120000                       # Live timer
"""

from __future__ import annotations

import json
import logging
import time
from datetime import date, datetime
from typing import Optional

import typer
from rich.console import Console
from rich.live import Live

from meetcost.config import load_defaults
from meetcost.display import build_cost_panel, render_cost
from meetcost.formatting import format_currency
from meetcost.log import setup_logging
from meetcost.pricing import WORK_HOURS_PER_YEAR, calculate_meeting_cost, convert_annual_to_hourly
from meetcost.timer import MeetingTimer

app = typer.Typer(
    name="meetcost",
    help="Work out what a meeting costs",
    no_args_is_help=True,
)
console = Console(stderr=True)

_TIME_FORMATS = ("%H:%M", "%H:%M:%S")


def _parse_clock_time(value: str, label: str, day: date) -> datetime:
    """Parse an HH:MM[:SS] clock time on ``day``."""
    for fmt in _TIME_FORMATS:
        try:
            return datetime.combine(day, datetime.strptime(value.strip(), fmt).time())
        except ValueError:
            continue
    console.print(f"[red]Invalid {label} time: {value}[/red]. Use HH:MM, e.g. 09:30")
    raise typer.Exit(1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Work out what a meeting costs."""
    level = logging.DEBUG if verbose else load_defaults().log_level
    setup_logging(level)


@app.command("calc")
def cmd_calc(
    start: str = typer.Option(..., "--start", "-s", help="Start time, HH:MM"),
    end: str = typer.Option(..., "--end", "-e", help="End time, HH:MM"),
    participants: Optional[int] = typer.Option(None, "--participants", "-p", help="Number of participants"),
    salary: Optional[float] = typer.Option(None, "--salary", help="Average annual salary (USD)"),
    rate: Optional[float] = typer.Option(None, "--rate", "-r", help="Average hourly rate (USD); overrides --salary"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON on stdout"),
) -> None:
    """Cost of a meeting between two clock times on the same day."""
    defaults = load_defaults()
    if participants is None:
        participants = defaults.participants
    if rate is None:
        rate = convert_annual_to_hourly(salary if salary is not None else defaults.annual_salary)

    today = date.today()
    start_dt = _parse_clock_time(start, "start", today)
    end_dt = _parse_clock_time(end, "end", today)

    result = calculate_meeting_cost(start_dt, end_dt, participants, rate)

    if as_json:
        payload = {
            "start": start_dt.time().isoformat(),
            "end": end_dt.time().isoformat(),
            "participants": participants,
            "hourly_rate": rate,
            **result.to_dict(),
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    render_cost(result, participants, console, hourly_rate=rate)


@app.command("rate")
def cmd_rate(
    salary: float = typer.Argument(help="Annual salary (USD)"),
) -> None:
    """Hourly rate for an annual salary."""
    hourly = convert_annual_to_hourly(salary)
    console.print(
        f"{format_currency(salary)}/year = [bold]{format_currency(hourly)}[/bold]/hour "
        f"[dim]({WORK_HOURS_PER_YEAR} working hours)[/dim]"
    )


@app.command("live")
def cmd_live(
    participants: Optional[int] = typer.Option(None, "--participants", "-p", min=1, help="Number of participants"),
    salary: Optional[float] = typer.Option(None, "--salary", min=1, help="Average annual salary (USD)"),
    duration: Optional[float] = typer.Option(None, "--duration", "-d", min=0, help="Stop automatically after this many seconds"),
) -> None:
    """Track a meeting as it happens; Ctrl+C ends it."""
    defaults = load_defaults()
    if participants is None:
        participants = defaults.participants
    if salary is None:
        salary = defaults.annual_salary
    # Environment defaults bypass the option bounds above.
    if participants < 1:
        console.print(f"[red]Invalid participant count: {participants}[/red]. Need at least 1")
        raise typer.Exit(1)
    if salary < 1:
        console.print(f"[red]Invalid annual salary: {salary}[/red]. Need at least 1")
        raise typer.Exit(1)

    timer = MeetingTimer(participants=participants, annual_salary=salary)

    def panel(result):
        return build_cost_panel(result, timer.participants, hourly_rate=timer.hourly_rate, running=True)

    with timer, Live(panel(timer.result), console=console, refresh_per_second=4, transient=True) as live:
        timer.subscribe(lambda result: live.update(panel(result)))
        timer.start()
        deadline = None if duration is None else time.monotonic() + duration
        try:
            while deadline is None or time.monotonic() < deadline:
                time.sleep(0.2)
        except KeyboardInterrupt:
            pass
        timer.stop()

    console.print()
    console.print(build_cost_panel(timer.result, timer.participants, hourly_rate=timer.hourly_rate))
    console.print()


if __name__ == "__main__":
    app()
