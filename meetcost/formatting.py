"""Display strings for cost results.

Currency uses the en-US dollar convention ("$1,234.50"); durations are spelled
out in words ("1 hour and 30 minutes").
"""

from __future__ import annotations

import math

from meetcost.models import CostResult


def format_currency(amount: float) -> str:
    """Format an amount as US dollars with two decimals."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_rate(amount: float) -> str:
    """Format a per-minute cost."""
    return f"{format_currency(amount)}/min"


def _plural(n: int, word: str) -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}s"


def format_duration(hours: float) -> str:
    """Render a duration in hours as whole hours and minutes.

    Minutes are rounded to the nearest whole minute (halves round up).
    Anything under one minute after rounding, and any non-finite input, is
    "Less than a minute".
    """
    if not math.isfinite(hours):
        return "Less than a minute"
    total_minutes = math.floor(hours * 60 + 0.5)
    if total_minutes < 1:
        return "Less than a minute"

    h, m = divmod(total_minutes, 60)
    hour_text = _plural(h, "hour") if h > 0 else ""
    minute_text = _plural(m, "minute") if m > 0 else ""

    if hour_text and minute_text:
        return f"{hour_text} and {minute_text}"
    return hour_text or minute_text


def summarize(result: CostResult, participants: int) -> str:
    """One-line summary of the per-minute burn for a meeting."""
    if participants <= 0:
        return ""
    who = _plural(participants, "participant")
    return (
        f"This meeting with {who} costs your organization approximately "
        f"{format_currency(result.cost_per_minute)} per minute"
    )
