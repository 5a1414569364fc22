"""Meeting cost calculation.

Converts a time span, a participant count and an hourly (or annual) rate into
CostResult metrics.  Degenerate input never raises: a non-positive duration,
participant count or rate yields the all-zero result.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from meetcost.models import CostResult

# Fixed work year used to turn an annual salary into an hourly rate.
WEEKS_PER_YEAR = 52
HOURS_PER_WEEK = 40
WORK_HOURS_PER_YEAR = WEEKS_PER_YEAR * HOURS_PER_WEEK  # 2080

_SECONDS_PER_HOUR = 3600.0


def calculate_meeting_cost(
    start: datetime,
    end: datetime,
    participants: float,
    hourly_rate: float,
) -> CostResult:
    """Compute the cost of a meeting between two instants.

    Args:
        start: Meeting start.
        end: Meeting end.  Must share timezone awareness with ``start``.
        participants: Number of attendees.
        hourly_rate: Average hourly rate per attendee.

    Returns:
        CostResult.  All fields are 0 when the duration, participant count
        or rate is not positive.
    """
    duration_hours = (end - start).total_seconds() / _SECONDS_PER_HOUR

    if duration_hours <= 0 or participants <= 0 or hourly_rate <= 0:
        return CostResult.zero()

    return CostResult(
        total_cost=duration_hours * participants * hourly_rate,
        duration_hours=duration_hours,
        cost_per_minute=(participants * hourly_rate) / 60,
        cost_per_person=duration_hours * hourly_rate,
    )


def convert_annual_to_hourly(annual_salary: float) -> float:
    """Hourly rate for an annual salary, assuming a 2080-hour work year."""
    return annual_salary / WORK_HOURS_PER_YEAR


def calculate_real_time_cost(
    start_time: datetime,
    participants: float,
    annual_salary: float,
    now: Optional[datetime] = None,
) -> CostResult:
    """Cost of a meeting that started at ``start_time`` and is still going.

    ``now`` defaults to the current wall-clock time in ``start_time``'s
    timezone (naive local time when ``start_time`` is naive).
    """
    if now is None:
        now = datetime.now(start_time.tzinfo)
    return calculate_meeting_cost(
        start_time,
        now,
        participants,
        convert_annual_to_hourly(annual_salary),
    )
