"""meetcost — What is this meeting costing us?

Computes the cost of a meeting from its length, head count and average
salary, either after the fact from a start and end time or live while the
meeting runs.

Usage:
    python -m meetcost calc --start 09:00 --end 10:30 -p 8 --rate 50
    python -m meetcost live -p 6 --salary 120000
"""

from meetcost.formatting import format_currency, format_duration, format_rate, summarize
from meetcost.models import CostResult, MeetingSession, SessionState
from meetcost.pricing import calculate_meeting_cost, calculate_real_time_cost, convert_annual_to_hourly
from meetcost.timer import MeetingTimer, Scheduler, ThreadScheduler

__all__ = [
    "CostResult",
    "MeetingSession",
    "SessionState",
    "MeetingTimer",
    "Scheduler",
    "ThreadScheduler",
    "calculate_meeting_cost",
    "calculate_real_time_cost",
    "convert_annual_to_hourly",
    "format_currency",
    "format_duration",
    "format_rate",
    "summarize",
]
