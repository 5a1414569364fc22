"""Tests for meeting cost calculation."""

from datetime import datetime, timedelta, timezone

import pytest

from meetcost.models import CostResult
from meetcost.pricing import (
    WORK_HOURS_PER_YEAR,
    calculate_meeting_cost,
    calculate_real_time_cost,
    convert_annual_to_hourly,
)

T0 = datetime(2024, 3, 4, 9, 0)


# --- calculate_meeting_cost ---

def test_ninety_minute_meeting():
    result = calculate_meeting_cost(T0, datetime(2024, 3, 4, 10, 30), 8, 50)
    assert result.duration_hours == pytest.approx(1.5)
    assert result.total_cost == pytest.approx(600)
    assert result.cost_per_minute == pytest.approx(400 / 60)
    assert result.cost_per_person == pytest.approx(75)


@pytest.mark.parametrize("minutes,participants,rate", [
    (1, 1, 1.0),
    (45, 3, 62.5),
    (250, 17, 12.34),
])
def test_total_is_duration_times_people_times_rate(minutes, participants, rate):
    result = calculate_meeting_cost(T0, T0 + timedelta(minutes=minutes), participants, rate)
    assert result.total_cost == pytest.approx((minutes / 60) * participants * rate)


def test_cost_per_person_ignores_participants():
    small = calculate_meeting_cost(T0, T0 + timedelta(hours=1), 3, 10)
    large = calculate_meeting_cost(T0, T0 + timedelta(hours=1), 30, 10)
    assert small.cost_per_person == large.cost_per_person == pytest.approx(10)


@pytest.mark.parametrize("end,participants,rate", [
    (T0, 8, 50),                          # zero duration
    (T0 - timedelta(minutes=5), 8, 50),   # end before start
    (T0 + timedelta(hours=1), 0, 50),
    (T0 + timedelta(hours=1), -2, 50),
    (T0 + timedelta(hours=1), 8, 0),
    (T0 + timedelta(hours=1), 8, -10),
])
def test_degenerate_input_clamps_to_zero(end, participants, rate):
    result = calculate_meeting_cost(T0, end, participants, rate)
    assert result == CostResult(0.0, 0.0, 0.0, 0.0)
    assert result.is_zero


def test_results_are_immutable():
    result = calculate_meeting_cost(T0, T0 + timedelta(hours=1), 2, 10)
    with pytest.raises(AttributeError):
        result.total_cost = 0  # type: ignore[misc]


# --- convert_annual_to_hourly ---

def test_work_year_is_2080_hours():
    assert WORK_HOURS_PER_YEAR == 2080


def test_annual_to_hourly():
    assert convert_annual_to_hourly(85000) == pytest.approx(40.8654, abs=1e-4)


def test_annual_to_hourly_zero():
    assert convert_annual_to_hourly(0) == 0


# --- calculate_real_time_cost ---

def test_real_time_cost_uses_hourly_rate():
    now = T0 + timedelta(hours=2)
    result = calculate_real_time_cost(T0, 4, 104000, now=now)
    # 104000 / 2080 = 50/hr
    assert result.duration_hours == pytest.approx(2)
    assert result.total_cost == pytest.approx(400)
    assert result.cost_per_person == pytest.approx(100)


def test_real_time_cost_future_start_is_zero():
    result = calculate_real_time_cost(T0, 4, 104000, now=T0 - timedelta(seconds=1))
    assert result.is_zero


def test_real_time_cost_defaults_to_wall_clock():
    start = datetime.now(timezone.utc) - timedelta(hours=1)
    result = calculate_real_time_cost(start, 1, 2080)
    assert result.duration_hours == pytest.approx(1, abs=0.01)
    assert result.total_cost == pytest.approx(1, abs=0.01)


def test_to_dict():
    result = calculate_meeting_cost(T0, T0 + timedelta(hours=1), 2, 10)
    assert result.to_dict() == {
        "total_cost": pytest.approx(20),
        "duration_hours": pytest.approx(1),
        "cost_per_minute": pytest.approx(20 / 60),
        "cost_per_person": pytest.approx(10),
    }
