"""Default inputs for meetcost, overridable from the environment.

Reads MEETCOST_* variables; CLI options take precedence over these.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_PARTICIPANTS = 8
DEFAULT_ANNUAL_SALARY = 85000.0
DEFAULT_LOG_LEVEL = "WARNING"

# Seconds between live recomputations.
TICK_INTERVAL_S = 1.0

_ENV_PREFIX = "MEETCOST_"
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__name__)


@dataclass
class Defaults:
    """Resolved default inputs."""

    participants: int = DEFAULT_PARTICIPANTS
    annual_salary: float = DEFAULT_ANNUAL_SALARY
    log_level: str = DEFAULT_LOG_LEVEL


def _env_number(env: Mapping[str, str], name: str, cast, default):
    raw = env.get(_ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        logger.warning("Ignoring %s%s=%r: not a number", _ENV_PREFIX, name, raw)
        return default


def load_defaults(env: Optional[Mapping[str, str]] = None) -> Defaults:
    """Build Defaults from MEETCOST_* environment variables.

    Args:
        env: Mapping to read instead of os.environ.

    Returns:
        Defaults with unparseable values left at their built-in default.
    """
    env = os.environ if env is None else env
    level = env.get(_ENV_PREFIX + "LOG_LEVEL", "").strip().upper()
    if level not in _LEVELS:
        level = DEFAULT_LOG_LEVEL
    return Defaults(
        participants=_env_number(env, "PARTICIPANTS", int, DEFAULT_PARTICIPANTS),
        annual_salary=_env_number(env, "ANNUAL_SALARY", float, DEFAULT_ANNUAL_SALARY),
        log_level=level,
    )
