from __future__ import annotations

import logging
import re
from typing import Optional

import pendulum

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400
LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def parse_epoch(value: Optional[str]) -> int:
    if not value:
        return 0
    match = LEADING_INTEGER.match(value)
    if not match:
        logger.warning("Could not parse timestamp %r, treating it as 0", value)
        return 0
    return int(match.group(1))


def format_duration(seconds: int) -> str:
    # Finishing before starting is clock skew, not a real duration.
    seconds = max(seconds, 0)
    if seconds < 60:
        return f"{seconds}s"

    # Only the time of day is shown, so whole days drop out.
    offset = pendulum.from_timestamp(seconds % SECONDS_PER_DAY, tz="UTC")
    if seconds < 3600:
        return offset.strftime("%Mm %Ss")
    return offset.strftime("%H:%M:%S")


def time_taken(started: Optional[str], finished: Optional[str]) -> str:
    return format_duration(parse_epoch(finished) - parse_epoch(started))
