import math
import re
from typing import Optional

from core.config import MASK_CHAR

CLOCK_PATTERN = re.compile(r'(\d{1,2}):(\d{2})(?::\d{2})?\s*(AM|PM)?', re.IGNORECASE)
MINUTES_PER_DAY = 24 * 60


def unmask(value: str) -> str:
    """Strips masking characters from a flight identifier or label."""
    if value is None:
        return ''
    return str(value).replace(MASK_CHAR, '').strip()


def round_half_up(value: float) -> int:
    # Halves always round towards +inf (12.5 -> 13, -2.5 -> -2)
    return int(math.floor(value + 0.5))


def try_parse_number(value: str) -> Optional[float]:
    """
    Parses a numeric cell. Returns None for blank, non-numeric or non-finite values.
    """
    if value is None:
        return None
    text = str(value).strip()
    # float() accepts digit separators like "1_000", plain CSV numbers never carry them
    if not text or '_' in text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_number(value: str, default: float = 0.0) -> float:
    number = try_parse_number(value)
    return default if number is None else number


def parse_clock(time_str: str) -> Optional[int]:
    """
    Extracts minutes since midnight from a time string like '8:05', '08:05:30' or '1:48 PM'.
    Returns None if no time is found.
    """
    if not isinstance(time_str, str):
        return None

    match = CLOCK_PATTERN.search(time_str.strip())
    if not match:
        return None

    hour = int(match.group(1))
    minute = int(match.group(2))
    meridiem = (match.group(3) or '').upper()

    # 12-hour clock to 24-hour clock
    if meridiem == 'AM' and hour == 12:
        hour = 0
    if meridiem == 'PM' and hour != 12:
        hour += 12

    return hour * 60 + minute


def to_minutes(time_str: str) -> int:
    """Minutes since midnight, 0 when the value cannot be parsed."""
    minutes = parse_clock(time_str)
    return 0 if minutes is None else minutes


def duration_in_minutes(start: str, end: str) -> int:
    """
    Minutes elapsed between two clock times.

    An end time earlier than the start time is treated as crossing midnight.

    Args:
        start: The start time text.
        end: The end time text.

    Returns:
        A non-negative number of minutes.
    """
    start_value = to_minutes(start)
    end_value = to_minutes(end)
    if end_value < start_value:
        end_value += MINUTES_PER_DAY
    return max(0, end_value - start_value)
