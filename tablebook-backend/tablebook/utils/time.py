import math
from datetime import datetime, timezone

def parse_clock(s: str) -> tuple[float, float]:
    """Splits 'HH:MM' into numeric hour and minute. Raises ValueError if either is not a number."""
    parts = s.split(":")
    if len(parts) < 2:
        raise ValueError(f"Expected HH:MM, got {s!r}")
    hour, minute = float(parts[0]), float(parts[1])
    if not (math.isfinite(hour) and math.isfinite(minute)):
        raise ValueError(f"Expected HH:MM, got {s!r}")
    return hour, minute

def format_clock(hour: int, minute: int) -> str:
    return f"{hour:02d}:{minute:02d}"

def compute_slot(time: str, slot_minutes: int = 90) -> str:
    """
    Maps a requested 'HH:MM' to its 'HH:MM-HH:MM' slot label.

    The start hour is the slot boundary truncated to a whole hour, and the
    label always spans exactly one slot width from there, so with 90 minute
    slots 14:00 lands in 13:00-14:30 rather than 13:30-15:00.
    """
    hour, minute = parse_clock(time)
    width_hours = slot_minutes / 60
    index = math.floor((hour + minute / 60) / width_hours)
    start_hour = int(index * width_hours)
    end_hour, end_minute = divmod(start_hour * 60 + slot_minutes, 60)
    return f"{format_clock(start_hour, 0)}-{format_clock(end_hour, end_minute)}"

def new_reservation_id(existing_ids, now: datetime | None = None) -> int:
    """Millisecond creation timestamp, bumped past any id already taken."""
    now = now or datetime.now(tz=timezone.utc)
    candidate = int(now.timestamp() * 1000)
    highest = max(existing_ids, default=0)
    return max(candidate, highest + 1)
