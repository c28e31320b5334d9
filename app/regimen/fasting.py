"""
Fasting window calculator.

Two concerns live here:

1. **Windows**: every supported pattern has exactly one canonical eating
   window (a static table; all windows close at 20:00).
2. **Status**: a stateless projection of an instant onto a window:
   which phase the user is in, how far through it, and how long until the
   next boundary.  There is no timer here; a caller that wants a live
   countdown re-evaluates :func:`status_at` on its own cadence.

Clock arithmetic
----------------
Boundaries and the query instant are reduced to seconds since midnight and
compared modulo one day::

    since_start = (now - start) mod DAY
    eating      = since_start < (end - start) mod DAY
    fasted      = (now - end) mod DAY          # fasting phase only

The modulo form handles both halves of the overnight fast ("after the
eating window, before midnight" and "after midnight, before the eating
window") with the same expression, and also supports a window whose end
precedes its start (spanning midnight), which none of the built-in
patterns use.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Optional, Union

from app.schemas.fasting import (
    FastingPatternInfo,
    FastingPhase,
    FastingStatus,
    FastingWindow,
    validate_clock_time,
)
from app.schemas.profile import FASTING_PATTERN_ORDER, FastingPattern

SECONDS_PER_DAY = 24 * 60 * 60

Instant = Union[datetime.datetime, datetime.time]

# ======================================================================
# Static tables
# ======================================================================

# pattern → (fasting_hours, eating_hours, eating_start, eating_end)
_WINDOWS: dict[FastingPattern, tuple[int, int, str, str]] = {
    FastingPattern.P12_12: (12, 12, "08:00", "20:00"),
    FastingPattern.P14_10: (14, 10, "10:00", "20:00"),
    FastingPattern.P16_8: (16, 8, "12:00", "20:00"),
    FastingPattern.P18_6: (18, 6, "14:00", "20:00"),
}

_RECOMMENDED_MEAL_COUNT: dict[FastingPattern, int] = {
    FastingPattern.P12_12: 4,  # 3 meals + snack
    FastingPattern.P14_10: 3,
    FastingPattern.P16_8: 3,
    FastingPattern.P18_6: 2,
}


# ======================================================================
# Clock helpers
# ======================================================================


def clock_to_seconds(clock: str) -> int:
    """``'HH:MM'`` → seconds since midnight."""
    validate_clock_time(clock)
    hours, minutes = clock.split(":")
    return int(hours) * 3600 + int(minutes) * 60


def seconds_to_clock(seconds: int) -> str:
    """Seconds since midnight (any integer) → ``'HH:MM'``."""
    seconds %= SECONDS_PER_DAY
    return f"{seconds // 3600:02d}:{(seconds % 3600) // 60:02d}"


def _instant_seconds(instant: Instant) -> int:
    return instant.hour * 3600 + instant.minute * 60 + instant.second


def _eating_length(window: FastingWindow) -> int:
    start = clock_to_seconds(window.eating_start_time)
    end = clock_to_seconds(window.eating_end_time)
    length = (end - start) % SECONDS_PER_DAY
    if length == 0:
        # Start == end is either "never" or "always" eating.
        return window.eating_hours * 3600
    return length


# ======================================================================
# Windows
# ======================================================================


def window_for(pattern: FastingPattern) -> FastingWindow:
    """Canonical eating window for *pattern*."""
    fasting_hours, eating_hours, start, end = _WINDOWS[pattern]
    return FastingWindow(
        pattern=pattern,
        fasting_hours=fasting_hours,
        eating_hours=eating_hours,
        eating_start_time=start,
        eating_end_time=end,
    )


def recommended_meal_count(pattern: FastingPattern) -> int:
    return _RECOMMENDED_MEAL_COUNT[pattern]


def available_patterns() -> list[FastingPatternInfo]:
    """All supported patterns, gentlest first."""
    infos = []
    for pattern in FASTING_PATTERN_ORDER:
        window = window_for(pattern)
        infos.append(FastingPatternInfo(
            pattern=pattern,
            label=pattern.value,
            description=(
                f"{window.fasting_hours} hours fasting, "
                f"{window.eating_hours} hours eating"
            ),
            recommended_meal_count=recommended_meal_count(pattern),
        ))
    return infos


def stricter_pattern(pattern: FastingPattern) -> FastingPattern:
    """One step longer fast; the strictest pattern maps to itself."""
    idx = FASTING_PATTERN_ORDER.index(pattern)
    return FASTING_PATTERN_ORDER[min(idx + 1, len(FASTING_PATTERN_ORDER) - 1)]


def gentler_pattern(pattern: FastingPattern) -> FastingPattern:
    """One step shorter fast; the gentlest pattern maps to itself."""
    idx = FASTING_PATTERN_ORDER.index(pattern)
    return FASTING_PATTERN_ORDER[max(idx - 1, 0)]


# ======================================================================
# Containment
# ======================================================================


def is_within_eating_window(clock: str, window: FastingWindow) -> bool:
    """Half-open containment: start is inside, end is outside."""
    start = clock_to_seconds(window.eating_start_time)
    since_start = (clock_to_seconds(clock) - start) % SECONDS_PER_DAY
    return since_start < _eating_length(window)


def can_schedule_meal_at(
    clock: str,
    window: FastingWindow,
    meal_duration_minutes: int = 30,
) -> bool:
    """Whether a meal starting at *clock* also finishes inside the window."""
    if not is_within_eating_window(clock, window):
        return False
    start = clock_to_seconds(window.eating_start_time)
    since_start = (clock_to_seconds(clock) - start) % SECONDS_PER_DAY
    return since_start + meal_duration_minutes * 60 <= _eating_length(window)


# ======================================================================
# Status
# ======================================================================


def status_at(window: FastingWindow, instant: Instant) -> FastingStatus:
    """Project *instant* (wall-clock) onto *window*.

    At exactly ``eating_start_time`` the phase is eating at 0 %; at exactly
    ``eating_end_time`` it is fasting at 0 %.
    """
    now = _instant_seconds(instant)
    start = clock_to_seconds(window.eating_start_time)
    end = clock_to_seconds(window.eating_end_time)
    eating_length = _eating_length(window)
    since_start = (now - start) % SECONDS_PER_DAY

    if since_start < eating_length:
        percent = since_start / eating_length * 100.0
        return FastingStatus(
            phase=FastingPhase.EATING,
            percent_complete=round(min(max(percent, 0.0), 100.0), 1),
            seconds_remaining=eating_length - since_start,
            phase_start_time=window.eating_start_time,
            phase_end_time=window.eating_end_time,
            next_phase_clock_time=window.eating_end_time,
        )

    fasting_length = window.fasting_hours * 3600
    elapsed = (now - end) % SECONDS_PER_DAY
    percent = elapsed / fasting_length * 100.0 if fasting_length else 100.0
    return FastingStatus(
        phase=FastingPhase.FASTING,
        percent_complete=round(min(max(percent, 0.0), 100.0), 1),
        seconds_remaining=(start - now) % SECONDS_PER_DAY,
        phase_start_time=window.fasting_start_time,
        phase_end_time=window.fasting_end_time,
        next_phase_clock_time=window.eating_start_time,
    )


def next_meal_time(
    meal_times: Iterable[str],
    window: FastingWindow,
    instant: Instant,
) -> Optional[str]:
    """Earliest in-window meal time later today than *instant*.

    ``None`` once the day's last in-window meal has passed.
    """
    now = _instant_seconds(instant)
    upcoming = sorted(
        t for t in meal_times
        if is_within_eating_window(t, window) and clock_to_seconds(t) > now
    )
    return upcoming[0] if upcoming else None
