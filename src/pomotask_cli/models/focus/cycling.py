"""Pomodoro cycle rules: durations, mode order and display helpers."""

from typing import Literal

TimerMode = Literal["focus", "short_break", "long_break"]

MODES: tuple[TimerMode, ...] = ("focus", "short_break", "long_break")

FOCUS_SECONDS = 25 * 60
SHORT_BREAK_SECONDS = 5 * 60
LONG_BREAK_SECONDS = 15 * 60
POMODOROS_PER_CYCLE = 4

MODE_DURATIONS: dict[TimerMode, int] = {
    "focus": FOCUS_SECONDS,
    "short_break": SHORT_BREAK_SECONDS,
    "long_break": LONG_BREAK_SECONDS,
}

MODE_LABELS: dict[TimerMode, str] = {
    "focus": "Pomodoro",
    "short_break": "Short Break",
    "long_break": "Long Break",
}


def is_valid_mode(value: str) -> bool:
    """Check whether *value* names a timer mode."""
    return value in MODE_DURATIONS


def duration_for(mode: TimerMode) -> int:
    """Get the fixed duration in seconds for a mode."""
    try:
        return MODE_DURATIONS[mode]
    except KeyError:
        raise ValueError(f"Unknown timer mode: {mode!r}") from None


def next_mode(mode: TimerMode, pomodoros_completed: int) -> TimerMode:
    """Determine the mode that follows a completed period.

    ``pomodoros_completed`` is the count *after* the finished period was
    counted, so every 4th focus period leads into a long break.
    """
    if mode == "focus":
        if pomodoros_completed > 0 and pomodoros_completed % POMODOROS_PER_CYCLE == 0:
            return "long_break"
        return "short_break"
    return "focus"


def format_time(seconds: int) -> str:
    """Format seconds as MM:SS."""
    seconds = max(0, int(seconds))
    mins, secs = divmod(seconds, 60)
    return f"{mins:02d}:{secs:02d}"


def get_emoji(mode: TimerMode) -> str:
    """Get emoji for a mode."""
    if mode == "focus":
        return "🍅"
    elif mode == "short_break":
        return "☕"
    else:
        return "🌴"


def get_prompt(mode: TimerMode) -> str:
    """Short call to action shown under the cycle number."""
    return "Time to focus!" if mode == "focus" else "Time to take a break!"


def get_motivation(mode: TimerMode) -> str:
    return "Stay focused and productive!" if mode == "focus" else "Relax and recharge!"


def get_progress_dots(pomodoros_completed: int, mode: TimerMode) -> str:
    """Get progress dots showing the position inside the current cycle."""
    done_in_cycle = pomodoros_completed % POMODOROS_PER_CYCLE
    if mode == "long_break" and pomodoros_completed > 0:
        done_in_cycle = POMODOROS_PER_CYCLE

    dots = []
    for i in range(1, POMODOROS_PER_CYCLE + 1):
        if i <= done_in_cycle:
            dots.append("●")  # Completed
        elif i == done_in_cycle + 1 and mode == "focus":
            dots.append("◉")  # Current
        else:
            dots.append("○")  # Upcoming

    return " ".join(dots)
