"""Countdown for one test attempt, ticked by the UI host once per second."""
from __future__ import annotations


class Countdown:
    def __init__(self, seconds: int):
        self.remaining = max(0, int(seconds))
        self.running = True

    @classmethod
    def for_session(cls, remaining_seconds: int, duration_minutes: int) -> "Countdown":
        """Carry ``remaining_seconds`` forward; start from the full duration on first entry."""
        if remaining_seconds > 0:
            return cls(remaining_seconds)
        return cls(duration_minutes * 60)

    @property
    def expired(self) -> bool:
        return self.remaining <= 0

    def tick(self) -> bool:
        """
        Advance one second. Returns True on the tick that runs the clock out,
        after which the countdown stops itself.
        """
        if not self.running:
            return False
        if self.remaining > 0:
            self.remaining -= 1
        if self.remaining <= 0:
            self.running = False
            return True
        return False

    def cancel(self) -> None:
        self.running = False

    def resume(self) -> None:
        if not self.expired:
            self.running = True


def format_time(seconds: int) -> str:
    seconds = max(0, int(seconds))
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


def due_ticks(last: float | None, now: float, period: float) -> tuple[int, float]:
    """
    Whole periods elapsed between ``last`` and ``now``, plus the new anchor.
    The anchor only advances by whole periods so partial seconds carry over
    between page runs. A missing anchor starts the count at ``now``.
    """
    if last is None:
        return 0, now
    period = max(1, period)
    ticks = max(0, int((now - last) // period))
    return ticks, last + ticks * period
