"""A countdown timer that ticks towards zero."""

from __future__ import annotations


class Timer:
    """A timer with a standard duration that always counts down towards zero."""

    def __init__(self, duration: float, remaining: float | None = None, paused: bool = False) -> None:
        self.duration = float(duration)
        self.remaining = self.duration if remaining is None else float(remaining)
        self.paused = paused

    @property
    def lapsed(self) -> bool:
        """True once the remaining time has reached zero."""
        return self.remaining <= 0.0

    def tick(self, dt: float) -> None:
        """Advance the timer by dt seconds unless paused or already lapsed."""
        if self.paused or self.remaining <= 0.0:
            return
        self.remaining -= dt

    def pause(self) -> None:
        self.paused = True

    def unpause(self) -> None:
        self.paused = False

    def restart(self) -> None:
        """Reset the remaining time to the standard duration."""
        self.remaining = self.duration

    def add_time(self, seconds: float) -> None:
        """Add time; the remaining time may exceed the standard duration."""
        self.remaining += seconds

    def set_one_shot(self, remaining: float) -> None:
        """Set the remaining time without changing the standard duration."""
        self.remaining = float(remaining)

    def __repr__(self) -> str:
        return (
            f"Timer(duration={self.duration!r}, remaining={self.remaining!r}, "
            f"paused={self.paused!r})"
        )