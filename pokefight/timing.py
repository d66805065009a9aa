"""A stopwatch driven by explicit time steps instead of a wall clock."""

from __future__ import annotations


class Stopwatch:
    """Measures elapsed seconds that the caller feeds in with :meth:`tick`."""

    def __init__(self, elapsed: float = 0.0) -> None:
        if elapsed < 0:
            raise ValueError("elapsed time cannot be negative")
        self._elapsed = float(elapsed)

    @property
    def elapsed(self) -> float:
        """Seconds since the last restart."""
        return self._elapsed

    def tick(self, seconds: float) -> float:
        """Advance the stopwatch and return the new elapsed time."""
        if seconds < 0:
            raise ValueError("cannot tick backwards in time")
        self._elapsed += seconds
        return self._elapsed

    def restart(self) -> float:
        """Reset to zero and return the time that had elapsed."""
        elapsed, self._elapsed = self._elapsed, 0.0
        return elapsed

    def __repr__(self) -> str:
        return f"Stopwatch(elapsed={self._elapsed!r})"