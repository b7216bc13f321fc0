import time
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field


class GameClock(BaseModel):
    """
    Countdown clock sampled from wall-clock time.

    The clock is never interrupted: callers check it between moves, so the
    remaining time can go negative when a move runs past the limit.

    Attributes:
        total_seconds: Length of a round
        paused: Whether the clock is currently stopped
        now: Time source in seconds (time.time by default)
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    total_seconds: int = Field(default=60, ge=1)
    paused: bool = False
    now: Callable[[], float] = Field(default=time.time, exclude=True)
    _started_at: float = 0.0
    _frozen_elapsed: float = 0.0

    def model_post_init(self, __context) -> None:
        """Start counting from creation time."""
        self._started_at = self.now()

    def elapsed(self) -> float:
        """Seconds counted so far, not including paused time."""
        if self.paused:
            return self._frozen_elapsed
        return self.now() - self._started_at

    def remaining(self) -> int:
        """Whole seconds left (negative once the round is over)."""
        return self.total_seconds - int(self.elapsed())

    def expired(self) -> bool:
        """Whether the round has run out. A paused clock never expires."""
        return not self.paused and self.elapsed() >= self.total_seconds

    def toggle(self) -> bool:
        """
        Pause a running clock or resume a paused one where it left off.

        Returns:
            True if the clock is now paused
        """
        if self.paused:
            self._started_at = self.now() - self._frozen_elapsed
            self.paused = False
        else:
            self._frozen_elapsed = self.elapsed()
            self.paused = True
        return self.paused

    def restart(self) -> None:
        """Reset elapsed time to zero, keeping the paused state."""
        self._started_at = self.now()
        self._frozen_elapsed = 0.0
