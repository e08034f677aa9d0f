"""Timer that decides how long the splash screen stays up."""

from __future__ import annotations

from dataclasses import dataclass

SPLASH_DURATION = 1.4
SPLASH_IMAGE = "Bevy/branding/icon.png"


@dataclass
class SplashTimer:
    """A one-shot timer; once finished it stays finished."""

    duration: float = SPLASH_DURATION
    elapsed: float = 0.0

    @property
    def finished(self) -> bool:
        return self.elapsed >= self.duration

    def tick(self, dt: float) -> bool:
        """Advance by ``dt`` seconds and report whether the timer has finished."""
        if dt < 0.0:
            raise ValueError(f"cannot tick a timer by a negative time: {dt}")
        self.elapsed = min(self.elapsed + dt, self.duration)
        return self.finished