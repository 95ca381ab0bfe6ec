"""Splash screen timing: the fade curve and the one-shot timer."""

from __future__ import annotations

from dataclasses import dataclass

SPLASH_BACKGROUND_COLOR = (0.157, 0.157, 0.157)
SPLASH_DURATION_SECS = 1.8
SPLASH_FADE_DURATION_SECS = 0.6


@dataclass
class FadeInOut:
    """A fade in, hold, fade out animation."""

    total_duration: float = SPLASH_DURATION_SECS
    fade_duration: float = SPLASH_FADE_DURATION_SECS
    t: float = 0.0

    def alpha(self) -> float:
        """Opacity at the current time: a trapezoid capped at 1."""
        t = min(max(self.t / self.total_duration, 0.0), 1.0)
        fade = self.fade_duration / self.total_duration
        if fade == 0:
            return 1.0
        return min((1.0 - abs(2.0 * t - 1.0)) / fade, 1.0)

    def tick(self, delta_seconds: float) -> None:
        self.t += delta_seconds


@dataclass
class SplashTimer:
    """A timer that finishes once after its duration has elapsed."""

    duration: float = SPLASH_DURATION_SECS
    elapsed: float = 0.0
    finished: bool = False
    _just_finished: bool = False

    def tick(self, delta_seconds: float) -> None:
        if self.finished:
            self._just_finished = False
            return
        self.elapsed += delta_seconds
        if self.elapsed >= self.duration:
            self.elapsed = self.duration
            self.finished = True
            self._just_finished = True
        else:
            self._just_finished = False

    def just_finished(self) -> bool:
        """Whether the last tick was the one that finished the timer."""
        return self._just_finished