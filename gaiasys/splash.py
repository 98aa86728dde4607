"""The splash screen that fades an image in and out at startup."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .palette import Color
from .states import Screen
from .widgets import Node, ui_root

SPLASH_BACKGROUND_COLOR = Color(0.157, 0.157, 0.157)
SPLASH_DURATION_SECS = 1.8
SPLASH_FADE_DURATION_SECS = 0.6
SPLASH_IMAGE = "images/splash.png"


@dataclass
class ImageNodeFadeInOut:
    """Fade-in, hold and fade-out of an image over a fixed duration."""

    total_duration: float
    """Total duration in seconds."""
    fade_duration: float
    """Fade duration in seconds."""
    t: float = 0.0
    """Current progress in seconds."""

    def __post_init__(self) -> None:
        if self.total_duration <= 0.0:
            raise ValueError("total_duration must be positive")
        if self.fade_duration <= 0.0:
            raise ValueError("fade_duration must be positive")

    def alpha(self) -> float:
        """Return the opacity: a trapezoid rising to 1, holding, then falling."""
        t = min(max(self.t / self.total_duration, 0.0), 1.0)
        fade = self.fade_duration / self.total_duration
        return min((1.0 - abs(2.0 * t - 1.0)) / fade, 1.0)

    def tick(self, delta_secs: float) -> None:
        """Advance the animation."""
        self.t += delta_secs


@dataclass
class SplashTimer:
    """One-shot timer that ends the splash screen."""

    duration: float = SPLASH_DURATION_SECS
    elapsed: float = 0.0
    finished: bool = False
    just_finished: bool = False

    def tick(self, delta_secs: float) -> bool:
        """Advance the timer; return True on the tick on which it finishes."""
        if self.finished:
            self.just_finished = False
            return False
        self.elapsed += delta_secs
        if self.elapsed >= self.duration:
            self.elapsed = self.duration
            self.finished = True
            self.just_finished = True
        else:
            self.just_finished = False
        return self.just_finished


def _splash_root() -> Node:
    root = ui_root(Node(name="Splash image", width="70%"))
    root.name = "Splash screen"
    root.background = SPLASH_BACKGROUND_COLOR
    root.state_scope = Screen.SPLASH
    return root


@dataclass
class SplashScreen:
    """State of the splash screen while it is shown."""

    fade: ImageNodeFadeInOut = field(
        default_factory=lambda: ImageNodeFadeInOut(
            total_duration=SPLASH_DURATION_SECS, fade_duration=SPLASH_FADE_DURATION_SECS
        )
    )
    timer: SplashTimer = field(default_factory=SplashTimer)
    root: Node = field(default_factory=_splash_root)
    image_path: str = SPLASH_IMAGE
    image_alpha: float = 1.0

    def update(self, delta_secs: float, escape_pressed: bool = False) -> Optional[Screen]:
        """Run one frame; return the screen to switch to, if any."""
        self.fade.tick(delta_secs)
        self.timer.tick(delta_secs)
        self.image_alpha = self.fade.alpha()
        if self.timer.just_finished or escape_pressed:
            return Screen.LOADING
        return None