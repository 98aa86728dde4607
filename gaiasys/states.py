"""Screen states, update-phase ordering and audio categories shared by the game."""

from __future__ import annotations

from enum import Enum, IntEnum


class Screen(Enum):
    """The game's main screen states. The first member is the starting screen."""

    SPLASH = "splash"
    LOADING = "loading"
    TITLE = "title"
    CREDITS = "credits"
    GAMEPLAY = "gameplay"


class AppSet(IntEnum):
    """High-level groupings of per-frame work, in the order they run."""

    TICK_TIMERS = 1
    """Tick timers."""
    RECORD_INPUT = 2
    """Record player input."""
    UPDATE = 3
    """Do everything else."""


class AudioCategory(Enum):
    """Organizational category of a playing sound, used to address groups of sounds."""

    MUSIC = "music"
    """Background music and soundtrack."""
    SOUND_EFFECT = "sound_effect"
    """Short effects such as button clicks or footsteps."""