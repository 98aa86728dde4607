"""Tutorial dialogue hooks that wait for the player to try each control."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .camera import CameraMovementIntentions
from .planet import PlanetState

DIALOGUE_START_NODE = "HelloWorld"
WAIT_INPUT_COMMAND = "wait_input"


@dataclass(frozen=True)
class Tutorial:
    """Marker present while the game runs in tutorial mode."""


class InputKind(Enum):
    """The control a tutorial step waits for, keyed by its dialogue argument."""

    ZOOM = "zoom"
    PAN = "pan"
    OVERLAY = "geothermal"


@dataclass
class InputObserver:
    """Watches for one kind of input and raises a shared flag once it is seen."""

    kind: InputKind
    done: threading.Event = field(default_factory=threading.Event)

    def set_done(self) -> None:
        """Mark the awaited input as seen."""
        self.done.set()

    @property
    def is_done(self) -> bool:
        return self.done.is_set()


def wait_input(command: str) -> tuple[Optional[InputObserver], threading.Event]:
    """Start waiting for the input named by ``command``.

    Returns the new observer and the flag the dialogue waits on. Unknown
    commands need no observer and return a flag that is already set.
    """
    try:
        kind = InputKind(command)
    except ValueError:
        done = threading.Event()
        done.set()
        return None, done
    observer = InputObserver(kind)
    return observer, observer.done


def observe_input(
    observer: InputObserver,
    intentions: CameraMovementIntentions,
    planet_state: PlanetState,
) -> bool:
    """Check this frame's input against ``observer``; return whether it is done."""
    if observer.kind is InputKind.ZOOM:
        if intentions.zoom != 0.0:
            observer.set_done()
    elif observer.kind is InputKind.PAN:
        if tuple(intentions.pan) != (0.0, 0.0):
            observer.set_done()
    elif planet_state.geothermal_overlay:
        observer.set_done()
    return observer.is_done