"""Screen state machine and the loading, title and credits screens."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from .states import Screen
from .widgets import Node, button, header, label, ui_root

CREDITS_MUSIC = "audio/music/Monkeys Spinning Monkeys.ogg"

ScreenCallback = Callable[[], Optional[Node]]


@dataclass
class ScreenStates:
    """The current screen, a pending change, and what runs on entering and leaving.

    A callback run on entering a screen may return a UI node; it is kept in
    :attr:`entities` until a screen named by its ``state_scope`` is left.
    """

    current: Screen = Screen.SPLASH
    next: Optional[Screen] = None
    entities: list[Node] = field(default_factory=list)
    _enter: dict[Screen, list[ScreenCallback]] = field(
        default_factory=dict, init=False, repr=False
    )
    _exit: dict[Screen, list[ScreenCallback]] = field(
        default_factory=dict, init=False, repr=False
    )
    _started: bool = field(default=False, init=False, repr=False)

    def set_next(self, screen: Screen) -> None:
        """Request a change to ``screen`` at the next transition."""
        self.next = screen

    def on_enter(self, screen: Screen, callback: ScreenCallback) -> ScreenStates:
        """Run ``callback`` whenever ``screen`` is entered."""
        self._enter.setdefault(screen, []).append(callback)
        return self

    def on_exit(self, screen: Screen, callback: ScreenCallback) -> ScreenStates:
        """Run ``callback`` whenever ``screen`` is left."""
        self._exit.setdefault(screen, []).append(callback)
        return self

    def _run(self, callbacks: dict[Screen, list[ScreenCallback]], screen: Screen) -> None:
        for callback in callbacks.get(screen, []):
            spawned = callback()
            if isinstance(spawned, Node):
                self.entities.append(spawned)

    def apply_transition(self) -> Optional[Screen]:
        """Enter the first screen, or move to the pending one.

        Returns the screen that was entered, or None if nothing changed.
        """
        entered: Optional[Screen] = None
        if not self._started:
            self._started = True
            self._run(self._enter, self.current)
            entered = self.current
        if self.next is not None:
            target, self.next = self.next, None
            leaving = self.current
            self._run(self._exit, leaving)
            self.entities = [node for node in self.entities if node.state_scope is not leaving]
            self.current = target
            self._run(self._enter, target)
            entered = target
        return entered


def loading_screen() -> Node:
    """Build the screen shown while game assets load."""
    text = label("Loading...")
    text.justify_content = "center"
    root = ui_root(text)
    root.state_scope = Screen.LOADING
    return root


def title_screen(include_exit: bool = True) -> Node:
    """Build the title screen menu; the exit button only where the app can quit."""
    names = ["Tutorial", "Start Game", "Credits"]
    if include_exit:
        names.append("Exit")
    root = ui_root(*(button(name) for name in names))
    root.state_scope = Screen.TITLE
    return root


def credits_screen() -> Node:
    """Build the credits screen with a button back to the title."""
    root = ui_root(
        header("Made by"),
        label("Joe Shmoe - Implemented aligator wrestling AI"),
        label("Jane Doe - Made the music for the alien invasion"),
        header("Assets"),
        label("Splash logo - used unmodified with permission"),
        label("Ducky sprite - community asset"),
        label("Button SFX - community asset"),
        label("Music - Monkeys Spinning Monkeys"),
        button("Back"),
    )
    root.state_scope = Screen.CREDITS
    return root