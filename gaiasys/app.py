"""The application: wires screens, camera, planet and tutorial into one frame loop."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Callable, Hashable, Iterator, Optional, Sequence

from .asset_tracking import ResourceHandles
from .camera import CameraController, CameraSettings
from .planet import Planet, PlanetState, default_planet_settings, spawn_planet
from .planet_settings import PlanetSettings
from .screens import (
    CREDITS_MUSIC,
    ScreenStates,
    credits_screen,
    loading_screen,
    title_screen,
)
from .splash import SplashScreen
from .states import AudioCategory, Screen
from .tutorial import InputObserver, Tutorial, observe_input
from .widgets import HOVER_SOUND, PRESS_SOUND, Interaction, Node, interaction_sound

WINDOW_TITLE = "gaia.sys"
GLOBAL_VOLUME = 0.3
TOGGLE_DEBUG_KEY = "`"


@dataclass
class FrameInput:
    """Player input during one frame."""

    zoom: float = 0.0
    pan: tuple[float, float] = (0.0, 0.0)
    pan_active: bool = False
    escape_pressed: bool = False
    toggle_geothermal: bool = False
    toggle_debug_ui: bool = False


def _walk(node: Node) -> Iterator[Node]:
    yield node
    for child in node.children:
        yield from _walk(child)


def _button_text(node: Node) -> Optional[str]:
    return node.children[0].text if node.children else None


def _bind(root: Node, actions: dict[str, Callable[[], None]]) -> Node:
    for node in _walk(root):
        if node.is_button and _button_text(node) in actions:
            node.on_press = actions[_button_text(node)]
    return root


class App:
    """The game's state and its per-frame update."""

    def __init__(
        self,
        dev: bool = True,
        is_loaded: Optional[Callable[[Hashable], bool]] = None,
        planet_settings: Optional[PlanetSettings] = None,
    ) -> None:
        self.dev = dev
        self.window_title = WINDOW_TITLE
        self.global_volume = GLOBAL_VOLUME
        self.camera = CameraController(
            settings=CameraSettings(zoom_speed=10.0, zoom_min=1.0, zoom_max=100.0, pan_speed=5.0)
        )
        self.states = ScreenStates()
        self.resource_handles = ResourceHandles()
        self.loaded_resources: dict[str, Hashable] = {}
        self._is_loaded = is_loaded if is_loaded is not None else (lambda handle: True)
        self._planet_settings = (
            planet_settings if planet_settings is not None else default_planet_settings()
        )
        self.splash: Optional[SplashScreen] = None
        self.planet: Optional[Planet] = None
        self.planet_state: Optional[PlanetState] = None
        self.tutorial: Optional[Tutorial] = None
        self.input_observer: Optional[InputObserver] = None
        self.sounds: list[tuple[str, AudioCategory]] = []
        self.debug_ui = False
        self.wireframe_global = False
        self.transition_log: list[tuple[Screen, Screen]] = []
        self.exit_requested = False

        self._load_resource("credits_music", (CREDITS_MUSIC,))
        self._load_resource("interaction_assets", (HOVER_SOUND, PRESS_SOUND))
        self._register_screens()
        self.states.apply_transition()

    def _load_resource(self, name: str, handle: Hashable) -> None:
        def insert(world: App, loaded: Hashable) -> None:
            world.loaded_resources[name] = loaded

        self.resource_handles.load_resource(handle, insert)

    def _register_screens(self) -> None:
        s = self.states
        s.on_enter(Screen.SPLASH, self._enter_splash)
        s.on_exit(Screen.SPLASH, self._exit_splash)
        s.on_enter(Screen.LOADING, loading_screen)
        s.on_enter(Screen.TITLE, self._enter_title)
        s.on_enter(Screen.CREDITS, self._enter_credits)
        s.on_exit(Screen.CREDITS, self._stop_credits_music)
        s.on_enter(Screen.GAMEPLAY, self._enter_gameplay)
        s.on_exit(Screen.GAMEPLAY, self.camera.reset)

    def _enter_splash(self) -> Node:
        self.splash = SplashScreen()
        return self.splash.root

    def _exit_splash(self) -> None:
        self.splash = None

    def _start_tutorial(self) -> None:
        self.tutorial = Tutorial()
        self.states.set_next(Screen.GAMEPLAY)

    def _request_exit(self) -> None:
        self.exit_requested = True

    def _enter_title(self) -> Node:
        return _bind(
            title_screen(include_exit=True),
            {
                "Tutorial": self._start_tutorial,
                "Start Game": lambda: self.states.set_next(Screen.GAMEPLAY),
                "Credits": lambda: self.states.set_next(Screen.CREDITS),
                "Exit": self._request_exit,
            },
        )

    def _enter_credits(self) -> Node:
        if "credits_music" in self.loaded_resources:
            self.sounds.append((CREDITS_MUSIC, AudioCategory.MUSIC))
        return _bind(credits_screen(), {"Back": lambda: self.states.set_next(Screen.TITLE)})

    def _stop_credits_music(self) -> None:
        self.sounds = [sound for sound in self.sounds if sound != (CREDITS_MUSIC, AudioCategory.MUSIC)]

    def _enter_gameplay(self) -> None:
        self.planet = spawn_planet(self._planet_settings)
        self.planet_state = PlanetState()

    def _transition(self) -> None:
        previous = self.states.current
        pending = self.states.next
        entered = self.states.apply_transition()
        if self.dev and pending is not None and entered is not None:
            self.transition_log.append((previous, entered))

    def update(self, delta_secs: float, frame_input: Optional[FrameInput] = None) -> Screen:
        """Run one frame and return the current screen."""
        frame = frame_input if frame_input is not None else FrameInput()
        self.resource_handles.load_resource_assets(self._is_loaded, self)
        self._transition()
        screen = self.states.current

        if screen is Screen.SPLASH and self.splash is not None:
            target = self.splash.update(delta_secs, frame.escape_pressed)
            if target is not None:
                self.states.set_next(target)

        if screen is Screen.LOADING and self.resource_handles.is_all_done():
            self.states.set_next(Screen.TITLE)

        if screen is Screen.GAMEPLAY:
            self.camera.record_intentions(frame.zoom, frame.pan, frame.pan_active)
            if frame.toggle_geothermal and self.planet_state is not None:
                overlay = self.planet_state.toggle_geothermal_overlay()
                if self.planet is not None:
                    self.planet.set_geothermal_overlay(overlay)
            self.camera.apply_intentions(delta_secs)
            if (
                self.tutorial is not None
                and self.input_observer is not None
                and self.planet_state is not None
            ):
                observe_input(self.input_observer, self.camera.intentions, self.planet_state)

        if self.dev and frame.toggle_debug_ui:
            self.debug_ui = not self.debug_ui
        return self.states.current

    def press_button(self, label: str) -> None:
        """Press the on-screen button showing ``label``."""
        for root in self.states.entities:
            for node in _walk(root):
                if node.is_button and _button_text(node) == label:
                    node.interaction = Interaction.PRESSED
                    if node.interaction_palette is not None:
                        node.background = node.interaction_palette.color_for(node.interaction)
                    sound = interaction_sound(node.interaction)
                    if sound is not None and "interaction_assets" in self.loaded_resources:
                        self.sounds.append((sound, AudioCategory.SOUND_EFFECT))
                    if node.on_press is not None:
                        node.on_press()
                    return
        raise LookupError(f"no button labelled {label!r} on screen")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game headless for a number of frames, printing screen changes."""
    parser = argparse.ArgumentParser(prog="gaiasys", description=WINDOW_TITLE)
    parser.add_argument("--frames", type=int, default=600, help="frames to run")
    parser.add_argument("--fps", type=float, default=60.0, help="frames per second")
    parser.add_argument("--release", action="store_true", help="disable dev tools")
    args = parser.parse_args(argv)
    if args.fps <= 0:
        parser.error("--fps must be positive")

    app = App(dev=not args.release)
    print(f"screen: {app.states.current.value}")
    for _ in range(args.frames):
        previous = app.states.current
        current = app.update(1.0 / args.fps)
        if current is not previous:
            print(f"screen: {current.value}")
        if app.exit_requested:
            break
    return 0