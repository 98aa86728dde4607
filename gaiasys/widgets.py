"""Builders for common UI widgets and their interaction feedback."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from .palette import (
    BUTTON_HOVERED_BACKGROUND,
    BUTTON_PRESSED_BACKGROUND,
    BUTTON_TEXT,
    HEADER_TEXT,
    LABEL_TEXT,
    NODE_BACKGROUND,
    Color,
)
from .states import Screen

HOVER_SOUND = "audio/sound_effects/button_hover.ogg"
PRESS_SOUND = "audio/sound_effects/button_press.ogg"


class Interaction(Enum):
    """Pointer interaction state of a widget."""

    NONE = "none"
    HOVERED = "hovered"
    PRESSED = "pressed"


@dataclass(frozen=True)
class InteractionPalette:
    """Background colors for each interaction state of a widget."""

    none: Color
    hovered: Color
    pressed: Color

    def color_for(self, interaction: Interaction) -> Color:
        """Return the background color for ``interaction``."""
        if interaction is Interaction.HOVERED:
            return self.hovered
        if interaction is Interaction.PRESSED:
            return self.pressed
        return self.none


@dataclass
class Node:
    """A UI element; sizes are strings such as ``"250px"`` or ``"100%"``."""

    name: str
    width: Optional[str] = None
    height: Optional[str] = None
    justify_content: Optional[str] = None
    align_items: Optional[str] = None
    flex_direction: Optional[str] = None
    row_gap: Optional[str] = None
    position_type: Optional[str] = None
    background: Optional[Color] = None
    text: Optional[str] = None
    font_size: Optional[float] = None
    text_color: Optional[Color] = None
    is_button: bool = False
    interaction_palette: Optional[InteractionPalette] = None
    interaction: Interaction = Interaction.NONE
    on_press: Optional[Callable[[], None]] = None
    state_scope: Optional[Screen] = None
    children: list[Node] = field(default_factory=list)


def _text_node(name: str, text: object, font_size: float, color: Color) -> Node:
    return Node(name=name, text=str(text), font_size=font_size, text_color=color)


def button(text: object) -> Node:
    """Build a simple button with text."""
    return Node(
        name="Button",
        width="250px",
        height="65px",
        justify_content="center",
        align_items="center",
        background=NODE_BACKGROUND,
        is_button=True,
        interaction_palette=InteractionPalette(
            none=NODE_BACKGROUND,
            hovered=BUTTON_HOVERED_BACKGROUND,
            pressed=BUTTON_PRESSED_BACKGROUND,
        ),
        children=[_text_node("Button Text", text, 40.0, BUTTON_TEXT)],
    )


def header(text: object) -> Node:
    """Build a header label, bigger than :func:`label`."""
    return Node(
        name="Header",
        width="500px",
        height="65px",
        justify_content="center",
        align_items="center",
        background=NODE_BACKGROUND,
        children=[_text_node("Header Text", text, 40.0, HEADER_TEXT)],
    )


def label(text: object) -> Node:
    """Build a simple text label."""
    node = _text_node("Label", text, 24.0, LABEL_TEXT)
    node.width = "500px"
    return node


def ui_root(*children: Node) -> Node:
    """Build a full-screen root that centers its children in a column."""
    return Node(
        name="UI Root",
        width="100%",
        height="100%",
        justify_content="center",
        align_items="center",
        flex_direction="column",
        row_gap="10px",
        position_type="absolute",
        children=list(children),
    )


def interaction_sound(interaction: Interaction) -> Optional[str]:
    """Return the sound effect asset path to play for ``interaction``, if any."""
    if interaction is Interaction.HOVERED:
        return HOVER_SOUND
    if interaction is Interaction.PRESSED:
        return PRESS_SOUND
    return None