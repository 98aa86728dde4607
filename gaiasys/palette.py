"""Colors used by the user interface."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Color:
    """An sRGB color with an alpha channel, components in the range 0 to 1."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def with_alpha(self, alpha: float) -> Color:
        """Return the same color with a different alpha."""
        return replace(self, alpha=alpha)


BUTTON_HOVERED_BACKGROUND = Color(0.186, 0.328, 0.573)
BUTTON_PRESSED_BACKGROUND = Color(0.286, 0.478, 0.773)

BUTTON_TEXT = Color(0.925, 0.925, 0.925)
LABEL_TEXT = Color(0.867, 0.827, 0.412)
HEADER_TEXT = Color(0.867, 0.827, 0.412)

NODE_BACKGROUND = Color(0.286, 0.478, 0.773)