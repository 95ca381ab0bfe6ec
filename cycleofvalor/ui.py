"""Colours, the UI palette and button interaction feedback."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Sequence

PRESSED_SCALE = 0.9
HOVERED_SCALE = 1.1
ANIMATION_SPEED = 40.0


@dataclass(frozen=True)
class Color:
    """An sRGB colour with alpha, each channel in 0..1."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @staticmethod
    def srgb(red: float, green: float, blue: float) -> Color:
        """An opaque colour."""
        return Color(red, green, blue, 1.0)

    def with_alpha(self, alpha: float) -> Color:
        """The same colour with another alpha."""
        return replace(self, alpha=alpha)


Color.WHITE = Color.srgb(1.0, 1.0, 1.0)  # type: ignore[attr-defined]
Color.BLACK = Color.srgb(0.0, 0.0, 0.0)  # type: ignore[attr-defined]

_CSS_RED = Color.srgb(1.0, 0.0, 0.0)
_CSS_ANTIQUE_WHITE = Color.srgb(0.98, 0.92, 0.84)

LABEL_SIZE = 18.0
HEADER_SIZE = 24.0

BUTTON_HOVERED_BACKGROUND = Color.srgb(0.186, 0.328, 0.573)
BUTTON_PRESSED_BACKGROUND = Color.srgb(0.286, 0.478, 0.773)

BUTTON_TEXT = Color.srgb(0.925, 0.925, 0.925)
LABEL_TEXT = Color.srgb(0.867, 0.827, 0.412)
HEADER_TEXT = Color.srgb(0.867, 0.827, 0.412)
TITLE_TEXT_COLOR = _CSS_ANTIQUE_WHITE

NODE_BACKGROUND = Color.srgb(0.286, 0.478, 0.773)

TITLE_BUTTON_BACKGROUND = Color.srgb(0.4, 0.025, 0.1)
TITLE_BUTTON_HOVERED_BACKGROUND = Color.srgb(0.75, 0.05, 0.2)
TITLE_BUTTON_PRESSED_BACKGROUND = _CSS_RED
TITLE_BUTTON_TEXT_COLOR = Color.srgb(0.1, 0.0, 0.0)

TITLE_TEXT_FONT_PATH = "fonts/CloisterBlackLight-axjg.ttf"


class Interaction(Enum):
    """The pointer state of a widget."""

    NONE = "none"
    HOVERED = "hovered"
    PRESSED = "pressed"


@dataclass(frozen=True)
class InteractionPalette:
    """Background colours of a widget for each interaction state."""

    none: Color
    hovered: Color
    pressed: Color

    def color_for(self, interaction: Interaction) -> Color:
        """The background to show for ``interaction``."""
        if interaction is Interaction.HOVERED:
            return self.hovered
        if interaction is Interaction.PRESSED:
            return self.pressed
        return self.none


def target_scale(interaction: Interaction) -> float:
    """The uniform scale a widget animates towards in a given state."""
    if interaction is Interaction.HOVERED:
        return HOVERED_SCALE
    if interaction is Interaction.PRESSED:
        return PRESSED_SCALE
    return 1.0


def animate_scale(
    current: Sequence[float], interaction: Interaction, delta_seconds: float
) -> tuple[float, ...]:
    """One animation step of a widget's scale towards its state's target.

    The interpolation factor is clamped to 1 so a long frame never overshoots.
    The animation is over once the result is exactly one on every axis.
    """
    target = target_scale(interaction)
    t = min(delta_seconds * ANIMATION_SPEED, 1.0)
    return tuple(value + (target - value) * t for value in current)