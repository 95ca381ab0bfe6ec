"""Screen and game states, menu actions and widget show/hide bookkeeping."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Optional

GAME_TITLE = "Cycle of Valor"

DISPLAY_NONE = "none"
"""Display mode of a widget that takes no space in the layout."""
DISPLAY_DEFAULT = "flex"
"""Display mode restored to a widget whose earlier mode is not known."""


class Screen(Enum):
    """The game's main screens."""

    SPLASH = "splash"
    LOADING = "loading"
    TITLE = "title"
    CREDITS = "credits"
    PLAYING = "playing"
    LOST = "lost"


DEFAULT_SCREEN = Screen.SPLASH


class GameState(Enum):
    """Phases of play while on the playing screen."""

    MERCHANT = "merchant"
    TAVERN = "tavern"
    BUILDING_TURN = "building_turn"
    DEPLOYMENT = "deployment"
    BATTLE_TURN = "battle_turn"
    ENEMY_TURN = "enemy_turn"


DEFAULT_GAME_STATE = GameState.BUILDING_TURN


class TitleAction(Enum):
    """Buttons on the title screen."""

    PLAY = "Play"
    CREDITS = "Credits"
    EXIT = "Exit"

    def target(self) -> Optional[Screen]:
        """The screen this button leads to; None means the application exits."""
        if self is TitleAction.PLAY:
            return Screen.PLAYING
        if self is TitleAction.CREDITS:
            return Screen.CREDITS
        return None


class CreditsAction(Enum):
    """Buttons on the credits screen."""

    BACK = "Back"

    def target(self) -> Screen:
        """The screen this button leads to."""
        return Screen.TITLE


class DisplayCache:
    """Hides and shows widgets, remembering the layout mode each one had.

    A widget is any object with a boolean ``visible`` attribute and a
    ``display`` attribute that is None when the widget has no layout style.
    """

    def __init__(self) -> None:
        self._displays: dict[int, Any] = {}

    def hide(self, widgets: Iterable[Any]) -> None:
        """Make widgets invisible and remove them from the layout."""
        for widget in widgets:
            widget.visible = False
            if widget.display is not None:
                self._displays[id(widget)] = widget.display
                widget.display = DISPLAY_NONE

    def show(self, widgets: Iterable[Any]) -> None:
        """Make widgets visible, restoring the layout mode they had when hidden."""
        for widget in widgets:
            widget.visible = True
            if widget.display is not None:
                widget.display = self._displays.pop(id(widget), DISPLAY_DEFAULT)

    def __len__(self) -> int:
        return len(self._displays)