"""Named UI icon images."""

from __future__ import annotations

from typing import Optional

PIXEL_ICONS: tuple[str, ...] = (
    "gold_coins",
    "population",
    "selection_arrow",
    "attack_arrow",
    "hourglass",
)
"""Icons drawn as pixel art, to be sampled with nearest filtering."""

ICONS: tuple[str, ...] = (
    # Weapons
    "axe",
    "bandage",
    "bow",
    "dagger",
    "mace",
    "sword",
    "whip",
    # Potions
    "fire_potion",
    "health_potion",
    "speed_potion",
    "strength_potion",
    # General
    "claw_mark",
    "shop",
    "shop_character",
    "bg1",
    "bg2",
    "button1",
    "button1-gs",
    "heart",
)


class IconSet:
    """Image handles for icons, looked up by name."""

    def __init__(self) -> None:
        self._handles: dict[str, str] = {}

    def insert(self, name: str, handle: str) -> Optional[str]:
        """Store a handle, returning the one it replaces, if any."""
        previous = self._handles.get(name)
        self._handles[name] = handle
        return previous

    def get(self, name: str) -> str:
        """The handle for ``name``; raises KeyError if it was never loaded."""
        try:
            return self._handles[name]
        except KeyError:
            raise KeyError(f"Unable to get icon: {name}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._handles

    def __len__(self) -> int:
        return len(self._handles)


def default_icon_set() -> IconSet:
    """An icon set with every game icon pointing at its image path."""
    icon_set = IconSet()
    for name in (*PIXEL_ICONS, *ICONS):
        icon_set.insert(name, f"icons/{name}.png")
    return icon_set