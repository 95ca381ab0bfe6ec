import pytest

from cycleofvalor.icons import ICONS, PIXEL_ICONS, IconSet, default_icon_set


def test_default_set_holds_every_icon():
    icons = default_icon_set()
    assert len(icons) == len(PIXEL_ICONS) + len(ICONS)
    for name in (*PIXEL_ICONS, *ICONS):
        assert name in icons


def test_default_handle_paths():
    icons = default_icon_set()
    assert icons.get("gold_coins") == "icons/gold_coins.png"
    assert icons.get("button1-gs") == "icons/button1-gs.png"


def test_missing_icon_raises():
    with pytest.raises(KeyError, match="Unable to get icon: nothing"):
        IconSet().get("nothing")


def test_insert_returns_replaced_handle():
    icons = IconSet()
    assert icons.insert("heart", "first") is None
    assert icons.insert("heart", "second") == "first"
    assert icons.get("heart") == "second"
    assert len(icons) == 1