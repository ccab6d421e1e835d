"""Tests for icon colour assignment."""

import pytest

from notification_hub.utils import ColorChooser


def test_same_name_keeps_its_color():
    chooser = ColorChooser(["#111", "#222"])

    first = chooser.get_color_for_name("comment")
    chooser.get_color_for_name("like")

    assert chooser.get_color_for_name("comment") == first


def test_colors_follow_first_appearance_and_wrap():
    chooser = ColorChooser(["#111", "#222"])

    assert chooser.get_color_for_name("a") == "#111"
    assert chooser.get_color_for_name("b") == "#222"
    assert chooser.get_color_for_name("c") == "#111"


def test_separate_choosers_assign_independently():
    first = ColorChooser(["#111", "#222"])
    second = ColorChooser(["#111", "#222"])

    first.get_color_for_name("a")

    assert second.get_color_for_name("b") == "#111"


def test_empty_palette_is_rejected():
    with pytest.raises(ValueError):
        ColorChooser([])
