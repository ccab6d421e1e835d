"""Colour assignment for notification icons."""

from __future__ import annotations

from typing import Final, Sequence

DEFAULT_PALETTE: Final[tuple[str, ...]] = (
    "#1abc9c",
    "#3498db",
    "#9b59b6",
    "#e67e22",
    "#e74c3c",
    "#2ecc71",
    "#34495e",
    "#f1c40f",
    "#16a085",
    "#2980b9",
    "#8e44ad",
    "#d35400",
    "#c0392b",
    "#27ae60",
    "#7f8c8d",
)


class ColorChooser:
    """Hand out palette colours to names in order of first appearance.

    A name keeps its colour for the lifetime of the chooser. Once the palette
    is exhausted colours are reused from the start.
    """

    def __init__(self, palette: Sequence[str] = DEFAULT_PALETTE) -> None:
        if not palette:
            raise ValueError("The colour palette cannot be empty")
        self._palette = tuple(palette)
        self._assigned: dict[str, str] = {}

    def get_color_for_name(self, name: str) -> str:
        color = self._assigned.get(name)
        if color is None:
            color = self._palette[len(self._assigned) % len(self._palette)]
            self._assigned[name] = color
        return color


__all__ = ["ColorChooser", "DEFAULT_PALETTE"]
