"""Split of the screen between the map and the control column."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

RECOMMENDED_CONTROLS_WIDTH = 600


@dataclass(frozen=True)
class WindowPlan:
    map_width: int
    controls_width: int
    window_width: int
    window_height: int
    maximized: bool


def split_widths(screen_width: int, map_width: int, controls_width: int) -> Tuple[int, int]:
    """Return ``(map_width, controls_width)`` for the available screen width."""

    total = map_width + controls_width
    if screen_width == total:
        return map_width, controls_width
    if screen_width > total:
        # Ultra wide: the map keeps its size and the controls take the rest.
        return map_width, screen_width - map_width
    if screen_width > controls_width:
        return screen_width - controls_width, controls_width
    half = screen_width // 2
    return half, half


def plan_window(
    screen_width: int,
    screen_height: int,
    map_width: int,
    map_height: int,
    controls_width: int = RECOMMENDED_CONTROLS_WIDTH,
) -> WindowPlan:
    """Size the main window for a map of ``map_width`` x ``map_height`` pixels.

    A screen taller than the map gets a window exactly as tall as the map so
    no untextured space shows below it; otherwise the window stays maximized.
    Scrollbar widths are not taken off the map budget, so a map that fits
    exactly can still show a scrollbar.
    """

    map_part, controls_part = split_widths(screen_width, map_width, controls_width)
    if screen_height > map_height:
        return WindowPlan(map_part, controls_part, screen_width, map_height, maximized=False)
    return WindowPlan(map_part, controls_part, screen_width, screen_height, maximized=True)


__all__ = ["RECOMMENDED_CONTROLS_WIDTH", "WindowPlan", "plan_window", "split_widths"]
