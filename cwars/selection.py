"""Drag-box selection with the mouse."""

from __future__ import annotations

from typing import Callable, Optional

import pygame

from cwars.camera import Camera
from cwars.geometry import Rect, Vector

# Half-transparent green, blended additively onto what is already drawn.
SELECTION_ADD_COLOR = (0, 128, 0)


class Selection:
    """Tracks a rectangle dragged out on screen and reports it when released."""

    def __init__(self, on_selection: Optional[Callable[[Rect], None]] = None) -> None:
        self.on_selection = on_selection
        self.selected = False
        self._start = Vector(0, 0)
        self._end = Vector(0, 0)

    def start(self, position: Vector) -> None:
        """Begin a drag at ``position``."""
        self.selected = True
        self._start = position
        self._end = position

    def move(self, position: Vector) -> None:
        """Stretch the box to ``position`` while a drag is active."""
        if self.selected:
            self._end = position

    def end(self, position: Vector) -> None:
        """Finish the drag at ``position`` and report the box."""
        self.selected = False
        self._end = position
        if self.on_selection is not None:
            self.on_selection(self.rect())

    def output(self, surface: pygame.Surface, camera: Camera) -> None:
        """Draw the box while a drag is active."""
        if not self.selected:
            return
        box = self.rect()
        surface.fill(
            SELECTION_ADD_COLOR,
            pygame.Rect(int(box.x), int(box.y), int(box.w), int(box.h)),
            special_flags=pygame.BLEND_RGB_ADD,
        )

    def rect(self) -> Rect:
        """The box between start and end, in whole screen pixels."""
        start, end = self._start, self._end
        return Rect(
            float(min(int(start.x), int(end.x))),
            float(min(int(start.y), int(end.y))),
            float(abs(int(end.x - start.x))),
            float(abs(int(end.y - start.y))),
        )