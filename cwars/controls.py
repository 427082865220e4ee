"""Keyboard and mouse controls for the camera and box selection."""

from __future__ import annotations

from typing import Callable, Optional

import pygame

from cwars.camera import Camera
from cwars.geometry import Rect, Vector
from cwars.selection import Selection

_CAMERA_KEYS = {
    pygame.K_w: Vector(0, -1),
    pygame.K_s: Vector(0, 1),
    pygame.K_a: Vector(-1, 0),
    pygame.K_d: Vector(1, 0),
}


class Controls:
    """Turns input events into camera movement, selections and stop requests."""

    def __init__(
        self,
        on_stop: Optional[Callable[[], None]] = None,
        on_move_camera: Optional[Callable[[Vector], None]] = None,
        on_selection: Optional[Callable[[Rect], None]] = None,
    ) -> None:
        self.on_stop = on_stop
        self.on_move_camera = on_move_camera
        self.on_selection = on_selection
        self.selection = Selection(on_selection=self._forward_selection)
        self._held: set[int] = set()

    def _forward_selection(self, rect: Rect) -> None:
        if self.on_selection is not None:
            self.on_selection(rect)

    def _request_stop(self) -> None:
        if self.on_stop is not None:
            self.on_stop()

    def input(self) -> None:
        """Drain the pending event queue."""
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event: pygame.event.Event) -> None:
        """Apply a single input event, then report the camera direction."""
        if event.type == pygame.QUIT:
            self._request_stop()
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self._request_stop()
            elif event.key in _CAMERA_KEYS:
                self._held.add(event.key)
        elif event.type == pygame.KEYUP:
            self._held.discard(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == pygame.BUTTON_LEFT:
                self.selection.start(_point(event.pos))
        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == pygame.BUTTON_LEFT:
                self.selection.end(_point(event.pos))
        elif event.type == pygame.MOUSEMOTION:
            self.selection.move(_point(event.pos))

        self._handle_camera_movement()

    def _handle_camera_movement(self) -> None:
        direction = Vector(0, 0)
        for key in self._held:
            direction = direction + _CAMERA_KEYS[key]
        if self.on_move_camera is not None:
            self.on_move_camera(direction.normalize())

    def update(self, dt: float) -> None:
        """Controls hold no time-dependent state."""

    def output(self, surface: pygame.Surface, camera: Camera) -> None:
        """Draw the active selection box."""
        self.selection.output(surface, camera)


def _point(pos: tuple[int, int]) -> Vector:
    x, y = pos
    return Vector(float(x), float(y))