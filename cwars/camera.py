"""The view camera."""

from __future__ import annotations

from dataclasses import dataclass, field

from cwars.geometry import Vector


@dataclass
class Camera:
    """Scrolling camera driven by a direction and a speed in pixels per second."""

    position: Vector = field(default_factory=Vector)
    velocity: Vector = field(default_factory=Vector)
    speed: float = 500.0

    def input(self) -> None:
        """The camera takes no input of its own; controls steer it through move()."""

    def update(self, dt: float) -> None:
        """Advance the camera by ``dt`` seconds."""
        self.position = self.position + self.velocity * self.speed * dt

    def move(self, direction: Vector) -> None:
        """Set the direction the camera travels in."""
        self.velocity = direction