"""Collision shapes used for hit testing."""

from __future__ import annotations

from abc import ABC, abstractmethod

from cwars.geometry import Vector


class CollisionShape(ABC):
    """A shape that can be tested for overlap with another shape."""

    @abstractmethod
    def collides_with(self, other: CollisionShape) -> bool:
        """Return True if this shape overlaps ``other``."""


class CollisionShapeSquare(CollisionShape):
    """An axis-aligned box given by its top-left corner and size."""

    def __init__(self, position: Vector, size: Vector) -> None:
        self.position = position
        self.size = size

    def __repr__(self) -> str:
        return f"CollisionShapeSquare(position={self.position!r}, size={self.size!r})"

    def collides_with(self, other: CollisionShape) -> bool:
        """Strict overlap test; boxes that only touch do not collide."""
        if not isinstance(other, CollisionShapeSquare):
            return other.collides_with(self)
        return (
            self.position.x + self.size.x > other.position.x
            and self.position.x < other.position.x + other.size.x
            and self.position.y + self.size.y > other.position.y
            and self.position.y < other.position.y + other.size.y
        )