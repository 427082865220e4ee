"""Game entities: the abstract entity, units and workers."""

from __future__ import annotations

from abc import ABC, abstractmethod

import pygame

from cwars.camera import Camera
from cwars.collision import CollisionShapeSquare
from cwars.geometry import Vector

UNIT_SIZE = 32
UNIT_COLOR = (255, 0, 0, 255)


class Entity(ABC):
    """Something that lives in the world, updates and draws itself."""

    def __init__(self, entity_id: str, position: Vector) -> None:
        self.id = entity_id
        self.name = ""
        self.position = position

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, position={self.position!r})"

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the entity by ``dt`` seconds."""

    @abstractmethod
    def output(self, surface: pygame.Surface, camera: Camera) -> None:
        """Draw the entity onto ``surface`` as seen from ``camera``."""


class Unit(Entity):
    """A square unit owned by a player."""

    def __init__(self, entity_id: str, player: str, position: Vector) -> None:
        super().__init__(entity_id, position)
        self.player = player
        self.velocity = Vector(0, 0)
        self.collision_shape = CollisionShapeSquare(position, Vector(UNIT_SIZE, UNIT_SIZE))

    def update(self, dt: float) -> None:
        self.position = self.position + self.velocity * dt

    def output(self, surface: pygame.Surface, camera: Camera) -> None:
        render_position = self.position - camera.position
        square = pygame.Rect(
            int(render_position.x), int(render_position.y), UNIT_SIZE, UNIT_SIZE
        )
        surface.fill(UNIT_COLOR, square)


class Worker(Unit):
    """A worker unit."""

    def __init__(self, entity_id: str, player: str, position: Vector) -> None:
        super().__init__(entity_id, player, position)
        self.name = "Worker"
        self.selected = False