"""Players and their unit picking."""

from __future__ import annotations

from collections.abc import Mapping

from cwars.collision import CollisionShapeSquare
from cwars.entities import Entity, Unit
from cwars.geometry import Rect, Vector


class Player:
    """A player who can box-select units in the world."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.selected_entities: dict[str, Entity] = {}

    def __repr__(self) -> str:
        return f"Player(name={self.name!r})"

    def scan_entities(self, rect: Rect, entities: Mapping[str, Entity]) -> list[Unit]:
        """Report and return the units whose collision box overlaps ``rect``."""
        area = CollisionShapeSquare(Vector(rect.x, rect.y), Vector(rect.w, rect.h))
        hits = []
        for entity in entities.values():
            if isinstance(entity, Unit) and area.collides_with(entity.collision_shape):
                print(f"Collided with unit:{entity.id}")
                hits.append(entity)
        return hits