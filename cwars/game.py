"""The game window, main loop and command entry point."""

from __future__ import annotations

import argparse
import dataclasses
import signal
import time
from typing import Optional, Sequence

import pygame

from cwars.camera import Camera
from cwars.controls import Controls
from cwars.entities import Entity, Worker
from cwars.geometry import Rect, Vector
from cwars.player import Player

WINDOW_TITLE = "CWars"
WINDOW_SIZE = (800, 600)
BACKGROUND = (0, 0, 0)


class Game:
    """Owns the window, the world's entities, and the fixed-rate loop."""

    def __init__(self, fps: float = 30.0) -> None:
        self.fps = fps
        self.running = False
        self.camera = Camera()
        self.controls = Controls()
        self.entities: dict[str, Entity] = {}
        self.players: dict[str, Player] = {}
        self.player = Player()

        try:
            pygame.display.init()
        except pygame.error as exc:
            raise RuntimeError("Failed to initialize the display") from exc
        try:
            self.surface = pygame.display.set_mode(WINDOW_SIZE)
        except pygame.error as exc:
            pygame.display.quit()
            raise RuntimeError("Failed to create window") from exc
        pygame.display.set_caption(WINDOW_TITLE)

        self._register_inputs()

        self.entities["worker"] = Worker("123", "TestPlayer", Vector(100, 100))
        self.entities["worker2"] = Worker("321", "TestPlayer", Vector(180, 180))

    def __enter__(self) -> Game:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Shut the window and release the display."""
        pygame.display.quit()

    def _register_inputs(self) -> None:
        self.controls.on_stop = self.stop
        self.controls.on_move_camera = self.camera.move
        self.controls.on_selection = self._select

    def _select(self, rect: Rect) -> None:
        world_rect = dataclasses.replace(
            rect,
            x=rect.x + self.camera.position.x,
            y=rect.y + self.camera.position.y,
        )
        self.player.scan_entities(world_rect, self.entities)

    def run(self) -> None:
        """Run frames at ``fps`` until stopped."""
        self.running = True
        frame_duration = 1.0 / self.fps
        while self.running:
            frame_start = time.perf_counter()
            self.input()
            self.update(frame_duration)
            self.output()
            remaining = frame_duration - (time.perf_counter() - frame_start)
            if remaining > 0.0:
                time.sleep(remaining)

    def stop(self) -> None:
        """Ask the loop to finish after the current frame."""
        self.running = False

    def set_player(self, player: Player) -> None:
        self.player = player

    def input(self) -> None:
        self.controls.input()

    def update(self, dt: float) -> None:
        self.camera.update(dt)
        for entity in self.entities.values():
            entity.update(dt)

    def output(self) -> None:
        self.surface.fill(BACKGROUND)
        for entity in self.entities.values():
            entity.output(self.surface, self.camera)
        self.controls.output(self.surface, self.camera)
        pygame.display.flip()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and play until closed or interrupted."""
    parser = argparse.ArgumentParser(prog="cwars", description="A small real-time strategy game.")
    parser.parse_args(argv)

    with Game() as game:

        def _on_interrupt(signum: int, _frame: object) -> None:
            print(f"Interrupt signal ({signum}) received.")
            game.stop()

        previous = signal.signal(signal.SIGINT, _on_interrupt)
        try:
            game.set_player(Player("TestPlayer"))
            game.run()
        finally:
            signal.signal(signal.SIGINT, previous)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())