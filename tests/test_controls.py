import math

import pygame
import pytest

from cwars.camera import Camera
from cwars.controls import Controls
from cwars.geometry import Rect, Vector
from cwars.selection import SELECTION_ADD_COLOR


def key_down(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def key_up(key):
    return pygame.event.Event(pygame.KEYUP, key=key)


def mouse_down(pos, button=pygame.BUTTON_LEFT):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=pos)


def mouse_up(pos, button=pygame.BUTTON_LEFT):
    return pygame.event.Event(pygame.MOUSEBUTTONUP, button=button, pos=pos)


def motion(pos):
    return pygame.event.Event(pygame.MOUSEMOTION, pos=pos)


@pytest.fixture
def recorded():
    calls = {"stop": 0, "moves": [], "rects": []}
    controls = Controls(
        on_stop=lambda: calls.__setitem__("stop", calls["stop"] + 1),
        on_move_camera=calls["moves"].append,
        on_selection=calls["rects"].append,
    )
    return controls, calls


@pytest.mark.parametrize(
    "key, expected",
    [
        (pygame.K_w, Vector(0, -1)),
        (pygame.K_s, Vector(0, 1)),
        (pygame.K_a, Vector(-1, 0)),
        (pygame.K_d, Vector(1, 0)),
    ],
)
def test_single_key_moves_camera(recorded, key, expected):
    controls, calls = recorded
    controls.handle_event(key_down(key))
    assert calls["moves"][-1] == expected


def test_diagonal_direction_is_normalized(recorded):
    controls, calls = recorded
    controls.handle_event(key_down(pygame.K_w))
    controls.handle_event(key_down(pygame.K_d))
    direction = calls["moves"][-1]
    assert math.isclose(direction.magnitude(), 1.0, rel_tol=1e-9)
    assert math.isclose(direction.x, -direction.y)
    assert direction.x > 0


def test_opposite_keys_cancel(recorded):
    controls, calls = recorded
    controls.handle_event(key_down(pygame.K_a))
    controls.handle_event(key_down(pygame.K_d))
    assert calls["moves"][-1] == Vector(0, 0)


def test_key_release_stops_camera(recorded):
    controls, calls = recorded
    controls.handle_event(key_down(pygame.K_s))
    controls.handle_event(key_up(pygame.K_s))
    assert calls["moves"][-1] == Vector(0, 0)


def test_every_event_reports_camera_direction(recorded):
    controls, calls = recorded
    controls.handle_event(key_down(pygame.K_w))
    controls.handle_event(motion((5, 5)))
    controls.handle_event(key_down(pygame.K_q))
    assert calls["moves"] == [Vector(0, -1)] * 3


@pytest.mark.parametrize(
    "event",
    [pygame.event.Event(pygame.QUIT), pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)],
)
def test_stop_requests(recorded, event):
    controls, calls = recorded
    controls.handle_event(event)
    assert calls["stop"] == 1


def test_left_drag_reports_selection(recorded):
    controls, calls = recorded
    controls.handle_event(mouse_down((10, 20)))
    controls.handle_event(motion((40, 5)))
    controls.handle_event(mouse_up((40, 5)))
    assert calls["rects"] == [Rect(10.0, 5.0, 30.0, 15.0)]


def test_right_button_does_not_select(recorded):
    controls, calls = recorded
    controls.handle_event(mouse_down((10, 20), button=pygame.BUTTON_RIGHT))
    controls.handle_event(mouse_up((40, 5), button=pygame.BUTTON_RIGHT))
    assert calls["rects"] == []
    assert controls.selection.selected is False


def test_without_callbacks_events_are_harmless():
    controls = Controls()
    controls.handle_event(pygame.event.Event(pygame.QUIT))
    controls.handle_event(mouse_down((1, 1)))
    controls.handle_event(mouse_up((3, 3)))
    assert controls.selection.selected is False


def test_output_draws_active_selection():
    controls = Controls()
    surface = pygame.Surface((50, 50))
    surface.fill((0, 0, 0))
    controls.handle_event(mouse_down((10, 10)))
    controls.handle_event(motion((20, 20)))
    controls.output(surface, Camera())
    assert tuple(surface.get_at((15, 15)))[:3] == SELECTION_ADD_COLOR
    assert tuple(surface.get_at((30, 30)))[:3] == (0, 0, 0)