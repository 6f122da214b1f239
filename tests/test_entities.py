import random

import pygame
import pytest

from config import BUG_COUNT, BUG_TYPES, SPAWN_DEPTH
from entities import Bug, Swarm
from grass import grass_top
from themes import get_theme

W, H = 800, 600
GT = grass_top(H)


@pytest.fixture
def theme():
    return get_theme("meadow")


@pytest.fixture
def swarm(theme):
    s = Swarm(rng=random.Random(5))
    s.populate(W, H, theme)
    # park every bug out of sight inside the grass
    for b in s.bugs:
        b.x, b.y, b.vy = 700, GT + 10, -1
    return s


def test_reset_postconditions(theme):
    r = random.Random(2)
    for _ in range(200):
        b = Bug(W, H, theme, r)
        assert b.vy < 0
        assert b.type in BUG_TYPES
        assert b.color == theme.bugs[b.type]
        assert 0 <= b.x < W
        assert b.y == GT + SPAWN_DEPTH
        assert -1.5 <= b.vx < 1.5


def test_all_types_eventually_spawn(theme):
    r = random.Random(4)
    assert {Bug(W, H, theme, r).type for _ in range(100)} == set(BUG_TYPES)


def test_rising_bug_below_grass_keeps_flying(theme):
    b = Bug(W, H, theme, random.Random(1))
    vy = b.vy
    assert b.update(W, H, theme) is None
    assert b.vy == pytest.approx(vy + 0.25)
    assert b.y == pytest.approx(GT + SPAWN_DEPTH + vy + 0.25)


@pytest.mark.parametrize("vy", [0.0, 0.5, 4.0])
def test_falling_bug_at_grass_line_is_reset(theme, vy):
    b = Bug(W, H, theme, random.Random(1))
    b.x, b.y, b.vy = 300.0, GT, vy
    assert b.update(W, H, theme) == "landed"
    assert b.y == GT + SPAWN_DEPTH and b.vy < 0


def test_falling_bug_above_grass_line_continues(theme):
    b = Bug(W, H, theme, random.Random(1))
    b.x, b.y, b.vy = 300.0, GT - 10, 1.0
    assert b.update(W, H, theme) is None
    assert b.y == pytest.approx(GT - 10 + 1.25)


@pytest.mark.parametrize("pos", [(-500, 100), (W + 500, 100), (100, -900)])
def test_runaway_bug_is_reset(theme, pos):
    b = Bug(W, H, theme, random.Random(1))
    b.x, b.y = pos
    b.vy = -3
    assert b.update(W, H, theme) == "lost"
    assert 0 <= b.x < W


def test_hit_box():
    b = Bug(W, H, get_theme("forest"), random.Random(1))
    b.x, b.y = 200.0, 200.0
    s = b.draw_size
    assert b.is_clicked(200, 200)
    assert b.is_clicked(200 + s * 0.6, 200 - s * 0.65)
    assert not b.is_clicked(200 + s * 0.7, 200)
    assert not b.is_clicked(200, 200 + s * 0.75)


def test_hidden_bug_is_not_drawn(theme):
    s = pygame.Surface((W, H))
    s.fill((0, 0, 0))
    b = Bug(W, H, theme, random.Random(1))
    b.x, b.y = 400.0, GT
    b.draw(s, H)
    assert pygame.transform.average_color(s)[:3] == (0, 0, 0)


@pytest.mark.parametrize("kind", BUG_TYPES)
def test_visible_bug_is_drawn(theme, kind):
    s = pygame.Surface((W, H))
    s.fill((0, 0, 0))
    b = Bug(W, H, theme, random.Random(1))
    b.type, b.color = kind, theme.bugs[kind]
    b.x, b.y = 400.0, 200.0
    b.draw(s, H)
    region = s.subsurface((380, 180, 40, 40))
    assert pygame.transform.average_color(region)[:3] != (0, 0, 0)


def test_populate_only_once(swarm, theme):
    bugs = list(swarm.bugs)
    swarm.populate(W, H, theme)
    assert swarm.bugs == bugs and len(swarm.bugs) == BUG_COUNT


def test_pool_size_is_constant(swarm):
    for b in swarm.bugs:
        b.y = GT + SPAWN_DEPTH
        b.vy = -8
    for _ in range(500):
        swarm.update()
    assert len(swarm.bugs) == BUG_COUNT


def test_catch_front_most_only(swarm):
    back, front = swarm.bugs[0], swarm.bugs[-1]
    back.x, back.y, back.type = 100.0, 100.0, "moth"
    front.x, front.y, front.type = 105.0, 100.0, "beetle"
    assert swarm.catch(102, 100) == "beetle"
    assert (back.x, back.y) == (100.0, 100.0)
    assert front.y == GT + SPAWN_DEPTH


def test_catch_empty_space(swarm):
    before = [(b.x, b.y, b.type) for b in swarm.bugs]
    assert swarm.catch(50, 50) is None
    assert [(b.x, b.y, b.type) for b in swarm.bugs] == before


def test_hidden_bug_cannot_be_caught(swarm):
    b = swarm.bugs[2]
    assert swarm.catch(b.x, b.y) is None


def test_reset_all_retints(swarm):
    th = get_theme("swamp")
    swarm.reset_all(W, H, th)
    assert all(b.color == th.bugs[b.type] for b in swarm.bugs)
    assert swarm.theme is th


def test_update_counts_landings(swarm):
    lander = swarm.bugs[4]
    lander.y, lander.vy = GT, 1.0
    assert swarm.update() == 1
    assert lander.y == GT + SPAWN_DEPTH
    assert swarm.update() == 0
