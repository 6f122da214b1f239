import pygame
import pytest

import game as game_mod
from audio import Audio
from config import BUG_TYPES, LOCATIONS
from grass import grass_top


@pytest.fixture
def g(monkeypatch):
    monkeypatch.setattr(game_mod, "Audio", lambda: Audio(enabled=False))
    gm = game_mod.Game()
    yield gm
    pygame.quit()


@pytest.fixture
def played(g):
    names = []
    g.audio.play = names.append
    return names


def _post(kind, **kw):
    pygame.event.post(pygame.event.Event(kind, **kw))


def _click(g, pos):
    _post(pygame.MOUSEBUTTONDOWN, pos=pos, button=1)
    g._events()


def _key(g, key):
    _post(pygame.KEYDOWN, key=key)
    g._events()


def _park(sc, bug, x, y):
    gt = grass_top(sc.h)
    for b in sc.swarm.bugs:
        b.x, b.y, b.vy = 5.0, gt + 10, -1.0
    bug.x, bug.y, bug.vy = float(x), float(y), -2.0


def test_start_button(g):
    g._draw()
    _click(g, g._start.center)
    assert g.scene.state == "forest"


def test_globe_click_wins_over_bug_under_it(g):
    g.scene.start()
    g._draw()
    bug = g.scene.swarm.bugs[0]
    _park(g.scene, bug, *g._globe.center)
    _click(g, g._globe.center)
    assert g.scene.state == "map"
    assert g.scene.inventory == {t: 0 for t in BUG_TYPES}
    assert (bug.x, bug.y) == tuple(map(float, g._globe.center))


def test_click_on_bug_catches_it(g, played):
    g.scene.start()
    g._draw()
    bug = g.scene.swarm.bugs[2]
    _park(g.scene, bug, 300, 200)
    kind = bug.type
    _click(g, (300, 200))
    assert g.scene.inventory[kind] == 1
    assert "catch" in played


def test_map_button_click_picks_location(g):
    g.scene.start()
    g.scene.open_map()
    g._draw()
    btns, _ = g._map
    rect = next(r for r, loc in btns if loc == "meadow")
    _click(g, rect.center)
    assert g.scene.state == "forest" and g.scene.location == "meadow"


def test_map_close_button(g):
    g.scene.start()
    g.scene.open_map()
    g._draw()
    _click(g, g._map[1].center)
    assert g.scene.state == "forest"


def test_resize_event_rebuilds_forest(g):
    g.scene.start()
    _post(pygame.VIDEORESIZE, w=640, h=480, size=(640, 480))
    g._events()
    assert (g.scene.w, g.scene.h) == (640, 480)
    assert g.scene.grass.size == (640, 480)
    assert all(g_.base_y == grass_top(480) for g_ in g.scene.grass.front)


def test_keyboard_shortcuts(g):
    _key(g, pygame.K_RETURN)
    assert g.scene.state == "forest"
    _key(g, pygame.K_TAB)
    assert g.scene.state == "map"
    _key(g, pygame.K_ESCAPE)
    assert g.scene.state == "forest"
    for key, loc in zip((pygame.K_1, pygame.K_2, pygame.K_3), LOCATIONS):
        _key(g, pygame.K_TAB)
        _key(g, key)
        assert g.scene.state == "forest" and g.scene.location == loc


def test_f2_toggles_sound(g):
    on = g.audio.on
    _key(g, pygame.K_F2)
    assert g.audio.on is not on


def test_landing_plays_rustle(g, played):
    g.scene.start()
    bug = g.scene.swarm.bugs[0]
    bug.y, bug.vy = grass_top(g.scene.h), 1.0
    g._update()
    assert "rustle" in played


def test_failing_phase_is_logged_and_loop_continues(g, capsys):
    frames = []

    def boom():
        raise RuntimeError("boom")

    def draw():
        frames.append(g.frame)
        g.running = len(frames) < 2

    g._update = boom
    g._draw = draw
    with pytest.raises(SystemExit):
        g.run()
    assert frames == [0, 1]
    assert "[update] boom" in capsys.readouterr().out
