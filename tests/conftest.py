import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from scene import Scene

W, H = 800, 600


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def scene(rng):
    return Scene(W, H, rng=rng)


@pytest.fixture
def forest(scene):
    scene.start()
    return scene


@pytest.fixture
def surf():
    return pygame.Surface((W, H))


@pytest.fixture(scope="session")
def fonts():
    pygame.font.init()
    return (pygame.font.Font(None, 20), pygame.font.Font(None, 40), pygame.font.Font(None, 15))
