import os

# Headless SDL so surfaces, fonts and the display work without a screen
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pygame
import pytest

from bugrun.textures.resourcepath import GAME_IMAGE_PATHS
from bugrun.textures.resources import ResourceCache
from bugrun.world.entities import Enemy
from bugrun.world.worldscene import WorldScene


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def resources(tmp_path):
    cache = ResourceCache(str(tmp_path), placeholders=True)
    cache.load(GAME_IMAGE_PATHS)
    return cache


@pytest.fixture
def scene(resources, rng):
    """A scene past the avatar menu with no enemies on the board."""
    s = WorldScene(resources, rng)
    s.enemies = []
    s.select_avatar(0)
    return s


def make_enemy(x, y, speed=0.0, width=80, height=70):
    enemy = Enemy.create(x, y, speed)
    enemy.width = width
    enemy.height = height
    return enemy


@pytest.fixture
def enemy_factory():
    return make_enemy


@pytest.fixture(autouse=True)
def _pygame_teardown():
    yield
    pygame.quit()
