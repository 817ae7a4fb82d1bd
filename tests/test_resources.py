import os

import pygame
import pytest

from bugrun.textures.resourcepath import ENEMY_BUG_PATH, GAME_IMAGE_PATHS, HEART_PATH
from bugrun.textures.resources import (
    SPRITE_SIZE,
    ResourceCache,
    ResourceLoadFailure,
    create_placeholder_image,
)


def test_missing_asset_raises_and_never_signals_ready(tmp_path):
    cache = ResourceCache(str(tmp_path))
    calls = []
    cache.on_ready(lambda: calls.append(1))
    with pytest.raises(ResourceLoadFailure) as excinfo:
        cache.load([ENEMY_BUG_PATH])
    assert excinfo.value.path == ENEMY_BUG_PATH
    assert calls == []
    assert not cache.is_ready()


def test_undecodable_asset_raises(tmp_path):
    bad = tmp_path / "images" / "broken.png"
    bad.parent.mkdir()
    bad.write_bytes(b"definitely not a png")
    cache = ResourceCache(str(tmp_path))
    with pytest.raises(ResourceLoadFailure):
        cache.load(["images/broken.png"])


def test_loads_real_image_file(tmp_path):
    os.makedirs(tmp_path / "images")
    surf = pygame.Surface((12, 7))
    surf.fill((10, 200, 30))
    pygame.image.save(surf, str(tmp_path / "images" / "tile.png"))

    cache = ResourceCache(str(tmp_path))
    cache.load(["images/tile.png"])
    assert cache.get("images/tile.png").get_size() == (12, 7)


def test_placeholders_fill_every_game_image(tmp_path):
    cache = ResourceCache(str(tmp_path), placeholders=True)
    cache.load(GAME_IMAGE_PATHS)
    for path in GAME_IMAGE_PATHS:
        assert cache.get(path).get_size() == SPRITE_SIZE


def test_ready_fires_exactly_once(tmp_path):
    cache = ResourceCache(str(tmp_path), placeholders=True)
    calls = []
    cache.on_ready(lambda: calls.append("a"))
    cache.load([HEART_PATH])
    cache.load([ENEMY_BUG_PATH])
    assert calls == ["a"]


def test_on_ready_after_load_runs_immediately(tmp_path):
    cache = ResourceCache(str(tmp_path), placeholders=True)
    cache.load([HEART_PATH])
    calls = []
    cache.on_ready(lambda: calls.append("late"))
    assert calls == ["late"]


def test_get_before_load_raises(tmp_path):
    cache = ResourceCache(str(tmp_path))
    with pytest.raises(KeyError):
        cache.get(HEART_PATH)


def test_scaled_lookup_is_cached(resources):
    small = resources.get(HEART_PATH, (30, 51))
    assert small.get_size() == (30, 51)
    assert resources.get(HEART_PATH, (30, 51)) is small
    assert resources.get(HEART_PATH) is not small


def test_unknown_placeholder_is_checkerboard():
    surf = create_placeholder_image("images/unknown.png")
    assert surf.get_size() == SPRITE_SIZE
    assert tuple(surf.get_at((0, 0)))[:3] == (255, 0, 0)


def test_failed_load_keeps_no_partial_images(tmp_path):
    os.makedirs(tmp_path / "images")
    pygame.image.save(pygame.Surface((4, 4)), str(tmp_path / "images" / "tile.png"))

    cache = ResourceCache(str(tmp_path))
    with pytest.raises(ResourceLoadFailure):
        cache.load(["images/tile.png", "images/missing.png"])
    with pytest.raises(KeyError):
        cache.get("images/tile.png")
    assert not cache.is_ready()
