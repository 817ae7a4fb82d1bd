from types import SimpleNamespace

import pytest

from bugrun.world.collision import CollisionDetector, aabb_overlap


def box(x, y, w=10, h=10):
    return SimpleNamespace(x=x, y=y, width=w, height=h)


def test_overlapping_boxes():
    assert aabb_overlap(box(0, 0), box(5, 5))
    assert aabb_overlap(box(5, 5), box(0, 0))


def test_contained_box_overlaps():
    assert aabb_overlap(box(0, 0, 100, 100), box(40, 40, 5, 5))


@pytest.mark.parametrize("dx,dy", [(10, 0), (0, 10), (-10, 0), (0, -10)])
def test_touching_edges_do_not_overlap(dx, dy):
    assert not aabb_overlap(box(0, 0), box(dx, dy))


@pytest.mark.parametrize("dx,dy", [(11, 0), (0, 11), (-25, 3), (3, -40), (50, 50)])
def test_separated_on_either_axis(dx, dy):
    assert not aabb_overlap(box(0, 0), box(dx, dy))


def test_overlap_on_one_axis_only_is_not_a_hit():
    # same rows, far apart horizontally
    assert not aabb_overlap(box(0, 0, 10, 100), box(200, 0, 10, 100))


def test_player_and_bug_scenario():
    player = box(203, 391, 101, 171)
    enemy = box(200, 390, 101, 171)
    assert aabb_overlap(enemy, player)


def test_hits_yields_overlapping_enemies_in_order():
    player = box(0, 0)
    a, b, c = box(5, 5), box(100, 100), box(-5, -5)
    assert list(CollisionDetector.hits(player, [a, b, c])) == [a, c]


def test_hits_rereads_player_position():
    player = box(0, 0)
    first, second = box(5, 5), box(-5, -5)
    seen = []
    for enemy in CollisionDetector.hits(player, [first, second]):
        seen.append(enemy)
        player.x, player.y = 500, 500
    assert seen == [first]

