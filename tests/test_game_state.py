import pytest

from bugrun.config import MAX_LIVES
from bugrun.textures.resourcepath import AVATAR_PATHS
from bugrun.world.game_state import GameState, Phase, ScoreRecord


@pytest.fixture
def state():
    s = GameState()
    s.select_avatar(1)
    return s


def test_starts_in_avatar_menu_with_full_hearts():
    s = GameState()
    assert s.phase is Phase.AVATAR_SELECT
    assert s.lives == MAX_LIVES
    assert not s.input_enabled
    assert (s.score, s.gem_count, s.replay_index) == (0, 0, 0)


def test_select_avatar_starts_play(state):
    assert state.phase is Phase.PLAYING
    assert state.avatar == AVATAR_PATHS[1]
    assert state.input_enabled


def test_select_avatar_only_once(state):
    assert state.select_avatar(2) is None
    assert state.avatar == AVATAR_PATHS[1]


def test_select_avatar_rejects_bad_index():
    with pytest.raises(ValueError):
        GameState().select_avatar(3)


def test_hits_before_the_game_starts_are_ignored():
    s = GameState()
    assert not s.register_hit()
    assert s.lives == MAX_LIVES


def test_hearts_count_down_to_zero(state):
    counts = []
    for _ in range(MAX_LIVES):
        assert state.register_hit()
        counts.append(state.lives)
    assert counts == [2, 1, 0]
    assert state.phase is Phase.GAME_OVER


def test_last_heart_ends_the_game(state):
    state.hearts = state.hearts[:1]
    assert state.register_hit()
    assert state.lives == 0
    assert state.is_game_over()
    assert not state.input_enabled


def test_hits_after_game_over_are_noops(state):
    for _ in range(MAX_LIVES):
        state.register_hit()
    for _ in range(5):
        assert not state.register_hit()
    assert state.lives == 0
    assert state.is_game_over()


def test_hearts_removed_from_the_end(state):
    first, second, third = state.hearts
    state.register_hit()
    assert state.hearts == [first, second]


def test_scoring(state):
    state.collect_gem(20)
    state.collect_gem(10)
    state.add_points(5)
    assert state.gem_count == 2
    assert state.score == 35


def test_scoring_ignored_outside_play():
    s = GameState()
    s.collect_gem(10)
    s.add_points(5)
    assert (s.gem_count, s.score) == (0, 0)


def test_play_again_only_from_game_over(state):
    assert state.play_again() is None
    assert state.replay_index == 0
    assert state.history == []


def test_play_again_resets_and_archives(state):
    state.collect_gem(30)
    state.add_points(5)
    for _ in range(MAX_LIVES):
        state.register_hit()

    record = state.play_again()

    assert record == ScoreRecord(replay_index=1, gem_count=1, score=35)
    assert state.history == [record]
    assert state.lives == MAX_LIVES
    assert (state.gem_count, state.score) == (0, 0)
    assert state.replay_index == 1
    assert state.phase is Phase.PLAYING
    assert state.input_enabled


def test_history_is_append_only_across_replays(state):
    for game in range(3):
        for _ in range(game + 1):
            state.collect_gem(10)
        for _ in range(MAX_LIVES):
            state.register_hit()
        state.play_again()
    assert [r.replay_index for r in state.history] == [1, 2, 3]
    assert [r.gem_count for r in state.history] == [1, 2, 3]
    assert state.replay_index == 3
