import pytest

import carousel
from catalog import SERVERS, STORE


def test_rotation_keeps_only_featured():
    rotation = carousel.FeaturedRotation(SERVERS)
    assert [server.id for server in rotation.items] == ["weather-mcp", "neon-mcp", "github-mcp"]
    assert rotation.current.id == "weather-mcp"


def test_next_wraps_around():
    rotation = carousel.FeaturedRotation(SERVERS)
    rotation.jump(2)
    assert rotation.next().id == "weather-mcp"
    assert rotation.index == 0


def test_previous_wraps_around():
    rotation = carousel.FeaturedRotation(SERVERS)
    assert rotation.previous().id == "github-mcp"
    assert rotation.index == 2


def test_jump_out_of_range():
    rotation = carousel.FeaturedRotation(SERVERS)
    with pytest.raises(IndexError):
        rotation.jump(3)
    with pytest.raises(IndexError):
        rotation.jump(-1)


def test_empty_rotation_shows_nothing():
    rotation = carousel.FeaturedRotation([server for server in SERVERS if not server.featured])
    assert len(rotation) == 0
    assert rotation.current is None
    assert rotation.next() is None
    assert rotation.previous() is None
    assert rotation.tick() is None


def test_tick_is_suspended_while_paused():
    rotation = carousel.FeaturedRotation(SERVERS)
    rotation.pause()
    rotation.tick()
    rotation.tick_elapsed(60)
    assert rotation.index == 0

    rotation.resume()
    rotation.tick()
    assert rotation.index == 1


def test_tick_elapsed_advances_per_interval():
    rotation = carousel.FeaturedRotation(SERVERS, interval=5)
    rotation.tick_elapsed(4)
    assert rotation.index == 0
    rotation.tick_elapsed(1)
    assert rotation.index == 1
    rotation.tick_elapsed(11)
    assert rotation.index == 0


@pytest.mark.parametrize(
    "index,action,expected",
    [
        (0, None, 0),
        (2, "next", 0),
        (0, "previous", 2),
        (1, "jump:2", 2),
        (7, None, 1),
        (-1, None, 2),
    ],
)
def test_rotation_state(index, action, expected):
    new_index, server = carousel.rotation_state(STORE, index, action)
    assert new_index == expected
    assert server.id == STORE.featured()[expected].id


@pytest.mark.parametrize("action", ["shuffle", "jump:x", "jump:9"])
def test_rotation_state_rejects_bad_actions(action):
    with pytest.raises((ValueError, IndexError)):
        carousel.rotation_state(STORE, 0, action)


def test_rotation_state_without_featured_items():
    assert carousel.rotation_state([], 3, "next") == (0, None)


@pytest.mark.parametrize(
    "index,elapsed,expected",
    [
        (0, 4.9, 0),
        (0, 5, 1),
        (0, 10, 2),
        (2, 5, 0),
    ],
)
def test_rotation_state_catches_up_on_elapsed_time(index, elapsed, expected):
    new_index, server = carousel.rotation_state(STORE, index, elapsed=elapsed)
    assert new_index == expected
    assert server.id == STORE.featured()[expected].id


def test_rotation_state_handles_huge_elapsed_time():
    new_index, server = carousel.rotation_state(STORE, 1, elapsed=5e300)
    assert 0 <= new_index < 3
    assert server.id == STORE.featured()[new_index].id


def test_rotation_state_paused_ignores_elapsed_time():
    assert carousel.rotation_state(STORE, 1, elapsed=30, paused=True)[0] == 1


def test_rotation_state_applies_action_after_elapsed_time():
    # One interval passed, then the user clicked next.
    assert carousel.rotation_state(STORE, 0, "next", elapsed=5)[0] == 2


@pytest.mark.parametrize("elapsed", [-1, float("inf"), float("nan")])
def test_rotation_state_rejects_bad_elapsed_time(elapsed):
    with pytest.raises(ValueError):
        carousel.rotation_state(STORE, 0, elapsed=elapsed)
