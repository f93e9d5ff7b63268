"""Turn resolution: movement, search, stairs, quit."""

from __future__ import annotations

import random

import pytest

from labyrinth.dungeon import Dungeon, DungeonConfig
from labyrinth.dungeon.cells import DELTAS, NORTH
from labyrinth.services.turn_service import MOVE_DIRECTIONS, Command, resolve_turn
from labyrinth.session import Player, Session

from tests.dungeon_test_utils import assert_symmetric


def test_session_start_discovers_around_player(scripted_session):
    # radius 1 from (0,0): itself, (1,0), (0,1)
    assert scripted_session.visibility.discovered_count(0) == 3
    assert scripted_session.turns == 0
    assert scripted_session.active


def test_blocked_move_still_counts_as_turn(scripted_session):
    s = scripted_session
    res = resolve_turn(s, Command.MOVE_EAST)  # (0,0) -> (1,0) is walled in the first-choice trace
    assert not res.moved
    assert s.player.pos == (0, 0)
    assert s.turns == 1
    assert "east" in res.message


def test_boundary_move_blocked(scripted_session):
    res = resolve_turn(scripted_session, Command.MOVE_NORTH)
    assert not res.moved
    assert scripted_session.player.pos == (0, 0)


def test_open_move_steps_one_cell(scripted_session):
    s = scripted_session
    res = resolve_turn(s, Command.MOVE_SOUTH)
    assert res.moved
    assert s.player.pos == (0, 1)
    assert res.newly_discovered == 2  # (1,1) and (0,2)
    resolve_turn(s, Command.MOVE_SOUTH)
    resolve_turn(s, Command.MOVE_EAST)
    assert s.player.pos == (1, 2)
    assert s.turns == 3


def test_use_stairs_descends_and_keeps_position(scripted_session):
    s = scripted_session
    res = resolve_turn(s, Command.USE_STAIRS)
    assert res.floor_delta == 1
    assert s.player.floor == 1 and s.dungeon.current_floor == 1
    assert s.player.pos == (0, 0)
    # Arrival refreshes the new floor's discovery grid
    assert s.visibility.discovered_count(1) == 3


def test_use_stairs_both_prefers_down(scripted_session):
    s = scripted_session
    resolve_turn(s, Command.USE_STAIRS)
    res = resolve_turn(s, Command.USE_STAIRS)
    assert res.floor_delta == 1
    assert s.player.floor == 2
    assert "down" in res.message
    res = resolve_turn(s, Command.USE_STAIRS)
    assert res.floor_delta == -1
    assert s.player.floor == 1


def test_use_stairs_without_staircase_is_noop(scripted_session):
    s = scripted_session
    resolve_turn(s, Command.MOVE_SOUTH)
    res = resolve_turn(s, Command.USE_STAIRS)
    assert res.floor_delta == 0
    assert s.player.floor == 0
    assert s.turns == 2


def test_search_reveals_and_unblocks(last_choice_rng):
    d = Dungeon(DungeonConfig(width=3, height=3, floors=1, view_radius=1), rng=last_choice_rng)
    s = Session(dungeon=d, view_radius=1, player=Player(1, 1, 0))
    assert d.floor.plant_secret_door(1, 1, NORTH)

    res = resolve_turn(s, Command.MOVE_NORTH)
    assert not res.moved

    res = resolve_turn(s, Command.SEARCH)
    assert res.found == [NORTH]
    assert res.found_door
    assert s.player.pos == (1, 1)

    res = resolve_turn(s, Command.SEARCH)
    assert res.found == []
    assert not res.found_door

    res = resolve_turn(s, Command.MOVE_NORTH)
    assert res.moved
    assert s.player.pos == (1, 0)
    assert s.turns == 4
    assert_symmetric(d.floor)


def test_quit_skips_refresh_and_ends_session(scripted_session):
    s = scripted_session
    before = s.visibility.discovered_count(0)
    res = resolve_turn(s, Command.QUIT)
    assert not s.active
    assert s.turns == 0
    assert s.visibility.discovered_count(0) == before
    # Further commands are ignored
    res = resolve_turn(s, Command.MOVE_SOUTH)
    assert not res.moved
    assert s.player.pos == (0, 0)


@pytest.mark.parametrize("seed", [2, 19, 404])
def test_movement_respects_walls_random_walk(seed, seeded_session):
    s = seeded_session(seed=seed, size=(7, 7, 3), radius=1, secret=0.25)
    r = random.Random(seed)
    commands = list(Command)
    commands.remove(Command.QUIT)
    for _ in range(500):
        cmd = r.choice(commands)
        x, y, floor = s.player.x, s.player.y, s.player.floor
        was_open = None
        if cmd in MOVE_DIRECTIONS:
            was_open = s.maze.is_open(x, y, MOVE_DIRECTIONS[cmd])
        res = resolve_turn(s, cmd)
        if cmd in MOVE_DIRECTIONS:
            if was_open:
                dx, dy = DELTAS[MOVE_DIRECTIONS[cmd]]
                assert res.moved and s.player.pos == (x + dx, y + dy)
                assert s.maze.in_bounds(*s.player.pos)
            else:
                assert not res.moved and s.player.pos == (x, y)
            assert s.player.floor == floor
        elif cmd is Command.SEARCH:
            assert s.player.pos == (x, y) and s.player.floor == floor
        elif cmd is Command.USE_STAIRS:
            assert s.player.pos == (x, y)
            assert s.player.floor == floor + res.floor_delta
            assert 0 <= s.player.floor < s.dungeon.floor_count
    for m in s.dungeon.floors:
        assert_symmetric(m)
