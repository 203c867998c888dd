"""Interaction controller tests: drags, undo and reset."""

from __future__ import annotations

import pytest

from backend.engine.gameplay import GamePlay
from backend.models.block import Axis
from backend.models.grid import EXIT, FLOOR
from conftest import OPEN, SCENARIO, record


# -- helpers ------------------------------------------------------------------


def _drag(game: GamePlay, start: tuple[float, float], end: tuple[float, float]) -> bool:
    """Press at *start*, move to *end* and release."""
    assert game.begin_drag(*start)
    game.point(*end)
    return game.commit()


def _footprint(block) -> tuple[int, int, int, int]:
    return block.x1, block.y1, block.x2, block.y2


# -- begin_drag ---------------------------------------------------------------


def test_grab_block_under_pointer() -> None:
    game = GamePlay.from_record(OPEN)

    assert game.begin_drag(1.5, 3.5)

    assert game.dragging
    assert game.drag_block is game.level.player
    assert game.level.player.drag
    assert game.state.drag_origin == (1, 3)


@pytest.mark.parametrize(
    "pointer",
    [(5.5, 2.5), (0.5, 0.5), (7.5, 3.5)],
    ids=["floor", "wall", "exit"],
)
def test_nothing_to_grab(pointer: tuple[float, float]) -> None:
    game = GamePlay.from_record(OPEN)
    assert not game.begin_drag(*pointer)
    assert not game.dragging


def test_near_miss_still_grabs() -> None:
    game = GamePlay.from_record(OPEN)
    # Player spans x in [1, 3); just past its right edge.
    assert game.begin_drag(3.1, 3.5)
    assert game.drag_block is game.level.player


def test_wide_miss_does_not_grab() -> None:
    game = GamePlay.from_record(OPEN)
    assert not game.begin_drag(3.3, 3.5)


@pytest.mark.parametrize(
    "pointer",
    [(-1.12, 1.28), (-0.01, 1.5), (8.0, 3.5), (1.5, -0.5), (1.5, 9.0)],
)
def test_press_off_the_board_grabs_nothing(pointer: tuple[float, float]) -> None:
    game = GamePlay.from_record(
        record(
            "&&&&&&&&",
            "--*****&",
            "&******&",
            "&==****^",
            "&******&",
            "&******&",
            "&******&",
            "&&&&&&&&",
        )
    )
    assert not game.begin_drag(*pointer)
    assert not game.dragging
    assert game.begin_drag(0.5, 1.5)


def test_second_press_is_ignored_while_dragging() -> None:
    game = GamePlay.from_record(OPEN)
    game.begin_drag(1.5, 3.5)
    assert not game.begin_drag(4.5, 5.5)
    assert game.drag_block is game.level.player


# -- update_drag --------------------------------------------------------------


def test_drag_proposes_without_touching_grid() -> None:
    game = GamePlay.from_record(OPEN)
    before = game.level.grid.copy()

    game.begin_drag(1.5, 3.5)
    game.update_drag(3.5, 3.5)

    player = game.level.player
    assert player.target_footprint() == (3, 3, 4, 3)
    assert _footprint(player) == (1, 3, 2, 3)
    assert game.level.grid == before


def test_drag_into_occupied_cell_stays_put() -> None:
    game = GamePlay.from_record(SCENARIO)
    game.begin_drag(1.5, 3.5)
    game.update_drag(3.5, 3.5)
    assert game.level.player.target_footprint() == (1, 3, 2, 3)


def test_update_drag_when_idle_is_noop() -> None:
    game = GamePlay.from_record(OPEN)
    game.update_drag(4.5, 3.5)
    assert not game.dragging


def test_pointer_is_clamped() -> None:
    game = GamePlay.from_record(OPEN)
    game.begin_drag(1.5, 3.5)
    game.point(100.0, -4.0)
    assert game.state.cell == (7, 0)
    assert game.level.player.target_x == 6


# -- commit -------------------------------------------------------------------


def test_commit_moves_block() -> None:
    game = GamePlay.from_record(OPEN)

    assert _drag(game, (1.5, 3.5), (3.5, 3.5))

    player = game.level.player
    assert _footprint(player) == (3, 3, 4, 3)
    assert not player.drag
    assert not game.dragging
    grid = game.level.grid
    assert [grid.get(x, 3) for x in range(1, 5)] == [FLOOR, FLOOR, player.id, player.id]
    assert game.moves == 1
    assert not game.is_won


def test_commit_when_idle_does_nothing() -> None:
    game = GamePlay.from_record(OPEN)
    assert not game.commit()
    assert game.moves == 0


def test_release_without_movement_is_recorded() -> None:
    game = GamePlay.from_record(OPEN)
    before = game.level.grid.copy()

    assert _drag(game, (1.5, 3.5), (1.5, 3.5))

    assert game.moves == 1
    assert game.level.grid == before


def test_cancel_drag_records_nothing() -> None:
    game = GamePlay.from_record(OPEN)
    game.begin_drag(1.5, 3.5)
    game.point(4.5, 3.5)

    game.cancel_drag()

    assert not game.dragging
    assert not game.level.player.drag
    assert _footprint(game.level.player) == (1, 3, 2, 3)
    assert game.moves == 0


# -- winning ------------------------------------------------------------------


def test_reaching_exit_solves() -> None:
    game = GamePlay.from_record(OPEN)

    _drag(game, (1.5, 3.5), (7.9, 3.5))

    assert _footprint(game.level.player) == (6, 3, 7, 3)
    assert game.is_won
    assert game.level.grid.get(7, 3) == game.level.player.id


def test_any_piece_on_exit_solves() -> None:
    game = GamePlay.from_record(
        record(
            "&&&&&&&&",
            "&******&",
            "&******&",
            "&==*--*^",
            "&******&",
            "&******&",
            "&******&",
            "&&&&&&&&",
        )
    )
    _drag(game, (4.5, 3.5), (6.5, 3.5))
    assert game.is_won


def test_other_commits_do_not_solve() -> None:
    game = GamePlay.from_record(OPEN)
    _drag(game, (4.5, 5.5), (4.5, 2.5))
    assert not game.is_won
    _drag(game, (1.5, 3.5), (5.5, 3.5))
    assert not game.is_won


# -- undo ---------------------------------------------------------------------


def test_commit_then_undo_restores() -> None:
    game = GamePlay.from_record(OPEN)
    before = game.level.grid.copy()

    _drag(game, (4.5, 5.5), (4.5, 1.5))
    assert game.undo()

    assert game.level.grid == before
    assert _footprint(next(b for b in game.blocks if b.id == 2)) == (4, 5, 4, 6)
    assert game.moves == 0


def test_undo_off_the_exit_restores_exit_cell() -> None:
    game = GamePlay.from_record(OPEN)
    before = game.level.grid.copy()
    _drag(game, (1.5, 3.5), (7.5, 3.5))
    assert game.is_won

    game.undo()

    assert game.level.grid == before
    assert game.level.grid.get(7, 3) == EXIT
    assert not game.is_won


def test_undo_steps_back_one_move_at_a_time() -> None:
    game = GamePlay.from_record(OPEN)
    _drag(game, (1.5, 3.5), (2.5, 3.5))
    _drag(game, (2.5, 3.5), (4.5, 3.5))
    assert _footprint(game.level.player) == (4, 3, 5, 3)

    game.undo()
    assert _footprint(game.level.player) == (2, 3, 3, 3)
    game.undo()
    assert _footprint(game.level.player) == (1, 3, 2, 3)
    assert not game.undo()


def test_undo_on_empty_history_is_noop() -> None:
    game = GamePlay.from_record(OPEN)
    before = game.level.grid.copy()
    assert not game.undo()
    assert game.level.grid == before


def test_undo_cancels_active_drag() -> None:
    game = GamePlay.from_record(OPEN)
    _drag(game, (1.5, 3.5), (3.5, 3.5))
    game.begin_drag(4.5, 5.5)

    game.undo()

    assert not game.dragging
    assert _footprint(game.level.player) == (1, 3, 2, 3)


# -- reset --------------------------------------------------------------------


def test_reset_restores_parsed_layout() -> None:
    game = GamePlay.from_record(OPEN)
    before = game.level.grid.copy()
    _drag(game, (1.5, 3.5), (7.5, 3.5))
    level = game.level

    game.reset()

    assert game.level is level
    assert game.level.grid == before
    assert _footprint(game.level.player) == (1, 3, 2, 3)
    assert game.moves == 0
    assert not game.is_won


# -- invariants ---------------------------------------------------------------


def test_axes_hold_after_many_moves() -> None:
    game = GamePlay.from_record(SCENARIO)
    drags = [
        ((3.5, 2.5), (3.5, 5.5)),  # vertical piece 3 down
        ((1.5, 3.5), (5.5, 3.5)),  # player right
        ((6.5, 1.5), (6.5, 6.5)),  # vertical piece 2 down
        ((1.5, 1.5), (4.5, 1.5)),  # top piece right
        ((1.5, 4.5), (1.5, 1.5)),  # vertical piece 5 up
    ]
    for start, end in drags:
        if game.begin_drag(*start):
            game.point(*end)
            game.commit()

        seen: dict[tuple[int, int], int] = {}
        for block in game.blocks:
            if block.axis is Axis.HORIZONTAL:
                assert block.y1 == block.y2
            elif block.axis is Axis.VERTICAL:
                assert block.x1 == block.x2
            if block.movable:
                for cell in block.cells():
                    assert cell not in seen
                    seen[cell] = block.id
                    assert game.level.grid.get(*cell) == block.id
        for x in range(8):
            for y in range(8):
                value = game.level.grid.get(x, y)
                if value > 0:
                    assert seen[(x, y)] == value
