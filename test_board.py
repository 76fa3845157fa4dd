"""
Tests for the Reversi board engine.
"""
import sys
from pathlib import Path

import numpy as np
import pytest

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from reversi.game.board import Board, DIRECTIONS
from reversi.game.player import Player


def empty_rows():
    return ["........"] * 8


def test_initial_board():
    """The four center cells are occupied, everything else is empty."""
    board = Board()
    state = board.get_board_state()

    assert state.shape == (8, 8), "Board should be 8x8"
    assert board.get_cell(3, 3) == Player.WHITE
    assert board.get_cell(3, 4) == Player.BLACK
    assert board.get_cell(4, 3) == Player.BLACK
    assert board.get_cell(4, 4) == Player.WHITE
    assert np.sum(state == Board.EMPTY) == 60, "Should have 60 empty squares initially"
    assert board.count_stones() == (2, 2)
    assert board.occupied_count() == 4


def test_directions_are_the_eight_neighbours():
    assert len(DIRECTIONS) == 8
    assert (0, 0) not in DIRECTIONS
    assert set(DIRECTIONS) == {(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1)} - {(0, 0)}


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (8, 0), (0, 8), (-1, -1), (8, 8), (100, 3)])
def test_off_board_moves_are_invalid(row, col):
    board = Board()
    for player in Player:
        assert not board.is_valid_move(row, col, player)
        assert not board.make_move(row, col, player)
    assert board == Board()


def test_occupied_cells_are_invalid():
    board = Board()
    for row, col in [(3, 3), (3, 4), (4, 3), (4, 4)]:
        for player in Player:
            assert not board.is_valid_move(row, col, player)


def test_initial_valid_moves():
    board = Board()
    assert board.get_valid_moves(Player.BLACK) == [(2, 3), (3, 2), (4, 5), (5, 4)]
    assert board.get_valid_moves(Player.WHITE) == [(2, 4), (3, 5), (4, 2), (5, 3)]
    assert board.has_valid_move(Player.BLACK)
    assert board.has_valid_move(Player.WHITE)


def test_opening_move_flips_center_stone():
    """Black plays (2,3) on a fresh board and captures (3,3)."""
    board = Board()

    assert board.make_move(2, 3, Player.BLACK), "Should be a valid move"
    assert board.get_cell(2, 3) == Player.BLACK
    assert board.get_cell(3, 3) == Player.BLACK, "Should capture white piece"
    assert board.occupied_count() == 5
    assert board.count_stones() == (4, 1)


def test_illegal_move_leaves_board_unchanged():
    board = Board()
    before = board.get_board_state()

    assert not board.make_move(0, 0, Player.BLACK)
    assert not board.make_move(3, 3, Player.BLACK)
    assert not board.make_move(2, 2, Player.BLACK)
    assert np.array_equal(board.get_board_state(), before)


def test_adjacent_opponent_without_bracket_is_illegal():
    rows = empty_rows()
    rows[3] = "...W...."
    rows[7] = ".......B"
    board = Board.from_rows(rows)

    assert not board.is_valid_move(2, 3, Player.BLACK)
    for dr, dc in DIRECTIONS:
        assert not board._can_flip_in_direction(2, 3, dr, dc, Player.BLACK)


def test_adjacent_own_stone_is_not_a_capture():
    rows = empty_rows()
    rows[0] = "BB......"
    board = Board.from_rows(rows)
    assert not board.is_valid_move(0, 2, Player.BLACK)


def test_run_to_the_edge_is_not_a_capture():
    rows = empty_rows()
    rows[0] = "WW......"
    rows[5] = "B......."
    board = Board.from_rows(rows)
    assert not board._can_flip_in_direction(0, 2, 0, -1, Player.BLACK)
    assert not board.is_valid_move(0, 2, Player.BLACK)


def test_run_ending_in_empty_is_not_a_capture():
    rows = empty_rows()
    rows[0] = ".WW.B..."
    board = Board.from_rows(rows)
    assert not board.is_valid_move(0, 3, Player.BLACK)
    assert board.get_flipped_pieces(0, 0, Player.BLACK) == []


def test_long_run_is_flipped_up_to_own_stone():
    rows = empty_rows()
    rows[4] = "BWWWWW.."
    rows[6] = "......WB"
    board = Board.from_rows(rows)

    assert board.get_flipped_pieces(4, 6, Player.BLACK) == [(4, 5), (4, 4), (4, 3), (4, 2), (4, 1)]
    assert board.make_move(4, 6, Player.BLACK)
    assert board.get_board_state()[4].tolist() == [1, 1, 1, 1, 1, 1, 1, 0]
    assert board.get_cell(6, 6) == Player.WHITE


def test_flip_stops_at_first_own_stone():
    """White stones past the bracketing black stone keep their color."""
    rows = empty_rows()
    rows[0] = "..WBW.B."
    board = Board.from_rows(rows)

    assert board.get_flipped_pieces(0, 1, Player.BLACK) == [(0, 2)]
    assert board.make_move(0, 1, Player.BLACK)
    assert board.get_board_state()[0].tolist() == [0, 1, 1, 1, 2, 0, 1, 0]
    assert board.get_cell(0, 4) == Player.WHITE
    assert board.count_stones() == (4, 1)


def test_capture_in_several_directions_at_once():
    board = Board.from_rows([
        "B.B.....",
        ".WW.....",
        "BW.WW...",
        "..W.....",
        "........",
        "........",
        "........",
        "........",
    ])
    assert board.count_stones() == (3, 6)

    assert sorted(board.get_flipped_pieces(2, 2, Player.BLACK)) == [(1, 1), (1, 2), (2, 1)]
    assert board.make_move(2, 2, Player.BLACK)

    assert board.count_stones() == (7, 3)
    assert board.occupied_count() == 10
    # Runs with no bracketing black stone keep their color
    for row, col in [(2, 3), (2, 4), (3, 2)]:
        assert board.get_cell(row, col) == Player.WHITE


def test_occupancy_grows_by_one_per_move():
    board = Board()
    player = Player.BLACK
    for _ in range(20):
        moves = board.get_valid_moves(player)
        if not moves:
            player = player.opponent()
            continue
        before = board.occupied_count()
        row, col = moves[-1]
        assert board.make_move(row, col, player)
        assert board.occupied_count() == before + 1
        assert board.occupied_count() <= Board.BOARD_SIZE
        player = player.opponent()


def test_no_moves_on_full_board():
    board = Board.from_rows(["BBBBBBBB"] * 4 + ["WWWWWWWW"] * 4)
    assert not board.has_valid_move(Player.BLACK)
    assert not board.has_valid_move(Player.WHITE)
    assert board.count_stones() == (32, 32)


def test_copy_is_independent():
    board = Board()
    clone = board.copy()
    assert clone == board

    clone.make_move(2, 3, Player.BLACK)
    assert clone != board
    assert board.count_stones() == (2, 2)


def test_boards_compare_by_value_and_are_unhashable():
    assert Board() == Board()
    with pytest.raises(TypeError):
        hash(Board())


def test_from_rows_rejects_bad_layouts():
    with pytest.raises(ValueError):
        Board.from_rows(["........"] * 7)
    with pytest.raises(ValueError):
        Board.from_rows(["......."] + ["........"] * 7)
    with pytest.raises(ValueError):
        Board.from_rows(["...X...."] + ["........"] * 7)


def test_from_rows_ignores_spaces():
    rows = [". . . . . . . ."] * 8
    rows[0] = "B W . . . . . ."
    board = Board.from_rows(rows)
    assert board.get_cell(0, 0) == Player.BLACK
    assert board.get_cell(0, 1) == Player.WHITE
    assert board.occupied_count() == 2


def test_render_has_coordinate_headers():
    lines = Board().render().splitlines()

    assert lines[0] == "  0 1 2 3 4 5 6 7"
    assert len(lines) == 9
    assert lines[1] == "0 . . . . . . . ."
    assert lines[4] == "3 . . . ● ○ . . ."
    assert lines[5] == "4 . . . ○ ● . . ."


def test_render_marks_hints():
    board = Board()
    lines = board.render(hints=board.get_valid_moves(Player.BLACK)).splitlines()
    assert lines[3] == "2 . . . * . . . ."


def test_display_prints_board(capsys):
    Board().display()
    assert capsys.readouterr().out == Board().render() + "\n"
