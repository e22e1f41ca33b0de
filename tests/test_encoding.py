"""Tests for numpy board encodings."""

import numpy as np

from connectk.game import (
    NUM_CHANNELS,
    Player,
    apply_move,
    encode_planes,
    import_state,
    legal_mask,
    new_board,
    parse_options,
    to_grid,
)


class TestToGrid:
    def test_shape(self):
        board = new_board(parse_options("7x6@4"))
        grid = to_grid(board)
        assert grid.shape == (6, 7)
        assert grid.dtype == np.int8

    def test_empty_board(self):
        grid = to_grid(new_board(parse_options("4x3@3")))
        assert np.all(grid == 0)

    def test_bottom_row_is_last(self):
        board = new_board(parse_options("4x3@3"))
        apply_move(board, 1)  # X
        apply_move(board, 1)  # O
        grid = to_grid(board)
        assert grid[2, 1] == 1
        assert grid[1, 1] == -1
        assert grid[0, 1] == 0


class TestEncodePlanes:
    def test_shape(self):
        planes = encode_planes(new_board(parse_options("7x6@4")))
        assert planes.shape == (NUM_CHANNELS, 6, 7)
        assert planes.dtype == np.float32

    def test_player_channels(self):
        board = new_board(parse_options("7x6@4"))
        apply_move(board, 3)  # X moved, O to move

        planes = encode_planes(board)
        # The X stone belongs to the opponent of the player to move
        assert planes[1, 5, 3] == 1.0
        assert planes[0, 5, 3] == 0.0

    def test_channels_disjoint(self):
        board = import_state(parse_options("4x3@3"), "XO/OX/X/#o")
        planes = encode_planes(board)
        assert np.all(planes[0] * planes[1] == 0)
        assert planes.sum() == board.stone_count


class TestLegalMask:
    def test_all_legal_initially(self):
        mask = legal_mask(new_board(parse_options("7x6@4")))
        assert mask.shape == (7,)
        assert np.all(mask)

    def test_full_column_illegal(self):
        board = new_board(parse_options("4x3@3"))
        for _ in range(3):
            apply_move(board, 0)
        mask = legal_mask(board)
        assert not mask[0]
        assert mask[1]

    def test_terminal_board(self):
        board = import_state(parse_options("4x3@3"), "XO/XO/X/#X")
        assert not np.any(legal_mask(board))

    def test_mask_columns_feed_back_into_apply_move(self):
        board = new_board(parse_options("7x6@4"))
        column = np.flatnonzero(legal_mask(board))[3]
        apply_move(board, column)
        assert board.heights[3] == 1
        assert type(board.columns[3][0]) is Player

        apply_move(board, np.argmax(legal_mask(board)))
        assert board.heights[0] == 1


class TestTerminalPlanes:
    def test_winner_stones_on_plane_zero(self):
        board = import_state(parse_options("4x3@3"), "XO/XO/X/#X")
        planes = encode_planes(board)
        assert planes[0].sum() == 3
        assert planes[0, 2, 0:3].tolist() == [1.0, 1.0, 1.0]
        assert planes[1].sum() == 2
