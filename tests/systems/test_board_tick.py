import logging

import pytest

from snake_board.board import Board
from snake_board.config import BoardConfig
from snake_board.types import Cell, Direction
from tests.test_utils import drive, lit_indices, make_board


def test_first_tick_moves_right() -> None:
    board, randint, recorder = make_board()
    board.tick()

    assert list(board.snake.cells) == [1, 2, 3]
    assert board.snake.head == 3
    assert board.snake.tail == 0
    assert board.score == 0
    assert board.cells[0] == Cell.DEAD
    assert board.cells[3] == Cell.LIT
    # bait is marked at the start of the tick
    assert board.cells[8] == Cell.LIT
    assert lit_indices(board) == [1, 2, 3, 8]
    assert recorder.calls == 0
    assert randint.calls == []


def test_ticks_without_bait_keep_score_and_length() -> None:
    board, _, recorder = make_board()
    for _ in range(5):
        board.tick()
        assert board.score == 0
        assert len(board.snake) == 3
    assert list(board.snake.cells) == [5, 6, 7]
    assert recorder.calls == 0


def test_reaching_bait_grows_and_replaces_bait() -> None:
    # 5 is the vacated tail (still Lit), 6 and 8 are occupied, 42 is free
    board, randint, recorder = make_board(rand_values=[5, 6, 8, 42])
    for _ in range(5):
        board.tick()
    assert board.bait == 8

    board.tick()

    assert board.score == 1
    assert len(board.snake) == 4
    # growth march lands one cell past the bait
    assert list(board.snake.cells) == [6, 7, 8, 9]
    assert board.snake.head == 9
    assert board.bait == 42
    assert randint.calls == [(0, 99)] * 4
    assert board.cells[42] == Cell.DEAD
    assert lit_indices(board) == [6, 7, 8, 9]
    assert recorder.calls == 0


def test_new_bait_is_lit_on_next_tick() -> None:
    board, _, _ = make_board(rand_values=[42])
    for _ in range(6):
        board.tick()
    assert board.bait == 42
    board.tick()
    assert board.cells[42] == Cell.LIT
    assert board.score == 1


def test_wrap_left_from_first_column() -> None:
    board, _, recorder = make_board()
    drive(board, [Direction.DOWN, Direction.LEFT, Direction.LEFT, Direction.LEFT])
    assert list(board.snake.cells) == [11, 10, 19]
    assert board.cells[19] == Cell.LIT
    assert recorder.calls == 0


def test_wrap_up_from_first_row() -> None:
    board, _, recorder = make_board()
    drive(board, [Direction.UP])
    assert list(board.snake.cells) == [1, 2, 92]
    assert board.cells[92] == Cell.LIT
    assert recorder.calls == 0


def test_wrap_right_and_up_on_larger_board() -> None:
    # bait kept off row 0 so the snake only wraps
    config = BoardConfig(bait=100)
    board, _, recorder = make_board(width=12, height=11, config=config)
    for _ in range(10):
        board.tick()
    # head went 2 -> 11 then wraps to column 0 of the same row
    assert board.snake.head == 0
    drive(board, [Direction.UP])
    assert board.snake.head == 120
    assert recorder.calls == 0


def test_wrap_down_from_last_row() -> None:
    board, _, recorder = make_board()
    drive(board, [Direction.DOWN] * 9)
    assert board.snake.head == 92
    drive(board, [Direction.DOWN])
    # row 9 wraps to row 0 of the same column
    assert list(board.snake.cells) == [82, 92, 2]
    assert board.cells[2] == Cell.LIT
    assert recorder.calls == 0


def test_change_direction_takes_effect_next_tick() -> None:
    board, _, _ = make_board()
    board.change_direction(Direction.DOWN)
    assert board.direction == Direction.DOWN
    assert board.snake.head == 2
    board.tick()
    assert board.snake.head == 12


def test_reversal_is_self_collision() -> None:
    board, _, recorder = make_board()
    fresh = Board(10, 10).snapshot()

    board.change_direction(Direction.LEFT)
    board.tick()

    assert recorder.calls == 1
    assert recorder.snakes == [[1, 2, 1]]
    assert board.snapshot() == fresh
    assert board.direction == Direction.RIGHT


def test_notifier_sees_pre_reset_state() -> None:
    board, _, recorder = make_board(rand_values=[42])
    for _ in range(6):
        board.tick()
    assert board.score == 1

    drive(board, [Direction.LEFT])

    assert recorder.calls == 1
    assert recorder.scores == [1]
    assert board.score == 0
    assert board.snapshot() == Board(10, 10).snapshot()


def test_moving_into_vacated_tail_collides() -> None:
    # square snake whose head sits just below its tail
    config = BoardConfig(snake_cells=(0, 1, 11, 10), direction=Direction.UP, bait=50)
    board, _, recorder = make_board(config=config)
    assert board.score == 0

    board.tick()

    assert recorder.calls == 1
    assert list(board.snake.cells) == [0, 1, 11, 10]
    assert lit_indices(board) == [0, 1, 10, 11]


def test_game_continues_after_collision() -> None:
    board, _, recorder = make_board()
    drive(board, [Direction.LEFT])
    board.tick()
    assert recorder.calls == 1
    assert list(board.snake.cells) == [1, 2, 3]


def test_default_notifier_logs_game_over(caplog: pytest.LogCaptureFixture) -> None:
    board = Board(10, 10, seed=0)
    board.change_direction(Direction.LEFT)

    with caplog.at_level(logging.INFO, logger="snake_board.board"):
        board.tick()

    records = [
        r
        for r in caplog.records
        if r.name == "snake_board.board" and r.levelno == logging.INFO
    ]
    assert len(records) == 1
    assert "Game Over!" in records[0].getMessage()
    assert board.snapshot() == Board(10, 10).snapshot()
