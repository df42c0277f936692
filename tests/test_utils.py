from typing import Iterable, List, Optional, Tuple

from snake_board.board import Board
from snake_board.config import DEFAULT_CONFIG, BoardConfig
from snake_board.types import CellIndex, Direction


class ScriptedRandInt:
    """Random source that replays a fixed list of values and records calls."""

    def __init__(self, values: Iterable[int]):
        self.values: List[int] = list(values)
        self.calls: List[Tuple[int, int]] = []

    def __call__(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        if not self.values:
            raise AssertionError("ScriptedRandInt ran out of values")
        return self.values.pop(0)


class GameOverRecorder:
    """Notifier that records the board state seen at each call."""

    def __init__(self) -> None:
        self.calls: int = 0
        self.scores: List[int] = []
        self.snakes: List[List[CellIndex]] = []

    def __call__(self, board: Board) -> None:
        self.calls += 1
        self.scores.append(board.score)
        self.snakes.append(list(board.snake.cells))


def make_board(
    width: int = 10,
    height: int = 10,
    rand_values: Optional[Iterable[int]] = None,
    config: BoardConfig = DEFAULT_CONFIG,
) -> Tuple[Board, ScriptedRandInt, GameOverRecorder]:
    """Board wired to a scripted random source and a recording notifier."""
    randint = ScriptedRandInt(rand_values or [])
    recorder = GameOverRecorder()
    board = Board(
        width, height, randint_fn=randint, on_game_over=recorder, config=config
    )
    return board, randint, recorder


def drive(board: Board, directions: Iterable[Direction]) -> None:
    """Change heading then tick once for each direction."""
    for direction in directions:
        board.change_direction(direction)
        board.tick()


def lit_indices(board: Board) -> List[CellIndex]:
    return [int(i) for i in board.cells.nonzero()[0]]
