"""
Board model helpers.

A board is a flat sequence of cells, row-major, where each cell is either
a Mark or None (empty).
"""
from typing import List, Optional, Sequence, Tuple

from app.core.exceptions import BoardFull, BoardSizeMismatch
from app.core.game_config import Geometry, Mark, get_board_size, get_board_width

Cell = Optional[Mark]
Board = Sequence[Cell]


def new_board(geometry: Geometry) -> List[Cell]:
    """Create an empty board for a geometry."""
    return [None] * get_board_size(geometry)


def empty_cells(board: Board) -> List[int]:
    """Indices of empty cells, in ascending order."""
    return [index for index, cell in enumerate(board) if cell is None]


def is_full(board: Board) -> bool:
    return all(cell is not None for cell in board)


def index_to_position(index: int, geometry: Geometry) -> Tuple[int, int]:
    """Convert a flat index into (row, col)."""
    width = get_board_width(geometry)
    return index // width, index % width


def position_to_index(row: int, col: int, geometry: Geometry) -> int:
    width = get_board_width(geometry)
    return row * width + col


def check_board(board: Board, geometry: Geometry) -> None:
    """Ensure the board length matches the geometry."""
    expected = get_board_size(geometry)
    if len(board) != expected:
        raise BoardSizeMismatch(
            f"{geometry.value} board must have {expected} cells, got {len(board)}"
        )


def check_playable(board: Board, geometry: Geometry) -> List[int]:
    """Validate a board before selecting a move and return its empty cells."""
    check_board(board, geometry)
    cells = empty_cells(board)
    if not cells:
        raise BoardFull("Cannot select a move on a full board")
    return cells


def place(board: Board, index: int, mark: Mark) -> Tuple[Cell, ...]:
    """Return a copy of the board with mark placed at index."""
    cells = list(board)
    cells[index] = mark
    return tuple(cells)


def render(board: Board, geometry: Geometry) -> str:
    """Plain-text rendering, mostly for log lines."""
    width = get_board_width(geometry)
    symbols = [cell.value if cell is not None else "." for cell in board]
    return "/".join(
        "".join(symbols[row * width:(row + 1) * width]) for row in range(width)
    )
