"""
Exhaustive minimax search for the classic 3x3 board.

Boards are handled as tuples so every trial placement is a new value and
the caller's board is never touched. Scores are memoised, which keeps a
full-depth search from the empty board interactive.
"""
import logging
from functools import lru_cache
from typing import Dict, Tuple

from app.core.exceptions import UnsupportedGeometry
from app.core.game_config import Geometry, Mark, WIN_SCORE
from app.services.board import Board, Cell, check_playable, empty_cells, place
from app.services.outcome_evaluator import has_won

logger = logging.getLogger(__name__)

MINIMAX_CACHE_SIZE = 65536

# Full search only stays within an interactive budget on the 3x3 board
SEARCHABLE_GEOMETRIES = (Geometry.CLASSIC,)


@lru_cache(maxsize=MINIMAX_CACHE_SIZE)
def _minimax(
    board: Tuple[Cell, ...],
    depth: int,
    is_maximizing: bool,
    mark: Mark,
    geometry: Geometry,
) -> int:
    opponent = mark.opposite()

    if has_won(board, mark, geometry):
        return WIN_SCORE - depth  # Prefer faster wins
    if has_won(board, opponent, geometry):
        return depth - WIN_SCORE  # Prefer slower losses

    cells = empty_cells(board)
    if not cells:
        return 0

    if is_maximizing:
        best_score = -WIN_SCORE - 1
        for cell in cells:
            score = _minimax(place(board, cell, mark), depth + 1, False, mark, geometry)
            best_score = max(best_score, score)
        return best_score

    best_score = WIN_SCORE + 1
    for cell in cells:
        score = _minimax(place(board, cell, opponent), depth + 1, True, mark, geometry)
        best_score = min(best_score, score)
    return best_score


def minimax(
    board: Board,
    depth: int,
    is_maximizing: bool,
    mark: Mark,
    geometry: Geometry,
) -> int:
    """
    Score a position for mark.

    Args:
        board: Position to evaluate.
        depth: Plies already played since the root move.
        is_maximizing: True if mark is to play.
        mark: The mark the score is computed for.
        geometry: Board geometry.

    Returns:
        WIN_SCORE - depth for a win, depth - WIN_SCORE for a loss, 0 for a draw.
    """
    if geometry not in SEARCHABLE_GEOMETRIES:
        raise UnsupportedGeometry(f"Exhaustive search is not available for {geometry.value}")

    return _minimax(tuple(board), depth, is_maximizing, mark, geometry)


def score_moves(board: Board, geometry: Geometry, mark: Mark) -> Dict[int, int]:
    """
    Score every empty cell as the next move for mark.

    Returns:
        Mapping of cell index to minimax score, in ascending index order.
    """
    if geometry not in SEARCHABLE_GEOMETRIES:
        raise UnsupportedGeometry(f"Exhaustive search is not available for {geometry.value}")

    cells = check_playable(board, geometry)
    position = tuple(board)

    return {
        cell: _minimax(place(position, cell, mark), 0, False, mark, geometry)
        for cell in cells
    }


def best_move(board: Board, geometry: Geometry, mark: Mark) -> int:
    """
    Get the optimal move for mark.

    Ties go to the lowest index reaching the best score.
    """
    scores = score_moves(board, geometry, mark)

    best_cell = None
    best_score = None
    for cell, score in scores.items():
        if best_score is None or score > best_score:
            best_score = score
            best_cell = cell

    logger.debug(f"Minimax picked {best_cell} (score: {best_score}) out of {len(scores)} moves")
    return best_cell
