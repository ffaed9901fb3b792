"""
Greedy one-ply move selection for boards too large for full search.
"""
import logging
import random
from typing import Optional

from app.core.game_config import CENTER_CELLS, Geometry, Mark
from app.services.board import Board, check_playable, empty_cells, place
from app.services.outcome_evaluator import has_won

logger = logging.getLogger(__name__)


def find_winning_move(board: Board, mark: Mark, geometry: Geometry) -> Optional[int]:
    """First empty cell (ascending) that completes a line for mark."""
    for cell in empty_cells(board):
        if has_won(place(board, cell, mark), mark, geometry):
            return cell
    return None


def heuristic_move(
    board: Board,
    geometry: Geometry,
    mark: Mark,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Pick a move with ordered rules, first match wins:

    1. Complete one of our own lines.
    2. Block a line the opponent could complete.
    3. Take a random free center cell.
    4. Take any random free cell.
    """
    rng = rng or random.Random()
    cells = check_playable(board, geometry)

    winning = find_winning_move(board, mark, geometry)
    if winning is not None:
        logger.debug(f"Heuristic takes the win at {winning}")
        return winning

    blocking = find_winning_move(board, mark.opposite(), geometry)
    if blocking is not None:
        logger.debug(f"Heuristic blocks at {blocking}")
        return blocking

    centers = [cell for cell in cells if cell in CENTER_CELLS[geometry]]
    if centers:
        return rng.choice(centers)

    return rng.choice(cells)
