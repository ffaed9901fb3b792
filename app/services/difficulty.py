"""
Difficulty policies for the computer opponent.

Each policy is a blend: a deterministic candidate move is either played or
dropped in favour of a uniform random pick, depending on a single draw from
the injected random source.
"""
import logging
import random
from typing import Callable, Optional

from app.core.exceptions import BoardFull
from app.core.game_config import Difficulty, Geometry, Mark
from app.services.board import Board, check_playable, empty_cells
from app.services.heuristic import find_winning_move, heuristic_move
from app.services.minimax import SEARCHABLE_GEOMETRIES, best_move

logger = logging.getLogger(__name__)


class DifficultyDispatcher:
    """Select a move according to a difficulty level."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        smart_optimal_rate: float = 0.7,
        soft_win_rate: float = 0.4,
    ):
        self.rng = rng or random.Random()
        self.smart_optimal_rate = smart_optimal_rate
        self.soft_win_rate = soft_win_rate

    def select_move(
        self,
        board: Board,
        geometry: Geometry,
        difficulty: Difficulty,
        mark: Mark,
    ) -> int:
        check_playable(board, geometry)

        if difficulty == Difficulty.UNBEATABLE:
            return self.optimal_move(board, geometry, mark)
        if difficulty == Difficulty.SMART:
            return self._blend(
                board,
                self.smart_optimal_rate,
                lambda: self.optimal_move(board, geometry, mark),
            )
        if difficulty == Difficulty.SOFT:
            # Soft only ever looks for its own win, it never blocks
            return self._blend(
                board,
                self.soft_win_rate,
                lambda: find_winning_move(board, mark, geometry),
            )
        raise ValueError(f"Unknown difficulty: {difficulty}")

    def optimal_move(self, board: Board, geometry: Geometry, mark: Mark) -> int:
        """Best move available for the geometry: full search or the heuristic."""
        if geometry in SEARCHABLE_GEOMETRIES:
            return best_move(board, geometry, mark)

        logger.debug(f"Exhaustive search unavailable for {geometry.value}, using heuristic")
        return heuristic_move(board, geometry, mark, self.rng)

    def random_move(self, board: Board) -> int:
        cells = empty_cells(board)
        if not cells:
            raise BoardFull("Cannot select a move on a full board")
        return self.rng.choice(cells)

    def _blend(
        self,
        board: Board,
        rate: float,
        candidate: Callable[[], Optional[int]],
    ) -> int:
        if self.rng.random() < rate:
            move = candidate()
            if move is not None:
                return move
        return self.random_move(board)
