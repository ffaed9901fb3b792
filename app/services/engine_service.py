import logging
import random
from datetime import date
from typing import Optional

from app.core.config import settings
from app.core.game_config import AI_MARK, Difficulty, Geometry, Mark
from app.services import daily_selector
from app.services.board import Board
from app.services.difficulty import DifficultyDispatcher
from app.services.outcome_evaluator import Outcome, evaluate

logger = logging.getLogger(__name__)


class EngineService:
    """Stateless entry points for outcome evaluation and move selection."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.dispatcher = DifficultyDispatcher(
            rng=rng,
            smart_optimal_rate=settings.SMART_OPTIMAL_RATE,
            soft_win_rate=settings.SOFT_WIN_RATE,
        )

    def evaluate(self, board: Board, mark: Mark, geometry: Geometry) -> Outcome:
        return evaluate(board, mark, geometry)

    def select_move(self, board: Board, geometry: Geometry,
                    difficulty: Difficulty, mark: Mark = AI_MARK) -> int:
        move = self.dispatcher.select_move(board, geometry, difficulty, mark)
        logger.debug(f"{difficulty.value} move for {mark.value} on {geometry.value}: {move}")
        return move

    def select_daily_move(self, board: Board, geometry: Geometry, move_count: int,
                          day: Optional[date] = None) -> int:
        return daily_selector.select_daily_move(board, geometry, move_count, day)


engine_service_obj = EngineService(rng=random.Random(settings.ENGINE_SEED))
