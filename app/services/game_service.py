import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.core.exceptions import GameNotFound
from app.core.game_config import AI_MARK, HUMAN_MARK, Difficulty, GameMode
from app.models.game_session import GameSession
from app.services.board import render
from app.services.engine_service import EngineService, engine_service_obj
from app.services.outcome_evaluator import OutcomeKind
from app.services.validators import GameValidator

logger = logging.getLogger(__name__)


class GameService:
    def __init__(self, engine: Optional[EngineService] = None):
        self.validator = GameValidator()
        self.engine = engine or engine_service_obj

    def create_game(self, db: Session, mode: GameMode = GameMode.CLASSIC,
                    difficulty: Difficulty = Difficulty.SOFT) -> GameSession:
        game = GameSession(mode=mode.value, difficulty=difficulty.value, status="playing")
        game.initialize_empty_board()
        db.add(game)
        db.commit()
        db.refresh(game)

        logger.info(f"Game {game.id} created ({mode.value}, {difficulty.value})")
        return game

    def reset_game(self, db: Session, game_id: int, mode: Optional[GameMode] = None,
                   difficulty: Optional[Difficulty] = None) -> GameSession:
        """Start a new game on the same session, keeping the scores."""
        game = self._get_game(db, game_id, lock=True)

        if mode is not None:
            game.mode = mode.value
        if difficulty is not None:
            game.difficulty = difficulty.value

        game.initialize_empty_board()
        game.status = "playing"
        game.move_count = 0
        game.set_highlight_line(None)

        db.commit()
        db.refresh(game)

        logger.info(f"Game {game_id} reset ({game.mode}, {game.difficulty})")
        return game

    def make_move(self, db: Session, game_id: int, index: int) -> dict:
        """Play the human move, then let the computer answer if the game goes on."""
        game = self._get_game(db, game_id, lock=True)

        self.validator.validate_move(game, index)

        geometry = game.geometry
        board = game.get_board()
        board[index] = HUMAN_MARK
        game.move_count += 1

        computer_index = None
        outcome = self.engine.evaluate(board, HUMAN_MARK, geometry)

        if outcome.kind == OutcomeKind.WIN:
            game.status = "win"
            game.player_score += 1
            game.set_highlight_line(outcome.line)
            logger.info(f"Player won game {game_id}")
        elif outcome.kind == OutcomeKind.DRAW:
            game.status = "draw"
            logger.info(f"Game {game_id} ended in a draw")
        else:
            if game.game_mode == GameMode.DAILY:
                computer_index = self.engine.select_daily_move(board, geometry, game.move_count)
            else:
                computer_index = self.engine.select_move(
                    board, geometry, game.game_difficulty, AI_MARK
                )
            board[computer_index] = AI_MARK
            game.move_count += 1

            outcome = self.engine.evaluate(board, AI_MARK, geometry)
            if outcome.kind == OutcomeKind.WIN:
                game.status = "lose"
                game.computer_score += 1
                game.set_highlight_line(outcome.line)
                logger.info(f"Computer won game {game_id}")
            elif outcome.kind == OutcomeKind.DRAW:
                game.status = "draw"
                logger.info(f"Game {game_id} ended in a draw")

        game.set_board(board)
        logger.debug(f"Game {game_id} board {render(board, geometry)} ({game.status})")
        db.commit()
        db.refresh(game)

        return {
            "game_id": game.id,
            "index": index,
            "computer_index": computer_index,
            "status": game.status,
            "board": game.get_board(),
            "highlight_line": game.get_highlight_line(),
            "move_count": game.move_count,
            "player_score": game.player_score,
            "computer_score": game.computer_score,
        }

    def get_game_state(self, db: Session, game_id: int) -> GameSession:
        return self._get_game(db, game_id)

    def _get_game(self, db: Session, game_id: int, lock: bool = False) -> GameSession:
        query = db.query(GameSession).filter(GameSession.id == game_id)
        if lock:
            query = query.with_for_update()
        game = query.first()
        if not game:
            raise GameNotFound(f"Game {game_id} not found")
        return game


game_service_obj = GameService()
