from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from app.core.game_config import AI_MARK, Difficulty, GameMode, Geometry, Mark, get_board_size
from app.services.outcome_evaluator import OutcomeKind

BOARD_SIZES = tuple(get_board_size(geometry) for geometry in Geometry)


class BoardRequest(BaseModel):
    board: List[Optional[Mark]] = Field(..., description="Row-major cells: 'A', 'B' or null")

    @field_validator("board")
    @classmethod
    def check_size(cls, v):
        if len(v) not in BOARD_SIZES:
            raise ValueError(f"Board must have one of {BOARD_SIZES} cells, got {len(v)}")
        return v


class EvaluateRequest(BoardRequest):
    mark: Mark = Field(..., description="The mark that just moved")
    mode: GameMode = GameMode.CLASSIC


class EvaluateResponse(BaseModel):
    outcome: OutcomeKind
    winner: Optional[Mark] = None
    winning_line: Optional[List[int]] = None


class MoveRequest(BoardRequest):
    mode: GameMode = GameMode.CLASSIC
    difficulty: Difficulty = Difficulty.UNBEATABLE
    mark: Mark = Field(AI_MARK, description="The mark the engine plays")

    @field_validator("mode")
    @classmethod
    def reject_daily(cls, v):
        if v == GameMode.DAILY:
            raise ValueError("Daily moves are served by /engine/daily-move")
        return v


class DailyMoveRequest(BoardRequest):
    move_count: int = Field(..., ge=0, description="Moves played so far in this game")
    day: Optional[date] = Field(None, description="Calendar day to seed from, defaults to today")


class MoveSelection(BaseModel):
    index: int
    seed: Optional[int] = None
