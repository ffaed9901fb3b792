import json
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from app.core.game_config import Difficulty, GameMode, Mark


class GameStatus(str, Enum):
    PLAYING = "playing"
    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"


class GameCreate(BaseModel):
    mode: GameMode = Field(GameMode.CLASSIC, description="classic (3x3), relax (4x4) or daily")
    difficulty: Difficulty = Field(Difficulty.SOFT, description="Ignored in daily mode")


class GameReset(BaseModel):
    mode: Optional[GameMode] = Field(None, description="Switch mode for the next game")
    difficulty: Optional[Difficulty] = Field(None, description="Switch difficulty for the next game")


class MoveCreate(BaseModel):
    index: int = Field(..., ge=0, description="Cell index (validated against the game's board size)")


class MoveResponse(BaseModel):
    game_id: int
    index: int
    computer_index: Optional[int] = None
    status: GameStatus
    board: List[Optional[Mark]]
    highlight_line: List[int] = []
    move_count: int
    player_score: int
    computer_score: int


class GameResponse(BaseModel):
    id: int
    mode: GameMode
    difficulty: Difficulty
    status: GameStatus
    board: List[Optional[Mark]]
    highlight_line: List[int] = []
    move_count: int
    player_score: int
    computer_score: int
    created_at: Optional[datetime] = None

    @field_validator("board", "highlight_line", mode="before")
    @classmethod
    def parse_json(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return json.loads(v)
        return v

    class Config:
        from_attributes = True
