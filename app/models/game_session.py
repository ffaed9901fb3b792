import json
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from app.core.database import Base
from app.core.game_config import Difficulty, GameMode, Mark, geometry_for_mode
from app.services.board import new_board


class GameSession(Base):
    """
    One human-vs-computer table.

    Only the current game is kept: the board is replaced when a new game
    starts, the running scores survive across games.
    """
    __tablename__ = "game_sessions"

    id = Column(Integer, primary_key=True, index=True)
    mode = Column(String(20), nullable=False, default=GameMode.CLASSIC.value)
    difficulty = Column(String(20), nullable=False, default=Difficulty.SOFT.value)
    status = Column(String(20), nullable=False, default="playing")
    board = Column(String, default=None)
    move_count = Column(Integer, nullable=False, default=0)
    player_score = Column(Integer, nullable=False, default=0)
    computer_score = Column(Integer, nullable=False, default=0)
    highlight_line = Column(String, default=None)  # Winning or losing cells
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    @property
    def game_mode(self) -> GameMode:
        return GameMode(self.mode)

    @property
    def game_difficulty(self) -> Difficulty:
        return Difficulty(self.difficulty)

    @property
    def geometry(self):
        return geometry_for_mode(self.game_mode)

    def get_board(self):
        """Get the board as a flat list of marks, creating an empty board if needed."""
        if self.board:
            return [Mark(cell) if cell is not None else None for cell in json.loads(self.board)]
        return self.initialize_empty_board()

    def set_board(self, board_obj):
        """Set the board from a flat list of marks."""
        self.board = json.dumps([cell.value if cell is not None else None for cell in board_obj])

    def initialize_empty_board(self):
        """Initialize an empty board based on the game mode."""
        empty_board = new_board(self.geometry)
        self.set_board(empty_board)
        return empty_board

    def get_highlight_line(self):
        if self.highlight_line:
            return json.loads(self.highlight_line)
        return []

    def set_highlight_line(self, line):
        self.highlight_line = json.dumps(list(line)) if line else None

    def is_valid_index(self, index: int) -> bool:
        """Check if a cell index exists on this session's board."""
        return 0 <= index < len(self.get_board())
