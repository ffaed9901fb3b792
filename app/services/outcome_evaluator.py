"""
Outcome evaluation: wins, winning lines and draws.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from app.core.game_config import Geometry, Mark, WIN_PATTERNS
from app.services.board import Board, check_board, is_full


class OutcomeKind(str, Enum):
    CONTINUE = "continue"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """Result of classifying a board after a mark has moved."""
    kind: OutcomeKind
    winner: Optional[Mark] = None
    line: Optional[Tuple[int, ...]] = None

    @property
    def is_terminal(self) -> bool:
        return self.kind != OutcomeKind.CONTINUE


CONTINUE = Outcome(OutcomeKind.CONTINUE)
DRAW = Outcome(OutcomeKind.DRAW)


def winning_line(board: Board, mark: Mark, geometry: Geometry) -> Optional[Tuple[int, ...]]:
    """
    Get the first line fully occupied by mark.

    Lines are scanned in their definition order (rows, columns, diagonals)
    so the highlighted line is always the same for a given board.
    """
    for line in WIN_PATTERNS[geometry]:
        if all(board[index] == mark for index in line):
            return line
    return None


def has_won(board: Board, mark: Mark, geometry: Geometry) -> bool:
    return winning_line(board, mark, geometry) is not None


def evaluate(board: Board, mark: Mark, geometry: Geometry) -> Outcome:
    """
    Classify the board from the point of view of the mark that just moved.

    A win for that mark takes precedence over a full board.
    """
    check_board(board, geometry)

    line = winning_line(board, mark, geometry)
    if line is not None:
        return Outcome(OutcomeKind.WIN, winner=mark, line=line)
    if is_full(board):
        return DRAW
    return CONTINUE
