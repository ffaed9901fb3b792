"""
Configuration constants for the TicTacToe game engine.
"""
from enum import Enum
from typing import Dict, Tuple


class Mark(str, Enum):
    """A player's symbol. Empty cells are represented by None."""
    A = "A"
    B = "B"

    def opposite(self) -> "Mark":
        return Mark.B if self == Mark.A else Mark.A


class Geometry(str, Enum):
    CLASSIC = "classic"  # 3x3, three in a row
    RELAX = "relax"      # 4x4, four in a row


class GameMode(str, Enum):
    CLASSIC = "classic"
    RELAX = "relax"
    DAILY = "daily"


class Difficulty(str, Enum):
    SOFT = "soft"
    SMART = "smart"
    UNBEATABLE = "unbeatable"


# Human moves first with A, the computer answers with B
HUMAN_MARK = Mark.A
AI_MARK = Mark.B

BOARD_WIDTH: Dict[Geometry, int] = {
    Geometry.CLASSIC: 3,
    Geometry.RELAX: 4,
}

# Scan order matters: the first matching line is the one highlighted
WIN_PATTERNS: Dict[Geometry, Tuple[Tuple[int, ...], ...]] = {
    Geometry.CLASSIC: (
        # Rows
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        # Columns
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        # Diagonals
        (0, 4, 8), (2, 4, 6),
    ),
    Geometry.RELAX: (
        # Rows
        (0, 1, 2, 3), (4, 5, 6, 7), (8, 9, 10, 11), (12, 13, 14, 15),
        # Columns
        (0, 4, 8, 12), (1, 5, 9, 13), (2, 6, 10, 14), (3, 7, 11, 15),
        # Diagonals
        (0, 5, 10, 15), (3, 6, 9, 12),
    ),
}

CENTER_CELLS: Dict[Geometry, Tuple[int, ...]] = {
    Geometry.CLASSIC: (4,),
    Geometry.RELAX: (5, 6, 9, 10),
}

# Minimax scores: a win is worth WIN_SCORE minus the plies it took
WIN_SCORE = 10


def get_board_width(geometry: Geometry) -> int:
    """Get the number of cells per row for a geometry."""
    return BOARD_WIDTH[geometry]


def get_board_size(geometry: Geometry) -> int:
    """Get the total number of cells for a geometry."""
    return BOARD_WIDTH[geometry] ** 2


def geometry_for_mode(mode: GameMode) -> Geometry:
    """Daily challenges are always played on the classic board."""
    if mode == GameMode.RELAX:
        return Geometry.RELAX
    return Geometry.CLASSIC

