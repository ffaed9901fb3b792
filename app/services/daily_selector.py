"""
Daily challenge move selection.

Everyone playing on the same calendar day faces the same opponent: the
move only depends on the date, the number of moves played so far and the
empty cells left on the board.
"""
import hashlib
import logging
from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

from app.core.config import settings
from app.core.game_config import Geometry
from app.services.board import Board, check_playable

logger = logging.getLogger(__name__)


def today() -> date:
    """Current date in the configured daily time zone."""
    return datetime.now(ZoneInfo(settings.DAILY_TIMEZONE)).date()


def daily_seed(day: date) -> int:
    """Seed for a calendar day, e.g. 2024-03-07 -> 20240307."""
    return day.year * 10000 + day.month * 100 + day.day


def seeded_random(seed: int) -> float:
    """Map an integer seed to a reproducible float in [0, 1)."""
    digest = hashlib.sha256(str(seed).encode("ascii")).digest()
    return int.from_bytes(digest[:8], "big") / 2 ** 64


def select_daily_move(
    board: Board,
    geometry: Geometry,
    move_count: int,
    day: Optional[date] = None,
) -> int:
    """
    Pick the daily challenge move.

    Args:
        board: Current board.
        geometry: Board geometry (daily games use the classic board).
        move_count: Moves played so far in this game, by both sides.
        day: Calendar day to seed from, defaults to today.

    Returns:
        Index of the cell to play.
    """
    cells = check_playable(board, geometry)
    seed = daily_seed(day or today()) + move_count

    choice = cells[int(seeded_random(seed) * len(cells))]
    logger.debug(f"Daily move {choice} from seed {seed}")
    return choice
