"""
Stateless engine endpoints: the caller owns the board.
"""
from fastapi import APIRouter

from app.core.game_config import GameMode, geometry_for_mode
from app.schemas import engine as engine_schemas
from app.services import daily_selector
from app.services.engine_service import engine_service_obj

router = APIRouter(
    prefix="/engine",
    tags=["engine"],
    responses={400: {"description": "Board does not allow the request"}}
)


@router.post("/evaluate", response_model=engine_schemas.EvaluateResponse)
def evaluate(request: engine_schemas.EvaluateRequest):
    """
    Classify a board after `mark` has moved.

    Returns `win` with the first winning line, `draw` for a full board,
    `continue` otherwise.
    """
    outcome = engine_service_obj.evaluate(
        request.board, request.mark, geometry_for_mode(request.mode)
    )
    return {
        "outcome": outcome.kind,
        "winner": outcome.winner,
        "winning_line": list(outcome.line) if outcome.line else None,
    }


@router.post("/move", response_model=engine_schemas.MoveSelection)
def select_move(request: engine_schemas.MoveRequest):
    """
    Select the computer's move for a difficulty level.

    - unbeatable: minimax on 3x3, win/block/center heuristic on 4x4
    - smart: mostly unbeatable play, sometimes random
    - soft: sometimes takes a win, otherwise random
    """
    index = engine_service_obj.select_move(
        request.board,
        geometry_for_mode(request.mode),
        request.difficulty,
        request.mark,
    )
    return {"index": index}


@router.post("/daily-move", response_model=engine_schemas.MoveSelection)
def select_daily_move(request: engine_schemas.DailyMoveRequest):
    """
    Select the daily challenge move.

    Same day, same move count and same board always give the same answer.
    """
    day = request.day or daily_selector.today()
    index = engine_service_obj.select_daily_move(
        request.board,
        geometry_for_mode(GameMode.DAILY),
        request.move_count,
        day,
    )
    return {"index": index, "seed": daily_selector.daily_seed(day) + request.move_count}
