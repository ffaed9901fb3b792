"""
Game session API endpoints.
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.core.exceptions import (
    GameNotFound, CellOccupied, GameEnded, InvalidCell
)
from app.schemas import game as game_schemas
from app.services.game_service import game_service_obj

router = APIRouter(
    prefix="/games",
    tags=["games"],
    responses={404: {"description": "Game not found"}}
)


@router.post("", response_model=game_schemas.GameResponse)
def create_game(
        game: game_schemas.GameCreate,
        db: Session = Depends(get_db)
):
    """
    Create a new game against the computer.

    The human plays A and moves first. Daily games always use the
    3x3 board and ignore the difficulty.
    """
    return game_service_obj.create_game(db, game.mode, game.difficulty)


@router.get("/{game_id}", response_model=game_schemas.GameResponse)
def get_game_state(
        game_id: int,
        db: Session = Depends(get_db)
):
    """
    Get the current state of a game.

    Returns:
    - Current board
    - Status (playing, win, lose, draw)
    - Highlighted winning or losing line
    - Running scores
    """
    try:
        return game_service_obj.get_game_state(db, game_id)
    except GameNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{game_id}/move", response_model=game_schemas.MoveResponse)
def make_move(
        game_id: int,
        move: game_schemas.MoveCreate,
        db: Session = Depends(get_db)
):
    """
    Place the human mark, then let the computer answer.

    Validates:
    - Game exists and is still being played
    - The cell exists on the board
    - The cell is empty

    Returns the updated board, the computer's reply (if the game went on),
    the status and the scores.
    """
    try:
        return game_service_obj.make_move(db, game_id, move.index)
    except GameNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CellOccupied as e:
        raise HTTPException(
            status_code=400,
            detail=str(e),
            headers={"X-Error-Code": "CELL_OCCUPIED"}
        )
    except InvalidCell as e:
        raise HTTPException(
            status_code=400,
            detail=str(e),
            headers={"X-Error-Code": "INVALID_CELL"}
        )
    except GameEnded as e:
        raise HTTPException(
            status_code=400,
            detail=str(e),
            headers={"X-Error-Code": "GAME_ENDED"}
        )


@router.post("/{game_id}/reset", response_model=game_schemas.GameResponse)
def reset_game(
        game_id: int,
        reset: game_schemas.GameReset,
        db: Session = Depends(get_db)
):
    """
    Start a new game on the same session.

    Scores are kept; mode and difficulty may be switched.
    """
    try:
        return game_service_obj.reset_game(db, game_id, reset.mode, reset.difficulty)
    except GameNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
