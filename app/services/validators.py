from app.core.exceptions import CellOccupied, GameEnded, InvalidCell
from app.models.game_session import GameSession


class GameValidator:
    """Validates moves against a game session."""

    def validate_move(self, game: GameSession, index: int) -> None:
        """Validate a human move is legal for the session's board."""
        # Check if game is still being played
        if game.status != "playing":
            raise GameEnded(f"Game {game.id} has already ended ({game.status})")

        # Validate position bounds for the session's geometry
        if not game.is_valid_index(index):
            raise InvalidCell(
                f"Cell {index} is invalid for a {game.geometry.value} board"
            )

        # Check if cell is already occupied
        board = game.get_board()
        if board[index] is not None:
            raise CellOccupied(f"Cell {index} is already occupied")
