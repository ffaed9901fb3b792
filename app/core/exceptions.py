class GameException(Exception):
    """Base exception for game-related errors."""
    pass


class GameNotFound(GameException):
    """Raised when a game session is not found."""
    pass


class CellOccupied(GameException):
    """Raised when trying to move to an occupied cell."""
    pass


class InvalidCell(GameException):
    """Raised when a cell index is outside the board."""
    pass


class GameEnded(GameException):
    """Raised when trying to move in an ended game."""
    pass


class EngineError(GameException):
    """Base exception for move-selection precondition failures."""
    pass


class BoardFull(EngineError):
    """Raised when a move is requested on a board with no empty cell."""
    pass


class BoardSizeMismatch(EngineError):
    """Raised when the board length does not match the geometry."""
    pass


class UnsupportedGeometry(EngineError):
    """Raised when exhaustive search is requested for a board too large for it."""
    pass
