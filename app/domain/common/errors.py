from __future__ import annotations

from typing import Any, Dict


class GameError(Exception):
    """Base for errors that map straight onto an HTTP response."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_body(self) -> Dict[str, Any]:
        return {"message": self.message}


class GameNotFound(GameError):
    status_code = 404

    def __init__(self, message: str = "Game not found"):
        super().__init__(message)


class DrawingNotFound(GameError):
    status_code = 404

    def __init__(self, message: str = "Drawing not found"):
        super().__init__(message)


class JoinRejected(GameError):
    status_code = 400

    def to_body(self) -> Dict[str, Any]:
        return {"message": self.message, "canJoin": False}
