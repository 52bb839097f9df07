"""Game session module for playing generated puzzles."""

from .session import GameSession, GameStatus, MoveResult

__all__ = ["GameSession", "GameStatus", "MoveResult"]
