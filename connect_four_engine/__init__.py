"""A rules engine for two player connect four games."""
from .board import Board
from .errors import InvalidDimensionError, InvalidPlayersError, OutOfBoundsError
from .game_engine import GameEngine, GameStatus, create_game, winning_line
from .logger import Logger, LogLevel
from .outcome import IGNORED, Ignored, Outcome, Placed, Tied, Won
from .player import Player

__all__ = [
    "Board",
    "GameEngine",
    "GameStatus",
    "IGNORED",
    "Ignored",
    "InvalidDimensionError",
    "InvalidPlayersError",
    "LogLevel",
    "Logger",
    "OutOfBoundsError",
    "Outcome",
    "Placed",
    "Player",
    "Tied",
    "Won",
    "create_game",
    "winning_line",
]
