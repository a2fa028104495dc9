"""Results returned by GameEngine.drop_piece() for a presentation layer to render."""
from dataclasses import dataclass
from typing import Union

from .player import Player


@dataclass(frozen=True)
class Ignored:
    """The drop had no effect: the column was full or invalid, or the game was already over."""
    is_terminal = False


@dataclass(frozen=True)
class Placed:
    """The piece landed at (row, column), the game continues and the turn has passed to the other player."""
    row: int
    column: int
    is_terminal = False


@dataclass(frozen=True)
class Won:
    """The piece landed at (row, column) and completed four in a row for player."""
    player: Player
    row: int
    column: int
    is_terminal = True


@dataclass(frozen=True)
class Tied:
    """The piece landed at (row, column) and filled the board without a winner."""
    row: int
    column: int
    is_terminal = True


Outcome = Union[Ignored, Placed, Won, Tied]

IGNORED = Ignored()
