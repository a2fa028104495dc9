"""The GameEngine class owns a Board and two players, alternates turns and decides when a game is won or tied."""
from enum import Enum
from typing import Optional, Union

from codetiming import Timer

from . import errors, utils

# Internal module imports
from .board import DEFAULT_HEIGHT, DEFAULT_WIDTH, Board
from .logger import Logger, LogLevel
from .outcome import IGNORED, Outcome, Placed, Tied, Won
from .player import Player

# region Globals
WIN_LENGTH = 4
# Offsets of (row, column) for each way to get four in a row.
DIRECTIONS: dict[str, tuple[int, int]] = {
    "horizontal": (0, 1),
    "vertical": (1, 0),
    "diagonal down-right": (1, 1),
    "diagonal down-left": (1, -1),
}
# endregion


class GameStatus(Enum):
    """The lifecycle state of a game. WON and TIED are terminal."""
    ONGOING = "ongoing"
    WON = "won"
    TIED = "tied"

    def __str__(self) -> str:
        return self.value


def winning_line(board: Board, player: Player, log: Optional[Logger] = None) -> list[tuple[int, int]]:
    """
    Return the positions of a four-in-a-row owned by player, or an empty list if there is none.

    Every cell is treated as the start of a sequence in each of the four directions, so the whole board is re-checked
    on every call rather than only the lines through the last move.
    """
    for y in range(board.height):
        for x in range(board.width):
            for name, (dy, dx) in DIRECTIONS.items():
                cells = [(y + i * dy, x + i * dx) for i in range(WIN_LENGTH)]
                if all(board.in_bounds(r, c) and board.cell_owner(r, c) == player for r, c in cells):
                    if log is not None:
                        log.verbose(f"winning_line(): {player} has a {name} line starting at ({y}, {x}).")
                    return cells
    return []


class GameEngine:
    """
    GameEngine plays a single game of connect four between two players.

    Each call to drop_piece() resolves where the current player's piece lands, checks for a win and then a tie,
    and passes the turn. Once the game is won or tied every further drop is ignored; start a new game by creating
    a new engine.
    """

    def __init__(
        self,
        player1: Player,
        player2: Player,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        log_level: Union[LogLevel, str] = LogLevel.NONE,
    ) -> None:
        """
        Initialize a game between two players on an empty board.

        Args:
            player1 (Player): The player who moves first.
            player2 (Player): The player who moves second.
            width (int, optional): The number of columns on the board. Defaults to 7.
            height (int, optional): The number of rows on the board. Defaults to 6.
            log_level (Union[LogLevel, str], optional): The log level for game logging. Defaults to LogLevel.NONE.

        Raises:
            InvalidDimensionError: If width or height is not a positive finite integer.
            InvalidPlayersError: If the two players are the same.
        """
        self.log: Logger = Logger(log_level)
        self.board: Board = Board(width, height, log_level=self.log.level)
        if player1 == player2:
            raise errors.InvalidPlayersError(f"Both players are {player1}; each player needs a distinct color.")
        self.player1: Player = player1
        self.player2: Player = player2
        self.current_player: Player = player1
        self.status: GameStatus = GameStatus.ONGOING
        self.winner: Optional[Player] = None
        self.winning_line: list[tuple[int, int]] = []
        self.log.info(f"New {self.board.width}x{self.board.height} game: {player1} vs {player2}.")

    def opponent(self, player: Player) -> Player:
        """Return the other player in this game."""
        return self.player2 if player == self.player1 else self.player1

    def cell_owner(self, row: int, column: int) -> Optional[Player]:
        """Return the player occupying the given position, or None if it is empty."""
        return self.board.cell_owner(row, column)

    def is_terminal(self) -> bool:
        """Return True if the game has been won or tied."""
        return self.status is not GameStatus.ONGOING

    def find_winning_line(self, player: Player) -> list[tuple[int, int]]:
        """Return the cells of a four-in-a-row owned by player, timing the board scan at the DEBUG log level."""
        t = Timer(text="\tfind_winning_line() took {:.6f}s", logger=self.log.debug)
        t.start()
        line = winning_line(self.board, player, self.log)
        t.stop()
        return line

    def has_winner(self, player: Player) -> bool:
        """Return True if the player currently has four in a row anywhere on the board."""
        return bool(self.find_winning_line(player))

    def drop_piece(self, column: int) -> Outcome:
        """
        Drop the current player's piece into the given column and return what happened.

        A full or invalid column, or any drop after the game has ended, is ignored rather than raising an error.
        """
        if self.is_terminal():
            self.log.debug(f"drop_piece(): the game is already {self.status}; ignoring column {column!r}.")
            return IGNORED
        row = self.board.find_landing_row(column)
        if row is None:
            self.log.debug(f"drop_piece(): no room in column {column!r}; ignoring.")
            return IGNORED

        player = self.current_player
        self.board.place(row, column, player)
        self.log.info(f"{player} played a piece in column {utils.one_index(column)}.")

        line = self.find_winning_line(player)
        if line:
            self.status = GameStatus.WON
            self.winning_line = line
            self.winner = player
            self.log.debug(f"drop_piece(): {player} won with {self.winning_line}.")
            return Won(player, row, column)

        if self.board.is_full():
            self.status = GameStatus.TIED
            self.log.debug("drop_piece(): the board is full; the game is tied.")
            return Tied(row, column)

        self.current_player = self.opponent(player)
        return Placed(row, column)


def create_game(
    player1: Player,
    player2: Player,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    log_level: Union[LogLevel, str] = LogLevel.NONE,
) -> GameEngine:
    """Return a new GameEngine, raising InvalidDimensionError if the board dimensions are not valid."""
    return GameEngine(player1, player2, width=width, height=height, log_level=log_level)
