"""The Board class stores the pieces of a single connect four grid and resolves where dropped pieces land."""
from typing import Optional, Union

from . import errors, utils
from .logger import Logger, LogLevel
from .player import Player

# region Globals
DEFAULT_WIDTH = 7
DEFAULT_HEIGHT = 6
# endregion


class Board:
    """
    Board is a fixed size grid of cells, each either empty (None) or occupied by a Player.

    Row 0 is the top of the board and column 0 is the leftmost column, so pieces fall towards higher row indexes.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        log_level: Union[LogLevel, str] = LogLevel.NONE,
    ) -> None:
        """
        Initialize an empty board.

        Args:
            width (int, optional): The number of columns. Defaults to 7.
            height (int, optional): The number of rows. Defaults to 6.
            log_level (Union[LogLevel, str], optional): The log level for board logging. Defaults to LogLevel.NONE.

        Raises:
            InvalidDimensionError: If width or height is not a positive finite integer.
        """
        self.log: Logger = Logger(log_level)
        self.width: int = utils.coerce_dimension("width", width)
        self.height: int = utils.coerce_dimension("height", height)
        self._cells: list[list[Optional[Player]]] = [[None for c in range(self.width)] for r in range(self.height)]
        self.log.debug(f"Created a {self.width}x{self.height} board.")

    @property
    def rows(self) -> tuple[tuple[Optional[Player], ...], ...]:
        """Return a read-only snapshot of every row, top to bottom."""
        return tuple(tuple(row) for row in self._cells)

    def in_bounds(self, row: int, column: int) -> bool:
        """Return True if the given position lies on the board."""
        return 0 <= row < self.height and 0 <= column < self.width

    def find_landing_row(self, column: int) -> Optional[int]:
        """
        Return the lowest empty row in the given column, scanning from the bottom up.

        None is returned if the column is full or is not a valid column index.
        """
        if isinstance(column, bool) or not isinstance(column, int) or column not in range(self.width):
            self.log.verbose(f"find_landing_row(): column {column!r} is out of bounds.")
            return None
        for r in range(self.height - 1, -1, -1):
            if self._cells[r][column] is None:
                return r
        self.log.verbose(f"find_landing_row(): column {utils.one_index(column)} is full.")
        return None

    def place(self, row: int, column: int, player: Player) -> None:
        """
        Put the player's piece at the given position.

        The row is expected to come from find_landing_row(); gravity is not re-validated here.
        """
        self._cells[row][column] = player

    def is_full(self) -> bool:
        """Return True if every cell on the board is occupied."""
        return all(cell is not None for row in self._cells for cell in row)

    def cell_owner(self, row: int, column: int) -> Optional[Player]:
        """Return the player occupying the given position, or None if it is empty."""
        if not self.in_bounds(row, column):
            raise errors.OutOfBoundsError(f"cell_owner(): position ({row}, {column}) is out of bounds.")
        return self._cells[row][column]

    def __repr__(self) -> str:
        """Return a string representing every occupied position and its owner."""
        result = []
        for r in range(self.height):
            for c in range(self.width):
                if self._cells[r][c] is not None:
                    result.append(f"{r}{c}:{self._cells[r][c]}")
        return f"Board({self.width}x{self.height}; {','.join(result)})"
