"""A console front-end that lets two people play connect four against each other using a GameEngine."""
import argparse
from typing import Iterable, Optional

from . import errors, utils
from .board import DEFAULT_HEIGHT, DEFAULT_WIDTH
from .game_engine import GameEngine, create_game
from .logger import Logger, LogLevel
from .outcome import IGNORED, Ignored, Outcome, Tied, Won
from .player import Player

# region Globals
MAX_ATTEMPTS = 5
SYMBOLS = ("X", "O")
EMPTY_SYMBOL = " "
# endregion


def is_color(value: str) -> bool:
    """Return True if the value looks like a color name (a single word made of letters)."""
    return bool(value) and value.strip().isalpha()


def render(engine: GameEngine, highlight: Iterable[tuple[int, int]] = ()) -> str:
    """Return a string representation of the board with an optional set of positions highlighted."""
    board = engine.board
    highlight = set(highlight)
    symbols = {engine.player1: SYMBOLS[0], engine.player2: SYMBOLS[1]}
    result = []
    for r, row in enumerate(board.rows):
        cells = []
        for c, owner in enumerate(row):
            piece_str = f" {symbols.get(owner, EMPTY_SYMBOL)} "
            if (r, c) in highlight:
                piece_str = "|" + piece_str[1] + "|"
            cells.append(piece_str)
        result.append("|" + "|".join(cells) + "|")

    result.append("|" + "-" * (4 * board.width - 1) + "|")
    result.append("|" + "|".join(f"{utils.one_index(c):^3}" for c in range(board.width)) + "|")
    return "\n".join(result) + "\n"


def announce(outcome: Outcome) -> str:
    """Return the end of game message for a terminal outcome, or an empty string otherwise."""
    if isinstance(outcome, Won):
        return f"{str(outcome.player).upper()} PLAYER WINS!!!"
    if isinstance(outcome, Tied):
        return "TIE!"
    return ""


def prompt_for_color(label: str, taken: Iterable[str] = (), log: Optional[Logger] = None) -> str:
    """Prompt a player for the color of their pieces via stdin, rejecting invalid or already chosen colors."""
    log = log or Logger()
    taken = {t.lower() for t in taken}
    for request in range(MAX_ATTEMPTS):
        if request > 0:
            log.normal(f"Invalid selection. {request} of {MAX_ATTEMPTS} attempts.")
        color = input(f"{label}, which color would you like to use?\n").strip()
        if is_color(color) and color.lower() not in taken:
            return color
    raise errors.TooManyAttemptsError(f"{label} did not choose a valid color in {MAX_ATTEMPTS} attempts.")


def prompt_for_column(engine: GameEngine, log: Optional[Logger] = None) -> int:
    """Prompt the current player for a column choice. Columns are one-indexed for ease of use."""
    log = log or Logger()
    for request in range(MAX_ATTEMPTS):
        choice = input(
            f"{engine.current_player}, please select a column number (1-{engine.board.width}):\n"
        )
        try:
            return int(choice) - 1
        except ValueError:
            log.normal(f"Invalid column. {request + 1} of {MAX_ATTEMPTS} attempts.")
    raise errors.TooManyAttemptsError(f"{engine.current_player} did not choose a column in {MAX_ATTEMPTS} attempts.")


def play(engine: GameEngine, log: Optional[Logger] = None) -> Outcome:
    """
    Play the game until it is won or tied and return the final outcome.

    Drops that the engine ignores (full or nonexistent columns) are reported and the same player is asked again.
    """
    log = log or Logger()
    log.normal(render(engine))
    outcome: Outcome = IGNORED
    while not engine.is_terminal():
        col = prompt_for_column(engine, log)
        outcome = engine.drop_piece(col)
        if isinstance(outcome, Ignored):
            log.normal(f"Column {utils.one_index(col)} is not available. Please try again.")
            continue
        highlight = engine.winning_line if isinstance(outcome, Won) else [(outcome.row, outcome.column)]
        log.normal(render(engine, highlight))
    log.normal(announce(outcome))
    return outcome


def prompt_play_again() -> bool:
    """Return True if the players would like to start a new game."""
    return input("Play again? (y/n)\n").strip().lower() in ("y", "yes")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="c4", description="Play connect four in the terminal.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="number of columns (default: %(default)s)")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="number of rows (default: %(default)s)")
    parser.add_argument(
        "--log-level",
        default=LogLevel.NONE.name,
        choices=[level.name for level in LogLevel],
        type=str.upper,
        help="amount of diagnostic output (default: %(default)s)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    """Run games until the players decide to stop. Returns a process exit code."""
    args = parse_args(argv)
    log = Logger(args.log_level)
    try:
        while True:
            player1 = Player(prompt_for_color("Player 1", log=log))
            player2 = Player(prompt_for_color("Player 2", taken=[player1.color], log=log))
            engine = create_game(player1, player2, args.width, args.height, log_level=log.level)
            play(engine, log)
            if not prompt_play_again():
                return 0
    except errors.Error as e:
        log.error(e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
