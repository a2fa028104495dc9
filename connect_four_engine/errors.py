class Error(Exception):
    """A base error class for the connect_four_engine package."""
    def __init__(self, message="ConnectFour: Unknown Exception occurred.") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

class InvalidDimensionError(Error):
    """The board width or height is not a positive finite integer."""
    pass

class InvalidPlayersError(Error):
    """The two players provided cannot be told apart."""
    pass

class OutOfBoundsError(Error):
    """A cell was requested outside of the bounds of the game board."""
    pass

class TooManyAttemptsError(Error):
    """The user failed to provide valid input within the allowed number of attempts."""
    pass
