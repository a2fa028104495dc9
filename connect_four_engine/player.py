from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    """A connect four competitor, identified by the color of their pieces."""
    color: str

    def __str__(self) -> str:
        return self.color
