"""Small helpers shared by the engine and the console front-end."""
import math
from numbers import Integral

from . import errors


def one_index(index: int) -> int:
    """Return the human friendly (one-indexed) version of a zero-indexed value."""
    return index + 1


def coerce_dimension(name: str, value) -> int:
    """
    Return the provided board dimension as an int.

    Integral floats such as 7.0 are accepted. Anything else that is not a positive finite integer raises
    InvalidDimensionError.
    """
    if isinstance(value, bool):
        raise errors.InvalidDimensionError(f"{name} must be a positive integer, got {value!r}.")
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        value = int(value)
    if not isinstance(value, Integral) or value <= 0:
        raise errors.InvalidDimensionError(f"{name} must be a positive integer, got {value!r}.")
    return int(value)
