from collections.abc import Iterable
from itertools import islice
from numbers import Integral
from typing import TypeVar

from seqkit.exceptions import NegativeCountError

T = TypeVar("T")


def validate_count(count: int, name: str = "count") -> int:
    """Checks that a count is a non-negative integer.

    >>> validate_count(3)
    3
    >>> validate_count(-1, "times")
    Traceback (most recent call last):
    ...
    seqkit.exceptions.NegativeCountError: times must be non-negative, got -1

    Args:
        count: The value to check. NumPy integers are accepted, booleans are not.
        name: The argument name used in error messages.

    Returns:
        The count as a builtin int.

    Raises:
        TypeError: If count is not an integer.
        NegativeCountError: If count is smaller than zero.

    """
    # bool is a subclass of int
    if isinstance(count, bool) or not isinstance(count, Integral):
        raise TypeError(f"{name} must be an integer, not {type(count).__name__}")
    if count < 0:
        raise NegativeCountError(name, int(count))
    return int(count)


def take(iterable: Iterable[T], n: int) -> list[T]:
    """Returns the first n elements of an iterable as a list.

    This is the safe way to look at a prefix of an infinite sequence.

    >>> take("abc", 2)
    ['a', 'b']

    Args:
        iterable: The iterable to consume. At most n elements are requested from it.
        n: The maximum number of elements to return.

    Returns:
        A list with at most n elements.

    """
    n = validate_count(n, "n")
    return list(islice(iterable, n))
