from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from typing import Callable

from seqkit.utils.typing import T


def _identity(element: T) -> T:
    return element


def _distinct(iterable: Iterable[T], projection: Callable[[T], Hashable]) -> Iterator[T]:
    seen: set[Hashable] = set()
    for element in iterable:
        key = projection(element)
        if key in seen:
            continue
        seen.add(key)
        yield element


def distinct(iterable: Iterable[T], on: Callable[[T], Hashable] | None = None) -> Iterator[T]:
    """A generator that returns only the distinct elements of another iterable.

    Elements are compared by the key that ``on`` computes for them, or by themselves if ``on`` is None.
    Of all elements with the same key, only the first one is returned.

    Args:
        iterable: The iterable to filter. It is iterated once.
        on: A function that maps an element to a hashable key.

    Yields:
        The first element for every distinct key, in the order of the input.

    Raises:
        TypeError: If on is neither None nor callable, or a key is not hashable.

    """
    if on is not None and not callable(on):
        raise TypeError(f"on must be callable, not {type(on).__name__}")
    return _distinct(iterable, _identity if on is None else on)


def uniqued(iterable: Iterable[T], *, on: Callable[[T], Hashable] | None = None) -> list[T]:
    """Returns a list with only the unique elements of an iterable, in the order of their first occurrence.

    >>> animals = ["dog", "pig", "cat", "ox", "dog", "cat"]
    >>> uniqued(animals)
    ['dog', 'pig', 'cat', 'ox']

    If ``on`` is given, uniqueness is determined by its result. If it returns the same key for two
    elements, the second one is excluded:

    >>> animals = ["dog", "pig", "cat", "ox", "cow", "owl"]
    >>> uniqued(animals, on=lambda animal: animal[0])
    ['dog', 'pig', 'cat', 'ox']

    An exception raised by ``on`` propagates and no result is returned.

    Args:
        iterable: The iterable to deduplicate. It is iterated once and not modified.
        on: A function that maps an element to a hashable key.

    Returns:
        The first element for every distinct key.

    """
    return list(distinct(iterable, on=on))
