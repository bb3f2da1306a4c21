"""Repeating the elements of a collection indefinitely or a fixed number of times.

A cycle over a non-empty collection is infinite. Only consume it in a bounded way, e.g. with
:meth:`Cycle.take`, :func:`itertools.islice` or by zipping it with a finite iterable. Calling ``list`` on it
never returns.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any, Generic

from typing_extensions import overload, override

from seqkit.base import LazySequence, OrderedCollection, as_collection, lazy, traverse
from seqkit.repeat import FlattenSequence, repeat_element
from seqkit.utils.typing import T

logger = logging.getLogger(__name__)


class CycleIterator(Generic[T], Iterator[T]):
    """The iteration state of a single traversal of a :class:`Cycle`.

    Each iterator keeps its own position, so several iterators over the same cycle do not affect
    each other. The base collection is never modified.

    Args:
        base: The collection to cycle through.

    Attributes:
        base: The collection to cycle through.
        current: The index of the next element, None until the first element is requested.

    """

    def __init__(self, base: OrderedCollection[T, Any]) -> None:
        self.base = base
        self.current: Any = None
        self._is_empty: bool | None = None

    def _start(self) -> None:
        # the base is only touched once the first element is requested
        self.current = self.base.start_index
        # same as base.is_empty, without evaluating a lazy base twice
        self._is_empty = self.current == self.base.end_index
        if self._is_empty:
            logger.debug("Cycling over an empty collection, no elements will be produced")

    @override
    def __next__(self) -> T:
        if self._is_empty is None:
            self._start()
        if self._is_empty:
            raise StopIteration

        if self.current == self.base.end_index:
            self.current = self.base.start_index
            # a lazy base that produced nothing on this pass
            if self.current == self.base.end_index:
                self._is_empty = True
                raise StopIteration

        element = self.base[self.current]
        self.current = self.base.index_after(self.current)
        return element


class Cycle(LazySequence[T]):
    """An infinite sequence that repeats the elements of a collection.

    When the end of the collection is reached, iteration starts again from the beginning. An empty
    collection produces no elements at all. Every call to ``iter`` creates an independent
    :class:`CycleIterator`, and the collection itself is neither copied nor modified.

    Consumption must be bounded by the caller, a cycle over a non-empty collection has no end.

    Args:
        base: The collection to cycle through, any object accepted by :func:`seqkit.base.as_collection`.

    Attributes:
        base: The ordered collection that is repeated.

    """

    base: OrderedCollection[T, Any]

    def __init__(self, base: Any) -> None:
        collection = as_collection(base)
        super().__init__(collection)
        self.base = collection

    @property
    @override
    def is_lazy(self) -> bool:
        """bool: True if the repeated collection is part of a lazy pipeline."""
        return bool(getattr(self.base, "is_lazy", False))

    @override
    def __iter__(self) -> CycleIterator[T]:
        return CycleIterator(self.base)

    @override
    def __repr__(self) -> str:
        return f"Cycle({self.base!r})"


@overload
def cycled(base: Iterable[T] | OrderedCollection[T, Any]) -> Cycle[T]: ...


@overload
def cycled(base: Iterable[T] | OrderedCollection[T, Any], times: int) -> FlattenSequence[T]: ...


def cycled(base: Iterable[T] | OrderedCollection[T, Any], times: int | None = None) -> Cycle[T] | FlattenSequence[T]:
    """Repeats the elements of a collection.

    Without times, the result is infinite unless the collection is empty:

    >>> cycled([1, 2, 3]).take(7)
    [1, 2, 3, 1, 2, 3, 1]
    >>> list(cycled([]))
    []

    With times, the collection is repeated exactly that many times:

    >>> list(cycled("ab", times=3))
    ['a', 'b', 'a', 'b', 'a', 'b']

    Args:
        base: A finite ordered collection, e.g. a list, tuple, string, range, dict or NumPy array.
            One-shot iterators are not accepted because they cannot start over.
        times: The number of passes over the collection. If None, the collection is repeated indefinitely.

    Returns:
        A :class:`Cycle` if times is None, otherwise a finite :class:`FlattenSequence`.

    Raises:
        NotACollectionError: If base cannot be traversed more than once.
        NegativeCountError: If times is negative.

    """
    collection = as_collection(base)
    if times is None:
        return Cycle(collection)

    passes = repeat_element(collection, times)
    is_lazy = bool(getattr(collection, "is_lazy", False))
    # is_empty would evaluate a lazy base here
    if not is_lazy and collection.is_empty:
        passes = repeat_element(collection, 0)
    logger.debug("Cycling %r %d times", collection, len(passes))
    return FlattenSequence(lazy(passes).map(traverse), is_lazy=is_lazy)
