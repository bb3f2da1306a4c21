from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import chain, repeat
from operator import index as as_index
from typing import Generic

from typing_extensions import overload, override

from seqkit.base import LazySequence
from seqkit.utils import validate_count
from seqkit.utils.typing import T


class Repeated(Generic[T], Sequence[T]):
    """A collection whose elements are all the same value.

    Args:
        value: The value to repeat. It is stored once, not copied.
        count: The number of repetitions.

    Attributes:
        value: The repeated value.

    Raises:
        TypeError: If count is not an integer.
        NegativeCountError: If count is negative.

    """

    def __init__(self, value: T, count: int) -> None:
        self.value = value
        self._count = validate_count(count)

    def __len__(self) -> int:
        return self._count

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> Repeated[T]: ...

    @override
    def __getitem__(self, index: int | slice) -> T | Repeated[T]:
        if isinstance(index, slice):
            return Repeated(self.value, len(range(self._count)[index]))
        if not -self._count <= as_index(index) < self._count:
            raise IndexError("Repeated index out of range")
        return self.value

    @override
    def __iter__(self) -> Iterator[T]:
        return repeat(self.value, self._count)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Repeated):
            return NotImplemented
        return self._count == other._count and (self._count == 0 or self.value == other.value)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Repeated({self.value!r}, count={self._count})"


def repeat_element(value: T, count: int) -> Repeated[T]:
    """Creates a collection containing the same value count times.

    >>> list(repeat_element("ab", 3))
    ['ab', 'ab', 'ab']

    Args:
        value: The value to repeat.
        count: The number of repetitions, must be non-negative.

    Returns:
        A collection of length count.

    """
    return Repeated(value, count)


class FlattenSequence(LazySequence[T]):
    """The concatenation of a sequence of iterables.

    The inner iterables are requested one at a time, so flattening a lazy or very long outer sequence
    does not evaluate it up front.

    Args:
        base: The outer iterable whose elements are the iterables to concatenate.
        is_lazy: Whether the flattened elements come from a lazy pipeline. By default, this is taken
            from base.

    """

    def __init__(self, base: Iterable[Iterable[T]], is_lazy: bool | None = None) -> None:
        super().__init__(base)  # type: ignore[arg-type]
        self.base = base
        self._is_lazy = is_lazy

    @property
    @override
    def is_lazy(self) -> bool:
        if self._is_lazy is None:
            return bool(getattr(self.base, "is_lazy", False))
        return self._is_lazy

    @override
    def __iter__(self) -> Iterator[T]:
        return chain.from_iterable(self.base)

    @override
    def __repr__(self) -> str:
        return f"FlattenSequence({self.base!r})"


def joined(iterables: Iterable[Iterable[T]]) -> FlattenSequence[T]:
    """Concatenates a sequence of iterables into one flat sequence.

    >>> list(joined([[1, 2], [], [3]]))
    [1, 2, 3]

    """
    return FlattenSequence(iterables)
