from __future__ import annotations

import logging
from collections.abc import Callable, Collection, Iterable, Iterator, Sequence, Sized
from itertools import islice
from typing import TYPE_CHECKING, Any, Generic, Protocol, Union, runtime_checkable

import numpy as np
from typing_extensions import override

from seqkit.exceptions import NotACollectionError
from seqkit.utils import take, validate_count
from seqkit.utils.typing import IndexT, T, T_co

if TYPE_CHECKING:
    import numpy.typing as npt
    from typing_extensions import TypeAlias

    Indexable: TypeAlias = Union[Sequence[T], npt.NDArray[Any]]

logger = logging.getLogger(__name__)


@runtime_checkable
class OrderedCollection(Protocol[T_co, IndexT]):
    """A finite collection that can be traversed forward from a start index to an end index.

    Indices are opaque to the caller. The only way to move from one index to the next is
    :meth:`index_after`, so collections without index arithmetic can implement this protocol as well.
    Applying :meth:`index_after` repeatedly to :attr:`start_index` reaches :attr:`end_index` after a
    finite number of steps. The end index is a marker and does not point to an element.

    """

    @property
    def start_index(self) -> IndexT: ...

    @property
    def end_index(self) -> IndexT: ...

    @property
    def is_empty(self) -> bool: ...

    def index_after(self, index: IndexT) -> IndexT: ...

    def __getitem__(self, index: IndexT) -> T_co: ...


def traverse(collection: OrderedCollection[T, Any]) -> Iterator[T]:
    """Yields the elements of an ordered collection from its start index to its end index.

    Args:
        collection: The collection to traverse.

    Yields:
        The elements of the collection in order.

    """
    index = collection.start_index
    end = collection.end_index
    while index != end:
        yield collection[index]
        index = collection.index_after(index)


class LazySequence(Generic[T_co]):
    """An iterable whose transformations are deferred until its elements are requested.

    Calling :meth:`map`, :meth:`filter` or :meth:`prefix` returns a new lazy sequence and does not touch
    a single element of the source. Nothing is evaluated until the result is iterated.

    Args:
        source: The iterable to wrap. If it is a one-shot iterator, the lazy sequence can be iterated only once.

    """

    def __init__(self, source: Iterable[T_co]) -> None:
        self._source = source

    @property
    def is_lazy(self) -> bool:
        return True

    @property
    def is_reiterable(self) -> bool:
        """bool: True if every call to ``iter`` starts again from the first element."""
        if isinstance(self._source, LazySequence):
            return self._source.is_reiterable
        return not isinstance(self._source, Iterator)

    def __iter__(self) -> Iterator[T_co]:
        return iter(self._source)

    def map(self, function: Callable[[T_co], T]) -> LazySequence[T]:
        """Lazily applies a function to every element."""
        return _LazyMap(self, function)

    def filter(self, predicate: Callable[[T_co], object]) -> LazySequence[T_co]:
        """Lazily keeps the elements for which the predicate is true."""
        return _LazyFilter(self, predicate)

    def prefix(self, n: int) -> LazySequence[T_co]:
        """Lazily limits the sequence to at most n elements."""
        return _LazyPrefix(self, validate_count(n, "n"))

    def take(self, n: int) -> list[T_co]:
        """Returns a list of at most n elements from the start of the sequence."""
        return take(self, n)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._source!r})"


class _LazyMap(LazySequence[T]):
    def __init__(self, source: LazySequence[Any], function: Callable[[Any], T]) -> None:
        super().__init__(source)
        self._function = function

    @override
    def __iter__(self) -> Iterator[T]:
        return map(self._function, self._source)


class _LazyFilter(LazySequence[T]):
    def __init__(self, source: LazySequence[T], predicate: Callable[[T], object]) -> None:
        super().__init__(source)
        self._predicate = predicate

    @override
    def __iter__(self) -> Iterator[T]:
        return filter(self._predicate, self._source)


class _LazyPrefix(LazySequence[T]):
    def __init__(self, source: LazySequence[T], n: int) -> None:
        super().__init__(source)
        self._n = n

    @override
    def __iter__(self) -> Iterator[T]:
        return islice(self._source, self._n)


def lazy(iterable: Iterable[T]) -> LazySequence[T]:
    """Wraps an iterable in a :class:`LazySequence`.

    >>> evens = lazy(range(10)).filter(lambda x: x % 2 == 0).map(str)
    >>> evens.take(3)
    ['0', '2', '4']

    """
    if isinstance(iterable, LazySequence):
        return iterable
    return LazySequence(iterable)


class IndexedCollection(Generic[T]):
    """An ordered collection over a sequence or array that supports integer indexing.

    Indices run from 0 to ``len(base)``. NumPy arrays are traversed along their first axis.

    Args:
        base: The sequence or array to wrap. It is not copied.

    Attributes:
        base: The wrapped sequence or array.

    """

    is_lazy = False

    def __init__(self, base: Indexable[T]) -> None:
        self.base = base

    @property
    def start_index(self) -> int:
        return 0

    @property
    def end_index(self) -> int:
        return len(self.base)

    @property
    def is_empty(self) -> bool:
        return len(self.base) == 0

    def index_after(self, index: int) -> int:
        return index + 1

    def __getitem__(self, index: int) -> T:
        return self.base[index]

    def __len__(self) -> int:
        return len(self.base)

    def __iter__(self) -> Iterator[T]:
        return iter(self.base)

    def __repr__(self) -> str:
        return f"IndexedCollection({self.base!r})"


class ForwardIndex(Generic[T]):
    """A position in a :class:`ForwardCollection`.

    A forward index holds the element it points to and the iterator that produced it. Advancing it consumes
    that iterator, so each index should be passed to :meth:`ForwardCollection.index_after` only once.

    Attributes:
        value: The element at this position.
        offset: The number of steps from the start index.

    """

    __slots__ = ("_iterator", "offset", "value")

    def __init__(self, iterator: Iterator[T], value: T, offset: int) -> None:
        self._iterator = iterator
        self.value = value
        self.offset = offset

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ForwardIndex):
            return NotImplemented
        return self.offset == other.offset

    def __hash__(self) -> int:
        return hash(self.offset)

    def __repr__(self) -> str:
        return f"ForwardIndex(offset={self.offset})"


class _EndIndex:
    def __repr__(self) -> str:
        return "END"


END = _EndIndex()

_MISSING = object()


class ForwardCollection(Generic[T]):
    """An ordered collection over any re-iterable object, e.g. a dict, set or lazy sequence.

    The collection is traversed with the object's own iterator: every start index begins a fresh
    iteration and every call to :meth:`index_after` requests one more element. No index arithmetic is
    used and nothing is copied.

    Args:
        base: The re-iterable object to wrap. Iterating it twice must yield the same elements in the same order.

    Attributes:
        base: The wrapped object.

    """

    def __init__(self, base: Iterable[T]) -> None:
        self.base = base

    @property
    def is_lazy(self) -> bool:
        return isinstance(self.base, LazySequence)

    @property
    def start_index(self) -> ForwardIndex[T] | _EndIndex:
        return self._advance(iter(self.base), 0)

    @property
    def end_index(self) -> _EndIndex:
        return END

    @property
    def is_empty(self) -> bool:
        if isinstance(self.base, Sized):
            return len(self.base) == 0
        return self.start_index is END

    def index_after(self, index: ForwardIndex[T] | _EndIndex) -> ForwardIndex[T] | _EndIndex:
        if not isinstance(index, ForwardIndex):
            raise IndexError("Cannot advance past the end index.")
        return self._advance(index._iterator, index.offset + 1)

    def __getitem__(self, index: ForwardIndex[T] | _EndIndex) -> T:
        if not isinstance(index, ForwardIndex):
            raise IndexError("The end index does not point to an element.")
        return index.value

    def __iter__(self) -> Iterator[T]:
        return iter(self.base)

    def __repr__(self) -> str:
        return f"ForwardCollection({self.base!r})"

    @staticmethod
    def _advance(iterator: Iterator[T], offset: int) -> ForwardIndex[T] | _EndIndex:
        value = next(iterator, _MISSING)
        if value is _MISSING:
            return END
        return ForwardIndex(iterator, value, offset)  # type: ignore[arg-type]


def as_collection(obj: Any) -> OrderedCollection[Any, Any]:
    """Adapts an object to the :class:`OrderedCollection` protocol.

    Objects that already implement the protocol are returned unchanged. Sequences and NumPy arrays are
    wrapped in an :class:`IndexedCollection`, other re-iterable collections and lazy sequences in a
    :class:`ForwardCollection`.

    Args:
        obj: The object to adapt.

    Returns:
        An ordered collection over the elements of obj.

    Raises:
        NotACollectionError: If obj is a one-shot iterator, a 0-dimensional array or not iterable at all.

    """
    if isinstance(obj, (IndexedCollection, ForwardCollection)):
        return obj

    result: OrderedCollection[Any, Any]
    if isinstance(obj, np.ndarray):
        if obj.ndim == 0:
            raise NotACollectionError("A 0-dimensional array is not a collection.")
        result = IndexedCollection(obj)
    elif isinstance(obj, OrderedCollection):
        return obj
    elif isinstance(obj, Sequence):
        result = IndexedCollection(obj)
    elif isinstance(obj, LazySequence):
        if not obj.is_reiterable:
            raise NotACollectionError("A lazy sequence over a one-shot iterator cannot be traversed repeatedly.")
        result = ForwardCollection(obj)
    elif isinstance(obj, Collection) and not isinstance(obj, Iterator):
        result = ForwardCollection(obj)
    else:
        raise NotACollectionError(f"Expected a finite ordered collection, not {type(obj).__name__}.")

    logger.debug("Adapted %s to %s", type(obj).__name__, type(result).__name__)
    return result
