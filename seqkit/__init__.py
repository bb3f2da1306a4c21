from seqkit.base import (
    ForwardCollection,
    IndexedCollection,
    LazySequence,
    OrderedCollection,
    as_collection,
    lazy,
    traverse,
)
from seqkit.cycle import Cycle, CycleIterator, cycled
from seqkit.exceptions import NegativeCountError, NotACollectionError, SeqkitException
from seqkit.repeat import FlattenSequence, Repeated, joined, repeat_element
from seqkit.unique import distinct, uniqued
from seqkit.utils import take
from seqkit.version import __version__
