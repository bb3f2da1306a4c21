from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import numpy as np
import pytest

if TYPE_CHECKING:
    from numpy.random import Generator


class LinkedList:
    """A minimal singly linked list whose indices are nodes, not integers."""

    class Node:
        def __init__(self, value: int, next_node: LinkedList.Node | None) -> None:
            self.value = value
            self.next = next_node

    def __init__(self, *values: int) -> None:
        self.head: LinkedList.Node | None = None
        for value in reversed(values):
            self.head = LinkedList.Node(value, self.head)

    @property
    def start_index(self) -> LinkedList.Node | None:
        return self.head

    @property
    def end_index(self) -> None:
        return None

    @property
    def is_empty(self) -> bool:
        return self.head is None

    def index_after(self, index: LinkedList.Node) -> LinkedList.Node | None:
        return index.next

    def __getitem__(self, index: LinkedList.Node) -> int:
        return index.value


@pytest.fixture(scope="session")
def rng() -> Generator:
    return np.random.default_rng(seed=0)


@pytest.fixture
def linked_list() -> Callable[..., LinkedList]:
    return LinkedList
