import pytest

from seqkit.base import lazy
from seqkit.exceptions import NegativeCountError
from seqkit.repeat import FlattenSequence, Repeated, joined, repeat_element


class TestRepeated:
    def test_init(self) -> None:
        r = repeat_element("x", 3)

        assert isinstance(r, Repeated)
        assert len(r) == 3
        assert list(r) == ["x", "x", "x"]
        assert r.value == "x"

    def test_zero(self) -> None:
        r = repeat_element("x", 0)

        assert len(r) == 0
        assert list(r) == []

    def test_negative(self) -> None:
        with pytest.raises(NegativeCountError):
            repeat_element("x", -1)
        with pytest.raises(ValueError):
            Repeated("x", -5)

    def test_getitem(self) -> None:
        r = repeat_element(1, 4)

        assert r[0] == 1
        assert r[3] == 1
        assert r[-4] == 1
        assert r[1:3] == Repeated(1, 2)
        assert len(r[::2]) == 2
        with pytest.raises(IndexError):
            r[4]
        with pytest.raises(IndexError):
            r[-5]

    def test_sequence_methods(self) -> None:
        r = repeat_element("a", 2)

        assert "a" in r
        assert "b" not in r
        assert r.count("a") == 2
        assert r.index("a") == 0
        assert list(reversed(r)) == ["a", "a"]

    def test_eq(self) -> None:
        assert Repeated(1, 2) == Repeated(1, 2)
        assert Repeated(1, 2) != Repeated(1, 3)
        assert Repeated(1, 2) != Repeated(2, 2)
        assert Repeated(1, 0) == Repeated(2, 0)

    def test_value_not_copied(self) -> None:
        value = [1, 2]
        r = repeat_element(value, 3)

        assert all(element is value for element in r)


class TestFlattenSequence:
    def test_joined(self) -> None:
        s = joined([[1, 2], [], (3,), "ab"])

        assert isinstance(s, FlattenSequence)
        assert list(s) == [1, 2, 3, "a", "b"]

    def test_empty(self) -> None:
        assert list(joined([])) == []
        assert list(joined([[], []])) == []

    def test_is_lazy(self) -> None:
        assert not joined([[1], [2]]).is_lazy
        assert joined(lazy([[1], [2]])).is_lazy
        assert not FlattenSequence(lazy([[1]]), is_lazy=False).is_lazy

    def test_reiterable(self) -> None:
        s = joined([[1], [2]])

        assert list(s) == [1, 2]
        assert list(s) == [1, 2]
        assert s.is_reiterable

    def test_lazy(self) -> None:
        requested = []

        def inner(i: int) -> list[int]:
            requested.append(i)
            return [i, i]

        s = joined(map(inner, range(100)))
        assert s.take(3) == [0, 0, 1]
        assert requested == [0, 1]

    def test_repeat_then_flatten(self) -> None:
        assert list(joined(repeat_element([1, 2], 3))) == [1, 2, 1, 2, 1, 2]
        assert list(joined(repeat_element([1, 2], 0))) == []
