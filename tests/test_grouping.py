"""Tests for the group function."""

from collections.abc import Iterator

import pytest

import keygroup as kg


def test_case_insensitive_grouping() -> None:
    """Keys follow first occurrence, groups keep input order."""
    result = kg.group(["A", "b", "B", "a"], str.casefold)
    assert result.inner() == {"a": ["A", "a"], "b": ["b", "B"]}
    assert list(result) == ["a", "b"]


def test_group_by_length() -> None:
    """Keys are not sorted."""
    result = kg.group(["John", "Paul", "George", "Ringo"], len)
    assert list(result.items()) == [
        (4, ["John", "Paul"]),
        (6, ["George"]),
        (5, ["Ringo"]),
    ]


def test_empty_input() -> None:
    """Grouping nothing yields an empty mapping."""
    assert kg.group([]).inner() == {}
    assert len(kg.group(iter(()), len)) == 0


def test_identity_is_default_key() -> None:
    """Equal elements share a group when no key is given."""
    assert kg.group([2, 1, 2, 3, 1]).inner() == {2: [2, 2], 1: [1, 1], 3: [3]}


def test_equal_keys_of_different_types() -> None:
    """Keys comparing equal land in the same group, under the first key seen."""
    result = kg.group([1, 1.0, True])
    assert list(result.items()) == [(1, [1, 1.0, True])]
    assert type(next(iter(result))) is int


def test_member_key() -> None:
    """A non-callable key looks up a member of each element."""
    rows = [("a", 1), ("b", 2), ("a", 3)]
    assert kg.group(rows, 0).inner() == {"a": [("a", 1), ("a", 3)], "b": [("b", 2)]}


def test_member_list_key() -> None:
    """A list of members builds a tuple key."""
    rows = [
        {"city": "Paris", "year": 2020, "v": 1},
        {"city": "Rome", "year": 2020, "v": 2},
        {"city": "Paris", "year": 2020, "v": 3},
    ]
    result = kg.group(rows, ["city", "year"])
    assert list(result) == [("Paris", 2020), ("Rome", 2020)]
    assert [r["v"] for r in result["Paris", 2020]] == [1, 3]


def test_completeness_and_order() -> None:
    """Every element lands in exactly one group, keeping relative order."""
    data = [7, 3, 8, 1, 4, 9, 2, 6, 5, 0]
    result = kg.group(data, lambda x: x % 3)
    assert sum(result.sizes().values()) == len(data)
    assert sorted(result.flatten().collect()) == sorted(data)
    for key, values in result.items():
        assert values == [x for x in data if x % 3 == key]


def test_determinism() -> None:
    """Same input, same output."""
    data = ["x", "yy", "z", "ww", "vvv"]
    assert kg.group(data, len).eq(kg.group(data, len))


def test_consumes_iterator_once() -> None:
    """A lazy input is read once, and the key runs once per element, in order."""
    seen: list[int] = []

    def key(x: int) -> int:
        seen.append(x)
        return x % 2

    def gen() -> Iterator[int]:
        yield from range(5)

    result = kg.group(gen(), key)
    assert seen == [0, 1, 2, 3, 4]
    assert result.inner() == {0: [0, 2, 4], 1: [1, 3]}


def test_key_failure_propagates() -> None:
    """A failing key aborts the whole grouping with the same error."""
    calls: list[int] = []

    def key(x: int) -> int:
        calls.append(x)
        if x == 3:
            msg = "bad element"
            raise ValueError(msg)
        return x

    result = None
    with pytest.raises(ValueError, match="bad element"):
        result = kg.group([1, 2, 3, 4, 5], key)
    assert result is None
    assert calls == [1, 2, 3]


def test_key_type_error_is_not_wrapped() -> None:
    """A TypeError raised by the key itself is not mistaken for an unhashable key."""

    def key(x: object) -> int:
        return len(x)  # type: ignore[arg-type]

    with pytest.raises(TypeError) as info:
        kg.group(["ab", 3], key)
    assert not isinstance(info.value, kg.UnhashableKeyError)


def test_iteration_failure_propagates() -> None:
    """Errors raised while producing the input surface unchanged."""

    class UpstreamError(Exception): ...

    def gen() -> Iterator[int]:
        yield 1
        yield 2
        raise UpstreamError

    with pytest.raises(UpstreamError):
        kg.group(gen())


def test_unhashable_key() -> None:
    """An unhashable key raises a TypeError naming the key and its element."""
    with pytest.raises(kg.UnhashableKeyError) as info:
        kg.group([(1, 2), [3, 4]])
    assert isinstance(info.value, TypeError)
    assert info.value.key == [3, 4]
    assert info.value.element == [3, 4]
    assert isinstance(info.value.__cause__, TypeError)


def test_unhashable_tuple_key() -> None:
    """Tuples holding unhashable members are rejected too."""
    with pytest.raises(kg.UnhashableKeyError):
        kg.group([{"a": [1]}], ["a"])


def test_result_is_fresh() -> None:
    """The result holds no reference to the input, and hands out copies of its groups."""
    data = [1, 2, 1]
    result = kg.group(data)
    data.append(2)
    result[1].append(99)
    result.inner()[2].clear()
    assert data == [1, 2, 1, 2]
    assert result.inner() == {1: [1, 1], 2: [2]}


def test_try_group_ok() -> None:
    """Successful grouping is wrapped in Ok."""
    result = kg.try_group("abca")
    assert result.is_ok()
    assert result.unwrap().sizes() == {"a": 2, "b": 1, "c": 1}


def test_try_group_err() -> None:
    """Failures are returned, not raised."""
    result = kg.try_group([1, 0], lambda x: 1 // x)
    assert result.is_err()
    assert isinstance(result.unwrap_err(), ZeroDivisionError)
    assert isinstance(kg.try_group([[1]]).unwrap_err(), kg.UnhashableKeyError)
