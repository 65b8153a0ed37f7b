from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from functools import partial
from typing import TYPE_CHECKING, NamedTuple

import cytoolz as cz

from ._core import CommonBase, get_config
from ._grouping import checked_key

if TYPE_CHECKING:
    from ._iter import Iter


class Group[K, V](NamedTuple):
    """Represents a grouping of values by a common key.

    See `Groups.iter_groups()` for details.
    """

    key: K
    """The common key for the group."""
    values: list[V]
    """The values associated with the key, in input order."""

    def __repr__(self) -> str:
        return f"({self.key!r}, {self.values!r})"


def _concat_lists[T](parts: Iterable[list[T]]) -> list[T]:
    return list(cz.itertoolz.concat(parts))


class Groups[K, T](CommonBase[dict[K, list[T]]], Mapping[K, list[T]]):
    """Read-only mapping of keys to the ordered list of elements sharing that key.

    Keys are kept in first-occurrence order. Instances are built by `group()` or `Iter.group_by()`,
    and remember the key function used, so that more elements can be grouped the same way with `extend()`.

    No method mutates the instance: each one returns new data, and the group lists
    handed out (by indexing, `inner()` or derived `Groups`) are copies.
    """

    __slots__ = ("_key",)

    _inner: dict[K, list[T]]
    _key: Callable[[T], K] | None

    def __init__(
        self, data: dict[K, list[T]], key: Callable[[T], K] | None
    ) -> None:
        self._inner = data
        self._key = key

    def __repr__(self) -> str:
        return get_config().dict_repr(self._inner)

    def __iter__(self) -> Iterator[K]:
        return iter(self._inner)

    def __len__(self) -> int:
        return len(self._inner)

    def __getitem__(self, key: K) -> list[T]:
        return list(self._inner[key])

    def _new(
        self, func: Callable[[dict[K, list[T]]], dict[K, list[T]]]
    ) -> Groups[K, T]:
        return Groups(cz.dicttoolz.valmap(list, func(self._inner)), self._key)

    def inner(self) -> dict[K, list[T]]:
        """Get a copy of the underlying dict, with copied group lists.

        This is a terminal operation that ends the chain.

        ```python
        >>> import keygroup as kg
        >>> groups = kg.group("aab")
        >>> groups.inner()["a"].append("z")
        >>> groups
        {'a': ['a', 'a'], 'b': ['b']}

        ```
        """
        return cz.dicttoolz.valmap(list, self._inner)

    def eq(self, other: Mapping[K, list[T]]) -> bool:
        """Check if two mappings hold the same keys, in the same order, with the same groups.

        Example:
        ```python
        >>> import keygroup as kg
        >>> kg.group("abab").eq(kg.group("aabb"))
        True
        >>> kg.group("abab").eq(kg.group("baba"))
        False

        ```
        """
        return list(self._inner.items()) == list(other.items())

    def sizes(self) -> dict[K, int]:
        """Return the number of elements of each group.

        ```python
        >>> import keygroup as kg
        >>> kg.group(["cat", "mouse", "dog"], len).sizes()
        {3: 2, 5: 1}

        ```
        """
        return cz.dicttoolz.valmap(len, self._inner)

    def aggregate[U](self, func: Callable[[list[T]], U]) -> dict[K, U]:
        """Reduce each group to a single value.

        Args:
            func (Callable[[list[T]], U]): Function applied to each group list.

        Returns:
            dict[K, U]: Aggregated values, in key order.

        ```python
        >>> import keygroup as kg
        >>> kg.group([1, 2, 3, 4, 5], lambda x: x % 2 == 0).aggregate(sum)
        {False: 9, True: 6}

        ```
        """
        return cz.dicttoolz.valmap(cz.functoolz.compose(func, list), self._inner)

    def map_members[U](self, func: Callable[[T], U]) -> Groups[K, U]:
        """Transform every element, keeping keys and positions.

        The resulting `Groups` forgets the key function: its elements are not of the
        original type anymore, so `extend()` raises `TypeError` on it.

        ```python
        >>> import keygroup as kg
        >>> kg.group(["Ann", "bob", "Al"], lambda s: s[0].lower()).map_members(str.upper)
        {'a': ['ANN', 'AL'], 'b': ['BOB']}

        ```
        """

        def _map(values: list[T]) -> list[U]:
            return [func(v) for v in values]

        return Groups(cz.dicttoolz.valmap(_map, self._inner), None)

    def filter_keys(self, predicate: Callable[[K], bool]) -> Groups[K, T]:
        """Keep the groups whose key satisfies predicate.

        ```python
        >>> import keygroup as kg
        >>> kg.group(range(10), lambda x: x % 3).filter_keys(bool)
        {1: [1, 4, 7], 2: [2, 5, 8]}

        ```
        """
        return self._new(partial(cz.dicttoolz.keyfilter, predicate))

    def filter_groups(self, predicate: Callable[[list[T]], bool]) -> Groups[K, T]:
        """Keep the groups whose list of elements satisfies predicate.

        ```python
        >>> import keygroup as kg
        >>> kg.group("mississippi").filter_groups(lambda g: len(g) > 2)
        {'i': ['i', 'i', 'i', 'i'], 's': ['s', 's', 's', 's']}

        ```
        """
        return self._new(partial(cz.dicttoolz.valfilter, predicate))

    def extend(self, data: Iterable[T]) -> Groups[K, T]:
        """Group more elements with the same key function.

        Elements are appended to their existing group, and new keys come after the existing ones.

        The instance itself is left untouched, even when grouping `data` fails.

        Raises:
            TypeError: If the instance has no key function, as after `map_members()`.

        Args:
            data (Iterable[T]): Additional elements.

        Returns:
            Groups[K, T]: A new `Groups` holding the elements of both.

        ```python
        >>> import keygroup as kg
        >>> first = kg.group(["apple", "avocado", "banana"], lambda s: s[0])
        >>> first.extend(["cherry", "apricot"])
        {'a': ['apple', 'avocado', 'apricot'], 'b': ['banana'], 'c': ['cherry']}
        >>> first
        {'a': ['apple', 'avocado'], 'b': ['banana']}

        ```
        """
        if self._key is None:
            msg = "cannot extend groups without a key function, see `map_members()`"
            raise TypeError(msg)
        more = cz.itertoolz.groupby(checked_key(self._key), data)
        return Groups(
            cz.dicttoolz.merge_with(_concat_lists, self._inner, more), self._key
        )

    def flatten(self) -> Iter[T]:
        """Iterate over all elements, group after group.

        ```python
        >>> import keygroup as kg
        >>> kg.group([1, 2, 3, 4], lambda x: x % 2).flatten().collect()
        [1, 3, 2, 4]

        ```
        """
        from ._iter import Iter

        return Iter(cz.itertoolz.concat(self._inner.values()))

    def iter_groups(self) -> Iter[Group[K, T]]:
        """Iterate over `(key, values)` pairs as `Group` named tuples.

        ```python
        >>> import keygroup as kg
        >>> kg.group("aba").iter_groups().collect()
        [('a', ['a', 'a']), ('b', ['b'])]

        ```
        """
        from ._iter import Iter

        return Iter(Group(k, list(v)) for k, v in self._inner.items())
