from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, overload

import cytoolz as cz
import more_itertools as mit

from ._core import CommonBase, get_config
from ._grouping import IntoKey, group, try_group

if TYPE_CHECKING:
    from ._groups import Groups
    from ._results import Result


def convert_data[T](data: Iterable[T] | T, *more_data: T) -> Iterable[T]:
    return data if cz.itertoolz.isiterable(data) else (data, *more_data)  # type: ignore[return-value]


class Iter[T](CommonBase[Iterator[T]], Iterator[T]):
    """A lazy, single-use wrapper around an `Iterator`, with chainable methods.

    - To instantiate from any `Iterable` (like a list or set), simply pass it to the standard constructor.
    - To instantiate from unpacked values, use the `from_` static method.

    Once exhausted, an `Iter` cannot be reused or reset.

    Every terminal grouping method (`group_by`, `count_by`, `reduce_by`, `frequencies`)
    returns its keys in first-occurrence order.
    """

    __slots__ = ()

    _inner: Iterator[T]

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = iter(data)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    def __next__(self) -> T:
        return next(self._inner)

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Iter[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Iter[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Iter[U]:
        """Create an `Iter` from an `Iterable`, or from unpacked values.

        ```python
        >>> import keygroup as kg
        >>> kg.Iter.from_(1, 2, 3).collect()
        [1, 2, 3]
        >>> kg.Iter.from_("ab").collect()
        ['a', 'b']

        ```
        """
        return Iter(convert_data(data, *more_data))

    def map[U](self, func: Callable[[T], U]) -> Iter[U]:
        """Apply a function to each element lazily.

        ```python
        >>> import keygroup as kg
        >>> kg.Iter([1, 2]).map(lambda x: x + 1).collect()
        [2, 3]

        ```
        """
        return Iter(map(func, self._inner))

    def filter(self, predicate: Callable[[T], bool]) -> Iter[T]:
        """Keep the elements satisfying predicate, lazily.

        ```python
        >>> import keygroup as kg
        >>> kg.Iter([1, 2, 3]).filter(lambda x: x > 1).collect()
        [2, 3]

        ```
        """
        return Iter(filter(predicate, self._inner))

    def collect[C](self, collector: Callable[[Iterable[T]], C] = list) -> C:  # type: ignore[assignment]
        """Consume the iterator into a collection, a `list` by default.

        ```python
        >>> import keygroup as kg
        >>> kg.Iter("aba").collect(tuple)
        ('a', 'b', 'a')

        ```
        """
        return collector(self._inner)

    def length(self) -> int:
        """Consume the iterator and return the number of elements.

        ```python
        >>> import keygroup as kg
        >>> kg.Iter(range(5)).length()
        5

        ```
        """
        return mit.ilen(self._inner)

    def group_by[K](self, on: IntoKey[T, K] = None) -> Groups[K, T]:
        """Group elements by key and return a `Groups` result.

        See `keygroup.group()` for the accepted keys and the failure behavior.

        Args:
            on (IntoKey[T, K]): Key function, member(s) to look up, or `None` for identity.

        Returns:
            Groups[K, T]: Groups of elements, in first-occurrence key order.

        Example:
        ```python
        >>> import keygroup as kg
        >>> names = ["Alice", "Bob", "Charlie", "Dan", "Edith", "Frank"]
        >>> kg.Iter(names).group_by(len)
        {5: ['Alice', 'Edith', 'Frank'], 3: ['Bob', 'Dan'], 7: ['Charlie']}
        >>>
        >>> iseven = lambda x: x % 2 == 0
        >>> kg.Iter([1, 2, 3, 4, 5, 6, 7, 8]).group_by(iseven)
        {False: [1, 3, 5, 7], True: [2, 4, 6, 8]}

        ```
        """
        return self.into(lambda it: group(it._inner, on))

    def try_group_by[K](
        self, on: IntoKey[T, K] = None
    ) -> Result[Groups[K, T], Exception]:
        """Group elements by key, returning failures as an `Err`.

        ```python
        >>> import keygroup as kg
        >>> kg.Iter([{"a": 1}, {"b": 2}]).try_group_by("a").is_err()
        True

        ```
        """
        return self.into(lambda it: try_group(it._inner, on))

    def count_by[K](self, key: Callable[[T], K]) -> dict[K, int]:
        """Count elements of a collection by a key function.

        ```python
        >>> import keygroup as kg
        >>> kg.Iter(["cat", "mouse", "dog"]).count_by(len)
        {3: 2, 5: 1}

        ```
        """
        return cz.recipes.countby(key, self._inner)

    def reduce_by[K](
        self,
        key: Callable[[T], K],
        binop: Callable[[T, T], T],
    ) -> dict[K, T]:
        """Perform a simultaneous groupby and reduction.

        Unlike `group_by(...).aggregate(...)`, the intermediate groups are never built.

        ```python
        >>> import keygroup as kg
        >>> from operator import add, mul
        >>> kg.Iter([1, 2, 3, 4, 5]).reduce_by(lambda x: x % 2 == 0, add)
        {False: 9, True: 6}
        >>> kg.Iter([1, 2, 3, 4, 5]).reduce_by(lambda x: x % 2 == 0, mul)
        {False: 15, True: 8}

        ```
        """
        return cz.itertoolz.reduceby(key, binop, self._inner)

    def frequencies(self) -> dict[T, int]:
        """Find number of occurrences of each value in the iterable.

        ```python
        >>> import keygroup as kg
        >>> kg.Iter(["cat", "cat", "ox", "pig", "pig", "cat"]).frequencies()
        {'cat': 3, 'ox': 1, 'pig': 2}

        ```
        """
        return cz.itertoolz.frequencies(self._inner)
