"""Single-pass grouping of an iterable by a key, in first-occurrence order."""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable, Hashable, Iterable
from typing import TYPE_CHECKING, Any

import cytoolz as cz

from ._errors import UnhashableKeyError
from ._results import Err, Ok, Result

if TYPE_CHECKING:
    from ._groups import Groups

logger = logging.getLogger(__name__)

type IntoKey[T, K] = Callable[[T], K] | Hashable | list[Any] | None
"""A key function, a member (or list of members) to look up, or `None` for identity."""


def into_key[T, K](on: IntoKey[T, K]) -> Callable[[T], K]:
    """Turn any accepted key argument into a key function.

    - `None` is the identity: each element is its own key.
    - A callable is used as is.
    - A list of members builds a tuple key, one item per member.
    - Any other value is a single member lookup (`element[on]`).

    Example:
    ```python
    >>> from keygroup._grouping import into_key
    >>> into_key(None)("a")
    'a'
    >>> into_key(str.upper)("a")
    'A'
    >>> into_key(["x", "y"])({"x": 1, "y": 2, "z": 3})
    (1, 2)
    >>> into_key(0)("abc")
    'a'

    ```
    """
    if on is None:
        return cz.functoolz.identity
    if callable(on):
        return on
    if isinstance(on, list):
        members: tuple[Any, ...] = tuple(on)
        return lambda element: tuple(element[m] for m in members)  # type: ignore[index,return-value]
    return operator.itemgetter(on)


def checked_key[T, K](key: Callable[[T], K]) -> Callable[[T], K]:
    def _key(element: T) -> K:
        k = key(element)
        try:
            hash(k)
        except TypeError as exc:
            raise UnhashableKeyError(k, element) from exc
        return k

    return _key


def group[T, K](data: Iterable[T], on: IntoKey[T, K] = None) -> Groups[K, T]:
    """Group elements of an iterable by key, preserving first-occurrence order.

    The iterable is consumed exactly once, left to right.
    Keys appear in the order they are first produced, and each group keeps its elements in input order.

    Keys only need to be hashable, they are never sorted nor compared for ordering.

    Failures raised by the key function or by the iterable itself propagate unchanged, and no partial result is returned.

    Args:
        data (Iterable[T]): Elements to group.
        on (IntoKey[T, K]): Key function, member(s) to look up, or `None` to group equal elements together.

    Returns:
        Groups[K, T]: A fresh mapping of each key to the list of its elements.

    Raises:
        UnhashableKeyError: If a produced key cannot be used as a mapping key.

    Example:
    ```python
    >>> import keygroup as kg
    >>> kg.group(["A", "b", "B", "a"], str.casefold)
    {'a': ['A', 'a'], 'b': ['b', 'B']}
    >>> kg.group(["John", "Paul", "George", "Ringo"], len)
    {4: ['John', 'Paul'], 6: ['George'], 5: ['Ringo']}
    >>> kg.group([3, 1, 3, 2, 1])
    {3: [3, 3], 1: [1, 1], 2: [2]}
    >>> kg.group([])
    {}

    ```
    Non-callable keys imply grouping on a member.
    ```python
    >>> data = [
    ...     {"name": "Alice", "gender": "F"},
    ...     {"name": "Bob", "gender": "M"},
    ...     {"name": "Charlie", "gender": "M"},
    ... ]
    >>> kg.group(data, "gender").map_members(lambda d: d["name"])
    {'F': ['Alice'], 'M': ['Bob', 'Charlie']}

    ```
    """
    from ._groups import Groups

    key = into_key(on)
    groups = cz.itertoolz.groupby(checked_key(key), data)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "grouped %d elements into %d groups",
            sum(map(len, groups.values())),
            len(groups),
        )
    return Groups(groups, key)


def try_group[T, K](
    data: Iterable[T], on: IntoKey[T, K] = None
) -> Result[Groups[K, T], Exception]:
    """Like `group`, but return failures as an `Err` instead of raising them.

    Example:
    ```python
    >>> import keygroup as kg
    >>> kg.try_group([1, 2, 3], lambda x: x % 2)
    Ok({1: [1, 3], 0: [2]})
    >>> kg.try_group(["a", "b"], {"a": 1}.__getitem__)
    Err(KeyError('b'))

    ```
    """
    try:
        return Ok(group(data, on))
    except Exception as exc:  # noqa: BLE001
        logger.debug("grouping failed: %r", exc)
        return Err(exc)
