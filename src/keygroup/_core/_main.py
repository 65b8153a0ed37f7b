from __future__ import annotations

from abc import ABC
from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Hand the instance to `func` and return whatever it returns.

        `groups.into(f)` reads left to right where `f(groups)` would not, so a chain can end on a custom reduction.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function for conversion.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> import keygroup as kg
        >>> def largest_key(groups: kg.Groups[int, str]) -> int:
        ...     return max(groups.sizes().items(), key=lambda kv: kv[1])[0]
        >>>
        >>> kg.group(["John", "Paul", "George", "Ringo"], len).into(largest_key)
        4

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Call `func` on the instance for its side effects, then return the instance unchanged.

        Args:
            func (Callable[Concatenate[Self, P], object]): Function to apply to the instance for side effects.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            Self: The instance itself for chaining.

        Example:
        ```python
        >>> import keygroup as kg
        >>> kg.group("abca").inspect(print).sizes()
        {'a': ['a', 'a'], 'b': ['b'], 'c': ['c']}
        {'a': 2, 'b': 1, 'c': 1}

        ```
        """
        func(self, *args, **kwargs)
        return self


class CommonBase[T](ABC, Pipeable):
    """Holds the wrapped data of `Groups` and `Iter` in a single slot.

    Args:
        data (T): The wrapped data.
    """

    _inner: T

    __slots__ = ("_inner",)

    def __init__(self, data: T) -> None:
        self._inner = data

    def inner(self) -> T:
        """Return the wrapped data, ending the chain."""
        return self._inner
