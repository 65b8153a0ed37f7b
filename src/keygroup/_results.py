from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Never, TypeIs


class ResultUnwrapError(RuntimeError): ...


class Result[T, E](ABC):
    """Outcome of a fallible operation: either `Ok(value)` or `Err(error)`."""

    __slots__ = ()

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """Returns True if the result is Ok."""
        ...

    @abstractmethod
    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """Returns True if the result is Err."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained Ok value, or raises ResultUnwrapError if the result is Err."""
        ...

    @abstractmethod
    def unwrap_err(self) -> E:
        """Returns the contained Err value, or raises ResultUnwrapError if the result is Ok."""
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained Ok value, or raises ResultUnwrapError with a custom message if the result is Err.

        Args:
            msg: The message to display if the result is Err.

        Returns:
            The contained Ok value.

        Raises:
            ResultUnwrapError: If the result is Err, with the provided message and error.
        """
        if self.is_ok():
            return self.unwrap()
        raise ResultUnwrapError(f"{msg}: {self.unwrap_err()!r}")

    def unwrap_or(self, default: T) -> T:
        """Returns the contained Ok value or a provided default.

        Args:
            default: The value to return if the result is Err.

        Returns:
            The contained Ok value or the default.
        """
        return self.unwrap() if self.is_ok() else default

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """Maps a `Result[T, E]` to `Result[U, E]` by applying a function to a contained Ok value.

        Err values are passed through untouched.

        Example:
        ```python
        >>> import keygroup as kg
        >>> kg.try_group("aab").map(len)
        Ok(2)
        >>> kg.try_group([[1], [2]]).map(len).is_err()
        True

        ```
        """
        if self.is_ok():
            return Ok(f(self.unwrap()))
        return Err(self.unwrap_err())


@dataclass(slots=True)
class Ok[T, E](Result[T, E]):
    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return True

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Never:
        msg = f"called `unwrap_err` on Ok({self.value!r})"
        raise ResultUnwrapError(msg)


@dataclass(slots=True)
class Err[T, E](Result[T, E]):
    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return False

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        msg = f"called `unwrap` on Err({self.error!r})"
        raise ResultUnwrapError(msg)

    def unwrap_err(self) -> E:
        return self.error
