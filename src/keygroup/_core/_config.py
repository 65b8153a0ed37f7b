from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from typing import Any

from ._format import dict_repr, iter_repr


@dataclass(slots=True, frozen=True)
class Config:
    """Display settings shared by all keygroup wrappers.

    Args:
        max_items (int): Maximum number of keys (or elements) shown in a repr.
        depth (int): Maximum nesting shown for grouped values.
        width (int): Line width used when pretty printing.
    """

    max_items: int = 20
    depth: int = 3
    width: int = 80

    def __post_init__(self) -> None:
        if self.max_items < 1:
            msg = f"max_items must be a positive integer, got {self.max_items}"
            raise ValueError(msg)
        if self.width < 1:
            msg = f"width must be a positive integer, got {self.width}"
            raise ValueError(msg)

    def dict_repr(self, v: Mapping[Any, Any]) -> str:
        return dict_repr(v, self.max_items, self.depth, self.width)

    def iter_repr(self, v: Iterable[Any]) -> str:
        return iter_repr(v, self.max_items)


_CONFIG = Config()


def get_config() -> Config:
    """Return the process-wide display configuration."""
    return _CONFIG


def set_config(**changes: Any) -> Config:
    """Replace the process-wide configuration with updated fields.

    Unknown field names raise `TypeError`, invalid values raise `ValueError`.

    Returns:
        Config: The previous configuration, so callers can restore it.

    Example:
    ```python
    >>> import keygroup as kg
    >>> previous = kg.set_config(max_items=2)
    >>> kg.group(range(5))
    {0: [0], 1: [1]}...
    >>> _ = kg.set_config(max_items=previous.max_items)

    ```
    """
    global _CONFIG  # noqa: PLW0603
    previous = _CONFIG
    _CONFIG = replace(previous, **changes)
    return previous
