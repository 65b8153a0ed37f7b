from __future__ import annotations

from typing import Any


class UnhashableKeyError(TypeError):
    """Raised when a key function produces a value that cannot key a mapping.

    Args:
        key (Any): The offending key.
        element (Any): The element the key was computed from.
    """

    def __init__(self, key: Any, element: Any) -> None:
        self.key = key
        self.element = element
        super().__init__(
            f"unhashable key {key!r} of type {type(key).__name__!r} "
            f"produced for element {element!r}"
        )
