from collections.abc import Iterable, Mapping
from itertools import islice
from pprint import pformat
from typing import Any


def dict_repr(v: Mapping[Any, Any], max_items: int, depth: int, width: int) -> str:
    """Pretty print at most `max_items` entries of `v`, keeping its key order."""
    shown = dict(islice(v.items(), max_items))
    text = pformat(shown, depth=depth, width=width, compact=True, sort_dicts=False)
    return f"{text}..." if len(v) > max_items else text


def iter_repr(v: Iterable[Any], max_items: int) -> str:
    if not isinstance(v, list | tuple):
        return f"<{type(v).__name__}>"
    head = ", ".join(map(repr, v[:max_items]))
    return f"{head}, ..." if len(v) > max_items else head
