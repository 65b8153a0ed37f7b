from ._core import Config, Pipeable, get_config, set_config
from ._errors import UnhashableKeyError
from ._grouping import group, try_group
from ._groups import Group, Groups
from ._iter import Iter
from ._results import Err, Ok, Result, ResultUnwrapError

__all__ = [
    "Config",
    "Err",
    "Group",
    "Groups",
    "Iter",
    "Ok",
    "Pipeable",
    "Result",
    "ResultUnwrapError",
    "UnhashableKeyError",
    "get_config",
    "group",
    "set_config",
    "try_group",
]
