# flake8: noqa
from .set import Set
from .scalars import ElementTypeError, is_scalar
from .sequences import equal
from .checking import (
    element_checking_enabled,
    pause_element_checking,
    continue_element_checking,
    stop_element_checking,
    no_element_checking,
)
from importlib.metadata import metadata

meta = metadata("scalarset")
__version__ = meta["Version"]
__author__ = meta.get("Author", "")
__license__ = meta["License"]
__email__ = meta["Author-email"]
__program_name__ = meta["Name"]


__all__ = [
    "Set",
    "ElementTypeError",
    "is_scalar",
    "equal",
    "element_checking_enabled",
    "pause_element_checking",
    "continue_element_checking",
    "stop_element_checking",
    "no_element_checking",
]
