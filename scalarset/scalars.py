import numbers

import numpy

__all__ = ["ElementTypeError", "is_scalar", "is_nan", "kind_of", "check_element"]

NUMBER = "number"
STRING = "string"


class ElementTypeError(TypeError):
    """Raised when a value cannot be stored in a Set."""
    pass


def is_scalar(obj):
    """Return True if `obj` is a totally ordered scalar.

    Real numbers (bool and numpy integer/floating scalars included) and
    strings qualify. Complex numbers, containers and numpy arrays do not.
    """
    if isinstance(obj, (str, numpy.bool_)):
        return True
    return isinstance(obj, numbers.Real)


def is_nan(obj):
    return isinstance(obj, numbers.Real) and obj != obj


def kind_of(obj):
    if isinstance(obj, str):
        return STRING
    return NUMBER


def check_element(obj, kind=None):
    """Check that `obj` may be stored in a set holding elements of `kind`.

    Args:
        obj (object): The candidate element.
        kind (str, optional): The kind of the elements already stored,
            ``"number"`` or ``"string"``. None if the set is empty.

    Returns:
        str: The kind of `obj`.

    Raises:
        ElementTypeError: if `obj` is not a scalar or its kind differs from `kind`.

    """
    if not is_scalar(obj):
        raise ElementTypeError(
            "Set elements must be real numbers or strings, got '{}'.".format(type(obj).__name__))
    obj_kind = kind_of(obj)
    if kind is not None and obj_kind != kind:
        raise ElementTypeError(
            "Cannot add a {} to a set of {}s: {!r}".format(obj_kind, kind, obj))
    return obj_kind
