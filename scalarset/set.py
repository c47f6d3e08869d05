import logging
from collections import abc
from collections.abc import Iterable, Iterator
from typing import Generic, Optional, TypeVar

import numpy

from .checking import element_checking_enabled
from .scalars import check_element, is_nan, is_scalar, kind_of

__all__ = ["Set"]

T = TypeVar("T", int, float, str)


def _equal(a, b) -> bool:
    # Elementwise comparisons, e.g. against numpy arrays, never match.
    result = a == b
    return isinstance(result, (bool, numpy.bool_)) and bool(result)


class Set(abc.MutableSet, Generic[T]):
    def __init__(self, *elements: T):
        """
        A Set is a collection of distinct scalar values (real numbers or
        strings) kept in insertion order.

        Membership is tested by a linear scan with ``==``, so a Set only
        relies on equality and ordering of its elements, not on hashing.

        Args:
          elements: The initial elements. Duplicates are dropped, keeping
            the first occurrence.

        Raises:
          ElementTypeError: if an element is not a scalar, or numbers and
            strings are mixed, while element checking is enabled.
        """

        self._elements: list = []
        self._kind: Optional[str] = None

        self.add(*elements)

    @classmethod
    def from_iterable(cls, iterable: Iterable[T]) -> "Set[T]":
        """Return a new set built from an iterable. A mapping contributes its keys."""

        if isinstance(iterable, abc.Mapping):
            iterable = iterable.keys()

        return cls(*iterable)

    # Used by the collections.abc.Set mixin methods.
    _from_iterable = from_iterable

    @classmethod
    def from_array(cls, array) -> "Set":
        """Return a new set holding the values of a numpy array of any shape."""

        return cls(*numpy.asarray(array).ravel().tolist())

    def _as_set(self, other: Iterable[T]) -> "Set[T]":
        if isinstance(other, Set):
            return other

        return type(self).from_iterable(other)

    def __contains__(self, obj: object) -> bool:
        return self.index(obj)[1]

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    def __repr__(self) -> str:
        return "{}({})".format(type(self).__name__, ", ".join(repr(e) for e in self._elements))

    def __str__(self) -> str:
        return "{" + ", ".join(repr(e) for e in self._elements) + "}"

    def size(self) -> int:
        """Return the number of elements in this set."""

        return len(self._elements)

    length = size
    cardinality = size

    def is_empty(self) -> bool:
        return len(self._elements) == 0

    def index(self, obj: object) -> tuple[int, bool]:
        """Return the position of obj in this set and whether it was found.

        The position is -1 when obj is not a member.
        """

        for i, element in enumerate(self._elements):
            if _equal(element, obj):
                return i, True

        return -1, False

    def contains(self, obj: object) -> bool:
        """Return True if obj is a member of this set."""

        return self.index(obj)[1]

    def not_contains(self, obj: object) -> bool:
        """Return True if obj is not a member of this set."""

        return not self.contains(obj)

    def is_disjoint(self, other: Iterable[T]) -> bool:
        """Return True if this set has no elements in common with other."""

        other = self._as_set(other)

        for element in self._elements:
            if element in other:
                return False

        return True

    def is_subset(self, other: Iterable[T]) -> bool:
        """Return True if every element of this set is in other."""

        other = self._as_set(other)

        for element in self._elements:
            if other.not_contains(element):
                return False

        return True

    def is_superset(self, other: Iterable[T]) -> bool:
        """Return True if every element of other is in this set."""

        for element in self._as_set(other):
            if self.not_contains(element):
                return False

        return True

    def copy(self) -> "Set[T]":
        """Return a copy of this set that shares no storage with it."""

        ret = type(self)()
        ret._elements = list(self._elements)
        ret._kind = self._kind

        return ret

    def add(self, *elements: T) -> None:
        """Add each element not already in this set."""

        if element_checking_enabled():
            kind = self._kind
            for element in elements:
                kind = check_element(element, kind)
            self._kind = kind

        for element in elements:
            if is_nan(element):
                logging.warning("Adding NaN to a Set, NaN never compares equal to itself "
                                "so it can neither be found nor deduplicated.")

            if self.not_contains(element):
                self._elements.append(element)
                if self._kind is None and is_scalar(element):
                    self._kind = kind_of(element)

    def remove(self, *elements: T) -> None:
        """Remove each element that is in this set, ignoring the others."""

        for element in elements:
            position, found = self.index(element)
            if found:
                del self._elements[position]

        if not self._elements:
            self._kind = None

    def discard(self, obj: T) -> None:
        """Remove obj from this set if it is present."""

        self.remove(obj)

    def clear(self) -> None:
        """Remove all elements from this set."""

        self._elements.clear()
        self._kind = None

    def union(self, *others: Iterable[T]) -> "Set[T]":
        """Return a new set with elements from this set and all others."""

        ret = self.copy()

        for other in others:
            ret.add(*self._as_set(other))

        return ret

    def __or__(self, other: abc.Set) -> "Set[T]":
        if not isinstance(other, abc.Set):
            return NotImplemented

        return self.union(other)

    def intersection(self, *others: Iterable[T]) -> "Set[T]":
        """Return a new set with elements common to this set
        and all others.
        """

        others = [self._as_set(other) for other in others]
        ret = type(self)()

        for element in self._elements:
            for other in others:
                if other.not_contains(element):
                    break
            else:
                ret.add(element)

        return ret

    def __and__(self, other: abc.Set) -> "Set[T]":
        if not isinstance(other, abc.Set):
            return NotImplemented

        return self.intersection(other)

    def difference(self, *others: Iterable[T]) -> "Set[T]":
        """Return a new set with elements from this set
        that are not in others.
        """

        others = [self._as_set(other) for other in others]
        ret = type(self)()

        for element in self._elements:
            for other in others:
                if other.contains(element):
                    break
            else:
                ret.add(element)

        return ret

    def __sub__(self, other: abc.Set) -> "Set[T]":
        if not isinstance(other, abc.Set):
            return NotImplemented

        return self.difference(other)

    def symmetric_difference(self, other: Iterable[T]) -> "Set[T]":
        """Return a new set with elements either in this set or other,
        but not both.
        """

        other = self._as_set(other)
        ret = type(self)()

        for element in self._elements:
            if other.not_contains(element):
                ret.add(element)

        for element in other:
            if self.not_contains(element):
                ret.add(element)

        return ret

    def __xor__(self, other: abc.Set) -> "Set[T]":
        if not isinstance(other, abc.Set):
            return NotImplemented

        return self.symmetric_difference(other)

    def sorted(self, reverse: bool = False) -> list:
        """Return the elements of this set in ascending order."""

        return sorted(self._elements, reverse=reverse)

    def to_array(self, dtype=None) -> numpy.ndarray:
        """Return the elements of this set, in insertion order, as a numpy array."""

        return numpy.array(self._elements, dtype=dtype)
