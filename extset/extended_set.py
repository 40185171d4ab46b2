from __future__ import annotations

import logging
from typing import Any, Generic, Hashable, Iterable, TypeVar

import attr
import funcy as fn

from extset import errors


__all__ = ['ExtendedSet', 'empty', 'full', 'of', 'complement_of']


logger = logging.getLogger(__name__)

E = TypeVar('E', bound=Hashable)


def _reject_absent(value: Any, name: str) -> None:
    if value is None:
        logger.debug('rejected None for %s', name)
        raise errors.absent_argument_error(name)


def _to_items(elements: Iterable[E] | None, name: str) -> frozenset[E]:
    _reject_absent(elements, name)
    items = frozenset(elements)
    if fn.any(fn.isnone, items):
        logger.debug('rejected None element in %s', name)
        raise errors.absent_element_error(name)
    return items


def _check_items(instance, attribute, value) -> None:
    if None in value:
        raise errors.absent_element_error(attribute.name)


@attr.frozen
class ExtendedSet(Generic[E]):
    """Finite set or complement of a finite set.

    `items` holds the members of a finite set, or the excluded elements of a
    complementary one. Values are immutable and canonical: whenever `items`
    is empty the value is one of the two shared instances returned by
    `empty()` and `full()`, so `x is empty()` is a valid emptiness test.

    Build values with `of`, `complement_of` or `ExtendedSet.from_iterable`
    rather than calling the constructor.
    """
    items: frozenset[E] = attr.ib(converter=frozenset, validator=_check_items)
    complementary: bool = False

    @staticmethod
    def from_iterable(items: Iterable[E], complementary: bool = False
                      ) -> ExtendedSet[E]:
        return _canonical(_to_items(items, 'items'), complementary)

    # ================== Inspection ==========================

    @property
    def is_complementary(self) -> bool:
        return self.complementary

    @property
    def is_finite(self) -> bool:
        return not self.complementary

    @property
    def is_empty(self) -> bool:
        return not self.complementary and not self.items

    @property
    def is_full(self) -> bool:
        return self.complementary and not self.items

    @property
    def is_trivial(self) -> bool:
        """Empty or full."""
        return not self.items

    # ================== Membership ==========================

    def contains(self, element: E) -> bool:
        _reject_absent(element, 'element')
        return (element in self.items) ^ self.complementary

    def contains_all(self, elements: Iterable[E]) -> bool:
        elements = _to_items(elements, 'elements')
        if self.complementary:
            return self.items.isdisjoint(elements)
        return elements <= self.items

    def contains_any(self, elements: Iterable[E]) -> bool:
        """True if some element is a member.

        Mirrors `contains_all` for an empty input and returns True.
        """
        elements = _to_items(elements, 'elements')
        if not elements:
            return True
        if self.complementary:
            return not elements <= self.items
        return not self.items.isdisjoint(elements)

    def __contains__(self, element: E) -> bool:
        return self.contains(element)

    # ===================== Algebra ==========================

    def complement(self) -> ExtendedSet[E]:
        if not self.items:
            return _EMPTY if self.complementary else _FULL
        return attr.evolve(self, complementary=not self.complementary)

    def intersect(self, other: ExtendedSet[E]) -> ExtendedSet[E]:
        _check_operand(other)

        if not self.items:
            return other if self.complementary else self
        if not other.items:
            return self if other.complementary else other

        left, right = self.items, other.items
        if self.complementary and other.complementary:
            return _canonical(left | right, True)
        elif self.complementary:
            return _canonical(right - left, False)
        elif other.complementary:
            return _canonical(left - right, False)
        return _canonical(left & right, False)

    def union(self, other: ExtendedSet[E]) -> ExtendedSet[E]:
        _check_operand(other)

        if not self.items:
            return self if self.complementary else other
        if not other.items:
            return other if other.complementary else self

        left, right = self.items, other.items
        if self.complementary and other.complementary:
            return _canonical(left & right, True)
        elif self.complementary:
            return _canonical(left - right, True)
        elif other.complementary:
            return _canonical(right - left, True)
        return _canonical(left | right, False)

    def subtract(self, other: ExtendedSet[E]) -> ExtendedSet[E]:
        _check_operand(other)
        return self.intersect(other.complement())

    def symmetric_difference(self, other: ExtendedSet[E]) -> ExtendedSet[E]:
        _check_operand(other)
        # An element is in exactly one side iff its flags disagree.
        complementary = self.complementary ^ other.complementary
        return _canonical(self.items ^ other.items, complementary)

    def __invert__(self) -> ExtendedSet[E]:
        return self.complement()

    def __and__(self, other):
        if not isinstance(other, ExtendedSet):
            return NotImplemented
        return self.intersect(other)

    def __or__(self, other):
        if not isinstance(other, ExtendedSet):
            return NotImplemented
        return self.union(other)

    def __sub__(self, other):
        if not isinstance(other, ExtendedSet):
            return NotImplemented
        return self.subtract(other)

    def __xor__(self, other):
        if not isinstance(other, ExtendedSet):
            return NotImplemented
        return self.symmetric_difference(other)

    def __str__(self) -> str:
        body = ', '.join(sorted(map(repr, self.items)))
        return ('~{%s}' if self.complementary else '{%s}') % body


_EMPTY = ExtendedSet(frozenset(), False)
_FULL = ExtendedSet(frozenset(), True)


def _canonical(items: frozenset[E], complementary: bool) -> ExtendedSet[E]:
    if not items:
        return _FULL if complementary else _EMPTY
    return ExtendedSet(items, complementary)


def _check_operand(other: Any) -> None:
    _reject_absent(other, 'other')
    if not isinstance(other, ExtendedSet):
        logger.debug('rejected %r as operand', type(other))
        raise errors.not_an_extended_set_error('other', other)


def empty() -> ExtendedSet:
    return _EMPTY


def full() -> ExtendedSet:
    """Complement of the empty set."""
    return _FULL


def of(*items: E) -> ExtendedSet[E]:
    return ExtendedSet.from_iterable(items)


def complement_of(*items: E) -> ExtendedSet[E]:
    return ExtendedSet.from_iterable(items, complementary=True)
