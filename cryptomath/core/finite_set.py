"""
FiniteSet — конечное упорядоченное множество без повторов

Носитель всех структур движка. Элементы хранятся отсортированными по их
естественному порядку, поэтому:
- итерация детерминирована и воспроизводима (ascending order)
- любой поиск "первого подходящего элемента" (генератор, единица)
  даёт один и тот же результат независимо от порядка ввода
- множества множеств сами упорядочены (лексикографически)

Экземпляр неизменяем: все операции возвращают новое множество.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Элементы hashable и попарно сравнимы (иначе TypeError при построении)
2. Нет дубликатов (равенство по значению)
3. Булеан строится только для |A| <= max_power_set_exponent
"""

import sys
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Final, Iterable, Iterator, Optional

from cryptomath.core.errors import ArithmeticOverflowError


# =============================================================================
# LIMITS
# =============================================================================

# Разрядность целого хоста (size_t-эквивалент): 63 бита на 64-битной платформе
HOST_INT_BITS: Final[int] = sys.maxsize.bit_length()


@dataclass(frozen=True)
class CardinalityLimits:
    """Ограничения на перечисление булеана."""

    max_power_set_exponent: int = HOST_INT_BITS


def check_power_set_exponent(n: int, limits: Optional[CardinalityLimits] = None) -> None:
    """
    Проверка, что 2^n представимо в целом хоста.

    Raises:
        ArithmeticOverflowError: если n > limits.max_power_set_exponent
    """
    limits = limits or CardinalityLimits()
    if n > limits.max_power_set_exponent:
        raise ArithmeticOverflowError(
            f"Power set exponent {n} exceeds limit {limits.max_power_set_exponent} "
            f"(2^{n} is not representable)"
        )


# =============================================================================
# FINITE SET
# =============================================================================


@total_ordering
class FiniteSet:
    """
    Неизменяемое конечное множество с детерминированным порядком.

    Сравнение < — лексикографический порядок по отсортированным элементам
    (нужен для упорядочивания множеств множеств). Отношение включения
    проверяется методами is_subset_of / is_proper_subset_of.

    Examples:
        >>> FiniteSet([3, 1, 2, 1])
        FiniteSet([1, 2, 3])
        >>> FiniteSet([1, 2]).union(FiniteSet([2, 3]))
        FiniteSet([1, 2, 3])
    """

    __slots__ = ("_items", "_members")

    def __init__(self, elements: Iterable[Any] = ()):
        members = frozenset(elements)
        self._members = members
        self._items = tuple(sorted(members))

    # -------------------------------------------------------------------------
    # Доступ к элементам
    # -------------------------------------------------------------------------

    def contains(self, element: Any) -> bool:
        try:
            return element in self._members
        except TypeError:
            # unhashable не может быть элементом
            return False

    def __contains__(self, element: Any) -> bool:
        return self.contains(element)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    @property
    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def elements(self) -> tuple[Any, ...]:
        """Элементы в порядке итерации."""
        return self._items

    def first(self) -> Any:
        """Наименьший элемент (первый в порядке итерации)."""
        if not self._items:
            raise IndexError("first() of an empty FiniteSet")
        return self._items[0]

    def with_element(self, element: Any) -> "FiniteSet":
        return FiniteSet(self._members | {element})

    def without_element(self, element: Any) -> "FiniteSet":
        return FiniteSet(self._members - {element})

    # -------------------------------------------------------------------------
    # Операции над множествами
    # -------------------------------------------------------------------------

    def union(self, other: "FiniteSet") -> "FiniteSet":
        """A ∪ B"""
        return FiniteSet(self._members | other._members)

    def intersection(self, other: "FiniteSet") -> "FiniteSet":
        """A ∩ B"""
        return FiniteSet(self._members & other._members)

    def difference(self, other: "FiniteSet") -> "FiniteSet":
        """A \\ B"""
        return FiniteSet(self._members - other._members)

    def symmetric_difference(self, other: "FiniteSet") -> "FiniteSet":
        """A Δ B = (A \\ B) ∪ (B \\ A)"""
        return FiniteSet(self._members ^ other._members)

    def complement(self, universal: "FiniteSet") -> "FiniteSet":
        """U \\ A"""
        return universal.difference(self)

    def is_subset_of(self, other: "FiniteSet") -> bool:
        """A ⊆ B"""
        return self._members <= other._members

    def is_proper_subset_of(self, other: "FiniteSet") -> bool:
        """A ⊂ B"""
        return self.is_subset_of(other) and len(self) < len(other)

    def is_disjoint(self, other: "FiniteSet") -> bool:
        return self._members.isdisjoint(other._members)

    __or__ = union
    __and__ = intersection
    __sub__ = difference
    __xor__ = symmetric_difference

    # -------------------------------------------------------------------------
    # Сравнение и хеширование
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FiniteSet):
            return NotImplemented
        return self._members == other._members

    def __lt__(self, other: "FiniteSet") -> bool:
        if not isinstance(other, FiniteSet):
            return NotImplemented
        return self._items < other._items

    def __hash__(self) -> int:
        return hash(self._members)

    def __repr__(self) -> str:
        return f"FiniteSet({list(self._items)!r})"

    def __str__(self) -> str:
        return "{" + ", ".join(str(x) for x in self._items) + "}"


# =============================================================================
# PRODUCTS
# =============================================================================


def cartesian_product(set_a: FiniteSet, set_b: FiniteSet) -> FiniteSet:
    """
    Декартово произведение A × B.

    Returns:
        FiniteSet пар (a, b), |A × B| = |A| · |B|

    Examples:
        >>> cartesian_product(FiniteSet([1, 2]), FiniteSet(["x"]))
        FiniteSet([(1, 'x'), (2, 'x')])
    """
    return FiniteSet((a, b) for a in set_a for b in set_b)


def power_set(s: FiniteSet, limits: Optional[CardinalityLimits] = None) -> FiniteSet:
    """
    Булеан P(A): все 2^|A| подмножеств.

    Подмножества перечисляются по битовой маске индекса: бит i маски
    включает i-й элемент в порядке итерации.

    Raises:
        ArithmeticOverflowError: если |A| превышает разрядность хоста

    Examples:
        >>> len(power_set(FiniteSet([1, 2, 3])))
        8
    """
    check_power_set_exponent(len(s), limits)

    items = s.elements()
    n = len(items)
    subsets = []
    for mask in range(1 << n):
        subsets.append(FiniteSet(items[i] for i in range(n) if mask & (1 << i)))
    return FiniteSet(subsets)


def as_finite_set(value: Any) -> FiniteSet:
    """Приведение произвольного iterable к FiniteSet (для pydantic before-валидаторов)."""
    if isinstance(value, FiniteSet):
        return value
    return FiniteSet(value)
