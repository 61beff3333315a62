"""
Cardinality — мощность конечных множеств и теорема Кантора

Все множества движка конечны, поэтому равномощность сводится к
равенству размеров. Мощность булеана 2^n защищена от переполнения
разрядности хоста.
"""

from enum import Enum
from typing import Any, Callable, Optional

from cryptomath.core.errors import InconsistentStructureError
from cryptomath.core.finite_set import (
    CardinalityLimits,
    FiniteSet,
    check_power_set_exponent,
    power_set,
)


class CardinalityType(str, Enum):
    """Тип мощности"""

    FINITE = "FINITE"
    COUNTABLE = "COUNTABLE"
    UNCOUNTABLE = "UNCOUNTABLE"


def cardinality(s: FiniteSet) -> int:
    return len(s)


def cardinality_type(s: FiniteSet) -> CardinalityType:
    """Все носители движка перечислимы в памяти — тип всегда FINITE."""
    return CardinalityType.FINITE


def is_finite(s: FiniteSet) -> bool:
    return cardinality_type(s) == CardinalityType.FINITE


def are_equinumerous(set_a: FiniteSet, set_b: FiniteSet) -> bool:
    """
    |A| = |B|.

    Для конечных множеств биекция существует тогда и только тогда,
    когда размеры равны.
    """
    return len(set_a) == len(set_b)


def cardinality_le(set_a: FiniteSet, set_b: FiniteSet) -> bool:
    """|A| ≤ |B| (существует инъекция A → B)"""
    return len(set_a) <= len(set_b)


def cardinality_lt(set_a: FiniteSet, set_b: FiniteSet) -> bool:
    """|A| < |B|"""
    return len(set_a) < len(set_b)


def cartesian_product_cardinality(set_a: FiniteSet, set_b: FiniteSet) -> int:
    """|A × B| = |A| · |B|"""
    return len(set_a) * len(set_b)


def power_set_cardinality(s: FiniteSet, limits: Optional[CardinalityLimits] = None) -> int:
    """
    |P(A)| = 2^|A|.

    Raises:
        ArithmeticOverflowError: если |A| превышает разрядность хоста

    Examples:
        >>> power_set_cardinality(FiniteSet([1, 2, 3]))
        8
    """
    n = len(s)
    check_power_set_exponent(n, limits)
    return 1 << n


def cantor_theorem(s: FiniteSet, limits: Optional[CardinalityLimits] = None) -> FiniteSet:
    """
    Теорема Кантора: |P(A)| > |A|.

    Строит булеан и подтверждает строгое неравенство мощностей.

    Returns:
        P(A)
    """
    result = power_set(s, limits)
    if len(result) <= len(s):
        raise InconsistentStructureError(
            f"Cantor's theorem violated: |P(A)|={len(result)} <= |A|={len(s)}"
        )
    return result


def cantor_diagonal_set(s: FiniteSet, f: Callable[[Any], FiniteSet]) -> FiniteSet:
    """
    Диагональное множество D = {a ∈ A | a ∉ f(a)} для f: A → P(A).

    D не совпадает ни с одним f(a): если D = f(a), то a ∈ D ⇔ a ∉ f(a) = D.
    Поэтому f не сюръективно, что и доказывает |P(A)| > |A|.

    Examples:
        >>> A = FiniteSet([1, 2])
        >>> cantor_diagonal_set(A, lambda a: FiniteSet([a]))
        FiniteSet([])
    """
    return FiniteSet(a for a in s if not f(a).contains(a))
