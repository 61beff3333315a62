"""
Element Order / Group Exponent

Порядок ord(a) — наименьшее n >= 1 с a^n = e. Вычисляется итерированным
умножением: текущее произведение начинается с a и домножается на a,
пока не станет равным e, но не более |G| шагов.

Если за |G| шагов единица не достигнута, конечная группа ведёт себя
противоречиво: element_order поднимает InconsistentStructureError,
try_element_order возвращает None.

Показатель exp(G) — НОК порядков всех элементов.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. ord(e) = 1
2. ord(a) делит |G| (следствие теоремы Лагранжа)
3. exp(G) делит |G|; для абелевой G: exp(G) = |G| ⇔ G циклическая
"""

import math
from functools import reduce
from typing import Any, Optional

from cryptomath.core.errors import InconsistentStructureError
from cryptomath.core.finite_set import FiniteSet
from cryptomath.structures.group import Group
from cryptomath.structures.laws import require_member


# =============================================================================
# ПОРЯДОК ЭЛЕМЕНТА
# =============================================================================


def try_element_order(group: Group, a: Any) -> Optional[int]:
    """
    ord(a), или None если e не достигнута за |G| шагов.

    Raises:
        DomainViolationError: если a вне группы
    """
    require_member(group.carrier, a)
    current = a
    for n in range(1, len(group) + 1):
        if current == group.identity:
            return n
        current = group.operation(current, a)
    return None


def element_order(group: Group, a: Any) -> int:
    """
    ord(a)

    Raises:
        DomainViolationError: если a вне группы
        InconsistentStructureError: если e не достигнута за |G| шагов

    Examples:
        >>> element_order(z5, 2)
        5
    """
    order = try_element_order(group, a)
    if order is None:
        raise InconsistentStructureError(
            f"Powers of {a!r} do not reach the identity within |G|={len(group)} steps"
        )
    return order


def is_finite_order(group: Group, a: Any) -> bool:
    return try_element_order(group, a) is not None


def has_order(group: Group, a: Any, n: int) -> bool:
    return try_element_order(group, a) == n


def satisfies_identity_power(group: Group, a: Any, n: int) -> bool:
    """a^n = e"""
    return group.power(a, n) == group.identity


def elements_of_order(group: Group, n: int) -> FiniteSet:
    """{a ∈ G | ord(a) = n}"""
    return FiniteSet(a for a in group.carrier if try_element_order(group, a) == n)


def order_map(group: Group) -> dict[Any, int]:
    """a ↦ ord(a) для всех элементов в порядке носителя."""
    return {a: element_order(group, a) for a in group.carrier}


# -----------------------------------------------------------------------------
# Свойства порядка
# -----------------------------------------------------------------------------


def order_equals_inverse_order(group: Group, a: Any) -> bool:
    """ord(a) = ord(a⁻¹)"""
    return element_order(group, a) == element_order(group, group.inverse(a))


def order_divides_power(group: Group, a: Any, n: int) -> bool:
    """
    a^n = e и ord(a) | n.

    Если a^n ≠ e, свойство неприменимо и результат False.
    """
    if not satisfies_identity_power(group, a, n):
        return False
    order = try_element_order(group, a)
    return order is not None and n % order == 0


def order_of_power(group: Group, a: Any, k: int) -> bool:
    """ord(a^k) = ord(a) / gcd(ord(a), k)"""
    order = element_order(group, a)
    expected = order // math.gcd(order, k)
    return element_order(group, group.power(a, k)) == expected


def generated_subgroup_elements(group: Group, g: Any) -> FiniteSet:
    """
    ⟨g⟩ = {e, g, g², ..., g^(ord(g)-1)} повторным умножением на g.

    Raises:
        DomainViolationError: если g вне группы
        InconsistentStructureError: если порядок g не определён
    """
    order = element_order(group, g)
    powers = [group.identity]
    current = g
    for _ in range(1, order):
        powers.append(current)
        current = group.operation(current, g)
    return FiniteSet(powers)


def order_via_generated_subgroup(group: Group, a: Any) -> int:
    """ord(a) = |⟨a⟩|"""
    return len(generated_subgroup_elements(group, a))


# =============================================================================
# ПОКАЗАТЕЛЬ ГРУППЫ
# =============================================================================


def try_group_exponent(group: Group) -> Optional[int]:
    """НОК порядков всех элементов, или None если какой-то порядок не определён."""
    orders = []
    for a in group.carrier:
        order = try_element_order(group, a)
        if order is None:
            return None
        orders.append(order)
    return reduce(math.lcm, orders, 1)


def group_exponent(group: Group) -> int:
    """
    exp(G) = lcm{ord(a) | a ∈ G}

    Raises:
        InconsistentStructureError: если порядок какого-то элемента не определён

    Examples:
        >>> group_exponent(klein_four)
        2
    """
    return reduce(math.lcm, (element_order(group, a) for a in group.carrier), 1)


def satisfies_exponent(group: Group, n: int) -> bool:
    """∀a ∈ G: a^n = e"""
    return all(satisfies_identity_power(group, a, n) for a in group.carrier)


def has_exponent(group: Group, n: int) -> bool:
    return try_group_exponent(group) == n


def has_finite_exponent(group: Group) -> bool:
    return try_group_exponent(group) is not None


def matches_exponent(group: Group, n: int) -> bool:
    """exp(G) = n и a^n = e для каждого a ∈ G."""
    return has_exponent(group, n) and satisfies_exponent(group, n)


def exponent_divides_group_order(group: Group) -> bool:
    exponent = try_group_exponent(group)
    return exponent is not None and len(group) % exponent == 0


def is_cyclic_via_exponent(group: Group) -> bool:
    """
    Абелева G циклическая ⇔ exp(G) = |G|. Для неабелевой группы критерий
    неприменим (exp(S3) = 6 = |S3|), поэтому результат False.
    """
    return group.is_abelian() and try_group_exponent(group) == len(group)


def orders_divide_exponent(group: Group) -> bool:
    exponent = try_group_exponent(group)
    if exponent is None:
        return False
    return all(exponent % element_order(group, a) == 0 for a in group.carrier)


def verify_exponent_order_relation(group: Group) -> bool:
    """exp(G) совпадает с НОК порядков всех элементов, пересчитанным поэлементно."""
    exponent = try_group_exponent(group)
    if exponent is None:
        return False
    orders = [try_element_order(group, a) for a in group.carrier]
    if any(order is None for order in orders):
        return False
    return exponent == reduce(math.lcm, orders, 1)
