"""
Cyclic Group — анализ циклических групп

G циклическая ⇔ ∃g: ord(g) = |G| (порождающий элемент).

Поиск порождающего — полный перебор носителя; возвращается первый
элемент в порядке итерации (по возрастанию). Любой порождающий
математически равноправен, порядок перебора лишь фиксирует выбор.

Соответствие делителей и подгрупп: в циклической группе порядка n для
каждого d | n существует ровно одна подгруппа порядка d, и она равна
⟨g^(n/d)⟩. Порождающих ровно φ(n), элементов порядка d ровно φ(d).
"""

from typing import Any, Optional

from cryptomath.core.errors import UndefinedResultError
from cryptomath.core.finite_set import FiniteSet
from cryptomath.core.math.euler_function import divisors, euler_phi
from cryptomath.groups.element_order import (
    generated_subgroup_elements,
    try_element_order,
    try_group_exponent,
)
from cryptomath.groups.subgroup import Subgroup
from cryptomath.structures.group import Group


# =============================================================================
# ПОРОЖДАЮЩИЕ
# =============================================================================


def is_generator(group: Group, g: Any) -> bool:
    """ord(g) = |G|; элемент вне группы порождающим не является."""
    if g not in group.carrier:
        return False
    return try_element_order(group, g) == len(group)


def try_find_generator(group: Group) -> Optional[Any]:
    """Первый порождающий в порядке носителя, или None."""
    for g in group.carrier:
        if is_generator(group, g):
            return g
    return None


def find_generator(group: Group) -> Any:
    """
    Raises:
        UndefinedResultError: если группа не циклическая
    """
    g = try_find_generator(group)
    if g is None:
        raise UndefinedResultError("Group is not cyclic: no generator exists")
    return g


def is_cyclic(group: Group) -> bool:
    return try_find_generator(group) is not None


def find_all_generators(group: Group) -> FiniteSet:
    """Все порождающие; пусто для нециклической группы."""
    return FiniteSet(g for g in group.carrier if is_generator(group, g))


def cyclic_order(group: Group) -> int:
    """
    Порядок циклической группы.

    Raises:
        UndefinedResultError: если группа не циклическая
    """
    find_generator(group)
    return len(group)


# =============================================================================
# ПОРОЖДЁННЫЕ ПОДГРУППЫ
# =============================================================================


def cyclic_subgroup(group: Group, g: Any) -> Subgroup:
    """⟨g⟩ как подгруппа; |⟨g⟩| = ord(g)."""
    return Subgroup.of(group, generated_subgroup_elements(group, g))


def subgroup_of_order(group: Group, d: int) -> Subgroup:
    """
    Единственная подгруппа порядка d циклической группы: ⟨g^(n/d)⟩.

    Raises:
        UndefinedResultError: если группа не циклическая или d не делит |G|
    """
    n = len(group)
    g = find_generator(group)
    if d < 1 or n % d != 0:
        raise UndefinedResultError(f"{d} does not divide the group order {n}")
    return cyclic_subgroup(group, group.power(g, n // d))


def cyclic_subgroups(group: Group) -> FiniteSet:
    """Все различные ⟨a⟩, a ∈ G (как множества элементов)."""
    return FiniteSet(generated_subgroup_elements(group, a) for a in group.carrier)


def unique_subgroup_for_each_divisor(group: Group) -> bool:
    """
    Для каждого d | |G| элементы порядка d порождают ровно одну подгруппу.
    Для нециклической группы — False.
    """
    if not is_cyclic(group):
        return False
    for d in divisors(len(group)):
        generated = FiniteSet(
            generated_subgroup_elements(group, a)
            for a in group.carrier
            if try_element_order(group, a) == d
        )
        if len(generated) != 1:
            return False
    return True


def exponent_equals_order(group: Group) -> bool:
    """Для циклической группы exp(G) = |G|; для нециклической — False."""
    if not is_cyclic(group):
        return False
    return try_group_exponent(group) == len(group)


def is_isomorphic_to_zn(group: Group, n: int) -> bool:
    """G ≅ Z/nZ ⇔ G циклическая и |G| = n."""
    return is_cyclic(group) and len(group) == n


# =============================================================================
# СВЯЗЬ С ФУНКЦИЕЙ ЭЙЛЕРА
# =============================================================================


def number_of_generators(group: Group) -> int:
    """φ(|G|) для циклической группы, 0 для нециклической."""
    if not is_cyclic(group):
        return 0
    return euler_phi(len(group))


def elements_of_order_in_cyclic_group(group: Group, d: int) -> int:
    """
    Число элементов порядка d в циклической группе: φ(d) при d | |G|,
    иначе 0. Для нециклической группы — 0.
    """
    if not is_cyclic(group):
        return 0
    if d < 1 or len(group) % d != 0:
        return 0
    return euler_phi(d)
