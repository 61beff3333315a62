"""
Center / Centralizer

Z(G) = {z ∈ G | ∀g ∈ G: z ∘ g = g ∘ z} — всегда нормальная подгруппа.
C_G(a) = {g ∈ G | g ∘ a = a ∘ g} — подгруппа, содержащая a.
"""

from typing import Any

from cryptomath.core.finite_set import FiniteSet
from cryptomath.groups.subgroup import NormalSubgroup, Subgroup
from cryptomath.structures.group import Group
from cryptomath.structures.laws import require_member


def commutes(group: Group, a: Any, b: Any) -> bool:
    """a ∘ b = b ∘ a"""
    return group.operate(a, b) == group.operate(b, a)


def is_in_center(group: Group, z: Any) -> bool:
    require_member(group.carrier, z)
    return all(commutes(group, z, g) for g in group.carrier)


def center_elements(group: Group) -> FiniteSet:
    return FiniteSet(z for z in group.carrier if is_in_center(group, z))


def center(group: Group) -> NormalSubgroup:
    """Z(G) как нормальная подгруппа."""
    return NormalSubgroup.of(group, center_elements(group))


def is_centerless(group: Group) -> bool:
    """Z(G) = {e}"""
    return len(center_elements(group)) == 1


def centralizer_elements(group: Group, a: Any) -> FiniteSet:
    require_member(group.carrier, a)
    return FiniteSet(g for g in group.carrier if commutes(group, g, a))


def centralizer(group: Group, a: Any) -> Subgroup:
    """C_G(a) как подгруппа."""
    return Subgroup.of(group, centralizer_elements(group, a))
