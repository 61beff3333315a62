"""
Coset — смежные классы, теорема Лагранжа, разбиение группы

Смежный класс строится умножением одного представителя на каждый
элемент подгруппы слева (gH) или справа (Hg) — сторона задаётся явно.
Результат — производное множество, а не живое представление.

Перечисление различных классов: проход по носителю в порядке итерации,
пропуская элементы, уже покрытые найденными классами; первый непокрытый
элемент порождает новый класс. Индекс [G : H] — число классов.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Классы попарно не пересекаются, их объединение — весь G
2. |gH| = |H| для каждого g
3. |G| = |H| · [G : H] (Лагранж)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from cryptomath.core.finite_set import FiniteSet
from cryptomath.core.math.euler_function import divisors
from cryptomath.groups.subgroup import Subgroup
from cryptomath.structures.group import Group
from cryptomath.structures.laws import require_member


# =============================================================================
# COSET
# =============================================================================


class CosetSide(str, Enum):
    """Сторона умножения на представителя"""

    LEFT = "left"  # gH
    RIGHT = "right"  # Hg


@dataclass(frozen=True, eq=False)
class Coset:
    """
    Смежный класс gH или Hg.

    Равенство — по стороне и множеству элементов: gH = g'H при разных
    представителях g, g' из одного класса.
    """

    representative: Any
    side: CosetSide
    elements: FiniteSet

    @classmethod
    def build(
        cls,
        group: Group,
        subgroup: Subgroup,
        representative: Any,
        side: CosetSide = CosetSide.LEFT,
    ) -> "Coset":
        """
        Raises:
            DomainViolationError: если представитель вне группы или
                подгруппа принадлежит другой группе
        """
        subgroup._require_parent(group)
        require_member(group.carrier, representative)
        if side == CosetSide.LEFT:
            elements = FiniteSet(group.operation(representative, h) for h in subgroup.elements)
        else:
            elements = FiniteSet(group.operation(h, representative) for h in subgroup.elements)
        return cls(representative=representative, side=side, elements=elements)

    def __len__(self) -> int:
        return len(self.elements)

    def contains(self, a: Any) -> bool:
        return a in self.elements

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coset):
            return NotImplemented
        return self.side == other.side and self.elements == other.elements

    def __hash__(self) -> int:
        return hash((self.side, self.elements))

    def __str__(self) -> str:
        if self.side == CosetSide.LEFT:
            return f"{self.representative}H = {self.elements}"
        return f"H{self.representative} = {self.elements}"


def left_coset(group: Group, subgroup: Subgroup, g: Any) -> Coset:
    """gH = {g ∘ h | h ∈ H}"""
    return Coset.build(group, subgroup, g, CosetSide.LEFT)


def right_coset(group: Group, subgroup: Subgroup, g: Any) -> Coset:
    """Hg = {h ∘ g | h ∈ H}"""
    return Coset.build(group, subgroup, g, CosetSide.RIGHT)


# =============================================================================
# ПЕРЕЧИСЛЕНИЕ И ИНДЕКС
# =============================================================================


def distinct_cosets(
    group: Group, subgroup: Subgroup, side: CosetSide = CosetSide.LEFT
) -> list[Coset]:
    """
    Все различные смежные классы в порядке первого непокрытого представителя.
    """
    cosets: list[Coset] = []
    for g in group.carrier:
        if any(coset.contains(g) for coset in cosets):
            continue
        cosets.append(Coset.build(group, subgroup, g, side))
    return cosets


def left_coset_partition(group: Group, subgroup: Subgroup) -> FiniteSet:
    """G/H как множество множеств"""
    return FiniteSet(c.elements for c in distinct_cosets(group, subgroup, CosetSide.LEFT))


def right_coset_partition(group: Group, subgroup: Subgroup) -> FiniteSet:
    """H\\G как множество множеств"""
    return FiniteSet(c.elements for c in distinct_cosets(group, subgroup, CosetSide.RIGHT))


def index(group: Group, subgroup: Subgroup) -> int:
    """[G : H] — число различных левых смежных классов."""
    return len(distinct_cosets(group, subgroup))


# =============================================================================
# ЛАГРАНЖ
# =============================================================================


def verify_lagrange(group: Group, subgroup: Subgroup) -> bool:
    """|G| = |H| · [G : H]"""
    return len(group) == len(subgroup) * index(group, subgroup)


def order_divides_group_order(group: Group, subgroup: Subgroup) -> bool:
    """|H| делит |G|"""
    subgroup._require_parent(group)
    return len(group) % len(subgroup) == 0


def possible_subgroup_orders(group: Group) -> FiniteSet:
    """Делители |G| — единственно возможные порядки подгрупп."""
    return FiniteSet(divisors(len(group)))


# =============================================================================
# РАЗБИЕНИЕ
# =============================================================================


def is_partition(carrier: FiniteSet, blocks: Iterable[FiniteSet]) -> bool:
    """
    Блоки покрывают носитель и попарно не пересекаются.
    Пустой блок разбиением не считается.
    """
    blocks = list(blocks)
    covered = FiniteSet()
    for i, block in enumerate(blocks):
        if block.is_empty():
            return False
        for other in blocks[i + 1 :]:
            if not block.is_disjoint(other):
                return False
        covered = covered.union(block)
    return covered == carrier


def verify_coset_partition(
    group: Group, subgroup: Subgroup, side: CosetSide = CosetSide.LEFT
) -> bool:
    """Смежные классы образуют разбиение G, и каждый имеет размер |H|."""
    cosets = distinct_cosets(group, subgroup, side)
    if any(len(c) != len(subgroup) for c in cosets):
        return False
    return is_partition(group.carrier, (c.elements for c in cosets))
