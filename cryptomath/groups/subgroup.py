"""
Subgroup / NormalSubgroup — подгруппы конечной группы

Подгруппа хранит только своё подмножество и снимок носителя родителя.
Ссылки на родительскую группу нет: группа явно передаётся в каждый
метод, которому нужна операция, и сверяется со снимком носителя.
Единица и обращение всегда берутся у родителя.

Построение — через Subgroup.of(group, subset) / NormalSubgroup.of(...):
группа передаётся в валидацию через контекст pydantic.

Критерий подгруппы: H ≠ ∅, H ⊆ G, ∀a, b ∈ H: a ∘ b⁻¹ ∈ H.
Нормальность: ∀g ∈ G, n ∈ N: g ∘ n ∘ g⁻¹ ∈ N.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Экземпляр существует только если критерий выполнен
2. Метод с чужой группой (другой носитель) → DomainViolationError
3. Пересечение подгрупп одного родителя повторно не проверяется
"""

import logging
from typing import Any, Optional

from pydantic import BaseModel, ValidationInfo, field_validator, model_validator

from cryptomath.core.errors import DomainViolationError, Law, UndefinedResultError
from cryptomath.core.finite_set import FiniteSet, as_finite_set
from cryptomath.structures.group import Group
from cryptomath.structures.laws import LawCheckResult, raise_if_violated, require_member

logger = logging.getLogger(__name__)


# =============================================================================
# КРИТЕРИИ
# =============================================================================


def check_subgroup_criterion(group: Group, subset: Any) -> LawCheckResult:
    """
    H ≠ ∅, H ⊆ G и a ∘ b⁻¹ ∈ H для всех упорядоченных пар (a, b) из H.
    """
    subset = as_finite_set(subset)
    if subset.is_empty():
        return LawCheckResult.failed(Law.NON_EMPTY, (), "Subgroup must be non-empty")
    for a in subset:
        if a not in group.carrier:
            return LawCheckResult.failed(
                Law.MEMBERSHIP, (a,), "Subgroup element is outside the group carrier"
            )
    for a in subset:
        for b in subset:
            c = group.operation(a, group.inverse(b))
            if c not in subset:
                return LawCheckResult.failed(
                    Law.SUBGROUP_CRITERION, (a, b), f"a ∘ b⁻¹ = {c!r} is outside the subset"
                )
    return LawCheckResult.ok(Law.SUBGROUP_CRITERION)


def is_closed_subset(group: Group, subset: Any) -> bool:
    """
    Ослабленный критерий для конечных групп: непустое подмножество,
    замкнутое относительно операции, уже является подгруппой.
    """
    subset = as_finite_set(subset)
    if subset.is_empty() or not subset.is_subset_of(group.carrier):
        return False
    return all(group.operation(a, b) in subset for a in subset for b in subset)


def check_normality(group: Group, subset: Any) -> LawCheckResult:
    """∀g ∈ G, n ∈ N: g ∘ n ∘ g⁻¹ ∈ N"""
    subset = as_finite_set(subset)
    for g in group.carrier:
        g_inv = group.inverse(g)
        for n in subset:
            conjugate = group.operation(group.operation(g, n), g_inv)
            if conjugate not in subset:
                return LawCheckResult.failed(
                    Law.NORMALITY, (g, n), f"Conjugate {conjugate!r} is outside the subgroup"
                )
    return LawCheckResult.ok(Law.NORMALITY)


def is_normal_by_cosets(group: Group, subset: Any) -> bool:
    """Эквивалентная проверка: gN = Ng для каждого g ∈ G."""
    subset = as_finite_set(subset)
    for g in group.carrier:
        left = FiniteSet(group.operation(g, n) for n in subset)
        right = FiniteSet(group.operation(n, g) for n in subset)
        if left != right:
            return False
    return True


def _group_from_context(info: ValidationInfo, parent_carrier: FiniteSet) -> Group:
    context = info.context or {}
    group = context.get("group")
    if group is None:
        raise TypeError("Subgroups are built with .of(group, subset)")
    if group.carrier != parent_carrier:
        raise DomainViolationError("Group carrier does not match the subgroup parent carrier")
    return group


# =============================================================================
# SUBGROUP
# =============================================================================


class Subgroup(BaseModel):
    """
    Подгруппа H ≤ G.

    Examples:
        >>> h = Subgroup.of(z6, [0, 2, 4])
        >>> h.index(z6)
        2
    """

    elements: FiniteSet
    parent_carrier: FiniteSet

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("elements", "parent_carrier", mode="before")
    @classmethod
    def _coerce_sets(cls, v: Any) -> FiniteSet:
        return as_finite_set(v)

    @model_validator(mode="after")
    def _check_subgroup_criterion(self, info: ValidationInfo) -> "Subgroup":
        group = _group_from_context(info, self.parent_carrier)
        raise_if_violated(check_subgroup_criterion(group, self.elements), type(self).__name__)
        logger.debug("%s validated: |H|=%d", type(self).__name__, len(self.elements))
        return self

    @classmethod
    def of(cls, group: Group, subset: Any) -> "Subgroup":
        """
        Проверенная подгруппа группы group.

        Raises:
            InvalidConstructionError: если subset не подгруппа
        """
        return cls.model_validate(
            {"elements": subset, "parent_carrier": group.carrier},
            context={"group": group},
        )

    # =========================================================================
    # ДОСТУП
    # =========================================================================

    def __len__(self) -> int:
        return len(self.elements)

    def contains(self, a: Any) -> bool:
        return a in self.elements

    def _require_parent(self, group: Group) -> None:
        if group.carrier != self.parent_carrier:
            raise DomainViolationError("Subgroup belongs to a different group")

    def _require_same_parent(self, other: "Subgroup") -> None:
        if self.parent_carrier != other.parent_carrier:
            raise DomainViolationError("Subgroups must share the same parent group")

    def identity(self, group: Group) -> Any:
        """Единица родителя."""
        self._require_parent(group)
        return group.identity

    def operate(self, group: Group, a: Any, b: Any) -> Any:
        """
        a ∘ b в подгруппе.

        Raises:
            DomainViolationError: если a или b вне подгруппы
        """
        self._require_parent(group)
        require_member(self.elements, a)
        require_member(self.elements, b)
        return group.operation(a, b)

    def inverse(self, group: Group, a: Any) -> Any:
        self._require_parent(group)
        require_member(self.elements, a)
        return group.inverse(a)

    def index(self, group: Group) -> int:
        """[G : H] = |G| / |H|"""
        self._require_parent(group)
        return len(group) // len(self)

    def is_trivial(self) -> bool:
        """H = {e}"""
        return len(self.elements) == 1

    def is_improper(self) -> bool:
        """H = G"""
        return self.elements == self.parent_carrier

    def is_subgroup_of(self, other: "Subgroup") -> bool:
        return self.parent_carrier == other.parent_carrier and self.elements.is_subset_of(
            other.elements
        )

    def is_normal(self, group: Group) -> bool:
        self._require_parent(group)
        return check_normality(group, self.elements).holds

    def as_group(self, group: Group) -> Group:
        """Подгруппа как самостоятельная группа (без повторной проверки)."""
        self._require_parent(group)
        return Group._unchecked(self.elements, group.operation, group.identity, group.inverse)

    # =========================================================================
    # ПЕРЕСЕЧЕНИЕ И ПРОИЗВЕДЕНИЕ
    # =========================================================================

    def intersection(self, other: "Subgroup") -> "Subgroup":
        """
        H1 ∩ H2 — всегда подгруппа; критерий повторно не проверяется.
        Пересечение двух нормальных подгрупп нормально.

        Raises:
            DomainViolationError: если родители различны
        """
        self._require_same_parent(other)
        result_type = (
            NormalSubgroup
            if isinstance(self, NormalSubgroup) and isinstance(other, NormalSubgroup)
            else Subgroup
        )
        return result_type.model_construct(
            elements=self.elements.intersection(other.elements),
            parent_carrier=self.parent_carrier,
        )

    def product_set(self, group: Group, other: "Subgroup") -> FiniteSet:
        """H1·H2 = {h1 ∘ h2 | h1 ∈ H1, h2 ∈ H2}"""
        self._require_parent(group)
        self._require_same_parent(other)
        return FiniteSet(group.operation(a, b) for a in self.elements for b in other.elements)

    def product_is_subgroup(self, group: Group, other: "Subgroup") -> bool:
        """H1·H2 — подгруппа тогда и только тогда, когда H1·H2 = H2·H1."""
        return self.product_set(group, other) == other.product_set(group, self)

    def product(self, group: Group, other: "Subgroup") -> "Subgroup":
        """
        H1·H2 как подгруппа.

        Raises:
            UndefinedResultError: если H1·H2 ≠ H2·H1
        """
        if not self.product_is_subgroup(group, other):
            raise UndefinedResultError("Product H1·H2 is not a subgroup (H1·H2 ≠ H2·H1)")
        return Subgroup.of(group, self.product_set(group, other))

    def __str__(self) -> str:
        return str(self.elements)


# =============================================================================
# NORMAL SUBGROUP
# =============================================================================


class NormalSubgroup(Subgroup):
    """
    Нормальная подгруппа N ⊴ G: подгруппа, замкнутая относительно
    сопряжения каждым элементом группы.
    """

    @model_validator(mode="after")
    def _check_normality(self, info: ValidationInfo) -> "NormalSubgroup":
        group = _group_from_context(info, self.parent_carrier)
        raise_if_violated(check_normality(group, self.elements), "NormalSubgroup")
        return self

    @classmethod
    def from_subgroup(cls, group: Group, subgroup: Subgroup) -> "NormalSubgroup":
        """
        Raises:
            DomainViolationError: если подгруппа принадлежит другой группе
            InvalidConstructionError: если подгруппа не нормальна
        """
        subgroup._require_parent(group)
        return cls.of(group, subgroup.elements)

    def as_subgroup(self) -> Subgroup:
        return Subgroup.model_construct(
            elements=self.elements, parent_carrier=self.parent_carrier
        )


# =============================================================================
# СТАНДАРТНЫЕ ПОДГРУППЫ
# =============================================================================


def trivial_subgroup(group: Group) -> Subgroup:
    """{e}"""
    return Subgroup.of(group, [group.identity])


def improper_subgroup(group: Group) -> Subgroup:
    """G как подгруппа самой себя"""
    return Subgroup.of(group, group.carrier)


def trivial_normal_subgroup(group: Group) -> NormalSubgroup:
    return NormalSubgroup.of(group, [group.identity])


def improper_normal_subgroup(group: Group) -> NormalSubgroup:
    return NormalSubgroup.of(group, group.carrier)


def is_normal(group: Group, subgroup: Subgroup) -> bool:
    return subgroup.is_normal(group)


def is_normal_in_abelian_group(group: Group, subgroup: Subgroup) -> bool:
    """В абелевой группе каждая подгруппа нормальна."""
    if group.is_abelian():
        subgroup._require_parent(group)
        return True
    return subgroup.is_normal(group)


def find_subgroup(group: Group, subset: Any) -> Optional[Subgroup]:
    """Подгруппа из subset, или None если критерий не выполнен."""
    if not check_subgroup_criterion(group, subset):
        return None
    return Subgroup.of(group, subset)
