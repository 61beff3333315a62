"""
Factor Group — фактор-группа G/N по нормальной подгруппе

Элементы — левые смежные классы N (для нормальной N они совпадают
с правыми). При построении один раз вычисляются все классы и таблица
"элемент → содержащий его класс"; таблица — единственный источник
истины для фактор-операции.

Операция: aN ∘ bN = (a ∘ b)N, где a и b — представители классов
(наименьшие элементы). Корректность определения следует из
нормальности N и на каждом вызове не перепроверяется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. N — нормальная подгруппа именно этой группы (сверка носителей)
2. Каждый элемент G лежит ровно в одном классе
3. Единица G/N — класс единицы G; обратный к aN — класс a⁻¹
"""

import logging
from typing import Any

from pydantic import BaseModel, InstanceOf, PrivateAttr, model_validator

from cryptomath.core.errors import DomainViolationError
from cryptomath.core.finite_set import FiniteSet
from cryptomath.groups.coset import CosetSide, distinct_cosets
from cryptomath.groups.subgroup import NormalSubgroup
from cryptomath.structures.group import Group
from cryptomath.structures.laws import (
    check_associativity,
    check_closure,
    check_identity,
    check_inverses,
)

logger = logging.getLogger(__name__)


class FactorGroup(BaseModel):
    """
    Фактор-группа G/N.

    Examples:
        >>> fg = FactorGroup(parent=z6, normal_subgroup=NormalSubgroup.of(z6, [0, 3]))
        >>> len(fg)
        3
        >>> fg.operate(fg.coset_of(1), fg.coset_of(2))
        FiniteSet([0, 3])
    """

    parent: InstanceOf[Group]
    normal_subgroup: InstanceOf[NormalSubgroup]

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    _cosets: FiniteSet = PrivateAttr(default_factory=FiniteSet)
    _coset_of: dict[Any, FiniteSet] = PrivateAttr(default_factory=dict)

    @model_validator(mode="after")
    def _build_cosets(self) -> "FactorGroup":
        if self.normal_subgroup.parent_carrier != self.parent.carrier:
            raise DomainViolationError("Normal subgroup belongs to a different group")

        cosets = [
            c.elements
            for c in distinct_cosets(self.parent, self.normal_subgroup, CosetSide.LEFT)
        ]
        self._cosets = FiniteSet(cosets)
        self._coset_of = {a: coset for coset in cosets for a in coset}
        logger.debug(
            "FactorGroup built: |G|=%d, |N|=%d, |G/N|=%d",
            len(self.parent),
            len(self.normal_subgroup),
            len(cosets),
        )
        return self

    @classmethod
    def of(cls, group: Group, normal_subgroup: NormalSubgroup) -> "FactorGroup":
        return cls(parent=group, normal_subgroup=normal_subgroup)

    # =========================================================================
    # ДОСТУП
    # =========================================================================

    def __len__(self) -> int:
        return len(self._cosets)

    @property
    def cosets(self) -> FiniteSet:
        """Элементы G/N (каждый — FiniteSet элементов G)."""
        return self._cosets

    def contains(self, coset: Any) -> bool:
        return coset in self._cosets

    def coset_of(self, a: Any) -> FiniteSet:
        """
        aN

        Raises:
            DomainViolationError: если a вне G
        """
        if a not in self.parent.carrier:
            raise DomainViolationError(f"Element {a!r} not in parent group")
        return self._coset_of[a]

    def _require_coset(self, coset: Any) -> None:
        if coset not in self._cosets:
            raise DomainViolationError(f"{coset!r} is not a coset of the factor group")

    # =========================================================================
    # ФАКТОР-ОПЕРАЦИЯ
    # =========================================================================

    @property
    def identity(self) -> FiniteSet:
        """eN = N"""
        return self._coset_of[self.parent.identity]

    def operate(self, coset_a: FiniteSet, coset_b: FiniteSet) -> FiniteSet:
        """
        aN ∘ bN = (a ∘ b)N по представителям.

        Raises:
            DomainViolationError: если аргумент не класс этой фактор-группы
        """
        self._require_coset(coset_a)
        self._require_coset(coset_b)
        product = self.parent.operation(coset_a.first(), coset_b.first())
        return self._coset_of[product]

    def inverse(self, coset: FiniteSet) -> FiniteSet:
        """(aN)⁻¹ = a⁻¹N"""
        self._require_coset(coset)
        return self._coset_of[self.parent.inverse(coset.first())]

    def as_group(self) -> Group:
        """G/N как проверенная группа, элементы которой — классы."""
        return Group(
            carrier=self._cosets,
            operation=self.operate,
            identity=self.identity,
            inverse_fn=self.inverse,
        )


def verify_factor_group(factor_group: FactorGroup) -> bool:
    """
    Проверка групповых законов на классах: замкнутость, ассоциативность,
    единица, обратные.
    """
    cosets = factor_group.cosets
    op = factor_group.operate
    return bool(
        check_closure(cosets, op)
        and check_associativity(cosets, op)
        and check_identity(cosets, op, factor_group.identity)
        and check_inverses(cosets, op, factor_group.identity, factor_group.inverse)
    )
