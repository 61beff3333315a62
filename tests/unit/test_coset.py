"""
Тесты для смежных классов, теоремы Лагранжа и разбиения

Проверяет:
1. Построение gH и Hg, равенство классов по элементам
2. Перечисление различных классов и индекс
3. Лагранж: |G| = |H| · [G : H]
4. Разбиение: покрытие и попарная непересекаемость
5. Левые и правые классы ненормальной подгруппы различаются
"""

import pytest

from cryptomath.core import DomainViolationError, FiniteSet
from cryptomath.groups import (
    Coset,
    CosetSide,
    Subgroup,
    distinct_cosets,
    index,
    is_partition,
    left_coset,
    left_coset_partition,
    order_divides_group_order,
    possible_subgroup_orders,
    right_coset,
    right_coset_partition,
    trivial_subgroup,
    verify_coset_partition,
    verify_lagrange,
)
from cryptomath.structures import Group

IDENTITY = (0, 1, 2)
TRANSPOSITION = (1, 0, 2)


# =============================================================================
# COSET CONSTRUCTION
# =============================================================================


class TestCosetConstruction:
    def test_left_coset(self, z6: Group) -> None:
        h = Subgroup.of(z6, [0, 3])
        coset = left_coset(z6, h, 1)
        assert coset.elements == FiniteSet([1, 4])
        assert coset.side == CosetSide.LEFT
        assert coset.representative == 1
        assert len(coset) == 2
        assert coset.contains(4)

    def test_equal_cosets_with_different_representatives(self, z6: Group) -> None:
        h = Subgroup.of(z6, [0, 3])
        assert left_coset(z6, h, 1) == left_coset(z6, h, 4)
        assert hash(left_coset(z6, h, 1)) == hash(left_coset(z6, h, 4))
        assert left_coset(z6, h, 1) != left_coset(z6, h, 2)

    def test_sides_are_distinguished(self, z6: Group) -> None:
        h = Subgroup.of(z6, [0, 3])
        assert left_coset(z6, h, 1).elements == right_coset(z6, h, 1).elements
        assert left_coset(z6, h, 1) != right_coset(z6, h, 1)

    def test_representative_outside_group(self, z6: Group) -> None:
        h = Subgroup.of(z6, [0, 3])
        with pytest.raises(DomainViolationError):
            left_coset(z6, h, 9)

    def test_subgroup_of_other_group(self, z6: Group, z5: Group) -> None:
        with pytest.raises(DomainViolationError):
            Coset.build(z5, Subgroup.of(z6, [0, 3]), 1)

    def test_str(self, z6: Group) -> None:
        h = Subgroup.of(z6, [0, 3])
        assert str(left_coset(z6, h, 1)) == f"1H = {FiniteSet([1, 4])}"
        assert str(right_coset(z6, h, 1)) == f"H1 = {FiniteSet([1, 4])}"

    def test_left_and_right_differ_for_non_normal_subgroup(self, s3: Group) -> None:
        h = Subgroup.of(s3, [IDENTITY, TRANSPOSITION])
        g = (1, 2, 0)
        assert left_coset(s3, h, g).elements == FiniteSet([(1, 2, 0), (2, 1, 0)])
        assert right_coset(s3, h, g).elements == FiniteSet([(1, 2, 0), (0, 2, 1)])
        assert left_coset_partition(s3, h) != right_coset_partition(s3, h)


# =============================================================================
# INDEX AND LAGRANGE
# =============================================================================


class TestLagrange:
    def test_distinct_cosets_in_carrier_order(self, z6: Group) -> None:
        h = Subgroup.of(z6, [0, 3])
        cosets = distinct_cosets(z6, h)
        assert [c.representative for c in cosets] == [0, 1, 2]
        assert [c.elements for c in cosets] == [
            FiniteSet([0, 3]),
            FiniteSet([1, 4]),
            FiniteSet([2, 5]),
        ]

    def test_index_and_lagrange(self, z6: Group) -> None:
        h = Subgroup.of(z6, [0, 2, 4])
        assert index(z6, h) == 2
        assert verify_lagrange(z6, h)
        assert order_divides_group_order(z6, h)

    def test_trivial_subgroup_index_equals_group_order(self, z5: Group) -> None:
        trivial = trivial_subgroup(z5)
        assert index(z5, trivial) == 5
        assert verify_lagrange(z5, trivial)

    @pytest.mark.parametrize(
        "subset",
        [[IDENTITY], [IDENTITY, TRANSPOSITION], [IDENTITY, (1, 2, 0), (2, 0, 1)]],
    )
    def test_lagrange_in_s3(self, s3: Group, subset: list) -> None:
        h = Subgroup.of(s3, subset)
        assert verify_lagrange(s3, h)
        assert index(s3, h) * len(h) == 6

    def test_possible_subgroup_orders(self, z6: Group, z5: Group) -> None:
        assert possible_subgroup_orders(z6) == FiniteSet([1, 2, 3, 6])
        assert possible_subgroup_orders(z5) == FiniteSet([1, 5])


# =============================================================================
# PARTITION
# =============================================================================


class TestPartition:
    def test_left_partition(self, z6: Group) -> None:
        h = Subgroup.of(z6, [0, 3])
        assert left_coset_partition(z6, h) == FiniteSet(
            [FiniteSet([0, 3]), FiniteSet([1, 4]), FiniteSet([2, 5])]
        )
        assert left_coset_partition(z6, h) == right_coset_partition(z6, h)

    @pytest.mark.parametrize("side", [CosetSide.LEFT, CosetSide.RIGHT])
    def test_coset_partition_in_s3(self, s3: Group, side: CosetSide) -> None:
        h = Subgroup.of(s3, [IDENTITY, TRANSPOSITION])
        assert verify_coset_partition(s3, h, side)
        assert len(distinct_cosets(s3, h, side)) == 3

    def test_is_partition(self) -> None:
        carrier = FiniteSet([1, 2, 3, 4])
        assert is_partition(carrier, [FiniteSet([1, 2]), FiniteSet([3, 4])])
        assert not is_partition(carrier, [FiniteSet([1, 2]), FiniteSet([2, 3, 4])])
        assert not is_partition(carrier, [FiniteSet([1, 2]), FiniteSet([3])])
        assert not is_partition(
            carrier, [FiniteSet([1, 2, 3, 4]), FiniteSet()]
        )
