"""
Тесты для иерархии структур Groupoid → Semigroup → Monoid → Group

Проверяет:
1. Валидацию законов при построении и свидетелей нарушений
2. Операции, степени и обратные
3. Переходы между уровнями (from_*, as_*)
4. Альтернативные определения группы
5. Результаты проверок законов без исключений (LawCheckResult)
"""

import logging

import pytest
from pydantic import ValidationError

from cryptomath.core import (
    DomainViolationError,
    FiniteSet,
    InvalidConstructionError,
    Law,
    UndefinedResultError,
)
from cryptomath.structures import (
    Capability,
    Group,
    Groupoid,
    LawCheckResult,
    Monoid,
    Semigroup,
    binary_power,
    check_associativity,
    check_closure,
    check_identity,
    check_left_group_axioms,
    check_right_group_axioms,
    find_identity,
)


def add_mod(n: int):
    return lambda a, b: (a + b) % n


def mul_mod(n: int):
    return lambda a, b: (a * b) % n


# =============================================================================
# LAW CHECKERS
# =============================================================================


class TestLawCheckers:
    def test_closure_holds(self) -> None:
        result = check_closure(FiniteSet(range(4)), add_mod(4))
        assert result.holds
        assert result
        assert result.violation is None

    def test_closure_witness_is_first_failing_pair(self) -> None:
        result = check_closure(FiniteSet([0, 1, 2]), lambda a, b: a + b)
        assert not result
        assert result.law == Law.CLOSURE
        assert result.witness == (1, 2)
        assert result.violation.witness == (1, 2)

    def test_associativity_witness_is_triple(self) -> None:
        result = check_associativity(FiniteSet([0, 1, 2]), lambda a, b: (a - b) % 3)
        assert not result
        assert result.law == Law.ASSOCIATIVITY
        assert len(result.witness) == 3

    def test_identity_candidate_outside_carrier(self) -> None:
        result = check_identity(FiniteSet([1, 2]), add_mod(3), 0)
        assert result.law == Law.MEMBERSHIP

    def test_find_identity(self) -> None:
        assert find_identity(FiniteSet(range(5)), mul_mod(5)) == 1
        assert find_identity(FiniteSet([0, 1, 2]), lambda a, b: max(a, b)) == 0
        assert find_identity(FiniteSet([1, 2]), lambda a, b: 1) is None

    def test_binary_power(self) -> None:
        assert binary_power(add_mod(100), 3, 13) == 39
        assert binary_power(mul_mod(1000), 2, 10) == 24
        assert binary_power(add_mod(7), 3, 0, one=0) == 0

    def test_result_is_plain_value(self) -> None:
        result = LawCheckResult.failed(Law.INVERSE, (1,), "no inverse")
        assert str(result.violation) == "inverse violated at (1,): no inverse"


# =============================================================================
# GROUPOID
# =============================================================================


class TestGroupoid:
    def test_closed_operation_accepted(self) -> None:
        g = Groupoid(carrier=[0, 1, 2], operation=lambda a, b: (a - b) % 3)
        assert g.capability == Capability.GROUPOID
        assert g.operate(0, 1) == 2
        assert len(g) == 3
        assert not g.is_associative()
        assert not g.is_commutative()

    def test_closure_violation_rejected(self) -> None:
        with pytest.raises(InvalidConstructionError) as exc_info:
            Groupoid(carrier=[0, 1, 2], operation=lambda a, b: a + b)
        assert exc_info.value.law == Law.CLOSURE
        assert exc_info.value.witness == (1, 2)

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="cryptomath"):
            with pytest.raises(InvalidConstructionError):
                Groupoid(carrier=[1, 2], operation=lambda a, b: a * b)
        assert "Groupoid construction rejected" in caplog.text

    def test_operate_outside_carrier(self) -> None:
        g = Groupoid(carrier=[0, 1], operation=lambda a, b: a & b)
        with pytest.raises(DomainViolationError):
            g.operate(0, 2)

    def test_idempotent_and_cancellation(self) -> None:
        g = Groupoid(carrier=[0, 1, 2], operation=max)
        assert g.is_idempotent()
        assert not g.is_left_cancellative()
        z3 = Groupoid(carrier=[0, 1, 2], operation=add_mod(3))
        assert z3.is_cancellative()
        assert not z3.is_idempotent()

    def test_immutable(self) -> None:
        g = Groupoid(carrier=[0], operation=lambda a, b: 0)
        with pytest.raises(ValidationError):
            g.carrier = FiniteSet([1])


# =============================================================================
# SEMIGROUP
# =============================================================================


class TestSemigroup:
    @pytest.fixture
    def max_semigroup(self) -> Semigroup:
        return Semigroup(carrier=[1, 2, 3], operation=max)

    def test_non_associative_rejected(self) -> None:
        with pytest.raises(InvalidConstructionError) as exc_info:
            Semigroup(carrier=[0, 1, 2], operation=lambda a, b: (a - b) % 3)
        assert exc_info.value.law == Law.ASSOCIATIVITY

    def test_associativity_holds_for_all_triples(self, max_semigroup: Semigroup) -> None:
        s = max_semigroup
        for a in s.carrier:
            for b in s.carrier:
                for c in s.carrier:
                    assert s.operate(s.operate(a, b), c) == s.operate(a, s.operate(b, c))

    def test_power(self) -> None:
        s = Semigroup(carrier=range(1, 6), operation=lambda a, b: 1 + ((a - 1) + (b - 1)) % 5)
        assert s.power(2, 1) == 2
        assert s.power(2, 3) == 4

    def test_zero_power_undefined(self, max_semigroup: Semigroup) -> None:
        with pytest.raises(UndefinedResultError, match="n >= 1"):
            max_semigroup.power(2, 0)

    def test_product(self, max_semigroup: Semigroup) -> None:
        assert max_semigroup.product([1, 3, 2]) == 3
        assert max_semigroup.product([2]) == 2

    def test_empty_product_undefined(self, max_semigroup: Semigroup) -> None:
        with pytest.raises(UndefinedResultError, match="empty"):
            max_semigroup.product([])

    def test_product_outside_carrier(self, max_semigroup: Semigroup) -> None:
        with pytest.raises(DomainViolationError):
            max_semigroup.product([7])

    def test_identity_discovery(self, max_semigroup: Semigroup) -> None:
        assert max_semigroup.find_identity() == 1
        assert max_semigroup.has_identity()
        no_identity = Semigroup(carrier=[1, 2], operation=lambda a, b: 2)
        assert not no_identity.has_identity()

    def test_from_groupoid_and_back(self) -> None:
        g = Groupoid(carrier=[1, 2, 3], operation=min)
        s = Semigroup.from_groupoid(g)
        assert s.capability == Capability.SEMIGROUP
        assert s.as_groupoid() == g


# =============================================================================
# MONOID
# =============================================================================


class TestMonoid:
    @pytest.fixture
    def mul4(self) -> Monoid:
        return Monoid(carrier=range(4), operation=mul_mod(4), identity=1)

    def test_wrong_identity_rejected(self) -> None:
        with pytest.raises(InvalidConstructionError) as exc_info:
            Monoid(carrier=range(4), operation=mul_mod(4), identity=0)
        assert exc_info.value.law == Law.IDENTITY

    def test_identity_outside_carrier_rejected(self) -> None:
        with pytest.raises(InvalidConstructionError) as exc_info:
            Monoid(carrier=[1, 2, 3], operation=max, identity=0)
        assert exc_info.value.law == Law.MEMBERSHIP

    def test_zero_power_is_identity(self, mul4: Monoid) -> None:
        assert mul4.power(3, 0) == 1
        assert mul4.power(3, 3) == 3
        assert mul4.power(2, 2) == 0

    def test_negative_power_undefined(self, mul4: Monoid) -> None:
        with pytest.raises(UndefinedResultError):
            mul4.power(3, -1)

    def test_invertible_elements(self, mul4: Monoid) -> None:
        assert mul4.invertible_elements() == FiniteSet([1, 3])
        assert mul4.is_invertible(3)
        assert not mul4.is_invertible(2)
        assert not mul4.is_invertible(17)
        assert mul4.inverse(3) == 3

    def test_inverse_of_non_invertible(self, mul4: Monoid) -> None:
        with pytest.raises(UndefinedResultError, match="not invertible"):
            mul4.inverse(2)

    def test_inverse_outside_carrier(self, mul4: Monoid) -> None:
        with pytest.raises(DomainViolationError):
            mul4.inverse(9)

    def test_from_semigroup(self) -> None:
        s = Semigroup(carrier=range(4), operation=mul_mod(4))
        m = Monoid.from_semigroup(s)
        assert m.identity == 1
        assert m.capability == Capability.MONOID

    def test_from_semigroup_without_identity(self) -> None:
        s = Semigroup(carrier=[1, 2], operation=lambda a, b: 2)
        with pytest.raises(UndefinedResultError, match="no identity"):
            Monoid.from_semigroup(s)

    def test_weaker_views(self, mul4: Monoid) -> None:
        assert mul4.as_semigroup().operate(2, 3) == 2
        assert mul4.as_groupoid().capability == Capability.GROUPOID


# =============================================================================
# GROUP
# =============================================================================


class TestGroup:
    def test_inverse_law_holds(self, z5: Group, s3: Group) -> None:
        for group in (z5, s3):
            for a in group.carrier:
                assert group.operate(a, group.inverse(a)) == group.identity
                assert group.operate(group.inverse(a), a) == group.identity

    def test_bad_inverse_rejected(self) -> None:
        with pytest.raises(InvalidConstructionError) as exc_info:
            Group(carrier=range(5), operation=add_mod(5), identity=0, inverse_fn=lambda a: a)
        assert exc_info.value.law == Law.RIGHT_INVERSE
        assert exc_info.value.witness == (1, 1)

    def test_inverse_outside_carrier_rejected(self) -> None:
        with pytest.raises(InvalidConstructionError) as exc_info:
            Group(carrier=range(3), operation=add_mod(3), identity=0, inverse_fn=lambda a: -a)
        assert exc_info.value.law == Law.INVERSE

    def test_monoid_is_not_group(self) -> None:
        with pytest.raises(InvalidConstructionError) as exc_info:
            Group(carrier=range(4), operation=mul_mod(4), identity=1, inverse_fn=lambda a: a)
        assert exc_info.value.law in (Law.RIGHT_INVERSE, Law.LEFT_INVERSE)

    def test_power(self, z5: Group) -> None:
        assert z5.power(2, 0) == 0
        assert z5.power(2, 3) == 1
        assert z5.power(2, -1) == 3
        assert z5.power(2, -3) == z5.power(z5.inverse(2), 3)

    def test_power_outside_carrier(self, z5: Group) -> None:
        with pytest.raises(DomainViolationError):
            z5.power(9, 2)
        with pytest.raises(DomainViolationError):
            z5.power(9, -2)

    def test_divide(self, z5: Group, s3: Group) -> None:
        assert z5.divide(1, 3) == 3
        assert z5.left_divide(1, 3) == 3
        a, b = (1, 0, 2), (2, 1, 0)
        assert s3.operate(s3.divide(a, b), b) == a
        assert s3.operate(b, s3.left_divide(a, b)) == a

    def test_abelian(self, z5: Group, s3: Group, klein_four: Group) -> None:
        assert z5.is_abelian()
        assert klein_four.is_abelian()
        assert not s3.is_abelian()

    def test_commutator_is_identity_in_abelian_group(self, z5: Group) -> None:
        assert all(z5.commutator(a, b) == 0 for a in z5.carrier for b in z5.carrier)

    def test_from_monoid(self) -> None:
        m = Monoid(carrier=[1, 2, 3, 4], operation=mul_mod(5), identity=1)
        g = Group.from_monoid(m)
        assert g.inverse(2) == 3
        assert g.capability == Capability.GROUP

    def test_from_monoid_with_non_invertible(self) -> None:
        m = Monoid(carrier=range(4), operation=mul_mod(4), identity=1)
        with pytest.raises(InvalidConstructionError) as exc_info:
            Group.from_monoid(m)
        assert exc_info.value.law == Law.INVERSE
        assert exc_info.value.witness == (0,)

    def test_alternative_definitions_agree(self, z6: Group, s3: Group) -> None:
        for group in (z6, s3):
            assert group.check_left_axioms()
            assert group.check_right_axioms()

    def test_alternative_definitions_reject_monoid(self) -> None:
        carrier = FiniteSet(range(4))
        assert not check_left_group_axioms(carrier, mul_mod(4))
        assert not check_right_group_axioms(carrier, mul_mod(4))

    def test_right_axioms_reject_left_identity_only(self) -> None:
        # a ∘ b = b: каждый элемент является левой единицей, правой нет
        carrier = FiniteSet([0, 1])
        result = check_right_group_axioms(carrier, lambda a, b: b)
        assert not result
        assert result.law == Law.RIGHT_IDENTITY

    def test_weaker_views(self, z5: Group) -> None:
        monoid = z5.as_monoid()
        assert monoid.identity == 0
        assert monoid.power(3, 2) == 1
        assert z5.as_semigroup().capability == Capability.SEMIGROUP
        assert z5.as_groupoid().is_commutative()
