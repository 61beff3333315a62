"""
Тесты для GroupHomomorphism

Проверяет:
1. Проверку f(a ∘ b) = f(a) ∘ f(b) при построении и свидетеля нарушения
2. Ядро (нормальная подгруппа) и образ (подгруппа)
3. Инъективность, сюръективность, изоморфизм
4. Первую теорему об изоморфизме
"""

import logging

import pytest

from cryptomath.core import FiniteSet, InvalidConstructionError, Law, Mapping
from cryptomath.groups import GroupHomomorphism, NormalSubgroup
from cryptomath.structures import Group

A3 = [(0, 1, 2), (1, 2, 0), (2, 0, 1)]


def _sign(p: tuple[int, ...]) -> int:
    """Чётность перестановки: число инверсий по модулю 2."""
    inversions = sum(1 for i in range(len(p)) for j in range(i + 1, len(p)) if p[i] > p[j])
    return inversions % 2


@pytest.fixture
def mod3(z6: Group, z3: Group) -> GroupHomomorphism:
    """Z6 → Z3, a ↦ a mod 3"""
    return GroupHomomorphism.from_function(z6, z3, lambda a: a % 3)


# =============================================================================
# CONSTRUCTION
# =============================================================================


class TestHomomorphismConstruction:
    def test_valid_homomorphism(self, mod3: GroupHomomorphism) -> None:
        assert mod3(4) == 1
        assert mod3(5) == 2

    def test_non_homomorphism_rejected(self, z3: Group) -> None:
        with pytest.raises(InvalidConstructionError) as exc_info:
            GroupHomomorphism.from_function(z3, z3, lambda a: (a + 1) % 3)
        assert exc_info.value.law == Law.HOMOMORPHISM
        assert exc_info.value.witness == (0, 0)

    def test_rejection_is_logged(self, z3: Group, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="cryptomath.groups.homomorphism"):
            with pytest.raises(InvalidConstructionError):
                GroupHomomorphism.from_function(z3, z3, lambda a: (a + 1) % 3)
        assert "rejected" in caplog.text

    def test_source_group_laws_not_rechecked(self, counting_z6, z3: Group) -> None:
        z6 = counting_z6.group
        GroupHomomorphism.from_function(z6, z3, lambda a: a % 3)
        assert counting_z6.calls == len(z6) ** 2

    def test_mapping_domain_must_match_source(self, z6: Group, z3: Group) -> None:
        mapping = Mapping.from_function(range(3), range(3), lambda a: a)
        with pytest.raises(InvalidConstructionError) as exc_info:
            GroupHomomorphism(source=z6, target=z3, mapping=mapping)
        assert exc_info.value.law == Law.MEMBERSHIP

    def test_mapping_codomain_must_match_target(self, z3: Group) -> None:
        mapping = Mapping.from_function(range(3), range(6), lambda a: 0)
        with pytest.raises(InvalidConstructionError, match="codomain"):
            GroupHomomorphism(source=z3, target=z3, mapping=mapping)


# =============================================================================
# KERNEL AND IMAGE
# =============================================================================


class TestKernelAndImage:
    def test_kernel(self, mod3: GroupHomomorphism) -> None:
        kernel = mod3.kernel()
        assert isinstance(kernel, NormalSubgroup)
        assert kernel.elements == FiniteSet([0, 3])

    def test_image(self, mod3: GroupHomomorphism) -> None:
        assert mod3.image().is_improper()

    def test_surjective_but_not_injective(self, mod3: GroupHomomorphism) -> None:
        assert mod3.is_surjective()
        assert not mod3.is_injective()
        assert not mod3.is_isomorphism()

    def test_identity_is_isomorphism(self, z5: Group) -> None:
        f = GroupHomomorphism.from_function(z5, z5, lambda a: a)
        assert f.kernel().is_trivial()
        assert f.is_isomorphism()

    def test_automorphism_of_z5(self, z5: Group) -> None:
        f = GroupHomomorphism.from_function(z5, z5, lambda a: 2 * a % 5)
        assert f.is_isomorphism()

    def test_trivial_homomorphism(self, z6: Group, z3: Group) -> None:
        f = GroupHomomorphism.from_function(z6, z3, lambda a: 0)
        assert f.kernel().is_improper()
        assert f.image().is_trivial()

    def test_sign_homomorphism_kernel_is_a3(self, s3: Group, cyclic_group) -> None:
        sign = GroupHomomorphism.from_function(s3, cyclic_group(2), _sign)
        assert sign.kernel().elements == FiniteSet(A3)
        assert sign.is_surjective()


# =============================================================================
# FIRST ISOMORPHISM THEOREM
# =============================================================================


class TestFirstIsomorphismTheorem:
    def test_induced_map(self, mod3: GroupHomomorphism) -> None:
        assert mod3.induced_map() == {
            FiniteSet([0, 3]): 0,
            FiniteSet([1, 4]): 1,
            FiniteSet([2, 5]): 2,
        }

    def test_holds_for_mod3(self, mod3: GroupHomomorphism) -> None:
        assert mod3.first_isomorphism_holds()

    def test_holds_for_sign(self, s3: Group, cyclic_group) -> None:
        sign = GroupHomomorphism.from_function(s3, cyclic_group(2), _sign)
        assert sign.first_isomorphism_holds()

    def test_holds_for_trivial_homomorphism(self, z6: Group, z3: Group) -> None:
        f = GroupHomomorphism.from_function(z6, z3, lambda a: 0)
        assert f.first_isomorphism_holds()
        assert len(f.induced_map()) == 1
