"""
Group Homomorphism — гомоморфизмы конечных групп

f: G → H с f(a ∘ b) = f(a) ∘ f(b) для всех пар, проверяется при построении.

Ядро ker f = {a | f(a) = e_H} — нормальная подгруппа G.
Образ im f = f(G) — подгруппа H.

Первая теорема об изоморфизме: G / ker f ≅ im f, изоморфизм
aK ↦ f(a) корректно определён и биективен.
"""

import logging
from typing import Any, Callable, NoReturn

from pydantic import BaseModel, InstanceOf, model_validator

from cryptomath.core.errors import InvalidConstructionError, Law, LawViolation
from cryptomath.core.finite_set import FiniteSet
from cryptomath.core.mapping import Mapping
from cryptomath.groups.factor_group import FactorGroup
from cryptomath.groups.subgroup import NormalSubgroup, Subgroup
from cryptomath.structures.group import Group

logger = logging.getLogger(__name__)


def _reject(violation: LawViolation) -> NoReturn:
    logger.info("GroupHomomorphism construction rejected: %s", violation)
    raise InvalidConstructionError(violation)


class GroupHomomorphism(BaseModel):
    """
    Гомоморфизм групп source → target.

    Examples:
        >>> f = GroupHomomorphism.from_function(z6, z3, lambda a: a % 3)
        >>> f.kernel().elements
        FiniteSet([0, 3])
    """

    source: InstanceOf[Group]
    target: InstanceOf[Group]
    mapping: InstanceOf[Mapping]

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @model_validator(mode="after")
    def _check_homomorphism(self) -> "GroupHomomorphism":
        if self.mapping.domain != self.source.carrier:
            _reject(
                LawViolation(
                    law=Law.MEMBERSHIP,
                    witness=(),
                    details="Mapping domain differs from the source carrier",
                )
            )
        if self.mapping.codomain != self.target.carrier:
            _reject(
                LawViolation(
                    law=Law.MEMBERSHIP,
                    witness=(),
                    details="Mapping codomain differs from the target carrier",
                )
            )

        f = self.mapping.table
        for a in self.source.carrier:
            for b in self.source.carrier:
                lhs = f[self.source.operation(a, b)]
                rhs = self.target.operation(f[a], f[b])
                if lhs != rhs:
                    _reject(
                        LawViolation(
                            law=Law.HOMOMORPHISM,
                            witness=(a, b),
                            details=f"f(a ∘ b) = {lhs!r} but f(a) ∘ f(b) = {rhs!r}",
                        )
                    )
        return self

    @classmethod
    def from_function(
        cls, source: Group, target: Group, func: Callable[[Any], Any]
    ) -> "GroupHomomorphism":
        mapping = Mapping.from_function(source.carrier, target.carrier, func)
        return cls(source=source, target=target, mapping=mapping)

    def __call__(self, a: Any) -> Any:
        return self.mapping.apply(a)

    # =========================================================================
    # ЯДРО И ОБРАЗ
    # =========================================================================

    def kernel(self) -> NormalSubgroup:
        """ker f = f⁻¹(e_H)"""
        return NormalSubgroup.of(self.source, self.mapping.preimage(self.target.identity))

    def image(self) -> Subgroup:
        """im f = f(G)"""
        return Subgroup.of(self.target, self.mapping.image())

    def is_injective(self) -> bool:
        """Мономорфизм ⇔ ker f = {e}"""
        return self.kernel().is_trivial()

    def is_surjective(self) -> bool:
        return self.mapping.is_surjective()

    def is_isomorphism(self) -> bool:
        return self.is_injective() and self.is_surjective()

    # =========================================================================
    # ПЕРВАЯ ТЕОРЕМА ОБ ИЗОМОРФИЗМЕ
    # =========================================================================

    def induced_map(self) -> dict[FiniteSet, Any]:
        """aK ↦ f(a) по представителю класса."""
        quotient = FactorGroup.of(self.source, self.kernel())
        return {coset: self.mapping.apply(coset.first()) for coset in quotient.cosets}

    def first_isomorphism_holds(self) -> bool:
        """
        |G / ker f| = |im f|, отображение aK ↦ f(a) не зависит от
        представителя и биективно на im f.
        """
        kernel = self.kernel()
        quotient = FactorGroup.of(self.source, kernel)
        image = self.image()

        if len(quotient) != len(image):
            return False

        values = []
        for coset in quotient.cosets:
            coset_values = {self.mapping.apply(a) for a in coset}
            if len(coset_values) != 1:
                return False
            values.append(coset_values.pop())

        return FiniteSet(values) == image.elements and len(set(values)) == len(values)
