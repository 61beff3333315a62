"""
Group — моноид, в котором каждый элемент обратим

Вызывающий код передаёт функцию обращения inverse_fn. При построении
для каждого a проверяется: inverse_fn(a) ∈ A, a ∘ a⁻¹ = e, a⁻¹ ∘ a = e.
После успешной проверки все обратные один раз кэшируются в тотальной
таблице; inverse(a) — O(1) поиск.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Замкнутость, ассоциативность, двусторонняя единица
2. Каждый элемент имеет ровно один двусторонний обратный (кэширован)
3. a^(-n) = (a⁻¹)^n, a^0 = e
"""

import logging
from typing import Any, Callable, ClassVar

from pydantic import BaseModel, PrivateAttr, field_validator, model_validator

from cryptomath.core.errors import InvalidConstructionError, Law, LawViolation
from cryptomath.core.finite_set import FiniteSet, as_finite_set
from cryptomath.structures.groupoid import Groupoid
from cryptomath.structures.laws import (
    Capability,
    LawCheckResult,
    binary_power,
    check_associativity,
    check_closure,
    check_commutativity,
    check_identity,
    check_inverses,
    check_left_group_axioms,
    check_right_group_axioms,
    operate_in,
    raise_if_violated,
    require_member,
)
from cryptomath.structures.monoid import Monoid
from cryptomath.structures.semigroup import Semigroup

logger = logging.getLogger(__name__)


class Group(BaseModel):
    """
    Группа: (G, ∘, e, ⁻¹).

    Examples:
        >>> z5 = Group(
        ...     carrier=range(5),
        ...     operation=lambda a, b: (a + b) % 5,
        ...     identity=0,
        ...     inverse_fn=lambda a: (-a) % 5,
        ... )
        >>> z5.inverse(2)
        3
        >>> z5.power(2, -1)
        3
    """

    capability: ClassVar[Capability] = Capability.GROUP

    carrier: FiniteSet
    operation: Callable[[Any, Any], Any]
    identity: Any
    inverse_fn: Callable[[Any], Any]

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    _inverses: dict[Any, Any] = PrivateAttr(default_factory=dict)

    @field_validator("carrier", mode="before")
    @classmethod
    def _coerce_carrier(cls, v: Any) -> FiniteSet:
        return as_finite_set(v)

    @model_validator(mode="after")
    def _check_laws(self) -> "Group":
        raise_if_violated(check_closure(self.carrier, self.operation), "Group")
        raise_if_violated(check_associativity(self.carrier, self.operation), "Group")
        raise_if_violated(check_identity(self.carrier, self.operation, self.identity), "Group")
        raise_if_violated(
            check_inverses(self.carrier, self.operation, self.identity, self.inverse_fn),
            "Group",
        )
        self._inverses = {a: self.inverse_fn(a) for a in self.carrier}
        logger.debug("Group validated: |G|=%d, e=%r", len(self.carrier), self.identity)
        return self

    @classmethod
    def _unchecked(
        cls,
        carrier: FiniteSet,
        operation: Callable[[Any, Any], Any],
        identity: Any,
        inverse_fn: Callable[[Any], Any],
    ) -> "Group":
        """Группа без повторной проверки законов (для заведомо корректных подструктур)."""
        group = cls.model_construct(
            carrier=carrier, operation=operation, identity=identity, inverse_fn=inverse_fn
        )
        group._inverses = {a: inverse_fn(a) for a in carrier}
        return group

    @classmethod
    def from_monoid(cls, monoid: Monoid) -> "Group":
        """
        Группа из моноида, все элементы которого обратимы.

        Raises:
            InvalidConstructionError: если найден необратимый элемент
        """
        inverses = {}
        for a in monoid.carrier:
            inv = monoid.find_inverse(a)
            if inv is None:
                violation = LawViolation(
                    law=Law.INVERSE, witness=(a,), details="Monoid element is not invertible"
                )
                logger.info("Group construction rejected: %s", violation)
                raise InvalidConstructionError(violation)
            inverses[a] = inv
        return cls(
            carrier=monoid.carrier,
            operation=monoid.operation,
            identity=monoid.identity,
            inverse_fn=inverses.__getitem__,
        )

    def __len__(self) -> int:
        return len(self.carrier)

    def contains(self, a: Any) -> bool:
        return a in self.carrier

    # =========================================================================
    # ОПЕРАЦИИ
    # =========================================================================

    def operate(self, a: Any, b: Any) -> Any:
        return operate_in(self.carrier, self.operation, a, b)

    def inverse(self, a: Any) -> Any:
        """
        a⁻¹ из кэша.

        Raises:
            DomainViolationError: если a вне носителя
        """
        require_member(self.carrier, a)
        return self._inverses[a]

    def power(self, a: Any, n: int) -> Any:
        """
        a^n для любого целого n: a^0 = e, a^(-n) = (a⁻¹)^n.

        Raises:
            DomainViolationError: если a вне носителя
        """
        if n < 0:
            return self.power(self.inverse(a), -n)
        require_member(self.carrier, a)
        return binary_power(self.operation, a, n, one=self.identity)

    def divide(self, a: Any, b: Any) -> Any:
        """Правое деление a / b = a ∘ b⁻¹"""
        return self.operate(a, self.inverse(b))

    def left_divide(self, a: Any, b: Any) -> Any:
        """Левое деление b \\ a = b⁻¹ ∘ a"""
        return self.operate(self.inverse(b), a)

    def conjugate(self, n: Any, g: Any) -> Any:
        """g ∘ n ∘ g⁻¹"""
        return self.operate(self.operate(g, n), self.inverse(g))

    def commutator(self, a: Any, b: Any) -> Any:
        """[a, b] = a⁻¹ ∘ b⁻¹ ∘ a ∘ b"""
        return self.operate(
            self.operate(self.inverse(a), self.inverse(b)), self.operate(a, b)
        )

    def is_abelian(self) -> bool:
        return check_commutativity(self.carrier, self.operation).holds

    # =========================================================================
    # АЛЬТЕРНАТИВНЫЕ ОПРЕДЕЛЕНИЯ (перекрёстная проверка)
    # =========================================================================

    def check_left_axioms(self) -> LawCheckResult:
        """Левая единица + левые обратные + ассоциативность."""
        return check_left_group_axioms(self.carrier, self.operation)

    def check_right_axioms(self) -> LawCheckResult:
        """Правая единица + правые обратные + ассоциативность."""
        return check_right_group_axioms(self.carrier, self.operation)

    # =========================================================================
    # ОСЛАБЛЕНИЕ
    # =========================================================================

    def as_monoid(self) -> Monoid:
        return Monoid.model_construct(
            carrier=self.carrier, operation=self.operation, identity=self.identity
        )

    def as_semigroup(self) -> Semigroup:
        return Semigroup.model_construct(carrier=self.carrier, operation=self.operation)

    def as_groupoid(self) -> Groupoid:
        return Groupoid.model_construct(carrier=self.carrier, operation=self.operation)
