"""
Monoid — полугруппа с двусторонней единицей

Единица передаётся вызывающим кодом и проверяется при построении.
Математически единица единственна, поэтому хранится ровно одна.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Замкнутость и ассоциативность (как у Semigroup)
2. identity ∈ A и ∀a: e ∘ a = a ∘ e = a
3. a^0 = e
"""

import logging
from typing import Any, Callable, ClassVar, Optional

from pydantic import BaseModel, field_validator, model_validator

from cryptomath.core.errors import UndefinedResultError
from cryptomath.core.finite_set import FiniteSet, as_finite_set
from cryptomath.structures.groupoid import Groupoid
from cryptomath.structures.laws import (
    Capability,
    binary_power,
    check_associativity,
    check_closure,
    check_commutativity,
    check_identity,
    find_inverse,
    operate_in,
    raise_if_violated,
    require_member,
)
from cryptomath.structures.semigroup import Semigroup

logger = logging.getLogger(__name__)


class Monoid(BaseModel):
    """
    Моноид: (A, ∘, e).

    Examples:
        >>> m = Monoid(carrier=[0, 1, 2, 3], operation=lambda a, b: (a * b) % 4, identity=1)
        >>> m.power(3, 0)
        1
        >>> m.is_invertible(2)
        False
    """

    capability: ClassVar[Capability] = Capability.MONOID

    carrier: FiniteSet
    operation: Callable[[Any, Any], Any]
    identity: Any

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("carrier", mode="before")
    @classmethod
    def _coerce_carrier(cls, v: Any) -> FiniteSet:
        return as_finite_set(v)

    @model_validator(mode="after")
    def _check_laws(self) -> "Monoid":
        raise_if_violated(check_closure(self.carrier, self.operation), "Monoid")
        raise_if_violated(check_associativity(self.carrier, self.operation), "Monoid")
        raise_if_violated(check_identity(self.carrier, self.operation, self.identity), "Monoid")
        logger.debug("Monoid validated: |A|=%d, e=%r", len(self.carrier), self.identity)
        return self

    @classmethod
    def from_semigroup(cls, semigroup: Semigroup) -> "Monoid":
        """
        Моноид из полугруппы с найденной единицей.

        Raises:
            UndefinedResultError: если у полугруппы нет единицы
        """
        identity = semigroup.find_identity()
        if identity is None:
            raise UndefinedResultError("Semigroup has no identity element")
        return cls(carrier=semigroup.carrier, operation=semigroup.operation, identity=identity)

    def __len__(self) -> int:
        return len(self.carrier)

    def contains(self, a: Any) -> bool:
        return a in self.carrier

    def operate(self, a: Any, b: Any) -> Any:
        return operate_in(self.carrier, self.operation, a, b)

    def power(self, a: Any, n: int) -> Any:
        """
        a^n, a^0 = e.

        Raises:
            DomainViolationError: если a вне носителя
            UndefinedResultError: если n < 0 (обратный может не существовать)
        """
        require_member(self.carrier, a)
        if n < 0:
            raise UndefinedResultError(f"Monoid power requires n >= 0, got {n}")
        return binary_power(self.operation, a, n, one=self.identity)

    def is_commutative(self) -> bool:
        return check_commutativity(self.carrier, self.operation).holds

    # =========================================================================
    # ОБРАТИМЫЕ ЭЛЕМЕНТЫ
    # =========================================================================

    def find_inverse(self, a: Any) -> Optional[Any]:
        if a not in self.carrier:
            return None
        return find_inverse(self.carrier, self.operation, self.identity, a)

    def is_invertible(self, a: Any) -> bool:
        """Элемент вне носителя не обратим."""
        return self.find_inverse(a) is not None

    def inverse(self, a: Any) -> Any:
        """
        a⁻¹ с a ∘ a⁻¹ = a⁻¹ ∘ a = e.

        Raises:
            DomainViolationError: если a вне носителя
            UndefinedResultError: если a не обратим
        """
        require_member(self.carrier, a)
        inv = self.find_inverse(a)
        if inv is None:
            raise UndefinedResultError(f"Element {a!r} is not invertible in the monoid")
        return inv

    def invertible_elements(self) -> FiniteSet:
        """Группа единиц U(M)."""
        return FiniteSet(a for a in self.carrier if self.is_invertible(a))

    # =========================================================================
    # ОСЛАБЛЕНИЕ
    # =========================================================================

    def as_semigroup(self) -> Semigroup:
        return Semigroup.model_construct(carrier=self.carrier, operation=self.operation)

    def as_groupoid(self) -> Groupoid:
        return Groupoid.model_construct(carrier=self.carrier, operation=self.operation)
