"""
Groupoid — множество с замкнутой бинарной операцией

Immutable Pydantic модель. Построение — единственная точка валидации:
экземпляр существует только если операция замкнута на носителе.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. ∀a, b ∈ A: a ∘ b ∈ A (проверяется для каждой упорядоченной пары)
2. Операция чистая и детерминированная
"""

import logging
from typing import Any, Callable, ClassVar

from pydantic import BaseModel, field_validator, model_validator

from cryptomath.core.finite_set import FiniteSet, as_finite_set
from cryptomath.structures.laws import (
    Capability,
    LawCheckResult,
    check_associativity,
    check_closure,
    check_commutativity,
    is_idempotent,
    is_left_cancellative,
    is_right_cancellative,
    operate_in,
    raise_if_violated,
)

logger = logging.getLogger(__name__)


class Groupoid(BaseModel):
    """
    Группоид (магма): (A, ∘) с замкнутой операцией.

    Examples:
        >>> g = Groupoid(carrier=[0, 1, 2], operation=lambda a, b: (a + b) % 3)
        >>> g.operate(2, 2)
        1
    """

    capability: ClassVar[Capability] = Capability.GROUPOID

    carrier: FiniteSet
    operation: Callable[[Any, Any], Any]

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("carrier", mode="before")
    @classmethod
    def _coerce_carrier(cls, v: Any) -> FiniteSet:
        return as_finite_set(v)

    @model_validator(mode="after")
    def _check_laws(self) -> "Groupoid":
        raise_if_violated(check_closure(self.carrier, self.operation), "Groupoid")
        logger.debug("Groupoid validated: |A|=%d", len(self.carrier))
        return self

    def __len__(self) -> int:
        return len(self.carrier)

    def contains(self, a: Any) -> bool:
        return a in self.carrier

    def operate(self, a: Any, b: Any) -> Any:
        """
        a ∘ b

        Raises:
            DomainViolationError: если a или b вне носителя
        """
        return operate_in(self.carrier, self.operation, a, b)

    # =========================================================================
    # ПРОВЕРКИ СВОЙСТВ
    # =========================================================================

    def check_associativity(self) -> LawCheckResult:
        return check_associativity(self.carrier, self.operation)

    def is_associative(self) -> bool:
        return self.check_associativity().holds

    def is_commutative(self) -> bool:
        return check_commutativity(self.carrier, self.operation).holds

    def is_idempotent(self) -> bool:
        return is_idempotent(self.carrier, self.operation)

    def is_left_cancellative(self) -> bool:
        return is_left_cancellative(self.carrier, self.operation)

    def is_right_cancellative(self) -> bool:
        return is_right_cancellative(self.carrier, self.operation)

    def is_cancellative(self) -> bool:
        return self.is_left_cancellative() and self.is_right_cancellative()
