"""
Semigroup — ассоциативный группоид

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Замкнутость (как у Groupoid)
2. ∀a, b, c: (a ∘ b) ∘ c = a ∘ (b ∘ c) (каждая упорядоченная тройка)
3. Степень определена только для n >= 1: единицы может не быть
"""

import logging
from typing import Any, Callable, ClassVar, Iterable, Optional

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
    find_identity,
    operate_in,
    raise_if_violated,
    require_member,
)

logger = logging.getLogger(__name__)


class Semigroup(BaseModel):
    """
    Полугруппа: (A, ∘) с замкнутой ассоциативной операцией.
    """

    capability: ClassVar[Capability] = Capability.SEMIGROUP

    carrier: FiniteSet
    operation: Callable[[Any, Any], Any]

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("carrier", mode="before")
    @classmethod
    def _coerce_carrier(cls, v: Any) -> FiniteSet:
        return as_finite_set(v)

    @model_validator(mode="after")
    def _check_laws(self) -> "Semigroup":
        raise_if_violated(check_closure(self.carrier, self.operation), "Semigroup")
        raise_if_violated(check_associativity(self.carrier, self.operation), "Semigroup")
        logger.debug("Semigroup validated: |A|=%d", len(self.carrier))
        return self

    @classmethod
    def from_groupoid(cls, groupoid: Groupoid) -> "Semigroup":
        """Усиление группоида: конструктор заново проверяет замкнутость и ассоциативность."""
        return cls(carrier=groupoid.carrier, operation=groupoid.operation)

    def __len__(self) -> int:
        return len(self.carrier)

    def contains(self, a: Any) -> bool:
        return a in self.carrier

    def operate(self, a: Any, b: Any) -> Any:
        return operate_in(self.carrier, self.operation, a, b)

    def power(self, a: Any, n: int) -> Any:
        """
        a^n = a ∘ a ∘ ... ∘ a (n раз), бинарное возведение.

        Raises:
            DomainViolationError: если a вне носителя
            UndefinedResultError: если n < 1 (в полугруппе нет единицы)
        """
        require_member(self.carrier, a)
        if n < 1:
            raise UndefinedResultError(f"Semigroup power requires n >= 1, got {n}")
        return binary_power(self.operation, a, n)

    def product(self, elements: Iterable[Any]) -> Any:
        """
        a1 ∘ a2 ∘ ... ∘ ak слева направо (ассоциативность делает порядок
        расстановки скобок несущественным).

        Raises:
            UndefinedResultError: для пустой последовательности
        """
        items = list(elements)
        if not items:
            raise UndefinedResultError("Product of an empty sequence is undefined in a semigroup")
        require_member(self.carrier, items[0])
        result = items[0]
        for item in items[1:]:
            result = self.operate(result, item)
        return result

    def is_commutative(self) -> bool:
        return check_commutativity(self.carrier, self.operation).holds

    def find_identity(self) -> Optional[Any]:
        """Двусторонняя единица, если есть (первая в порядке носителя)."""
        return find_identity(self.carrier, self.operation)

    def has_identity(self) -> bool:
        return self.find_identity() is not None

    def as_groupoid(self) -> Groupoid:
        """Ослабление без повторной проверки."""
        return Groupoid.model_construct(carrier=self.carrier, operation=self.operation)
