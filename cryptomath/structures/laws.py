"""
Laws — проверка алгебраических законов на конечном носителе

Каждый проверяющий возвращает LawCheckResult: либо "закон выполнен",
либо нарушение со свидетелем (пара, тройка или элемент). Конструкторы
структур превращают неуспешный результат в InvalidConstructionError
через raise_if_violated.

Порядок перебора — порядок итерации носителя (по возрастанию), поэтому
свидетель нарушения и найденная единица детерминированы.

Сложность проверок:
- замкнутость, коммутативность: O(n²)
- ассоциативность: O(n³)
- поиск единицы: O(n²)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from cryptomath.core.errors import (
    DomainViolationError,
    InvalidConstructionError,
    Law,
    LawViolation,
)
from cryptomath.core.finite_set import FiniteSet

logger = logging.getLogger(__name__)

Operation = Callable[[Any, Any], Any]


# =============================================================================
# CAPABILITY
# =============================================================================


class Capability(str, Enum):
    """Маркер уровня гарантий структуры"""

    GROUPOID = "groupoid"
    SEMIGROUP = "semigroup"
    MONOID = "monoid"
    GROUP = "group"


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class LawCheckResult:
    """
    Результат проверки одного закона.

    Attributes:
        law: Проверенный закон
        holds: True если закон выполнен на всём носителе
        witness: Контрпример (пусто если holds)
        details: Человекочитаемое описание нарушения
    """

    law: Law
    holds: bool
    witness: tuple[Any, ...] = ()
    details: str = ""

    @classmethod
    def ok(cls, law: Law) -> "LawCheckResult":
        return cls(law=law, holds=True)

    @classmethod
    def failed(cls, law: Law, witness: tuple[Any, ...], details: str) -> "LawCheckResult":
        return cls(law=law, holds=False, witness=witness, details=details)

    @property
    def violation(self) -> Optional[LawViolation]:
        if self.holds:
            return None
        return LawViolation(law=self.law, witness=self.witness, details=self.details)

    def __bool__(self) -> bool:
        return self.holds


def raise_if_violated(result: LawCheckResult, structure: str) -> None:
    """
    Отклонить построение структуры при нарушенном законе.

    Raises:
        InvalidConstructionError: если result.holds == False
    """
    if result.holds:
        return
    violation = result.violation
    logger.info("%s construction rejected: %s", structure, violation)
    raise InvalidConstructionError(violation)


# =============================================================================
# ОПЕРАЦИЯ НА НОСИТЕЛЕ
# =============================================================================


def require_member(carrier: FiniteSet, a: Any) -> None:
    """
    Raises:
        DomainViolationError: если a вне носителя
    """
    if a not in carrier:
        raise DomainViolationError(f"Element {a!r} not in carrier")


def operate_in(carrier: FiniteSet, operation: Operation, a: Any, b: Any) -> Any:
    """
    a ∘ b с проверкой принадлежности операндов носителю.

    Raises:
        DomainViolationError: если a или b вне носителя
    """
    require_member(carrier, a)
    require_member(carrier, b)
    return operation(a, b)


def binary_power(operation: Operation, a: Any, n: int, one: Any = None) -> Any:
    """
    a^n бинарным возведением в степень (n >= 1, либо n == 0 при заданной one).

    Для n == 0 возвращается one. Вызывающий код отвечает за проверку,
    что n == 0 допустимо в его структуре.
    """
    if n == 0:
        return one

    result = None
    base = a
    while n > 0:
        if n & 1:
            result = base if result is None else operation(result, base)
        n >>= 1
        if n:
            base = operation(base, base)
    return result


# =============================================================================
# ЗАКОНЫ ГРУППОИДА И ПОЛУГРУППЫ
# =============================================================================


def check_closure(carrier: FiniteSet, operation: Operation) -> LawCheckResult:
    """∀a, b ∈ A: a ∘ b ∈ A"""
    for a in carrier:
        for b in carrier:
            c = operation(a, b)
            if c not in carrier:
                return LawCheckResult.failed(
                    Law.CLOSURE, (a, b), f"{a!r} ∘ {b!r} = {c!r} is outside carrier"
                )
    return LawCheckResult.ok(Law.CLOSURE)


def check_associativity(carrier: FiniteSet, operation: Operation) -> LawCheckResult:
    """∀a, b, c ∈ A: (a ∘ b) ∘ c = a ∘ (b ∘ c)"""
    for a in carrier:
        for b in carrier:
            ab = operation(a, b)
            for c in carrier:
                left = operation(ab, c)
                right = operation(a, operation(b, c))
                if left != right:
                    return LawCheckResult.failed(
                        Law.ASSOCIATIVITY,
                        (a, b, c),
                        f"(a ∘ b) ∘ c = {left!r} but a ∘ (b ∘ c) = {right!r}",
                    )
    return LawCheckResult.ok(Law.ASSOCIATIVITY)


def check_commutativity(carrier: FiniteSet, operation: Operation) -> LawCheckResult:
    """∀a, b ∈ A: a ∘ b = b ∘ a"""
    items = carrier.elements()
    for i, a in enumerate(items):
        for b in items[i + 1 :]:
            ab = operation(a, b)
            ba = operation(b, a)
            if ab != ba:
                return LawCheckResult.failed(
                    Law.COMMUTATIVITY, (a, b), f"a ∘ b = {ab!r} but b ∘ a = {ba!r}"
                )
    return LawCheckResult.ok(Law.COMMUTATIVITY)


def is_idempotent(carrier: FiniteSet, operation: Operation) -> bool:
    """∀a ∈ A: a ∘ a = a"""
    return all(operation(a, a) == a for a in carrier)


def is_left_cancellative(carrier: FiniteSet, operation: Operation) -> bool:
    """a ∘ b = a ∘ c ⇒ b = c: каждая строка таблицы инъективна."""
    for a in carrier:
        if len({operation(a, b) for b in carrier}) != len(carrier):
            return False
    return True


def is_right_cancellative(carrier: FiniteSet, operation: Operation) -> bool:
    """b ∘ a = c ∘ a ⇒ b = c: каждый столбец таблицы инъективен."""
    for a in carrier:
        if len({operation(b, a) for b in carrier}) != len(carrier):
            return False
    return True


# =============================================================================
# ЕДИНИЦА И ОБРАТНЫЕ
# =============================================================================


def check_identity(carrier: FiniteSet, operation: Operation, identity: Any) -> LawCheckResult:
    """e ∈ A и ∀a ∈ A: e ∘ a = a ∘ e = a"""
    if identity not in carrier:
        return LawCheckResult.failed(
            Law.MEMBERSHIP, (identity,), "Identity candidate is outside carrier"
        )
    for a in carrier:
        left = operation(identity, a)
        if left != a:
            return LawCheckResult.failed(
                Law.IDENTITY, (a,), f"e ∘ a = {left!r}, expected {a!r}"
            )
        right = operation(a, identity)
        if right != a:
            return LawCheckResult.failed(
                Law.IDENTITY, (a,), f"a ∘ e = {right!r}, expected {a!r}"
            )
    return LawCheckResult.ok(Law.IDENTITY)


def find_identity(carrier: FiniteSet, operation: Operation) -> Optional[Any]:
    """Первый (в порядке носителя) элемент, являющийся двусторонней единицей."""
    for candidate in carrier:
        if check_identity(carrier, operation, candidate):
            return candidate
    return None


def check_inverses(
    carrier: FiniteSet,
    operation: Operation,
    identity: Any,
    inverse_fn: Callable[[Any], Any],
) -> LawCheckResult:
    """∀a ∈ A: inverse_fn(a) ∈ A, a ∘ a⁻¹ = e и a⁻¹ ∘ a = e"""
    for a in carrier:
        inv = inverse_fn(a)
        if inv not in carrier:
            return LawCheckResult.failed(
                Law.INVERSE, (a, inv), f"Inverse of {a!r} is outside carrier"
            )
        if operation(a, inv) != identity:
            return LawCheckResult.failed(
                Law.RIGHT_INVERSE, (a, inv), "a ∘ a⁻¹ is not the identity"
            )
        if operation(inv, a) != identity:
            return LawCheckResult.failed(
                Law.LEFT_INVERSE, (a, inv), "a⁻¹ ∘ a is not the identity"
            )
    return LawCheckResult.ok(Law.INVERSE)


def find_inverse(carrier: FiniteSet, operation: Operation, identity: Any, a: Any) -> Optional[Any]:
    """Первый b ∈ A с a ∘ b = b ∘ a = e."""
    for b in carrier:
        if operation(a, b) == identity and operation(b, a) == identity:
            return b
    return None


# =============================================================================
# АЛЬТЕРНАТИВНЫЕ ОПРЕДЕЛЕНИЯ ГРУППЫ
# =============================================================================


def _one_sided_group_axioms(
    carrier: FiniteSet, operation: Operation, left: bool
) -> LawCheckResult:
    identity_law = Law.LEFT_IDENTITY if left else Law.RIGHT_IDENTITY
    inverse_law = Law.LEFT_INVERSE if left else Law.RIGHT_INVERSE

    def apply(x: Any, y: Any) -> Any:
        # левая сторона: x ∘ y, правая: y ∘ x
        return operation(x, y) if left else operation(y, x)

    if carrier.is_empty():
        return LawCheckResult.failed(Law.NON_EMPTY, (), "Group carrier must be non-empty")

    closure = check_closure(carrier, operation)
    if not closure:
        return closure

    identity = None
    for candidate in carrier:
        if all(apply(candidate, a) == a for a in carrier):
            identity = candidate
            break
    if identity is None:
        return LawCheckResult.failed(identity_law, (), "No one-sided identity found")

    for a in carrier:
        if not any(apply(b, a) == identity for b in carrier):
            return LawCheckResult.failed(inverse_law, (a,), "Element has no one-sided inverse")

    return check_associativity(carrier, operation)


def check_left_group_axioms(carrier: FiniteSet, operation: Operation) -> LawCheckResult:
    """
    Группа через левые аксиомы: ассоциативность, левая единица e ∘ a = a,
    левые обратные b ∘ a = e. Эквивалентно стандартному определению.
    """
    return _one_sided_group_axioms(carrier, operation, left=True)


def check_right_group_axioms(carrier: FiniteSet, operation: Operation) -> LawCheckResult:
    """Группа через правые аксиомы: a ∘ e = a, a ∘ b = e."""
    return _one_sided_group_axioms(carrier, operation, left=False)
