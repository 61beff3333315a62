"""
Errors — таксономия ошибок алгебраического движка

Все ошибки наследуются от AlgebraError и НЕ являются ValueError:
pydantic-валидаторы пропускают их наружу без обёртки в ValidationError,
поэтому вызывающий код всегда получает типизированную ошибку.

Таксономия:
- InvalidConstructionError: нарушен закон при построении (замкнутость,
  ассоциативность, единица, обратные, критерий подгруппы, нормальность)
- DomainViolationError: элемент вне носителя, структуры с разных носителей
- UndefinedResultError: результат математически не определён в контексте
- InconsistentStructureError: валидированная конечная структура ведёт себя
  противоречиво (например, степени элемента не возвращаются в единицу)
- ArithmeticOverflowError: показатель мощности превышает разрядность хоста

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ошибки поднимаются сразу и никогда не подменяются значением по умолчанию
2. Повтор бессмысленен: все вычисления чистые и детерминированные
3. Нарушение закона всегда несёт свидетеля (witness) — пару/тройку/элемент
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


# =============================================================================
# LAWS
# =============================================================================


class Law(str, Enum):
    """Проверяемый закон (для диагностики нарушений)."""

    CLOSURE = "closure"
    ASSOCIATIVITY = "associativity"
    COMMUTATIVITY = "commutativity"
    IDENTITY = "identity"
    LEFT_IDENTITY = "left_identity"
    RIGHT_IDENTITY = "right_identity"
    INVERSE = "inverse"
    LEFT_INVERSE = "left_inverse"
    RIGHT_INVERSE = "right_inverse"
    MEMBERSHIP = "membership"
    NON_EMPTY = "non_empty"
    SUBGROUP_CRITERION = "subgroup_criterion"
    NORMALITY = "normality"
    TOTALITY = "totality"
    HOMOMORPHISM = "homomorphism"


@dataclass(frozen=True)
class LawViolation:
    """
    Нарушение закона со свидетелем.

    witness — кортеж элементов, на которых закон не выполнился:
    (a, b) для замкнутости, (a, b, c) для ассоциативности, (a,) для единицы.
    """

    law: Law
    witness: tuple[Any, ...]
    details: str

    def __str__(self) -> str:
        return f"{self.law.value} violated at {self.witness!r}: {self.details}"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class AlgebraError(Exception):
    """Базовая ошибка движка."""


class InvalidConstructionError(AlgebraError):
    """
    Построение структуры отклонено: нарушен обязательный закон.

    Поднимается один раз, в конструкторе, до того как экземпляр
    становится доступен. Нарушение доступно в атрибуте violation.
    """

    def __init__(self, violation: LawViolation):
        self.violation = violation
        super().__init__(str(violation))

    @property
    def law(self) -> Law:
        return self.violation.law

    @property
    def witness(self) -> tuple[Any, ...]:
        return self.violation.witness


class DomainViolationError(AlgebraError):
    """Операция вызвана с элементом вне соответствующего носителя."""


class UndefinedResultError(AlgebraError):
    """Запрос не имеет математически определённого ответа в контексте."""


class InconsistentStructureError(UndefinedResultError):
    """
    Валидированная конечная структура ведёт себя противоречиво.

    Пример: итерированное возведение в степень не достигает единицы за |G|
    шагов. Для корректной конечной группы это невозможно, поэтому ситуация
    трактуется как логическая ошибка входных данных, а не как
    "бесконечный порядок".
    """


class ArithmeticOverflowError(AlgebraError, OverflowError):
    """Показатель мощности превышает представимый диапазон."""
