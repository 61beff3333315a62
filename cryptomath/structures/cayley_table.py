"""
Cayley Table — явная таблица умножения конечной структуры

Операция вычисляется один раз для каждой упорядоченной пары и
сохраняется в таблице с ключом (a, b). Все дальнейшие проверки
(ассоциативность, коммутативность, поиск единицы, сокращение)
работают только по таблице и не вызывают исходную операцию.

Таблица владеет собственной копией элементов и не зависит от
структуры, из которой построена.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Таблица тотальна: есть запись для каждой пары (a, b)
2. Все значения лежат среди элементов (замкнутость)
"""

from dataclasses import dataclass
from typing import Any, Callable, Final, Optional

from pydantic import BaseModel, field_validator, model_validator

from cryptomath.core.errors import (
    DomainViolationError,
    InvalidConstructionError,
    Law,
    LawViolation,
)
from cryptomath.core.finite_set import FiniteSet


# =============================================================================
# RENDER CONFIG
# =============================================================================

DEFAULT_MIN_COLUMN_WIDTH: Final[int] = 3
DEFAULT_OPERATION_SYMBOL: Final[str] = "∘"


@dataclass(frozen=True)
class CayleyRenderConfig:
    """Параметры текстового представления таблицы"""

    min_column_width: int = DEFAULT_MIN_COLUMN_WIDTH
    operation_symbol: str = DEFAULT_OPERATION_SYMBOL


# =============================================================================
# CAYLEY TABLE
# =============================================================================


class CayleyTable(BaseModel):
    """
    Таблица Кэли.

    Examples:
        >>> t = CayleyTable.from_operation([0, 1], lambda a, b: (a + b) % 2)
        >>> t.lookup(1, 1)
        0
        >>> t.find_identity()
        0
    """

    elements: tuple[Any, ...]
    table: dict[tuple[Any, Any], Any]

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("elements", mode="before")
    @classmethod
    def _sort_elements(cls, v: Any) -> tuple[Any, ...]:
        return FiniteSet(v).elements()

    @model_validator(mode="after")
    def _check_table(self) -> "CayleyTable":
        members = set(self.elements)
        for a in self.elements:
            for b in self.elements:
                if (a, b) not in self.table:
                    raise InvalidConstructionError(
                        LawViolation(
                            law=Law.TOTALITY,
                            witness=(a, b),
                            details="Cayley table has no entry for the pair",
                        )
                    )
                if self.table[(a, b)] not in members:
                    raise InvalidConstructionError(
                        LawViolation(
                            law=Law.CLOSURE,
                            witness=(a, b),
                            details=f"Entry {self.table[(a, b)]!r} is outside the elements",
                        )
                    )
        return self

    @classmethod
    def from_operation(
        cls, elements: Any, operation: Callable[[Any, Any], Any]
    ) -> "CayleyTable":
        items = FiniteSet(elements).elements()
        table = {(a, b): operation(a, b) for a in items for b in items}
        return cls(elements=items, table=table)

    @classmethod
    def from_structure(cls, structure: Any) -> "CayleyTable":
        """Таблица любой структуры с полями carrier и operation."""
        return cls.from_operation(structure.carrier, structure.operation)

    # =========================================================================
    # ДОСТУП
    # =========================================================================

    @property
    def size(self) -> int:
        return len(self.elements)

    def lookup(self, a: Any, b: Any) -> Any:
        """
        a ∘ b по таблице.

        Raises:
            DomainViolationError: если пары нет в таблице
        """
        try:
            return self.table[(a, b)]
        except (KeyError, TypeError):
            raise DomainViolationError(f"Pair ({a!r}, {b!r}) not in Cayley table") from None

    def row(self, a: Any) -> tuple[Any, ...]:
        """Строка a: (a ∘ x для x по порядку)"""
        return tuple(self.lookup(a, b) for b in self.elements)

    def column(self, b: Any) -> tuple[Any, ...]:
        return tuple(self.lookup(a, b) for a in self.elements)

    def as_operation(self) -> Callable[[Any, Any], Any]:
        """Операция, читающая значения из таблицы."""
        return self.lookup

    # =========================================================================
    # СТРУКТУРНЫЕ ПРОВЕРКИ (только по таблице)
    # =========================================================================

    def is_associative(self) -> bool:
        t = self.table
        for a in self.elements:
            for b in self.elements:
                ab = t[(a, b)]
                for c in self.elements:
                    if t[(ab, c)] != t[(a, t[(b, c)])]:
                        return False
        return True

    def is_commutative(self) -> bool:
        t = self.table
        return all(t[(a, b)] == t[(b, a)] for a in self.elements for b in self.elements)

    def find_identity(self) -> Optional[Any]:
        """Первый элемент e с e ∘ x = x ∘ e = x для всех x."""
        t = self.table
        for e in self.elements:
            if all(t[(e, x)] == x and t[(x, e)] == x for x in self.elements):
                return e
        return None

    def has_identity(self) -> bool:
        return self.find_identity() is not None

    def is_left_cancellative(self) -> bool:
        """
        Для фиксированного левого операнда a: два разных b, c не дают
        одинакового a ∘ b = a ∘ c.
        """
        for a in self.elements:
            seen: dict[Any, Any] = {}
            for b in self.elements:
                result = self.table[(a, b)]
                if result in seen and seen[result] != b:
                    return False
                seen[result] = b
        return True

    def is_right_cancellative(self) -> bool:
        for a in self.elements:
            seen: dict[Any, Any] = {}
            for b in self.elements:
                result = self.table[(b, a)]
                if result in seen and seen[result] != b:
                    return False
                seen[result] = b
        return True

    def is_cancellative(self) -> bool:
        return self.is_left_cancellative() and self.is_right_cancellative()

    # =========================================================================
    # ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def to_string(self, config: Optional[CayleyRenderConfig] = None) -> str:
        """
        Текстовая таблица: заголовок из элементов, затем по строке на элемент.

        Examples:
            >>> print(CayleyTable.from_operation([0, 1], lambda a, b: a ^ b).to_string())
              ∘ |   0   1
            ----+--------
              0 |   0   1
              1 |   1   0
        """
        config = config or CayleyRenderConfig()
        cells = [str(x) for x in self.elements] + [
            str(v) for v in self.table.values()
        ]
        width = max([config.min_column_width, len(config.operation_symbol)] + [len(c) for c in cells])

        def fmt(value: Any) -> str:
            return str(value).rjust(width)

        header = fmt(config.operation_symbol) + " |" + "".join(" " + fmt(x) for x in self.elements)
        separator = "-" * (width + 1) + "+" + "-" * ((width + 1) * len(self.elements))
        lines = [header, separator]
        for a in self.elements:
            lines.append(fmt(a) + " |" + "".join(" " + fmt(v) for v in self.row(a)))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_string()
